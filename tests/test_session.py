"""Tests for GameSession state replacement and signals."""

import pytest

from knightqueen.game_logic import EMPTY_BOARD, Cell, Player
from knightqueen.session import GameSession


@pytest.fixture
def session(qapp):
    s = GameSession(coin_flip=lambda: True)
    s.emitted = []
    s.state_changed.connect(s.emitted.append)
    return s


class TestGameSession:
    """Tests for the session that owns the live GameState."""

    def test_starts_with_reset_state(self, session):
        assert session.state.board == EMPTY_BOARD
        assert session.state.next_player is Player.A
        assert session.emitted == []

    def test_play_replaces_state_and_emits(self, session):
        before = session.state
        session.play(4)
        assert session.state is not before
        assert session.state.board[4] is Cell.MARK_A
        assert session.emitted == [session.state]

    def test_ignored_move_emits_nothing(self, session):
        session.play(4)
        session.play(4)
        assert len(session.emitted) == 1
        assert session.state.next_player is Player.B

    def test_moves_after_win_emit_nothing(self, session):
        for index in [0, 4, 1, 5, 2]:
            session.play(index)
        assert session.state.is_terminal
        count = len(session.emitted)
        session.play(8)
        assert len(session.emitted) == count

    def test_out_of_range_propagates(self, session):
        with pytest.raises(IndexError):
            session.play(9)
        assert session.emitted == []

    def test_restart_always_emits_fresh_state(self, session):
        session.play(0)
        session.restart()
        assert session.state.board == EMPTY_BOARD
        assert session.state.next_player is Player.A
        assert len(session.emitted) == 2

    def test_new_game_uses_injected_coin_flip(self, session):
        session.play(0)
        session.new_game()
        assert session.state.board == EMPTY_BOARD
        assert session.state.next_player is Player.B
        assert session.emitted[-1] == session.state

    def test_old_states_stay_untouched(self, session):
        session.play(0)
        snapshot = session.state
        session.play(1)
        assert snapshot.board[1] is Cell.EMPTY
