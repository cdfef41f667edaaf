"""Tests for the board widget and main window wiring."""

import pytest
from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest

from knightqueen.game_logic import Cell, GameState, Player
from knightqueen.session import GameSession
from knightqueen.ui.board_widget import BoardWidget
from knightqueen.ui.main_window import TicTacToeWindow


@pytest.fixture
def board(qapp):
    widget = BoardWidget()
    widget.resize(300, 300)
    widget.show()
    yield widget
    widget.close()


@pytest.fixture
def window(qapp):
    session = GameSession(coin_flip=lambda: True)
    win = TicTacToeWindow(session=session)
    yield win
    win.close()


class TestBoardWidget:
    """Tests for hit-testing, clicks and painting."""

    def test_index_at_maps_row_major(self, board):
        assert board.index_at(10, 10) == 0
        assert board.index_at(150, 150) == 4
        assert board.index_at(290, 10) == 2
        assert board.index_at(10, 290) == 6

    def test_index_at_outside_grid(self, board):
        assert board.index_at(-1, 10) is None
        assert board.index_at(10, 300) is None

    def test_click_emits_index(self, board):
        clicked = []
        board.cell_clicked.connect(clicked.append)
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(150, 150))
        assert clicked == [4]

    def test_click_on_taken_cell_ignored(self, board):
        clicked = []
        board.cell_clicked.connect(clicked.append)
        board.set_state(GameState.reset().apply_move(4))
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(150, 150))
        assert clicked == []

    def test_click_after_game_over_ignored(self, board, won_by_a):
        clicked = []
        board.cell_clicked.connect(clicked.append)
        board.set_state(won_by_a)
        QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(290, 290))
        assert clicked == []

    def test_accessible_description_follows_state(self, board):
        board.set_state(GameState.reset().apply_move(0))
        assert board.accessibleDescription().startswith("Cell 1, Knight")

    def test_paints_finished_board(self, board, won_by_a):
        board.set_state(won_by_a)
        assert not board.grab().isNull()


class TestMainWindow:
    """Tests for the window reacting to session changes."""

    def test_initial_status(self, window):
        assert window.message_label.text() == "Turn: Player X"
        assert window.turn_pill.text() == "Current player: Knight"
        assert window.game_over_label.isHidden()

    def test_board_click_reaches_session(self, window):
        window.board_widget.cell_clicked.emit(4)
        assert window.session.state.board[4] is Cell.MARK_A
        assert window.message_label.text() == "Turn: Player O"

    def test_win_shows_game_over(self, window):
        for index in [0, 4, 1, 5, 2]:
            window.board_widget.cell_clicked.emit(index)
        assert window.message_label.text() == "Player X wins!"
        assert window.message_label.accessibleName() == "Player X wins"
        assert not window.game_over_label.isHidden()
        assert window.turn_pill.isHidden()

    def test_restart_button(self, window):
        window.board_widget.cell_clicked.emit(0)
        window.restart_button.click()
        assert window.session.state == GameState.reset()
        assert window.board_widget.state == window.session.state

    def test_new_game_button_uses_coin_flip(self, window):
        window.new_game_button.click()
        assert window.session.state.next_player is Player.B
        assert window.turn_pill.text() == "Current player: Queen"

    def test_button_accessible_names(self, window):
        assert window.restart_button.accessibleName() == "Restart current round"
        assert window.new_game_button.accessibleName() == \
            "New game with random first player"
