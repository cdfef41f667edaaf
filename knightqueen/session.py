import logging

from PySide6.QtCore import QObject, Signal, Slot

from .game_logic import GameState

logger = logging.getLogger(__name__)


class GameSession(QObject):
    """
    holds the one live GameState and swaps it on every change
    """
    state_changed = Signal(object)  # emits the new GameState

    def __init__(self, coin_flip=None, parent=None):
        """
        coin_flip: zero-arg callable, True means B opens a new game
        """
        super().__init__(parent)
        self._coin_flip = coin_flip
        self._state = GameState.reset()

    @property
    def state(self):
        return self._state

    def _replace(self, new_state):
        self._state = new_state
        self.state_changed.emit(new_state)

    @Slot(int)
    def play(self, index):
        """
        apply a move; ignored moves emit nothing
        """
        old = self._state
        new = old.apply_move(index)
        if new is old:
            return
        logger.info("player %s -> cell %d", old.next_player.value, index)
        self._replace(new)
        if new.is_terminal:
            logger.info("round over: %s", new.status_text)

    @Slot()
    def restart(self):
        # same round again, A always opens
        logger.info("round restarted")
        self._replace(GameState.reset())

    @Slot()
    def new_game(self):
        state = GameState.start_with_random_first_player(self._coin_flip)
        logger.info("new game, player %s opens", state.next_player.value)
        self._replace(state)
