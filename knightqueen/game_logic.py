import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

BOARD_SIZE = 3                        # fixed 3x3 grid
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

# rows, cols, diags, scanned in this order
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Player(Enum):
    """
    the two sides; value is the letter used in status text
    """
    A = "X"
    B = "O"

    def opposite(self) -> "Player":
        return Player.B if self is Player.A else Player.A

    @property
    def mark(self) -> "Cell":
        return Cell.MARK_A if self is Player.A else Cell.MARK_B


class Cell(Enum):
    EMPTY = ""
    MARK_A = "X"
    MARK_B = "O"

    @property
    def owner(self) -> Optional[Player]:
        if self is Cell.EMPTY:
            return None
        return Player.A if self is Cell.MARK_A else Player.B


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    round classification; winner is set only for WIN
    """
    status: Status
    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls(Status.WIN, player)

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)

Board = Tuple[Cell, ...]
EMPTY_BOARD: Board = (Cell.EMPTY,) * BOARD_CELLS


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    first line fully owned by one player, or None
    """
    for a, b, c in WIN_LINES:
        if board[a] is not Cell.EMPTY and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def evaluate_outcome(board: Board) -> Outcome:
    """
    win beats draw; draw needs a full board
    """
    line = winning_line(board)
    if line is not None:
        return Outcome.win(board[line[0]].owner)
    if all(cell is not Cell.EMPTY for cell in board):
        return DRAW
    return IN_PROGRESS


def _default_coin_flip() -> bool:
    return random.random() > 0.5


@dataclass(frozen=True)
class GameState:
    """
    One immutable snapshot of a round.

    Moves never mutate a state; apply_move hands back a new one (or the same
    object when the move is ignored). outcome is always derived from board.
    """
    board: Board = EMPTY_BOARD
    next_player: Player = Player.A
    outcome: Outcome = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        board = tuple(self.board)
        if len(board) != BOARD_CELLS:
            raise ValueError(
                f"board must have exactly {BOARD_CELLS} cells, got {len(board)}")
        object.__setattr__(self, "board", board)
        object.__setattr__(self, "outcome", evaluate_outcome(board))

    @classmethod
    def reset(cls) -> "GameState":
        """empty board, A to move"""
        return cls()

    @classmethod
    def start_with_random_first_player(
            cls, coin_flip: Optional[Callable[[], bool]] = None) -> "GameState":
        """
        like reset, but a coin flip picks who opens the round;
        coin_flip returns True when B should start
        """
        flip = coin_flip or _default_coin_flip
        first = Player.B if flip() else Player.A
        logger.debug("coin flip: player %s starts", first.value)
        return cls(next_player=first)

    def apply_move(self, index: int) -> "GameState":
        """
        place next_player's mark at index
        returns: new state, or self when the game is over or the cell taken
        """
        # callers only ever send 0-8; anything else is a bug upstream
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < BOARD_CELLS:
            raise IndexError(f"cell index out of range: {index!r}")
        if self.outcome.is_terminal:
            logger.debug("move %d ignored: round is over", index)
            return self
        if self.board[index] is not Cell.EMPTY:
            logger.debug("move %d ignored: cell taken", index)
            return self

        board = list(self.board)
        board[index] = self.next_player.mark
        moved = GameState(board=tuple(board), next_player=self.next_player)
        if moved.outcome.is_terminal:
            return moved                  # mover stays; no more moves
        return GameState(board=moved.board,
                         next_player=self.next_player.opposite())

    def empty_cells(self):
        return [i for i, cell in enumerate(self.board) if cell is Cell.EMPTY]

    @property
    def is_terminal(self) -> bool:
        return self.outcome.is_terminal

    @property
    def current_player(self) -> Player:
        return self.next_player

    @property
    def status_text(self) -> str:
        if self.outcome.status is Status.WIN:
            return f"Player {self.outcome.winner.value} wins!"
        if self.outcome.status is Status.DRAW:
            return "It's a draw!"
        return f"Turn: Player {self.next_player.value}"
