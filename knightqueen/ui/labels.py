"""
Text the UI shows or announces for a given GameState.

Kept free of Qt so screen-reader strings can be checked without a display.
"""

from ..game_logic import Cell, Player, Status

PLAYER_NAMES = {Player.A: "Knight", Player.B: "Queen"}


def player_name(player):
    return PLAYER_NAMES[player]


def cell_label(index, cell):
    """'Cell 5, Queen' style label, 1-based like the on-screen grid"""
    owner = cell.owner
    what = player_name(owner) if owner is not None else "empty"
    return f"Cell {index + 1}, {what}"


def board_description(state):
    return "; ".join(cell_label(i, c) for i, c in enumerate(state.board))


def announcement(state):
    """
    live-region text; empty while the round is running
    """
    if state.outcome.status is Status.WIN:
        return f"Player {state.outcome.winner.value} wins"
    if state.outcome.status is Status.DRAW:
        return "Game ended in a draw"
    return ""


def current_player_label(state):
    return f"Current player: {player_name(state.current_player)}"


def status_color_role(state):
    if state.is_terminal:
        return "muted"
    return "blue" if state.current_player is Player.A else "amber"


def is_cell_enabled(state, index):
    return not state.is_terminal and state.board[index] is Cell.EMPTY
