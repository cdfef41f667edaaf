"""Shared fixtures: a headless QApplication and a few canned games."""

import os

# must be set before the first QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from knightqueen.game_logic import GameState


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def play(state, moves):
    for index in moves:
        state = state.apply_move(index)
    return state


@pytest.fixture
def won_by_a():
    # A takes the top row
    return play(GameState.reset(), [0, 4, 1, 5, 2])


@pytest.fixture
def drawn():
    return play(GameState.reset(), [0, 1, 2, 4, 3, 5, 7, 6, 8])
