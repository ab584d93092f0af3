import os
import random

# Must be set before app is imported: no gevent monkey-patching under pytest.
os.environ.setdefault("SOCKETIO_ASYNC_MODE", "threading")

import pytest

from tictactoe.logic import UltimateTicTacToe


def board_from(text):
    """'OO_X_____' -> ['O', 'O', None, 'X', None, ...]"""
    return [None if ch == "_" else ch for ch in text]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def decided_ultimate():
    """Return a factory for an ultimate game whose sub-boards are pre-decided."""
    def make(winners, current_player="O"):
        game = UltimateTicTacToe()
        for b, w in enumerate(winners):
            if w == "D":
                game.boards[b] = board_from("OXOOXXXOO")
            elif w:
                game.boards[b] = [w, w, w, None, None, None, None, None, None]
            game.board_winners[b] = w
        game.current_player = current_player
        return game
    return make
