"""Scripted opponent for classic Tic Tac Toe.

FIXED PRIORITY CHAIN (first rule that yields a cell wins)
──────────────────────────────────────────────────────────
1. Win now: complete a line that already holds two of our marks.
2. Block: complete the opponent's two-in-a-line before they do.
3. Centre (4).
4. A random free corner (0, 2, 6, 8).
5. The lowest-indexed free cell.

No search, no difficulty levels. The corner pick takes an optional
random.Random so callers (and tests) can make it deterministic.
"""
import random
from .lines import WIN_LINES, CENTER, CORNERS, empty_cells


# ── Rules ─────────────────────────────────────────────────────────────────────
def find_winning_move(board, player):
    """First empty cell that completes a line for `player`, in WIN_LINES order."""
    for line in WIN_LINES:
        marks = [board[i] for i in line]
        if marks.count(player) == 2 and marks.count(None) == 1:
            return line[marks.index(None)]
    return None

def take_center(board):
    return CENTER if board[CENTER] is None else None

def take_random_corner(board, rng=None):
    corners = [i for i in CORNERS if board[i] is None]
    if not corners:
        return None
    return (rng or random).choice(corners)

def take_any_open(board):
    free = empty_cells(board)
    return free[0] if free else None


# ── Public API ────────────────────────────────────────────────────────────────
def choose_move(board, me="X", opp="O", rng=None):
    """Pick the opponent's cell, or None when the board is full."""
    for rule in (lambda: find_winning_move(board, me),
                 lambda: find_winning_move(board, opp),
                 lambda: take_center(board),
                 lambda: take_random_corner(board, rng),
                 lambda: take_any_open(board)):
        move = rule()
        if move is not None:
            return move
    assert not empty_cells(board), f"no move chosen for open board {board!r}"
    return None
