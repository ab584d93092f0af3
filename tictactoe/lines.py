"""Three-in-a-row detection shared by the classic and ultimate games.

A board is a list of 9 marks in row-major order: None (empty), "O" or "X".
An outcome is None (undecided), "O"/"X" (won by that mark) or DRAW.
"""

DRAW = "D"
PLAYERS = ("O", "X")

WIN_LINES = [
    (0,1,2),(3,4,5),(6,7,8),
    (0,3,6),(1,4,7),(2,5,8),
    (0,4,8),(2,4,6)
]

CENTER  = 4
CORNERS = (0, 2, 6, 8)


def new_board():
    return [None]*9

def other(player):
    return "X" if player == "O" else "O"

def check_win(board):
    """Return (outcome, winning line). The first matching line in WIN_LINES wins."""
    for a, b, c in WIN_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return board[a], [a, b, c]
    if all(board):
        return DRAW, None
    return None, None

def evaluate(board):
    return check_win(board)[0]

def empty_cells(board):
    return [i for i, mark in enumerate(board) if mark is None]

def is_index(value):
    """True for an int in 0..8 (bools are not indices)."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 8
