"""Rules engines for classic and Ultimate Tic Tac Toe."""
from .lines import DRAW, WIN_LINES, check_win, evaluate
from .ai import choose_move
from .classic import ClassicGame, new_classic_game, apply_human_move, apply_opponent_move
from .logic import UltimateTicTacToe, new_ultimate_game, apply_ultimate_move

__all__ = [
    "DRAW", "WIN_LINES", "check_win", "evaluate", "choose_move",
    "ClassicGame", "new_classic_game", "apply_human_move", "apply_opponent_move",
    "UltimateTicTacToe", "new_ultimate_game", "apply_ultimate_move",
]
