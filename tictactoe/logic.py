"""Ultimate Tic Tac Toe for two players on one page.

The cell you play in picks the board your opponent must play in next. A
decided board (won or drawn) is locked; being sent to one frees the
opponent to play in any undecided board. Drawn boards count for nobody on
the meta-board.
"""
from .lines import DRAW, PLAYERS, check_win, is_index, new_board, other


class UltimateTicTacToe:
    def __init__(self):
        self.boards = [new_board() for _ in range(9)]
        self.board_winners = [None]*9
        self.board_win_lines = [None]*9   # which 3 cells formed each mini-board win
        self.current_player = "O"
        self.forced_board = None
        self.game_winner = None
        self.game_win_line = None          # which 3 mini-boards formed the meta-win
        self.last_move = None              # [board, cell]
        self.move_history = []             # [{board, cell, player}, ...]

    @property
    def is_over(self):
        return self.game_winner is not None

    def meta_board(self):
        return [w if w in PLAYERS else None for w in self.board_winners]

    def check_game_winner(self):
        winner, win_line = check_win(self.meta_board())
        if winner and winner != DRAW:
            self.game_win_line = win_line
            return winner
        if all(self.board_winners):
            return DRAW
        return None

    def can_play(self, b, c):
        if self.is_over: return False
        if not is_index(b) or not is_index(c): return False
        if self.board_winners[b]: return False
        if self.forced_board is not None and b != self.forced_board: return False
        return self.boards[b][c] is None

    def make_move(self, b, c):
        if not self.can_play(b, c): return False
        player = self.current_player
        self.boards[b][c] = player
        self.last_move = [b, c]
        self.move_history.append({"board": b, "cell": c, "player": player})
        winner, win_line = check_win(self.boards[b])
        if winner:
            self.board_winners[b] = winner
            if winner != DRAW: self.board_win_lines[b] = win_line
        self.game_winner = self.check_game_winner()
        if self.game_winner: return True
        self.forced_board = c if self.board_winners[c] is None else None
        self.current_player = other(player)
        return True

    def get_valid_moves(self):
        if self.is_over: return []
        moves = []
        boards_to_check = range(9) if self.forced_board is None else [self.forced_board]
        for b in boards_to_check:
            if self.board_winners[b]: continue
            for c in range(9):
                if self.boards[b][c] is None: moves.append((b, c))
        return moves

    def state(self):
        return {
            "boards": [list(b) for b in self.boards],
            "winners": list(self.board_winners),
            "boardWinLines": list(self.board_win_lines),
            "player": self.current_player,
            "forced": self.forced_board,
            "isOver": self.is_over,
            "gameWinner": self.game_winner,
            "gameWinLine": self.game_win_line,
            "lastMove": self.last_move,
            "moveHistory": list(self.move_history),
        }


# ── Functional API ────────────────────────────────────────────────────────────
def new_ultimate_game():
    return UltimateTicTacToe()

def apply_ultimate_move(state, board_index, cell_index):
    state.make_move(board_index, cell_index)
    return state
