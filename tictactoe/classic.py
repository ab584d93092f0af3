"""Classic Tic Tac Toe: the human plays O, the scripted computer plays X.

A turn is two explicit steps. human_move() leaves the game waiting for the
opponent; whoever hosts the game calls opponent_move() later (after its own
delay). The engine never schedules anything itself.
"""
from .ai import choose_move
from .lines import check_win, is_index, new_board

HUMAN    = "O"
COMPUTER = "X"

AWAITING_HUMAN    = "awaiting_human"
AWAITING_OPPONENT = "awaiting_opponent"
OVER              = "over"


class ClassicGame:
    def __init__(self):
        self.board       = new_board()
        self.phase       = AWAITING_HUMAN
        self.last_result = None   # "O" | "X" | "D" once over
        self.win_line    = None
        self.last_move   = None

    @property
    def is_over(self):
        return self.phase == OVER

    def human_move(self, index):
        if self.phase != AWAITING_HUMAN: return False
        if not is_index(index) or self.board[index] is not None: return False
        self._place(index, HUMAN, AWAITING_OPPONENT)
        return True

    def opponent_move(self, rng=None):
        if self.phase != AWAITING_OPPONENT: return False
        index = choose_move(self.board, COMPUTER, HUMAN, rng=rng)
        if index is None: return False
        self._place(index, COMPUTER, AWAITING_HUMAN)
        return True

    def _place(self, index, mark, next_phase):
        self.board[index] = mark
        self.last_move = index
        result, line = check_win(self.board)
        if result:
            self.phase, self.last_result, self.win_line = OVER, result, line
        else:
            self.phase = next_phase

    def state(self):
        return {
            "board":      list(self.board),
            "phase":      self.phase,
            "isOver":     self.is_over,
            "lastResult": self.last_result,
            "winLine":    self.win_line,
            "lastMove":   self.last_move,
        }


# ── Functional API ────────────────────────────────────────────────────────────
def new_classic_game():
    return ClassicGame()

def apply_human_move(state, index):
    state.human_move(index)
    return state

def apply_opponent_move(state, rng=None):
    state.opponent_move(rng=rng)
    return state
