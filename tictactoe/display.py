"""Text shown around the boards: glyphs, status lines and cell labels.

Nothing here changes a game. Gravel mode is only a different row in GLYPHS.
"""
from .classic import AWAITING_OPPONENT, COMPUTER, HUMAN
from .lines import DRAW

NORMAL = "normal"
GRAVEL = "gravel"

GLYPHS = {
    NORMAL: {"O": "O", "X": "X"},
    GRAVEL: {"O": "\U0001FAA8", "X": "\U0001F69B"},   # rock, truck
}

GRAVEL_TOGGLE_LABEL = {False: "Hello Gravel Mode", True: "Normal Mode"}


def glyph(mark, mode=NORMAL):
    if mark is None: return ""
    return GLYPHS.get(mode, GLYPHS[NORMAL])[mark]

def _row_col(index):
    return index // 3 + 1, index % 3 + 1

def cell_label(index, mark, mode=NORMAL):
    row, col = _row_col(index)
    label = f"Row {row} Column {col}"
    return f"{label} ({glyph(mark, mode)})" if mark else label


# ── Classic ───────────────────────────────────────────────────────────────────
def classic_status(game, mode=NORMAL):
    if game.is_over:
        if game.last_result == HUMAN: return "congrats"
        if game.last_result == COMPUTER: return "Computer wins"
        return "Draw"
    if game.phase == AWAITING_OPPONENT:
        return "Computer thinking..."
    return f"Your turn: place a {glyph(HUMAN, mode)}"

def classic_view(game, mode=NORMAL):
    view = game.state()
    view["glyphs"] = [glyph(m, mode) for m in game.board]
    view["labels"] = [cell_label(i, m, mode) for i, m in enumerate(game.board)]
    view["status"] = classic_status(game, mode)
    return view


# ── Ultimate ──────────────────────────────────────────────────────────────────
def ultimate_status(game):
    if game.game_winner == DRAW: return "It's a draw!"
    if game.game_winner: return f"Player {game.game_winner} wins!"
    msg = f"Player {game.current_player}'s turn"
    if game.forced_board is None:
        return msg + " - pick any square"
    row, col = _row_col(game.forced_board)
    return msg + f" - must play in board ({row},{col})"

def active_boards(game):
    if game.is_over: return []
    return [b for b in range(9) if not game.board_winners[b]
            and (game.forced_board is None or game.forced_board == b)]

def ultimate_view(game):
    view = game.state()
    active = active_boards(game)
    view["active"] = active
    view["playable"] = [[b in active and game.boards[b][c] is None for c in range(9)]
                        for b in range(9)]
    view["status"] = ultimate_status(game)
    return view
