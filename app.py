import os

ASYNC_MODE = os.environ.get('SOCKETIO_ASYNC_MODE', 'gevent')
if ASYNC_MODE == 'gevent':
    from gevent import monkey
    monkey.patch_all()

from flask import Flask, render_template, request
from flask_socketio import SocketIO
from tictactoe.classic import ClassicGame, AWAITING_OPPONENT
from tictactoe.logic import UltimateTicTacToe
from tictactoe.display import (GRAVEL, NORMAL, GRAVEL_TOGGLE_LABEL,
                               classic_view, ultimate_view)

app = Flask(__name__)
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'a_secret_key')
# Pause before the computer answers, so the human sees their own move land first.
app.config['COMPUTER_DELAY_MS'] = int(os.environ.get('COMPUTER_DELAY_MS', 250))
app.logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())
socketio = SocketIO(app, async_mode=ASYNC_MODE)

MODES = ('classic', 'ultimate')

# One table per open page (socket sid). Nothing outlives the connection.
tables = {}

def make_table():
    return {
        "mode":       "classic",
        "gravel":     False,
        "classic":    ClassicGame(),
        "ultimate":   UltimateTicTacToe(),
        "generation": 0,   # bumped on every classic reset; stale computer turns check it
    }

def _table():
    return tables.get(request.sid)

def _arg(data, key):
    return data.get(key) if isinstance(data, dict) else None

# ── Emitters ─────────────────────────────────────────────────────────────────
def emit_classic(sid):
    table = tables.get(sid)
    if not table: return
    view = classic_view(table["classic"], GRAVEL if table["gravel"] else NORMAL)
    view["gravel"]      = table["gravel"]
    view["gravelLabel"] = GRAVEL_TOGGLE_LABEL[table["gravel"]]
    socketio.emit("classic_state", view, to=sid)

def emit_ultimate(sid):
    table = tables.get(sid)
    if not table: return
    socketio.emit("ultimate_state", ultimate_view(table["ultimate"]), to=sid)

def emit_mode(sid):
    table = tables.get(sid)
    if not table: return
    socketio.emit("mode", {"mode": table["mode"]}, to=sid)

# ── Computer turn ────────────────────────────────────────────────────────────
def schedule_opponent_turn(sid, generation):
    socketio.start_background_task(play_opponent_turn, sid, generation)

def play_opponent_turn(sid, generation):
    """Runs after the human's move has been shown. Drops out if the game moved on."""
    socketio.sleep(app.config['COMPUTER_DELAY_MS'] / 1000)
    table = tables.get(sid)
    if not table or table["generation"] != generation:
        app.logger.debug("Discarding stale computer turn for %s", sid)
        return
    g = table["classic"]
    if not g.opponent_move():
        app.logger.debug("Computer turn skipped for %s (phase=%s)", sid, g.phase)
        return
    if g.is_over:
        app.logger.info("Classic game over for %s: %s", sid, g.last_result)
    emit_classic(sid)

# ── Routes ───────────────────────────────────────────────────────────────────
@app.route('/')
def index(): return render_template('index.html')

# ── SocketIO Events ───────────────────────────────────────────────────────────
@socketio.on('connect')
def connect(auth=None):
    tables[request.sid] = make_table()
    app.logger.info("Page connected: %s", request.sid)
    emit_mode(request.sid)
    emit_classic(request.sid)

@socketio.on('disconnect')
def disconnect(reason=None):
    tables.pop(request.sid, None)
    app.logger.info("Page disconnected: %s", request.sid)

@socketio.on("classic_move")
def classic_move(data=None):
    table = _table()
    if not table: return
    sid, g = request.sid, table["classic"]
    index = _arg(data, "index")
    if not g.human_move(index):
        app.logger.debug("Rejected classic move %r for %s (phase=%s)", index, sid, g.phase)
        emit_classic(sid)
        return
    if g.is_over:
        app.logger.info("Classic game over for %s: %s", sid, g.last_result)
    emit_classic(sid)
    if g.phase == AWAITING_OPPONENT:
        schedule_opponent_turn(sid, table["generation"])

@socketio.on("classic_reset")
def classic_reset(data=None):
    table = _table()
    if not table: return
    table["classic"] = ClassicGame()
    table["generation"] += 1
    emit_classic(request.sid)

@socketio.on("ultimate_move")
def ultimate_move(data=None):
    table = _table()
    if not table: return
    sid, g = request.sid, table["ultimate"]
    b, c = _arg(data, "board"), _arg(data, "cell")
    if not g.make_move(b, c):
        app.logger.debug("Rejected ultimate move (%r, %r) for %s", b, c, sid)
    elif g.is_over:
        app.logger.info("Ultimate game over for %s: %s", sid, g.game_winner)
    emit_ultimate(sid)

@socketio.on("ultimate_reset")
def ultimate_reset(data=None):
    table = _table()
    if not table: return
    table["ultimate"] = UltimateTicTacToe()
    emit_ultimate(request.sid)

@socketio.on("set_mode")
def set_mode(data=None):
    """Switching mode starts the target game afresh."""
    table = _table()
    if not table: return
    mode = _arg(data, "mode")
    if mode not in MODES:
        emit_mode(request.sid)
        return
    table["mode"] = mode
    emit_mode(request.sid)
    if mode == "classic":
        classic_reset()
    else:
        ultimate_reset()

@socketio.on("toggle_gravel")
def toggle_gravel(data=None):
    table = _table()
    if not table: return
    table["gravel"] = not table["gravel"]
    emit_classic(request.sid)


if __name__ == "__main__":
    socketio.run(app, debug=True)
