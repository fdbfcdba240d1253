"""
Tic-Tac-Toe - two players taking turns on the same device.
The game lives in the signed session cookie; nothing is stored server-side.
"""

import logging

from flask import Blueprint, abort, jsonify, redirect, render_template, request, session, url_for
from flask_wtf.csrf import CSRFError, generate_csrf

from app.projects.tic_tac_toe.core.constants import BOARD_SIZE, BOARD_WIDTH, SESSION_KEY
from app.projects.tic_tac_toe.core.game_state import GameState
from app.utils.logging import log_game_event, log_project_visit

logger = logging.getLogger(__name__)

tic_tac_toe_bp = Blueprint(
    "tic_tac_toe",
    __name__,
    template_folder="templates",
    url_prefix="/tic-tac-toe",
)


def _log_move(state, index, marker):
    log_game_event("tic_tac_toe", f"played {marker.value} at cell {index}")
    winner = state.winner()
    if winner is not None:
        log_game_event("tic_tac_toe", f"finished a game: {winner.value} won")


def _load_game():
    """Current session game, or a fresh one if there is none or it is corrupt."""
    data = session.get(SESSION_KEY)
    if data is None:
        game = GameState()
    else:
        try:
            game = GameState.from_dict(data)
        except ValueError as e:
            logger.warning(f"Discarding invalid tic-tac-toe session data: {e}")
            game = GameState()
    game.subscribe(_log_move)
    return game


def _save_game(game):
    session[SESSION_KEY] = game.to_dict()


def _state_payload(game):
    winner = game.winner()
    line = game.winning_line()
    return {
        "board": game.to_dict()["board"],
        "next_player": game.next_marker.value,
        "winner": winner.value if winner is not None else None,
        "winning_line": list(line) if line is not None else None,
        "status": game.status(),
        "csrf_token": generate_csrf(),
    }


def _valid_index(index):
    return 0 <= index < BOARD_SIZE


@tic_tac_toe_bp.route("/")
def index():
    """Display the board and the status line."""
    log_project_visit("tic_tac_toe", "Tic-Tac-Toe")
    game = _load_game()
    return render_template(
        "tic_tac_toe.html",
        game=game,
        winning_line=game.winning_line() or (),
        board_width=BOARD_WIDTH,
    )


@tic_tac_toe_bp.route("/play/<int:index>", methods=["POST"])
def play(index):
    if not _valid_index(index):
        abort(404)
    game = _load_game()
    game.play(index)
    _save_game(game)
    return redirect(url_for("tic_tac_toe.index"))


@tic_tac_toe_bp.route("/new", methods=["POST"])
def new_game():
    _save_game(GameState())
    log_game_event("tic_tac_toe", "started a new game")
    return redirect(url_for("tic_tac_toe.index"))


@tic_tac_toe_bp.route("/api/state")
def api_state():
    return jsonify(_state_payload(_load_game()))


@tic_tac_toe_bp.route("/api/play/<int:index>", methods=["POST"])
def api_play(index):
    if not _valid_index(index):
        return jsonify({"error": f"Cell index must be between 0 and {BOARD_SIZE - 1}."}), 404
    game = _load_game()
    game.play(index)
    _save_game(game)
    return jsonify(_state_payload(game))


@tic_tac_toe_bp.errorhandler(CSRFError)
def csrf_error(e):
    """API callers get JSON; form posts keep the default 400 page."""
    if request.path.startswith(f"{tic_tac_toe_bp.url_prefix}/api/"):
        return jsonify({"error": e.description}), 400
    return e
