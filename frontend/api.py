# frontend/api.py

import logging
import threading

from flask import Blueprint, current_app, jsonify, request

from backend.game import GameSession
from backend.levels import LEVELS, get_level

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

# Global session (one player per server process)
game = None

# The dev server is threaded; every request that touches the session holds this.
session_lock = threading.Lock()


def _get_game() -> GameSession:
    global game
    if game is None:
        level = get_level(current_app.config.get("DEFAULT_LEVEL", 2))
        game = GameSession(level=level, seed=current_app.config.get("SEED"))
    return game


def _bad_request(message: str):
    return jsonify({"error": message}), 400


def _int_field(data: dict, name: str):
    value = data.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return _bad_request("Expected a JSON object")
    with session_lock:
        session = _get_game()
        if "level" in data:
            try:
                session.select_level(data["level"])
            except ValueError as e:
                return _bad_request(str(e))
        else:
            session.new_game()
        return jsonify(session.get_state())


@api_blueprint.route("/level", methods=["POST"])
def select_level():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "level" not in data:
        return _bad_request("Missing 'level'")
    with session_lock:
        session = _get_game()
        try:
            session.select_level(data["level"])
        except ValueError as e:
            return _bad_request(str(e))
        logger.info("Level changed to %s", session.level.name)
        return jsonify(session.get_state())


@api_blueprint.route("/click", methods=["POST"])
def click():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _bad_request("Expected a JSON object")
    row = _int_field(data, "row")
    col = _int_field(data, "col")
    button = data.get("button", "primary")

    if row is None or col is None or button not in {"primary", "secondary"}:
        return _bad_request("Invalid input")

    with session_lock:
        session = _get_game()
        if button == "primary":
            session.primary_click(row, col)
        else:
            session.secondary_click(row, col)
        return jsonify(session.get_state())


@api_blueprint.route("/state", methods=["GET"])
def get_state():
    with session_lock:
        return jsonify(_get_game().get_state())


@api_blueprint.route("/levels", methods=["GET"])
def list_levels():
    return jsonify([dict(index=i, **level.to_dict()) for i, level in enumerate(LEVELS)])
