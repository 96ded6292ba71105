# frontend/api.py

import logging
import uuid

from flask import Blueprint, current_app, jsonify, request

from backend.config import board_options
from backend.errors import InvalidConstructionParameters, OutOfRange
from backend.game import GameSession

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

# One GameSession per id, never shared between clients.
sessions = {}


def _get_session(game_id):
    if not isinstance(game_id, str):
        return None
    return sessions.get(game_id)


def _json_object():
    """The request body as a dict, or None when it is not a JSON object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return data


@api_blueprint.errorhandler(InvalidConstructionParameters)
@api_blueprint.errorhandler(OutOfRange)
def handle_bad_request(error):
    return jsonify({"error": str(error)}), 400


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    data = _json_object()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    game_config = current_app.config.get("MINESWEEPER", {})
    defaults = game_config.get("game", {})

    size = data.get("size", defaults.get("default_size", 9))
    num_mines = data.get("num_mines", defaults.get("default_mines", 10))
    seed = data.get("seed", defaults.get("seed"))

    max_size = game_config.get("api", {}).get("max_size", 100)
    if isinstance(size, int) and size > max_size:
        return jsonify({"error": f"Board size must be at most {max_size}, got {size}"}), 400

    game = GameSession(size=size, num_mines=num_mines, seed=seed, board_options=board_options(game_config))
    game_id = uuid.uuid4().hex
    sessions[game_id] = game
    logger.info("Created session %s", game_id)

    state = game.get_state()
    state["game_id"] = game_id
    return jsonify(state), 201


@api_blueprint.route("/reveal", methods=["POST"])
def reveal():
    data = _json_object()
    if data is None:
        return jsonify({"error": "Request body must be a JSON object"}), 400
    game_id = data.get("game_id")
    row = data.get("row")
    col = data.get("col")

    if game_id is None or row is None or col is None:
        return jsonify({"error": "Invalid input"}), 400

    game = _get_session(game_id)
    if game is None:
        return jsonify({"error": f"Unknown game {game_id}"}), 404

    result = game.reveal(row, col)
    result["game_id"] = game_id
    return jsonify(result)


@api_blueprint.route("/state/<game_id>", methods=["GET"])
def get_state(game_id):
    game = _get_session(game_id)
    if game is None:
        return jsonify({"error": f"Unknown game {game_id}"}), 404

    state = game.get_state()
    state["game_id"] = game_id
    return jsonify(state)


@api_blueprint.route("/game/<game_id>", methods=["DELETE"])
def end_game(game_id):
    if sessions.pop(game_id, None) is None:
        return jsonify({"error": f"Unknown game {game_id}"}), 404
    logger.info("Discarded session %s", game_id)
    return "", 204
