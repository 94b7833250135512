"""Player REST API.

Endpoints live under ``/rest``. Player ids must be positive integers: any
other value is a 400, an unknown id is a 404.
"""

import logging
from typing import Optional

from flask import Blueprint, jsonify, request
from marshmallow import ValidationError
from sqlalchemy import text

from game_players.database import get_db_session, with_player_service
from game_players.services import InvalidArgumentError, PlayerService
from game_players.validation import (
    player_create_schema,
    player_filter_schema,
    player_list_schema,
    player_schema,
    player_update_schema,
    players_schema,
)

bp = Blueprint("players", __name__, url_prefix="/rest")
logger = logging.getLogger(__name__)

_PAGING_KEYS = ("order", "page_number", "page_size")

# Largest value a 64-bit signed INTEGER column can hold
MAX_PLAYER_ID = 2 ** 63 - 1


def _parse_player_id(raw: str) -> Optional[int]:
    """Return the id as an int, or None unless it is a positive 64-bit integer."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    player_id = int(raw)
    return player_id if 0 < player_id <= MAX_PLAYER_ID else None


def _bad_request(error: str, details=None):
    body = {"error": error}
    if details is not None:
        body["details"] = details
    return jsonify(body), 400


def _invalid_id(raw: str):
    return _bad_request(f"Invalid player id: {raw}")


def _not_found(player_id: int):
    return jsonify({"error": f"Player {player_id} not found"}), 404


@bp.route("/health")
def health():
    """Health check endpoint."""
    try:
        with next(get_db_session()) as db:
            db.execute(text("SELECT 1"))

        return jsonify({
            "status": "ok",
            "database": "connected",
        })
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return jsonify({
            "status": "error",
            "database": "disconnected",
            "error": str(e)
        }), 500


@bp.route("/players")
@with_player_service
def list_players(service: PlayerService):
    """List players matching the query filters, ordered and paged."""
    try:
        params = player_list_schema.load(request.args.to_dict())
    except ValidationError as err:
        return _bad_request("Validation failed", err.messages)

    try:
        paging = {key: params.pop(key, None) for key in _PAGING_KEYS}
        players = service.get_players(**params)
        players = service.sort_players(players, paging["order"])
        page = service.get_page(players, paging["page_number"], paging["page_size"])
        return jsonify(players_schema.dump(page))
    except Exception as e:
        logger.error(f"Error listing players: {e}")
        return jsonify({"error": "Internal server error"}), 500


@bp.route("/players/count")
@with_player_service
def count_players(service: PlayerService):
    """Count players matching the query filters."""
    try:
        params = player_filter_schema.load(request.args.to_dict())
    except ValidationError as err:
        return _bad_request("Validation failed", err.messages)

    try:
        return jsonify(len(service.get_players(**params)))
    except Exception as e:
        logger.error(f"Error counting players: {e}")
        return jsonify({"error": "Internal server error"}), 500


@bp.route("/players", methods=["POST"])
@with_player_service
def create_player(service: PlayerService):
    """Create a new player."""
    data = request.get_json(silent=True)
    if not data:
        return _bad_request("No JSON data provided")

    try:
        player = player_create_schema.load(data)
        created = service.create_player(player)
        return jsonify(player_schema.dump(created))
    except ValidationError as err:
        return _bad_request("Validation failed", err.messages)
    except InvalidArgumentError as err:
        return _bad_request("Invalid player", {err.field: str(err)})
    except Exception as e:
        logger.error(f"Error creating player: {e}")
        return jsonify({"error": "Internal server error"}), 500


@bp.route("/players/<raw_id>")
@with_player_service
def get_player(service: PlayerService, raw_id: str):
    """Get player by ID."""
    player_id = _parse_player_id(raw_id)
    if player_id is None:
        return _invalid_id(raw_id)

    try:
        player = service.get_player(player_id)
        if player is None:
            return _not_found(player_id)
        return jsonify(player_schema.dump(player))
    except Exception as e:
        logger.error(f"Error getting player {player_id}: {e}")
        return jsonify({"error": "Internal server error"}), 500


@bp.route("/players/<raw_id>", methods=["POST"])
@with_player_service
def update_player(service: PlayerService, raw_id: str):
    """Apply a partial update to an existing player."""
    player_id = _parse_player_id(raw_id)
    if player_id is None:
        return _invalid_id(raw_id)

    data = request.get_json(silent=True)
    if data is None:
        return _bad_request("No JSON data provided")

    try:
        patch = player_update_schema.load(data)
        player = service.get_player(player_id)
        if player is None:
            return _not_found(player_id)

        updated = service.update_player(player, patch)
        return jsonify(player_schema.dump(updated))
    except ValidationError as err:
        return _bad_request("Validation failed", err.messages)
    except InvalidArgumentError as err:
        return _bad_request("Invalid player", {err.field: str(err)})
    except Exception as e:
        logger.error(f"Error updating player {player_id}: {e}")
        return jsonify({"error": "Internal server error"}), 500


@bp.route("/players/<raw_id>", methods=["DELETE"])
@with_player_service
def delete_player(service: PlayerService, raw_id: str):
    """Delete a player."""
    player_id = _parse_player_id(raw_id)
    if player_id is None:
        return _invalid_id(raw_id)

    try:
        player = service.get_player(player_id)
        if player is None:
            return _not_found(player_id)

        service.delete_player(player)
        return jsonify({"message": "Player deleted successfully"}), 200
    except Exception as e:
        logger.error(f"Error deleting player {player_id}: {e}")
        return jsonify({"error": "Internal server error"}), 500
