from __future__ import annotations

from flask import Blueprint, jsonify

from ..extensions import get_room_registry

bp = Blueprint("rooms", __name__)


@bp.get("/rooms/<room_id>")
def get_room(room_id: str):
    with get_room_registry().lock_room(room_id) as room:
        if room is None:
            return jsonify({"error": "room_not_found"}), 404
        return jsonify(room.snapshot())
