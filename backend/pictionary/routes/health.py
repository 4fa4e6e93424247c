from __future__ import annotations

from flask import Blueprint, jsonify

from ..extensions import get_room_registry

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    return jsonify({"status": "ok", "activeRoomCount": len(get_room_registry())})
