from __future__ import annotations

from flask import Flask, current_app

from .game.registry import RoomRegistry


ROOMS_KEY = "pictionary.rooms"


def init_room_registry(app: Flask, registry: RoomRegistry) -> RoomRegistry:
    app.extensions[ROOMS_KEY] = registry
    return registry


def get_room_registry() -> RoomRegistry:
    return current_app.extensions[ROOMS_KEY]
