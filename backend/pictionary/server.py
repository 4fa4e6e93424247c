from __future__ import annotations

import sys
from functools import partial

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .extensions import init_room_registry
from .game.registry import RoomRegistry
from .game.room import GameRoom
from .routes.health import bp as health_bp
from .routes.rooms import bp as rooms_bp
from .realtime.handlers import register_socketio_handlers


def _pick_async_mode(configured: str) -> str:
    if configured:
        return configured
    # Default choice:
    # - Windows: threading (eventlet has known compatibility issues on newer Python)
    # - Python >= 3.13: threading (safer default)
    # - Otherwise: eventlet
    if sys.platform.startswith("win") or sys.version_info >= (3, 13):
        return "threading"
    return "eventlet"


def create_app(config_class: type = Config) -> tuple[Flask, SocketIO]:
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    if app.config.get("TRUST_PROXY_HEADERS", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": cors_origins}, r"/health": {"origins": cors_origins}})

    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=_pick_async_mode(app.config.get("SOCKETIO_ASYNC_MODE", "")),
    )

    registry = RoomRegistry(
        room_factory=partial(
            GameRoom,
            max_rounds=app.config["MAX_ROUNDS"],
            min_players=app.config["MIN_PLAYERS_TO_START"],
            points_per_guess=app.config["POINTS_PER_CORRECT_GUESS"],
        )
    )
    init_room_registry(app, registry)

    app.register_blueprint(health_bp)
    app.register_blueprint(health_bp, url_prefix="/api", name="api_health")
    app.register_blueprint(rooms_bp, url_prefix="/api")

    register_socketio_handlers(socketio, registry)

    return app, socketio
