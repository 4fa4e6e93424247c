import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    # Socket.IO ("" picks eventlet or threading depending on platform)
    SOCKETIO_ASYNC_MODE = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Dev server (backend/app.py)
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3001"))
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
    # Werkzeug refuses to serve Socket.IO outside debug unless this is set.
    ALLOW_UNSAFE_WERKZEUG = os.environ.get("ALLOW_UNSAFE_WERKZEUG", "1") == "1"
    USE_RELOADER = os.environ.get("FLASK_USE_RELOADER", "0") == "1"

    # Game
    MAX_ROUNDS = int(os.environ.get("MAX_ROUNDS", "3"))
    MIN_PLAYERS_TO_START = int(os.environ.get("MIN_PLAYERS_TO_START", "2"))
    POINTS_PER_CORRECT_GUESS = int(os.environ.get("POINTS_PER_CORRECT_GUESS", "10"))
