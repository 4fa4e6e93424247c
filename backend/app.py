import os
import sys
from pathlib import Path

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _needs_eventlet() -> bool:
    mode = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()
    return not sys.platform.startswith("win") and sys.version_info < (3, 13) and mode in ("", "eventlet")


def main() -> None:
    # .env sits next to pyproject.toml; PICTIONARY_ENV_FILE points elsewhere.
    load_dotenv(os.environ.get("PICTIONARY_ENV_FILE") or PROJECT_ROOT / ".env")

    if _needs_eventlet():
        import eventlet

        eventlet.monkey_patch()

    # Config reads the environment at import time, so import after load_dotenv.
    from pictionary.server import create_app

    app, socketio = create_app()
    cfg = app.config

    app.logger.info(f"[listen] host={cfg['HOST']} port={cfg['PORT']} async_mode={socketio.async_mode}")

    socketio.run(
        app,
        host=cfg["HOST"],
        port=cfg["PORT"],
        debug=cfg["DEBUG"],
        allow_unsafe_werkzeug=cfg["ALLOW_UNSAFE_WERKZEUG"],
        use_reloader=cfg["USE_RELOADER"],
    )


if __name__ == "__main__":
    main()
