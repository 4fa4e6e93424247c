import flask_socketio
import pytest

import app as entrypoint
from pictionary.config import Config


@pytest.fixture()
def captured_run(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(flask_socketio.SocketIO, 'run', lambda self, app, **kw: calls.append((app, kw)))
    monkeypatch.setenv('SOCKETIO_ASYNC_MODE', 'threading')
    monkeypatch.setenv('PICTIONARY_ENV_FILE', str(tmp_path / 'missing.env'))
    monkeypatch.setattr(Config, 'SOCKETIO_ASYNC_MODE', 'threading')
    return calls


def test_run_options_come_from_config(captured_run, monkeypatch):
    monkeypatch.setattr(Config, 'HOST', '127.0.0.1')
    monkeypatch.setattr(Config, 'PORT', 4567)
    monkeypatch.setattr(Config, 'DEBUG', False)
    monkeypatch.setattr(Config, 'ALLOW_UNSAFE_WERKZEUG', False)
    monkeypatch.setattr(Config, 'USE_RELOADER', False)

    entrypoint.main()

    assert len(captured_run) == 1
    _, kwargs = captured_run[0]
    assert kwargs == {
        'host': '127.0.0.1',
        'port': 4567,
        'debug': False,
        'allow_unsafe_werkzeug': False,
        'use_reloader': False,
    }


def test_env_file_defaults_to_project_root():
    assert (entrypoint.PROJECT_ROOT / 'pyproject.toml').exists()
