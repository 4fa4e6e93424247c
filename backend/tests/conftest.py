import os
import random
import sys

import pytest

# Ensure the backend root (containing the `pictionary` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from pictionary.config import Config
from pictionary.extensions import ROOMS_KEY
from pictionary.game.room import GameRoom
from pictionary.server import create_app


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SOCKETIO_ASYNC_MODE = 'threading'
    TRUST_PROXY_HEADERS = False
    LOG_LEVEL = 'WARNING'


@pytest.fixture()
def make_room():
    def _make(room_id='r1', seed=7, **kwargs):
        return GameRoom(room_id=room_id, rng=random.Random(seed), **kwargs)
    return _make


@pytest.fixture()
def app_and_socketio():
    return create_app(TestConfig)


@pytest.fixture()
def flask_app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture()
def socketio(app_and_socketio):
    return app_and_socketio[1]


@pytest.fixture()
def registry(flask_app):
    return flask_app.extensions[ROOMS_KEY]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app, socketio):
    clients = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _connect

    for c in clients:
        if c.is_connected():
            c.disconnect()
