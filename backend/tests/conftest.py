import os
import sys
import pytest

# Ensure the backend root (containing the `baucua` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from baucua import create_app, socketio
from baucua.services.rooms.registry import RoomRegistry
from baucua.services.rooms.router import SessionRouter


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CLIENT_ORIGIN = 'https://baucua.example.com'
    SOCKETIO_NAMESPACE = '/'
    MAX_PLAYERS = 4
    STARTING_COINS = 100
    CHAT_HISTORY_LIMIT = 50


class ScriptedRandom:
    """Stands in for random.Random; hands out symbols in a fixed order."""

    def __init__(self, *symbols):
        self._symbols = list(symbols)

    def choice(self, seq):
        symbol = self._symbols.pop(0)
        assert symbol in seq
        return symbol


@pytest.fixture()
def scripted():
    return ScriptedRandom


@pytest.fixture()
def registry():
    return RoomRegistry()


@pytest.fixture()
def router(registry):
    return SessionRouter(registry, rng=ScriptedRandom())


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    clients = []

    def _connect():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(sio_factory):
    return sio_factory()
