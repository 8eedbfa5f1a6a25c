import os
import sys
import pytest

# Ensure the backend root (containing the `lowcard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from lowcard import create_app, socketio
from lowcard.services.table import Card, Deck, GameEngine


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SOCKETIO_NAMESPACE = '/'
    CORS_ORIGINS = '*'
    JOIN_PHASE_SEC = 30
    DRAW_PHASE_SEC = 30
    MAX_NAME_LENGTH = 24


class RecordingGateway:
    """Collects what the engine would have sent over the socket."""

    def __init__(self):
        self.messages = []
        self.rosters = []

    def message(self, text, to=None):
        self.messages.append((text, to))

    def players(self, roster):
        self.rosters.append(roster)

    def broadcast_texts(self):
        return [text for text, to in self.messages if to is None]

    def texts_to(self, identity):
        return [text for text, to in self.messages if to == identity]

    @property
    def last_roster(self):
        return self.rosters[-1] if self.rosters else None

    def clear(self):
        self.messages.clear()
        self.rosters.clear()


@pytest.fixture()
def stack_deck():
    """Replace an engine's deck so the given values come out in that order."""
    def _stack(engine, *values):
        cards = [Card(f"{v}♣", v) for v in values]
        engine.state.deck = Deck(list(reversed(cards)))
    return _stack


@pytest.fixture()
def gateway():
    return RecordingGateway()


@pytest.fixture()
def engine(gateway):
    return GameEngine(gateway, join_seconds=30, draw_seconds=30)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
    )
    yield test_client
    try:
        test_client.disconnect()
    except Exception:
        pass
