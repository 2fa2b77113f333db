import os
import random
import sys
import pytest

# Ensure the backend root (containing the `nouns` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from nouns import create_app, socketio
from nouns.services.games import sessions
from nouns.services.games.coordinator import GameCoordinator
from nouns.simulation import ManualClock


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    TURN_DURATION_SEC = 60
    SKIP_ENABLED = True
    TIMER_TICK_SEC = 0
    SAMPLE_WORD_COUNT = 5
    CONTROLLER_DEBOUNCE_MS = 0
    TIMER_HEARTBEAT_SEC = 0


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application
    sessions.clear_games()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass


@pytest.fixture()
def fake_clock():
    return ManualClock(start=1000.0)


@pytest.fixture()
def make_game(fake_clock):
    def _make(words=('pizza', 'burger', 'taco'), turn_duration=60, skip_enabled=True, seed=3):
        game = GameCoordinator(game_code='TEST', turn_duration=turn_duration,
                               skip_enabled=skip_enabled, rng=random.Random(seed),
                               clock=fake_clock)
        game.proceed_to_word_input()
        for w in words:
            game.add_word(w)
        return game
    return _make


@pytest.fixture()
def play(fake_clock):
    """Let `seconds` of wall time pass while the turn timer runs."""
    def _play(game, seconds):
        events = []
        for _ in range(seconds):
            fake_clock.advance(1)
            events.extend(game.tick())
        return events
    return _play
