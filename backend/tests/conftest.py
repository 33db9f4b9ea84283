import os
import sys
import pytest

# Ensure the backend root (containing the `partyroom` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from partyroom import create_app, socketio
from partyroom.config import Config


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SOCKETIO_NAMESPACE = '/'
    MAX_PAYLOAD_BYTES = 4096
    PLAYER_JOIN_CREATES_ROOM = True
    STATUS_UPDATE_INCLUDES_SENDER = True
    PRUNE_ON_DISCONNECT = False
    LOTTERY_SEED = 1234


def config_with(**overrides):
    """Build a one-off config class on top of TestConfig."""
    return type('OverrideConfig', (TestConfig,), overrides)


@pytest.fixture()
def app_config():
    return TestConfig


@pytest.fixture()
def flask_app(app_config):
    application = create_app(app_config)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    created = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()


def events(received, name):
    """Payload lists of every received packet called ``name``, in order."""
    return [pkt['args'] for pkt in received if pkt['name'] == name]


def names(received):
    return [pkt['name'] for pkt in received]
