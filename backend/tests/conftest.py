import os
import sys
import pytest

# Ensure the backend root (containing the `arcade` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from arcade import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ['http://localhost:5173']
    SOCKETIO_NAMESPACE = '/ws'
    OPTIMISTIC_LOCKING = True
    REDEMPTION_COMPENSATION = False


class RecordingNotifier:
    """Captures fan-out pushes instead of sending them over Socket.IO."""

    def __init__(self):
        self.events = []

    def publish(self, event, payload):
        self.events.append((event, payload))

    def of(self, event):
        return [payload for name, payload in self.events if name == event]


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def flask_app(notifier):
    application = create_app(TestConfig, notifier=notifier)
    with application.app_context():
        # Ensure models are imported so tables are created
        import arcade.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def services(flask_app):
    return flask_app.extensions['arcade']


@pytest.fixture()
def connect_ws(flask_app):
    clients = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace='/ws'
        )
        clients.append(test_client)
        return test_client

    yield _connect
    for test_client in clients:
        if test_client.is_connected('/ws'):
            test_client.disconnect(namespace='/ws')


@pytest.fixture()
def make_game(client):
    def _make(name='Skee-Ball', token_cost=2):
        res = client.post('/games/create', json={'name': name, 'tokenCost': token_cost})
        assert res.status_code == 200
        return res.get_json()
    return _make


@pytest.fixture()
def make_player(client):
    def _make(screen_name='ace', **extra):
        body = {'firstName': 'Alex', 'lastName': 'Chen', 'screenName': screen_name}
        body.update(extra)
        res = client.post('/players/create', json=body)
        assert res.status_code == 200
        return res.get_json()
    return _make


@pytest.fixture()
def make_prize(client):
    def _make(name='Plush Bear', ticket_cost=20, quantity=1, **extra):
        body = {'name': name, 'ticketCost': ticket_cost, 'availableQuantity': quantity}
        body.update(extra)
        res = client.post('/prizes/create', json=body)
        assert res.status_code == 200
        return res.get_json()
    return _make
