from flask import current_app, request
from flask_socketio import emit
from arcade import socketio
from arcade.services import get_services


class ReplyNotifier:
    """Publishes only to the client whose event is being handled."""

    def publish(self, event, payload):
        emit(event, payload)


def handle_connect(auth=None):
    # Initial sync: a new subscriber gets current state without waiting for a mutation
    current_app.logger.info(f"[ws-connect] sid={request.sid}")
    get_services().fanout.replay(ReplyNotifier())


def handle_disconnect(*args):
    current_app.logger.info(f"[ws-disconnect] sid={request.sid}")


def handle_resync(data=None):
    get_services().fanout.replay(ReplyNotifier())


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('resync', handle_resync, namespace=namespace)
