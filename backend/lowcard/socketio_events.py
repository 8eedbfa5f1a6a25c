from flask import current_app, request
from lowcard import socketio


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _engine():
    return current_app.extensions['lowcard']


def handle_connect(auth=None):
    current_app.logger.info(f"[socket-connect] sid={_get_sid()}")
    _engine().connect(_get_sid())


def handle_disconnect(*args):
    # Newer python-socketio passes a disconnect reason
    _engine().disconnect(_get_sid())
    current_app.logger.info(f"[socket-disconnect] sid={_get_sid()}")


def handle_set_name(name=None):
    _engine().set_name(_get_sid(), name)


def handle_chat(message=None):
    _engine().handle_chat(_get_sid(), message)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register the table's Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('setName', handle_set_name, namespace=namespace)
    socketio.on_event('chat', handle_chat, namespace=namespace)
