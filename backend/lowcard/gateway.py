"""Outbound side of the Socket.IO channel.

The engine only knows two event kinds: ``message`` (a text line, broadcast
or sent to one connection) and ``players`` (the public roster).
"""


class SocketIOGateway:
    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def message(self, text: str, to=None) -> None:
        # to=None broadcasts to every connection on the namespace
        self.socketio.emit('message', text, to=to, namespace=self.namespace)

    def players(self, roster) -> None:
        self.socketio.emit('players', roster, namespace=self.namespace)
