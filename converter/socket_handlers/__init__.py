from converter.events import SocketIOEventType
from converter.extensions import socketio
from .common import socketio_unicast
from .conversion import *
from .settings import *

def init_app(app):
    pass

@socketio.on(SocketIOEventType.CONNECT)
def handle_connect():
    pass

@socketio.on(SocketIOEventType.PING)
def handle_ping():
    socketio_unicast(SocketIOEventType.PONG)
