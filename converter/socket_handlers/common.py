from flask import request
from converter.extensions import socketio

def socketio_unicast(event, data=None, **kwargs):
    if 'to' not in kwargs:
        kwargs['to'] = request.sid
    socketio.emit(event, data, **kwargs)
