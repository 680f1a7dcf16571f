import threading
from typing import Iterable

from flask import current_app, request
from baucua import socketio

# Events are handled strictly one at a time, emits included, so a room's
# broadcasts always follow the mutation that produced them.
_dispatch_lock = threading.RLock()


def _router():
    return current_app.extensions['session_router']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _deliver(notifications) -> None:
    namespace = current_app.config.get('SOCKETIO_NAMESPACE', '/')
    for note in notifications:
        socketio.emit(note.event, note.payload, to=note.to, namespace=namespace)


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()} origin={request.headers.get('Origin')}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    with _dispatch_lock:
        _deliver(_router().disconnect(sid))
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")


def _event_handler(event: str):
    def handler(data=None):
        with _dispatch_lock:
            _, notifications = _router().handle(event, data, _get_sid())
            _deliver(notifications)
    handler.__name__ = f"handle_{event}"
    return handler


def register_socketio_handlers(events: Iterable[str], namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``.

    Every client event in ``events`` is forwarded to the app's session router.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    for event in events:
        socketio.on_event(event, _event_handler(event), namespace=namespace)
