from __future__ import annotations

from collections.abc import Iterable

from flask_socketio import SocketIO

from ..game.events import Audience, OutboundEvent


def deliver(socketio: SocketIO, room_id: str, sender_sid: str, events: Iterable[OutboundEvent]) -> None:
    """Emit room events in order, resolving each audience to Socket.IO targets.

    Fire-and-forget: nothing here waits for client acknowledgement.
    """
    for event in events:
        args = () if event.payload is None else (event.payload,)

        if event.audience is Audience.SENDER:
            socketio.emit(event.name, *args, to=sender_sid)
        elif event.audience is Audience.ROOM_EXCEPT_SENDER:
            socketio.emit(event.name, *args, to=room_id, skip_sid=sender_sid)
        else:
            socketio.emit(event.name, *args, to=room_id)
