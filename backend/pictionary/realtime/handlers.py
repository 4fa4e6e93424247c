from __future__ import annotations

from typing import Any

from flask import current_app, request
from flask_socketio import SocketIO, emit, join_room, leave_room

from ..game import events as ev
from ..game.events import OutboundEvent
from ..game.registry import RoomRegistry
from ..game.room import GameRoom
from .broadcast import deliver


def _payload(data: Any) -> dict:
    return data if isinstance(data, dict) else {}


def _room_id(payload: dict) -> str:
    return str(payload.get("roomId", "") or "").strip()


def register_socketio_handlers(socketio: SocketIO, registry: RoomRegistry) -> None:
    def _log_round(room: GameRoom, out: list[OutboundEvent]) -> None:
        for event in out:
            if event.name == ev.NEXT_ROUND:
                current_app.logger.info(
                    f"[round] room={room.room_id} round={room.round} drawer={room.current_drawer_id}"
                )
            elif event.name == ev.GAME_FINISHED:
                current_app.logger.info(f"[finish] room={room.room_id} scores={room.scores}")

    def _leave_locked(room: GameRoom, sid: str) -> None:
        player = room.get_player(sid)
        out = room.leave(sid)
        deliver(socketio, room.room_id, sid, out)
        if player is not None:
            current_app.logger.info(f"[leave] room={room.room_id} sid={sid} name={player.name}")
        if registry.discard_if_empty(room):
            current_app.logger.info(f"[room-destroyed] room={room.room_id} active={len(registry)}")

    @socketio.on("connect")
    def on_connect(auth=None):
        current_app.logger.info(f"[connect] sid={request.sid}")

    @socketio.on("joinRoom")
    def on_join_room(data):
        payload = _payload(data)
        room_id = _room_id(payload)
        name = str(payload.get("playerName", "") or "").strip()
        if not room_id:
            emit(ev.ROOM_ERROR, {"error": "invalid_payload"})
            return

        join_room(room_id)
        with registry.lock_room(room_id, create=True) as room:
            out = room.join(request.sid, name)
            deliver(socketio, room_id, request.sid, out)

        current_app.logger.info(f"[join] room={room_id} sid={request.sid} name={name}")

    @socketio.on("startGame")
    def on_start_game(data):
        room_id = _room_id(_payload(data))
        with registry.lock_room(room_id) as room:
            if room is None:
                return
            out = room.start()
            deliver(socketio, room_id, request.sid, out)
            if out:
                current_app.logger.info(
                    f"[start] room={room_id} players={len(room.players)} drawer={room.current_drawer_id}"
                )

    @socketio.on("draw")
    def on_draw(data):
        payload = _payload(data)
        stroke = payload.get("data")
        if not isinstance(stroke, dict):
            return

        room_id = _room_id(payload)
        with registry.lock_room(room_id) as room:
            if room is None:
                return
            deliver(socketio, room_id, request.sid, room.submit_stroke(stroke))

    @socketio.on("clearCanvas")
    def on_clear_canvas(data):
        room_id = _room_id(_payload(data))
        with registry.lock_room(room_id) as room:
            if room is None:
                return
            deliver(socketio, room_id, request.sid, room.clear_canvas())

    @socketio.on("guess")
    def on_guess(data):
        payload = _payload(data)
        room_id = _room_id(payload)
        text = str(payload.get("guess", "") or "")
        display_name = str(payload.get("playerName", "") or "")

        with registry.lock_room(room_id) as room:
            if room is None:
                return
            out = room.submit_guess(request.sid, text, display_name)
            deliver(socketio, room_id, request.sid, out)
            _log_round(room, out)

    @socketio.on("leaveRoom")
    def on_leave_room(data):
        room_id = _room_id(_payload(data))
        if not room_id:
            return

        leave_room(room_id)
        with registry.lock_room(room_id) as room:
            if room is None:
                return
            _leave_locked(room, request.sid)

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        sid = request.sid
        current_app.logger.info(f"[disconnect] sid={sid}")
        # A connection is normally in one room, but stale memberships are cleaned up too.
        registry.for_each_room_containing(sid, lambda room: _leave_locked(room, sid))

    @socketio.on_error_default
    def on_error(exc):
        current_app.logger.exception(f"[socket-error] sid={request.sid} event={request.event}: {exc}")
