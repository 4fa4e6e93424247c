from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from threading import RLock
from typing import TypeVar

from .room import GameRoom


T = TypeVar("T")

RoomFactory = Callable[[str], GameRoom]


class RoomRegistry:
    """Room id -> GameRoom table.

    Rooms are created lazily on first join and dropped as soon as they are
    empty. Creation and removal go through ``_lock``; game state changes go
    through each room's own lock. Lock order is always room, then registry.
    """

    def __init__(self, room_factory: RoomFactory | None = None) -> None:
        self._rooms: dict[str, GameRoom] = {}
        self._lock = RLock()
        self._room_factory: RoomFactory = room_factory or GameRoom

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def __contains__(self, room_id: object) -> bool:
        with self._lock:
            return room_id in self._rooms

    def get(self, room_id: str) -> GameRoom | None:
        with self._lock:
            return self._rooms.get(room_id)

    def get_or_create(self, room_id: str) -> GameRoom:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                room = self._room_factory(room_id)
                self._rooms[room_id] = room
            return room

    def remove(self, room_id: str) -> bool:
        with self._lock:
            return self._rooms.pop(room_id, None) is not None

    def discard_if_empty(self, room: GameRoom) -> bool:
        """Drop ``room`` if it has no players and is still the registered instance."""
        with self._lock:
            if room.is_empty() and self._rooms.get(room.room_id) is room:
                del self._rooms[room.room_id]
                return True
            return False

    def list_rooms(self) -> list[GameRoom]:
        with self._lock:
            return list(self._rooms.values())

    @contextmanager
    def lock_room(self, room_id: str, create: bool = False) -> Iterator[GameRoom | None]:
        """Hold one room's lock, yielding the room or ``None`` on a lookup miss.

        The room may be discarded between lookup and lock acquisition; in that
        case the stale instance is released and the lookup is repeated.
        """
        while True:
            room = self.get_or_create(room_id) if create else self.get(room_id)
            if room is None:
                yield None
                return

            with room.lock:
                if self.get(room_id) is room:
                    yield room
                    return

    def for_each_room_containing(self, connection_id: str, fn: Callable[[GameRoom], T]) -> list[T]:
        """Run ``fn`` on every room holding ``connection_id``, under that room's lock.

        Does not stop at the first hit: stale memberships in other rooms are
        visited too.
        """
        results: list[T] = []
        for room in self.list_rooms():
            with room.lock:
                if self.get(room.room_id) is not room or not room.has_player(connection_id):
                    continue
                results.append(fn(room))
        return results
