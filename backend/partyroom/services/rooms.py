import threading
from typing import Any, Dict, Optional, Set

from ..models import Room


class RoomRegistry:
    """Process-scoped mapping of room id to room state.

    Rooms are created lazily on first reference and live for the rest of the
    process. Every public method returns a detached snapshot of the room
    (``{'participants': [...], 'gameState': ...}``) so callers can emit it
    without holding the lock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._rooms: Dict[str, Room] = {}
        self._subscriptions: Dict[str, Set[str]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def __contains__(self, room_id) -> bool:
        with self._lock:
            return room_id in self._rooms

    def _ensure(self, room_id: str) -> Room:
        room = self._rooms.get(room_id)
        if room is None:
            room = Room(room_id)
            self._rooms[room_id] = room
        return room

    def get(self, room_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            room = self._rooms.get(room_id)
            return room.to_dict() if room else None

    def get_or_create(self, room_id: str) -> Dict[str, Any]:
        with self._lock:
            return self._ensure(room_id).to_dict()

    def reset(self, room_id: str) -> Dict[str, Any]:
        with self._lock:
            room = Room(room_id)
            self._rooms[room_id] = room
            return room.to_dict()

    def upsert_participant(self, room_id: str, participant: Dict[str, Any], create: bool = True) -> Optional[Dict[str, Any]]:
        """Insert or merge ``participant`` keyed by its ``id``.

        Returns None when the room is unknown and ``create`` is False.
        """
        with self._lock:
            if create:
                room = self._ensure(room_id)
            else:
                room = self._rooms.get(room_id)
                if room is None:
                    return None
            room.upsert(participant)
            return room.to_dict()

    def set_game_state(self, room_id: str, state: Any) -> Optional[Dict[str, Any]]:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                return None
            room.game_state = state
            return room.to_dict()

    def remove_participant(self, room_id: str, participant_id: Any) -> bool:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                return False
            idx = room.index_of(participant_id)
            if idx is None:
                return False
            del room.participants[idx]
            return True

    # ---- Session subscriptions ----

    def subscribe(self, sid: str, room_id: str) -> None:
        with self._lock:
            self._subscriptions.setdefault(sid, set()).add(room_id)

    def subscriptions(self, sid: str) -> Set[str]:
        with self._lock:
            return set(self._subscriptions.get(sid, ()))

    def forget(self, sid: str) -> Set[str]:
        with self._lock:
            return self._subscriptions.pop(sid, set())

    def clear(self) -> None:
        with self._lock:
            self._rooms.clear()
            self._subscriptions.clear()
