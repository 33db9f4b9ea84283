import copy
import json
from typing import Any, Dict, List, Optional

from .errors import PayloadError

DEFAULT_STATUS = 'lobby'


def default_game_state() -> Dict[str, Any]:
    return {'status': DEFAULT_STATUS}


def bounded_payload(value: Any, max_bytes: int, require_object: bool = False) -> Any:
    """Return a detached copy of a client payload after checking its size.

    The server never interprets these values, it only needs them to be JSON
    that fits in ``max_bytes`` once encoded.
    """
    if require_object and not isinstance(value, dict):
        raise PayloadError('payload must be an object')
    try:
        encoded = json.dumps(value, separators=(',', ':'))
    except (TypeError, ValueError) as exc:
        raise PayloadError('payload is not JSON-serializable') from exc
    if max_bytes and len(encoded.encode('utf-8')) > max_bytes:
        raise PayloadError(f'payload exceeds {max_bytes} bytes')
    return json.loads(encoded)


class Room:
    def __init__(self, room_id: str):
        self.room_id = room_id
        self.participants: List[Dict[str, Any]] = []
        self.game_state: Any = default_game_state()

    def index_of(self, participant_id: Any) -> Optional[int]:
        for idx, participant in enumerate(self.participants):
            if participant.get('id') == participant_id:
                return idx
        return None

    def upsert(self, participant: Dict[str, Any]) -> None:
        idx = self.index_of(participant.get('id'))
        if idx is None:
            self.participants.append(dict(participant))
        else:
            self.participants[idx].update(participant)

    def participant_list(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self.participants)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'participants': self.participant_list(),
            'gameState': copy.deepcopy(self.game_state),
        }


class LotteryUser:
    def __init__(self, user_id: str, name: str):
        self.id = user_id
        self.name = name

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
        }
