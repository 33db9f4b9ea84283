import random
import threading
from typing import List, Optional

from ..errors import DrawError, LoginError
from ..models import LotteryUser


class Lottery:
    """Global name draw: registered users minus winners minus excluded names.

    Users are kept after they disconnect so a phone that locks its screen or
    reloads the page keeps its place in the draw.
    """

    def __init__(self, seed=None, rng: Optional[random.Random] = None):
        self._lock = threading.RLock()
        self._rng = rng or random.Random(seed)
        self.users: List[LotteryUser] = []
        self.winners: List[str] = []
        self.excluded: set = set()

    @staticmethod
    def clean_name(name) -> str:
        return str(name).strip() if name else ''

    def names(self) -> List[str]:
        with self._lock:
            return [u.name for u in self.users]

    def winner_names(self) -> List[str]:
        with self._lock:
            return list(self.winners)

    def login(self, sid: str, name) -> LotteryUser:
        clean = self.clean_name(name)
        if not clean:
            raise LoginError('Name cannot be empty')
        with self._lock:
            # Strict check: a name stays taken until the event is reset
            if any(u.name == clean for u in self.users):
                raise LoginError('This name is already taken, please choose another')
            user = LotteryUser(sid, clean)
            self.users.append(user)
            return user

    def candidates(self) -> List[str]:
        with self._lock:
            return [
                u.name for u in self.users
                if u.name not in self.winners and u.name not in self.excluded
            ]

    def draw(self) -> str:
        with self._lock:
            pool = self.candidates()
            if not pool:
                raise DrawError('No eligible participants left to draw')
            winner = self._rng.choice(pool)
            self.winners.append(winner)
            return winner

    def toggle_exclude(self, name) -> bool:
        """Flip ``name`` in the excluded set; True when it is now excluded."""
        with self._lock:
            if name in self.excluded:
                self.excluded.discard(name)
                return False
            self.excluded.add(name)
            return True

    def remove_user(self, sid: str) -> Optional[LotteryUser]:
        with self._lock:
            for idx, user in enumerate(self.users):
                if user.id == sid:
                    return self.users.pop(idx)
            return None

    def reset(self) -> None:
        with self._lock:
            self.users = []
            self.winners = []
            self.excluded = set()
