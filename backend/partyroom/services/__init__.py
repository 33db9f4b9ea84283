"""Room and lottery domain services.

Plain in-memory state holders imported by the Socket.IO handlers and the
HTTP blueprint, keeping transport concerns separated from the relay rules.
"""

from ..errors import DrawError, LoginError, PayloadError
from .lottery import Lottery
from .rooms import RoomRegistry

__all__ = ['DrawError', 'LoginError', 'PayloadError', 'Lottery', 'RoomRegistry']
