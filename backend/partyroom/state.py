"""Process-scoped runtime state.

One ``AppState`` is created per Flask app by ``create_app`` and stored in
``app.extensions``; handlers reach it through ``get_state()`` instead of
importing module-level tables.
"""
from flask import current_app

from .services import Lottery, RoomRegistry

EXTENSION_KEY = 'partyroom'


class AppState:
    def __init__(self, lottery_seed=None):
        self.rooms = RoomRegistry()
        self.lottery = Lottery(seed=lottery_seed)

    def clear(self) -> None:
        self.rooms.clear()
        self.lottery.reset()


def get_state(app=None) -> AppState:
    app = app or current_app
    return app.extensions[EXTENSION_KEY]
