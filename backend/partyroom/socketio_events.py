from flask import current_app, request
from flask_socketio import emit, join_room

from . import socketio
from .errors import DrawError, LoginError, PayloadError
from .models import bounded_payload
from .state import get_state


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _room_key(room_id: str) -> str:
    return f"room:{room_id}"


def _room_id(data):
    """Accept either a bare room id or an object carrying ``roomId``."""
    if isinstance(data, dict):
        data = data.get('roomId')
    if isinstance(data, (int, float)) and not isinstance(data, bool):
        data = str(data)
    if not isinstance(data, str) or not data.strip():
        return None
    return data.strip()


def _max_bytes() -> int:
    return int(current_app.config.get('MAX_PAYLOAD_BYTES', 4096))


# ---- Connection lifecycle ----

def handle_connect(auth=None):
    current_app.logger.info(f"[connect] {_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    state = get_state()
    rooms = state.rooms.forget(sid)
    current_app.logger.info(f"[disconnect] {sid}")
    # Participants and users are kept by default so a reload does not cost a seat
    if not current_app.config.get('PRUNE_ON_DISCONNECT'):
        return
    for room_id in rooms:
        if state.rooms.remove_participant(room_id, sid):
            room = state.rooms.get(room_id)
            emit('player_list_update', room['participants'], to=_room_key(room_id))
    if state.lottery.remove_user(sid):
        emit('update_user_list', state.lottery.names(), broadcast=True)


# ---- Room-scoped party game ----

def handle_join_room(data=None):
    room_id = _room_id(data)
    if room_id is None:
        emit('error', {'message': 'roomId is required'})
        return
    sid = _get_sid()
    state = get_state()
    join_room(_room_key(room_id))
    state.rooms.subscribe(sid, room_id)
    room = state.rooms.get_or_create(room_id)
    emit('init_data', room)
    emit('game_status_update', room['gameState'])


def handle_player_join(data=None):
    data = data if isinstance(data, dict) else {}
    room_id = _room_id(data)
    if room_id is None:
        emit('error', {'message': 'roomId is required'})
        return
    sid = _get_sid()
    try:
        user = bounded_payload(data.get('user'), _max_bytes(), require_object=True)
    except PayloadError as exc:
        emit('error', {'message': f'invalid user: {exc}'})
        return
    if user.get('id') is None:
        user['id'] = sid

    state = get_state()
    create = current_app.config.get('PLAYER_JOIN_CREATES_ROOM', True)
    room = state.rooms.upsert_participant(room_id, user, create=create)
    if room is None:
        current_app.logger.debug(f"[player_join] ignored, unknown room {room_id}")
        return
    join_room(_room_key(room_id))
    state.rooms.subscribe(sid, room_id)
    current_app.logger.info(f"[player_join] room={room_id} participant={user['id']}")
    emit('player_list_update', room['participants'], to=_room_key(room_id))


def handle_update_game_status(data=None):
    data = data if isinstance(data, dict) else {}
    room_id = _room_id(data)
    if room_id is None:
        emit('error', {'message': 'roomId is required'})
        return
    try:
        status = bounded_payload(data.get('status'), _max_bytes())
    except PayloadError as exc:
        emit('error', {'message': f'invalid status: {exc}'})
        return
    room = get_state().rooms.set_game_state(room_id, status)
    if room is None:
        current_app.logger.debug(f"[game_status] ignored, unknown room {room_id}")
        return
    include_self = bool(current_app.config.get('STATUS_UPDATE_INCLUDES_SENDER', True))
    emit('game_status_update', room['gameState'], to=_room_key(room_id), include_self=include_self)


def handle_reset_game(data=None):
    data = data if isinstance(data, dict) else {}
    room_id = _room_id(data)
    if room_id is None:
        emit('error', {'message': 'roomId is required'})
        return
    state = get_state()
    if room_id not in state.rooms:
        current_app.logger.debug(f"[reset_game] ignored, unknown room {room_id}")
        return
    room = state.rooms.reset(room_id)
    current_app.logger.info(f"[reset_game] room={room_id}")
    emit('game_reset', to=_room_key(room_id))
    emit('init_data', room, to=_room_key(room_id))


# ---- Global lottery: mobile side ----

def handle_mobile_login(name=None):
    sid = _get_sid()
    lottery = get_state().lottery
    try:
        user = lottery.login(sid, name)
    except LoginError as exc:
        emit('login_error', str(exc))
        return
    emit('login_success', {'name': user.name})
    emit('update_user_list', lottery.names(), broadcast=True)
    current_app.logger.info(f"[login] {user.name} ({sid})")


# ---- Global lottery: screen (admin) side ----

def handle_admin_init(data=None):
    lottery = get_state().lottery
    emit('update_user_list', lottery.names())
    emit('update_winners', lottery.winner_names())


def handle_admin_start_rolling(data=None):
    # Lets every phone play the rolling animation in sync with the screen
    emit('client_show_rolling', broadcast=True)


def handle_admin_perform_draw(data=None):
    try:
        winner = get_state().lottery.draw()
    except DrawError as exc:
        emit('admin_draw_error', str(exc), broadcast=True)
        return
    current_app.logger.info(f"[winner] {winner}")
    emit('draw_result', {'winnerName': winner}, broadcast=True)


def handle_admin_reset(data=None):
    get_state().lottery.reset()
    emit('event_reset', broadcast=True)
    emit('update_user_list', [], broadcast=True)
    current_app.logger.info('[reset] lottery event reset')


def handle_admin_toggle_exclude(name=None):
    if not isinstance(name, str):
        return
    excluded = get_state().lottery.toggle_exclude(name)
    current_app.logger.info(f"[exclude] {name} {'excluded' if excluded else 'restored'}")


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    events = {
        'connect': handle_connect,
        'disconnect': handle_disconnect,
        'join_room': handle_join_room,
        'player_join': handle_player_join,
        'update_game_status': handle_update_game_status,
        'reset_game': handle_reset_game,
        'mobile_login': handle_mobile_login,
        'admin_init': handle_admin_init,
        'admin_start_rolling': handle_admin_start_rolling,
        'admin_perform_draw': handle_admin_perform_draw,
        'admin_reset': handle_admin_reset,
        'admin_toggle_exclude': handle_admin_toggle_exclude,
    }
    for name, handler in events.items():
        socketio.on_event(name, handler, namespace=namespace)
