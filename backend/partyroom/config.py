import os

BACKEND_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


def _flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    # Hosting platforms inject PORT; local development falls back to 3000
    PORT = int(os.environ.get('PORT', '3000'))
    DEBUG = _flag('DEBUG', False)
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Static front-end bundle
    STATIC_DIR = os.environ.get('STATIC_DIR') or os.path.join(BACKEND_ROOT, 'public')
    MOBILE_DOCUMENT = os.environ.get('MOBILE_DOCUMENT', 'mobile.html')
    SCREEN_DOCUMENT = os.environ.get('SCREEN_DOCUMENT', 'index.html')
    # Upper bound for client-defined payloads (user objects, game status), in bytes of JSON
    MAX_PAYLOAD_BYTES = int(os.environ.get('MAX_PAYLOAD_BYTES', '4096'))
    # Room behaviour switches
    PLAYER_JOIN_CREATES_ROOM = _flag('PLAYER_JOIN_CREATES_ROOM', True)
    STATUS_UPDATE_INCLUDES_SENDER = _flag('STATUS_UPDATE_INCLUDES_SENDER', True)
    PRUNE_ON_DISCONNECT = _flag('PRUNE_ON_DISCONNECT', False)
    # Optional: fixed seed for reproducible draws. Empty means system entropy.
    LOTTERY_SEED = os.environ.get('LOTTERY_SEED') or None
