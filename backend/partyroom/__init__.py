import os

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from .config import Config
from .state import EXTENSION_KEY, AppState

socketio = SocketIO(async_mode=None)


def _origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__, static_folder=None)
    flask_app.config.from_object(config_class)

    allowed_origins = _origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    flask_app.extensions[EXTENSION_KEY] = AppState(lottery_seed=flask_app.config.get('LOTTERY_SEED'))

    from .main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from .socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    _check_documents(flask_app)

    return flask_app


def _check_documents(flask_app):
    static_dir = flask_app.config.get('STATIC_DIR')
    for key in ('MOBILE_DOCUMENT', 'SCREEN_DOCUMENT'):
        path = os.path.join(static_dir, flask_app.config.get(key, ''))
        if not os.path.isfile(path):
            flask_app.logger.warning(f"[static] {key} not found at {path}; serving a diagnostic page instead")
