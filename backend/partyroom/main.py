import os

from flask import Blueprint, current_app, jsonify, send_from_directory

from .state import get_state

main = Blueprint('main', __name__)

MISSING_DOCUMENT_PAGE = """<!doctype html>
<html>
<head><meta charset="utf-8"><title>Front-end not found</title></head>
<body>
<h1>Front-end not found</h1>
<p>The server is running but <code>{name}</code> is missing from the static directory.</p>
</body>
</html>
"""


def _send_document(config_key):
    static_dir = current_app.config['STATIC_DIR']
    name = current_app.config[config_key]
    if not os.path.isfile(os.path.join(static_dir, name)):
        current_app.logger.error(f"[static] missing document {name} in {static_dir}")
        return MISSING_DOCUMENT_PAGE.format(name=name), 503, {'Content-Type': 'text/html; charset=utf-8'}
    return send_from_directory(static_dir, name)


@main.route('/')
def mobile():
    return _send_document('MOBILE_DOCUMENT')


@main.route('/screen')
def screen():
    return _send_document('SCREEN_DOCUMENT')


@main.route('/api/health')
def health():
    state = get_state()
    return jsonify({
        'status': 'ok',
        'rooms': len(state.rooms),
        'users': len(state.lottery.names()),
    })


@main.route('/<path:path>')
def static_or_entry(path):
    static_dir = current_app.config['STATIC_DIR']
    full_path = os.path.abspath(os.path.join(static_dir, path))
    inside = full_path.startswith(os.path.abspath(static_dir) + os.sep)
    if inside and os.path.isfile(full_path):
        return send_from_directory(static_dir, path)
    # Unknown paths belong to client-side routing
    return _send_document('SCREEN_DOCUMENT')
