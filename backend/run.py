from partyroom import create_app, socketio
from partyroom.state import get_state

app = create_app()

if __name__ == '__main__':
    try:
        # Use SocketIO server to enable websockets
        socketio.run(
            app,
            host=app.config['HOST'],
            port=app.config['PORT'],
            debug=app.config['DEBUG'],
            allow_unsafe_werkzeug=True,
        )
    finally:
        # All state lives in memory; nothing survives a restart
        get_state(app).clear()
