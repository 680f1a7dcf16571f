from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_socketio import SocketIO
from baucua.config import Config

allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
socketio = SocketIO(async_mode=None)


def origins_for(config) -> list:
    origins = list(allowed_origins)
    extra = config.get('CLIENT_ORIGIN')
    if extra and extra not in origins:
        origins.append(extra)
    return origins


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    origins = origins_for(flask_app.config)
    # Requests without an Origin header (curl, server-to-server) are not blocked by either layer
    CORS(flask_app, supports_credentials=True, origins=origins)
    socketio.init_app(flask_app, cors_allowed_origins=origins, cors_credentials=True)

    @flask_app.before_request
    def reject_unlisted_origin():
        origin = request.headers.get('Origin')
        if origin and origin not in origins:
            flask_app.logger.warning(f"[cors-blocked] origin={origin} path={request.path}")
            return jsonify({'error': f'CORS blocked: {origin}'}), 403

    # One registry per app; tests get a fresh one with every create_app
    from baucua.services.rooms.registry import RoomRegistry
    from baucua.services.rooms.router import SessionRouter
    registry = RoomRegistry(
        max_players=flask_app.config.get('MAX_PLAYERS', 4),
        starting_coins=flask_app.config.get('STARTING_COINS', 100),
        chat_limit=flask_app.config.get('CHAT_HISTORY_LIMIT', 50),
    )
    flask_app.extensions['room_registry'] = registry
    router = SessionRouter(registry)
    flask_app.extensions['session_router'] = router

    from baucua.main import main
    flask_app.register_blueprint(main)

    # Register Socket.IO event handlers
    from baucua.socketio_events import register_socketio_handlers
    register_socketio_handlers(router.events, namespace=flask_app.config.get('SOCKETIO_NAMESPACE', '/'))

    flask_app.logger.info(f"[startup] origins={origins}")
    return flask_app
