from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from lowcard.gateway import SocketIOGateway
    from lowcard.services.table import GameEngine

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    # Tests drive the phase timers by hand unless explicitly enabled
    manual_clock = flask_app.config.get('TESTING') and not flask_app.config.get('ENABLE_SCHEDULER_IN_TESTS')
    flask_app.extensions['lowcard'] = GameEngine(
        SocketIOGateway(socketio, namespace=namespace),
        join_seconds=int(flask_app.config.get('JOIN_PHASE_SEC', 30)),
        draw_seconds=int(flask_app.config.get('DRAW_PHASE_SEC', 30)),
        max_name_length=int(flask_app.config.get('MAX_NAME_LENGTH', 24)),
        spawn=None if manual_clock else socketio.start_background_task,
        sleep=None if manual_clock else socketio.sleep,
        logger=flask_app.logger,
    )

    from lowcard.routes import main
    flask_app.register_blueprint(main)

    from lowcard.api.table import table
    flask_app.register_blueprint(table, url_prefix='/api/table')

    # Register Socket.IO event handlers
    from lowcard.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    return flask_app
