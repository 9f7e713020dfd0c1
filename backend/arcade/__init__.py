from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)


def create_app(config_class=Config, notifier=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/ws')

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Services share one store adapter and push through the injected notifier
    from arcade.store import DocumentStore
    from arcade.services import ArcadeServices, SocketIONotifier
    flask_app.extensions['arcade'] = ArcadeServices(
        DocumentStore(db),
        notifier or SocketIONotifier(socketio, namespace),
        optimistic_locking=flask_app.config.get('OPTIMISTIC_LOCKING', True),
        compensation=flask_app.config.get('REDEMPTION_COMPENSATION', False),
    )

    from arcade.api import register_error_handlers
    from arcade.api.games import games
    from arcade.api.players import players
    from arcade.api.prizes import prizes
    register_error_handlers(flask_app)
    flask_app.register_blueprint(games, url_prefix='/games')
    flask_app.register_blueprint(players, url_prefix='/players')
    flask_app.register_blueprint(prizes, url_prefix='/prizes')

    @flask_app.route('/')
    def index():
        return 'Invalid Endpoint', 400

    from arcade.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace)

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from arcade.models import Game, Prize
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            for name, cost in [('Skee-Ball', 1), ('Pac-Man', 2), ('Air Hockey', 3)]:
                db.session.add(Game(name=name, token_cost=cost))
            for name, cost, qty in [('Bouncy Ball', 10, 50), ('Plush Bear', 250, 5)]:
                db.session.add(Prize(name=name, ticket_cost=cost, available_quantity=qty))

            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
