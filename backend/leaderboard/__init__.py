from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_cors import CORS
from flask_migrate import Migrate
import click
from leaderboard.config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()
migrate = Migrate()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    bcrypt.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', '*'))

    # Import and register blueprints here
    from leaderboard.main import main
    flask_app.register_blueprint(main)

    from leaderboard.api.users import users
    from leaderboard.api.scores import scores
    flask_app.register_blueprint(users)
    flask_app.register_blueprint(scores)

    from leaderboard.errors import LeaderboardError, StorageError

    @flask_app.errorhandler(LeaderboardError)
    def handle_leaderboard_error(exc):
        if isinstance(exc, StorageError):
            # The cause stays in the logs; callers only get the generic message
            flask_app.logger.error(f"[storage] {exc.message}: {exc.__cause__!r}", exc_info=exc.__cause__ or exc)
        return jsonify(exc.to_dict()), exc.status_code

    backend = flask_app.config['SQLALCHEMY_DATABASE_URI'].split(':', 1)[0]
    flask_app.logger.info(f"[startup] database backend={backend}")

    @click.command('db-reset')
    @click.option('--no-seed', is_flag=True, help='Only recreate the tables.')
    def db_reset_command(no_seed):
        """Drops, recreates, and seeds the database."""
        from leaderboard.services.credentials import CredentialStore
        from leaderboard.services.scores import ScoreLedger
        from leaderboard.services.users import UserRegistry

        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            if no_seed:
                click.echo('Database has been reset.')
                return

            registry = UserRegistry(db.session, CredentialStore(flask_app.config['BCRYPT_LOG_ROUNDS']))
            ledger = ScoreLedger(db.session)
            seed = {'testuser1': [50, 120], 'testuser2': [90], 'testuser3': [10, 75]}
            for username, values in seed.items():
                user_id = registry.register(username, 'password')
                for value in values:
                    ledger.add_score(user_id, value)
            click.echo('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
