import os
import sys
import pytest

# Ensure the backend root (containing the `leaderboard` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from leaderboard import create_app, db
from leaderboard.services.credentials import CredentialStore
from leaderboard.services.scores import ScoreLedger
from leaderboard.services.users import UserRegistry


class TestConfig:
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Lowest cost bcrypt accepts, keeps the suite fast
    BCRYPT_LOG_ROUNDS = 4
    BCRYPT_HANDLE_LONG_PASSWORDS = True
    TOP_SCORES_LIMIT = 10
    CORS_ORIGINS = '*'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import leaderboard.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def credentials(flask_app):
    return CredentialStore(TestConfig.BCRYPT_LOG_ROUNDS)


@pytest.fixture()
def registry(flask_app, credentials):
    return UserRegistry(db.session, credentials)


@pytest.fixture()
def ledger(flask_app):
    return ScoreLedger(db.session)
