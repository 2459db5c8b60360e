from typing import Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from leaderboard.errors import AuthError, ConflictError, StorageError
from leaderboard.models import User
from leaderboard.services.credentials import CredentialStore


class UserRegistry:
    """Registration and login against the ``users`` table."""

    def __init__(self, session, credentials: CredentialStore):
        self.session = session
        self.credentials = credentials

    def exists(self, username: str) -> bool:
        return self.session.query(User.id).filter_by(username=username).first() is not None

    def register(self, username: str, password: str) -> int:
        """Create a user and return its id.

        The existence check only gives the common case a clean answer; two
        concurrent registrations can both pass it, and then the unique
        constraint on ``users.username`` rejects the second insert.
        """
        try:
            if self.exists(username):
                raise ConflictError()
            user = User(username=username, password_hash=self.credentials.hash(password))
            self.session.add(user)
            self.session.commit()
            return user.id
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError() from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError('Could not register user') from exc

    def login(self, username: str, password: str) -> Tuple[int, str]:
        """Return ``(user_id, username)`` for valid credentials.

        Unknown users and wrong passwords raise the same AuthError.
        """
        try:
            row = (
                self.session.query(User.id, User.username, User.password_hash)
                .filter_by(username=username)
                .first()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError('Could not look up user') from exc
        if row is None or not self.credentials.verify(password, row.password_hash):
            raise AuthError()
        return row.id, row.username
