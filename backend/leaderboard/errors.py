"""Error taxonomy shared by the services and the HTTP layer.

Each error carries the HTTP status the blueprint answers with and a short,
user-visible message. Storage failures keep the original exception as
``__cause__`` for logging but never expose it to the caller.
"""


class LeaderboardError(Exception):
    status_code = 500
    message = 'Internal error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(LeaderboardError):
    status_code = 400
    message = 'Invalid request body'


class ConflictError(LeaderboardError):
    status_code = 409
    message = 'Username already exists'


class AuthError(LeaderboardError):
    status_code = 401
    message = 'Invalid username or password'


class StorageError(LeaderboardError):
    status_code = 500
    message = 'Storage error'
