from leaderboard import bcrypt


class CredentialStore:
    """Password hashing and verification backed by bcrypt.

    Every call to :meth:`hash` uses a fresh random salt, so hashing the same
    password twice gives different strings that both verify.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.generate_password_hash(password, self.rounds).decode('utf-8')

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches ``password_hash``.

        Malformed or missing hashes count as a mismatch.
        """
        if not password_hash or password is None:
            return False
        try:
            return bcrypt.check_password_hash(password_hash, password)
        except (ValueError, TypeError):
            return False
