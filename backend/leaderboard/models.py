from leaderboard import db

USERNAME_MAX_LENGTH = 64
# Range of the signed 32-bit INTEGER columns
INT_MIN = -2**31
INT_MAX = 2**31 - 1


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    # The unique constraint is what actually prevents duplicate usernames
    username = db.Column(db.String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    scores = db.relationship('Score', back_populates='user', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }


class Score(db.Model):
    __tablename__ = 'score'
    id = db.Column(db.Integer, primary_key=True)  # insertion order, used as tie-break
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    score = db.Column(db.Integer, nullable=False)
    user = db.relationship('User', back_populates='scores')

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'score': self.score,
        }
