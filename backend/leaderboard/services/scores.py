from typing import List, NamedTuple

from sqlalchemy.exc import SQLAlchemyError

from leaderboard.errors import StorageError
from leaderboard.models import Score, User


class RankedScore(NamedTuple):
    user_id: int
    username: str
    score: int

    def to_dict(self):
        return self._asdict()


class ScoreLedger:
    """Append-only score storage and the top-N ranking over it."""

    def __init__(self, session):
        self.session = session

    def add_score(self, user_id: int, value: int) -> Score:
        # user_id is not checked here; the foreign key on score.user_id is
        # left to the database
        entry = Score(user_id=user_id, score=value)
        try:
            self.session.add(entry)
            self.session.commit()
            self.session.refresh(entry)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError('Could not record score') from exc
        return entry

    def top_scores(self, limit: int = 10) -> List[RankedScore]:
        """Highest scores across all users, best first.

        Equal scores keep insertion order (lower ``score.id`` first).
        """
        try:
            rows = (
                self.session.query(User.id, User.username, Score.score)
                .select_from(Score)
                .join(User, Score.user_id == User.id)
                .order_by(Score.score.desc(), Score.id.asc())
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError('Could not list scores') from exc
        return [RankedScore(*row) for row in rows]
