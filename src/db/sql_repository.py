"""Implementation of (Match)Repository using SQLAlchemy"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import MatchModel
from src.db.schema import DBMatch

_log = logging.getLogger(__name__)


class SQLMatchRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_match(self, match_id: str) -> MatchModel | None:
        """Get match by ID, if record exists."""
        match_db = self._fetch_match(match_id)
        if match_db:
            return self._to_model(match_db)
        return None

    def create_match(self, match_id: str, match: MatchModel) -> MatchModel:
        """Store new match and return the stored data."""
        if self._fetch_match(match_id):
            raise RepositoryError(f"Match with {match_id=} already exists.")

        match_db = DBMatch(
            id=match_id,
            board=match.board,
            turn=match.turn,
            captures=match.captures,
            status=match.status,
            moves=match.moves,
        )
        self.db.add(match_db)
        self.db.commit()
        self.db.refresh(match_db)
        _log.debug("Stored new match %s", match_id)
        return self._to_model(match_db)

    def update_match(self, match_id: str, match: MatchModel) -> MatchModel | None:
        """Replace the stored state with the new one."""
        match_db = self._fetch_match(match_id)
        if not match_db:
            return None
        match_db.board = match.board
        match_db.turn = match.turn
        match_db.captures = match.captures
        match_db.status = match.status
        match_db.moves = match.moves
        self.db.commit()
        self.db.refresh(match_db)
        return self._to_model(match_db)

    def delete_match(self, match_id: str) -> MatchModel | None:
        """Remove a match's record."""
        match_db = self._fetch_match(match_id)
        if not match_db:
            return None
        match_model = self._to_model(match_db)
        self.db.delete(match_db)
        self.db.commit()
        return match_model

    def _fetch_match(self, match_id: str) -> DBMatch | None:
        query = select(DBMatch).where(DBMatch.id == match_id)
        return self.db.scalar(query)

    def _to_model(self, match_db: DBMatch) -> MatchModel:
        """Convert SQLAlchemy model to data transfer model."""
        return MatchModel(
            board=[list(row) for row in match_db.board],
            turn=match_db.turn,
            captures=dict(match_db.captures),
            status=match_db.status,
            moves=list(match_db.moves),
        )
