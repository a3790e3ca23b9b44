"""Protocol repository (implemented in memory, and with SQLAlchemy)"""

from typing import Protocol

from src.core.models import MatchModel


class MatchRepository(Protocol):
    """Persistence layer orchestration"""

    def get_match(self, match_id: str) -> MatchModel | None:
        """Get match by ID, if record exists."""
        ...

    def create_match(self, match_id: str, match: MatchModel) -> MatchModel:
        """Store new match under the ID chosen by the caller and return the stored data."""
        ...

    def update_match(self, match_id: str, match: MatchModel) -> MatchModel | None:
        """Replace the record with the new state."""
        ...

    def delete_match(self, match_id: str) -> MatchModel | None:
        """Remove a match's record."""
        ...
