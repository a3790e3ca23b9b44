"""Implementation of (Match)Repository keeping every match in a dictionary"""

import logging
from copy import deepcopy

from src.core.exceptions import RepositoryError
from src.core.models import MatchModel

_log = logging.getLogger(__name__)


class InMemoryMatchRepository:
    """
    Records live as long as the process.

    NOTE: Models are copied on the way in and on the way out. Callers never hold a reference to the stored record,
    so a reader always sees a whole snapshot (never a match in the middle of an update).
    """

    def __init__(self) -> None:
        self._matches: dict[str, MatchModel] = {}

    def get_match(self, match_id: str) -> MatchModel | None:
        match = self._matches.get(match_id)
        return deepcopy(match) if match is not None else None

    def create_match(self, match_id: str, match: MatchModel) -> MatchModel:
        if match_id in self._matches:
            raise RepositoryError(f"Match with {match_id=} already exists.")
        self._matches[match_id] = deepcopy(match)
        _log.debug("Stored new match %s", match_id)
        return deepcopy(match)

    def update_match(self, match_id: str, match: MatchModel) -> MatchModel | None:
        if match_id not in self._matches:
            return None
        self._matches[match_id] = deepcopy(match)
        return deepcopy(match)

    def delete_match(self, match_id: str) -> MatchModel | None:
        return self._matches.pop(match_id, None)
