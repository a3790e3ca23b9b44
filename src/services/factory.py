"""Put the layers together: settings -> logging, database -> repository -> service."""

import logging
from typing import Optional

from src.core.config import Settings, configure_logging
from src.db.database import create_session_factory
from src.db.sql_repository import SQLMatchRepository
from src.services.match_service import MatchService

_log = logging.getLogger(__name__)


def build_service(settings: Optional[Settings] = None) -> MatchService:
    """
    Create a MatchService backed by the SQL repository.
    ----
    Settings are read from the CHECKERS_* environment variables when none are given.
    NOTE: the service owns a single session, so keep one service per process (or thread).
    """
    settings = Settings.from_env() if settings is None else settings
    configure_logging(settings)

    session_factory = create_session_factory(settings.database_url)
    _log.info("Matches stored at %s", settings.database_url)
    return MatchService(SQLMatchRepository(session_factory()))
