"""Application settings (read from environment variables) and logging setup."""

import logging
import os
from collections.abc import Mapping
from typing import Optional, Self

from pydantic import BaseModel, field_validator

ENV_PREFIX = "CHECKERS_"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseModel):
    database_url: str = "sqlite:///checkers.db"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Pick up every field that has a CHECKERS_<FIELD NAME> variable set. Others keep their default."""
        environ = os.environ if environ is None else environ
        values = {
            name: environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in environ
        }
        return cls(**values)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
