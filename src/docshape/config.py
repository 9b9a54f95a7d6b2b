"""
Settings read from the environment (and a local .env file).
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .analyzer import MALFORMED_POLICIES
from .exceptions import ConfigError

MAX_BATCH_SIZE = 1000
ENV_PREFIX = "DOCSHAPE_"


def validate_batch_size(batch_size: int) -> int:
    if not 0 < batch_size <= MAX_BATCH_SIZE:
        raise ConfigError(f"batch size must be between 1 and {MAX_BATCH_SIZE}, got {batch_size}")
    return batch_size


@dataclass
class Settings:
    couchdb_url: Optional[str] = None
    couchdb_database: Optional[str] = None
    batch_size: int = MAX_BATCH_SIZE
    on_malformed: str = "raise"
    log_level: str = "INFO"

    def validate(self) -> "Settings":
        validate_batch_size(self.batch_size)
        if self.on_malformed not in MALFORMED_POLICIES:
            raise ConfigError(
                f"on_malformed must be one of {', '.join(MALFORMED_POLICIES)}, got {self.on_malformed!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")
        return self

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Builds settings from DOCSHAPE_* environment variables.

        Variables: DOCSHAPE_COUCHDB_URL, DOCSHAPE_COUCHDB_DB, DOCSHAPE_BATCH_SIZE,
        DOCSHAPE_ON_MALFORMED, DOCSHAPE_LOG_LEVEL.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        def env(key: str, default: Optional[str] = None) -> Optional[str]:
            value = os.getenv(ENV_PREFIX + key, default)
            if value is not None and value.strip() == "":
                return default
            return value

        raw_batch = env("BATCH_SIZE", str(MAX_BATCH_SIZE))
        try:
            batch_size = int(raw_batch)
        except ValueError:
            raise ConfigError(f"{ENV_PREFIX}BATCH_SIZE must be an integer, got {raw_batch!r}") from None

        settings = cls(
            couchdb_url=env("COUCHDB_URL"),
            couchdb_database=env("COUCHDB_DB"),
            batch_size=batch_size,
            on_malformed=env("ON_MALFORMED", "raise").lower(),
            log_level=env("LOG_LEVEL", "INFO").upper(),
        )
        return settings.validate()
