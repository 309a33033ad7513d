"""
Runtime configuration read from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

FETCH_SILENT = "silent"
FETCH_SURFACE = "surface"
RESYNC_FULL = "full"
RESYNC_INCREMENTAL = "incremental"

DEV_ORIGINS = [
    "http://localhost",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def _choice(name: str, default: str, allowed: tuple) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(allowed)}, got {value!r}")
    return value


@dataclass
class Settings:
    db_path: str = "job_board.db"
    environment: str = "development"
    allowed_origins: List[str] = field(default_factory=lambda: list(DEV_ORIGINS))
    fetch_errors: str = FETCH_SILENT
    resync: str = RESYNC_FULL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        environment = os.getenv("JOBBOARD_ENV", "development").lower()
        if environment == "production":
            # No wildcard fallback.
            raw_origins = os.getenv("JOBBOARD_ALLOWED_ORIGINS", "")
            origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
        else:
            origins = list(DEV_ORIGINS)
        return cls(
            db_path=os.getenv("DB_PATH", "job_board.db"),
            environment=environment,
            allowed_origins=origins,
            fetch_errors=_choice("JOBBOARD_FETCH_ERRORS", FETCH_SILENT, (FETCH_SILENT, FETCH_SURFACE)),
            resync=_choice("JOBBOARD_RESYNC", RESYNC_FULL, (RESYNC_FULL, RESYNC_INCREMENTAL)),
            log_level=os.getenv("JOBBOARD_LOG_LEVEL", "INFO").upper(),
        )
