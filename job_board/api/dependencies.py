"""
Shared dependencies for FastAPI routes.

Provides the store connection, the per-request job board and the
session checks used across API endpoints.
"""

from fastapi import Depends, HTTPException, Query, status
from pathlib import Path
from typing import Iterator

from job_board.board import Confirm, JobBoard
from job_board.config import Settings
from job_board.db import Database
from job_board.models import User, UserRole


def get_settings() -> Settings:
    """Read settings from the environment on every request."""
    return Settings.from_env()


def get_db(settings: Settings = Depends(get_settings)) -> Iterator[Database]:
    """Dependency to get a store connection, closed after the request.

    Uses the DB_PATH environment variable if provided, otherwise
    'job_board.db' in the current working directory.
    """
    db = Database(Path(settings.db_path))
    try:
        yield db
    finally:
        db.close()


def get_board(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> JobBoard:
    """Build the orchestrator around the stored session."""
    return JobBoard(
        db,
        fetch_errors=settings.fetch_errors,
        resync=settings.resync,
    )


def confirm_flag(
    confirm: bool = Query(False, description="Must be true to run the destructive action")
) -> Confirm:
    """Answer the board's confirmation prompt from the ``confirm`` query flag."""
    return lambda _prompt: confirm


def get_confirming_board(
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_settings),
    confirm: Confirm = Depends(confirm_flag),
) -> JobBoard:
    """Like ``get_board``, but delete and reset follow the ``confirm`` flag."""
    return JobBoard(
        db,
        confirm=confirm,
        fetch_errors=settings.fetch_errors,
        resync=settings.resync,
    )


def require_session(board: JobBoard = Depends(get_board)) -> User:
    """Require a logged-in user - raises 401 otherwise."""
    if board.user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required"
        )
    return board.user


def require_admin(user: User = Depends(require_session)) -> User:
    """Require the ADMIN role - raises 403 for employees."""
    if user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin view required"
        )
    return user
