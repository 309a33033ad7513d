"""
Storage layer for the job board.

This module defines the SQLite schema holding the job collection and a
small table of named slots (used for the persisted session). The
``Database`` wrapper is the only owner of the canonical job collection:
callers get copies of the rows as ``Job`` objects and must list again
to see changes. SQLite keeps the board self-contained; nothing here
relies on features another key/value store could not provide.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from .errors import JobNotFoundError
from .models import Job, JobInput, JobStatus

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS jobs (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT UNIQUE NOT NULL,
    title TEXT NOT NULL,
    department TEXT NOT NULL,
    location TEXT NOT NULL,
    description TEXT NOT NULL,
    type TEXT NOT NULL,
    salary_range TEXT,
    status TEXT NOT NULL DEFAULT 'OPEN', -- 'OPEN' | 'CLOSED' | 'ARCHIVED'
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS slots (
    name TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_to_job(row: sqlite3.Row) -> Job:
    return Job(
        id=row["id"],
        title=row["title"],
        department=row["department"],
        location=row["location"],
        description=row["description"],
        type=row["type"],
        status=JobStatus(row["status"]),
        created_at=row["created_at"],
        salary_range=row["salary_range"],
    )


class Database:
    """Wrapper around a sqlite3 connection.

    Provides the job operations the board consumes (list, create,
    update, delete, archive) plus named slot storage. Connections are
    opened with ``check_same_thread=False`` because the web layer may
    resolve dependencies on a different thread than the one serving
    the request.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        if str(db_path) != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(str(db_path), check_same_thread=False)
        self.conn.row_factory = sqlite3.Row
        self._ensure_schema()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def _ensure_schema(self) -> None:
        self.conn.executescript(SCHEMA)
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    # --- job operations ---
    def list_jobs(self) -> List[Job]:
        """Return the whole collection, newest posting first."""
        cur = self.conn.cursor()
        cur.execute("SELECT * FROM jobs ORDER BY seq DESC")
        return [_row_to_job(row) for row in cur.fetchall()]

    def get_job(self, job_id: str) -> Job:
        cur = self.conn.cursor()
        cur.execute("SELECT * FROM jobs WHERE id=?", (job_id,))
        row = cur.fetchone()
        if row is None:
            raise JobNotFoundError(job_id)
        return _row_to_job(row)

    def create_job(
        self,
        job_input: JobInput,
        status: JobStatus = JobStatus.OPEN,
        created_at: Optional[str] = None,
    ) -> Job:
        """Insert a new posting and return it with its assigned fields.

        ``status`` and ``created_at`` are store-assigned; they are only
        overridden when seeding existing data.
        """
        job_id = uuid.uuid4().hex
        cur = self.conn.cursor()
        cur.execute(
            """
            INSERT INTO jobs (id, title, department, location, description, type, salary_range, status, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                job_id,
                job_input.title,
                job_input.department,
                job_input.location,
                job_input.description,
                job_input.type,
                job_input.salary_range,
                status.value,
                created_at or _now(),
            ),
        )
        self.conn.commit()
        logger.info("Created job %s (%s)", job_id, job_input.title)
        return self.get_job(job_id)

    def update_job(self, job_id: str, job_input: JobInput) -> Job:
        """Replace the editable fields of a posting. Status is untouched."""
        cur = self.conn.cursor()
        cur.execute(
            """
            UPDATE jobs
            SET title=?, department=?, location=?, description=?, type=?, salary_range=?
            WHERE id=?
            """,
            (
                job_input.title,
                job_input.department,
                job_input.location,
                job_input.description,
                job_input.type,
                job_input.salary_range,
                job_id,
            ),
        )
        if cur.rowcount == 0:
            raise JobNotFoundError(job_id)
        self.conn.commit()
        logger.info("Updated job %s", job_id)
        return self.get_job(job_id)

    def delete_job(self, job_id: str) -> None:
        cur = self.conn.cursor()
        cur.execute("DELETE FROM jobs WHERE id=?", (job_id,))
        if cur.rowcount == 0:
            raise JobNotFoundError(job_id)
        self.conn.commit()
        logger.info("Deleted job %s", job_id)

    def archive_job(self, job_id: str) -> None:
        cur = self.conn.cursor()
        cur.execute(
            "UPDATE jobs SET status=? WHERE id=?",
            (JobStatus.ARCHIVED.value, job_id),
        )
        if cur.rowcount == 0:
            raise JobNotFoundError(job_id)
        self.conn.commit()
        logger.info("Archived job %s", job_id)

    def clear_jobs(self) -> int:
        """Drop every posting. Returns how many were removed."""
        cur = self.conn.cursor()
        cur.execute("DELETE FROM jobs")
        removed = cur.rowcount
        self.conn.commit()
        logger.warning("Cleared job collection (%d jobs removed)", removed)
        return removed

    # --- slot operations ---
    def get_slot(self, name: str) -> Optional[str]:
        cur = self.conn.cursor()
        cur.execute("SELECT value FROM slots WHERE name=?", (name,))
        row = cur.fetchone()
        return row["value"] if row else None

    def set_slot(self, name: str, value: str) -> None:
        cur = self.conn.cursor()
        cur.execute(
            "INSERT INTO slots (name, value) VALUES (?, ?) "
            "ON CONFLICT(name) DO UPDATE SET value=excluded.value",
            (name, value),
        )
        self.conn.commit()

    def delete_slot(self, name: str) -> None:
        cur = self.conn.cursor()
        cur.execute("DELETE FROM slots WHERE name=?", (name,))
        self.conn.commit()
