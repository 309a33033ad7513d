"""
Root orchestrator for the job board.

``JobBoard`` owns everything the screen depends on: the session context,
the cached job list, the loading flag, the search text and active tab,
the posting modal (and which job it edits) and the database explorer
panel. User intents call the store and then re-synchronize the cache.

By default every mutation is followed by exactly one full re-fetch; the
cache is never patched locally. The ``incremental`` resync mode patches
the cache from the store's return values instead, behind the same
methods. Nothing here locks or de-duplicates: two overlapping calls each
re-fetch and the last one to finish wins.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from .config import FETCH_SILENT, FETCH_SURFACE, RESYNC_FULL, RESYNC_INCREMENTAL
from .db import Database
from .errors import FetchError
from .models import TAB_ALL, Job, JobInput, JobStatus, User, UserRole
from .session import SessionContext, SessionStore
from .views import Tab, available_tabs, explorer_json, explorer_rows, filter_jobs

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this job posting?"
RESET_PROMPT = "Clear all job data?"

EXPLORER_TABLE = "TABLE"
EXPLORER_JSON = "JSON"

Confirm = Callable[[str], bool]


def _deny(message: str) -> bool:
    return False


class JobBoard:
    """State container wiring user intents to the store.

    Args:
        db: Store holding the job collection.
        session: Session context; built from ``db`` when omitted.
        confirm: Called with a prompt before delete and reset; the
            action only runs when it returns True. Denies by default.
        fetch_errors: ``"silent"`` logs list failures and keeps the stale
            cache; ``"surface"`` also records ``fetch_error`` and raises
            ``FetchError``.
        resync: ``"full"`` or ``"incremental"``.
    """

    def __init__(
        self,
        db: Database,
        session: Optional[SessionContext] = None,
        confirm: Confirm = _deny,
        fetch_errors: str = FETCH_SILENT,
        resync: str = RESYNC_FULL,
    ):
        if fetch_errors not in (FETCH_SILENT, FETCH_SURFACE):
            raise ValueError(f"Unknown fetch error policy: {fetch_errors}")
        if resync not in (RESYNC_FULL, RESYNC_INCREMENTAL):
            raise ValueError(f"Unknown resync mode: {resync}")
        self.db = db
        self.session = session if session is not None else SessionContext(SessionStore(db))
        self.confirm = confirm
        self.fetch_errors = fetch_errors
        self.resync = resync

        self.jobs: List[Job] = []
        self.loading = True
        self.fetch_error: Optional[str] = None
        self.search = ""
        self.active_tab: str = TAB_ALL
        self.modal_open = False
        self.editing_job: Optional[Job] = None
        self.explorer_open = False
        self.explorer_format = EXPLORER_TABLE

    # --- derived state ---
    @property
    def user(self) -> Optional[User]:
        return self.session.user

    @property
    def is_admin(self) -> bool:
        return self.session.role == UserRole.ADMIN

    @property
    def visible_jobs(self) -> List[Job]:
        if not self.session.is_authenticated:
            return []
        return filter_jobs(self.jobs, self.session.role, self.search, self.active_tab)

    @property
    def tabs(self) -> List[str]:
        return available_tabs(self.session.role)

    # --- auth actions ---
    def login(self, user: User) -> User:
        self.session.login(user)
        self.fetch_jobs()
        return user

    def logout(self) -> None:
        # The cache is kept but visible_jobs is empty without a session.
        self.session.logout()

    def toggle_role(self) -> Optional[User]:
        return self.session.toggle_role()

    # --- filter state ---
    def set_search(self, text: str) -> None:
        self.search = text or ""

    def set_tab(self, tab: Tab) -> None:
        value = tab.value if isinstance(tab, JobStatus) else str(tab)
        if value != TAB_ALL and value not in {s.value for s in JobStatus}:
            raise ValueError(f"Unknown tab: {value}")
        self.active_tab = value

    # --- modal and explorer ---
    def open_create(self) -> None:
        self.editing_job = None
        self.modal_open = True

    def open_edit(self, job: Job) -> None:
        self.editing_job = job
        self.modal_open = True

    def close_modal(self) -> None:
        self.modal_open = False

    def open_explorer(self) -> None:
        self.explorer_open = True

    def close_explorer(self) -> None:
        self.explorer_open = False

    def set_explorer_format(self, fmt: str) -> None:
        fmt = fmt.upper()
        if fmt not in (EXPLORER_TABLE, EXPLORER_JSON):
            raise ValueError(f"Unknown explorer format: {fmt}")
        self.explorer_format = fmt

    def explorer_view(self):
        """Raw dump of the cache in the selected explorer format."""
        if self.explorer_format == EXPLORER_JSON:
            return explorer_json(self.jobs)
        return explorer_rows(self.jobs)

    # --- CRUD actions ---
    def fetch_jobs(self) -> List[Job]:
        self.loading = True
        try:
            self.jobs = self.db.list_jobs()
            self.fetch_error = None
        except Exception as exc:
            logger.error("Failed to fetch jobs: %s", exc)
            if self.fetch_errors == FETCH_SURFACE:
                self.fetch_error = f"Could not load job postings: {exc}"
                raise FetchError(self.fetch_error) from exc
        finally:
            self.loading = False
        return self.jobs

    def submit_job(self, job_input: JobInput, editing: Optional[Job] = None) -> Job:
        """Create a posting, or update the one being edited.

        ``editing`` defaults to the job the modal was opened for. Store
        failures propagate and leave the modal as it was.
        """
        target = editing if editing is not None else self.editing_job
        if target is not None:
            saved = self.db.update_job(target.id, job_input)
        else:
            saved = self.db.create_job(job_input)
        self.modal_open = False
        self.editing_job = None
        if self.resync == RESYNC_INCREMENTAL:
            if target is not None:
                self.jobs = [saved if job.id == saved.id else job for job in self.jobs]
            else:
                self.jobs = [saved] + self.jobs
        else:
            self.fetch_jobs()
        return saved

    def delete_job(self, job_id: str) -> bool:
        if not self.confirm(DELETE_PROMPT):
            return False
        self.db.delete_job(job_id)
        if self.resync == RESYNC_INCREMENTAL:
            self.jobs = [job for job in self.jobs if job.id != job_id]
        else:
            self.fetch_jobs()
        return True

    def archive_job(self, job_id: str) -> None:
        self.db.archive_job(job_id)
        if self.resync == RESYNC_INCREMENTAL:
            self.jobs = [
                replace(job, status=JobStatus.ARCHIVED) if job.id == job_id else job
                for job in self.jobs
            ]
        else:
            self.fetch_jobs()

    def reset_all(self) -> bool:
        """Wipe the whole collection, bypassing per-job deletes."""
        if not self.confirm(RESET_PROMPT):
            return False
        self.db.clear_jobs()
        if self.resync == RESYNC_INCREMENTAL:
            self.jobs = []
        else:
            self.fetch_jobs()
        self.explorer_open = False
        return True
