"""
Presentation components: login form, posting form and job card.

These hold only local draft state and hand composed records to the
orchestrator. Their only checks are required fields; nothing here
validates formats or talks to the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .models import Job, JobInput, JobStatus, User, UserRole
from .views import status_label, status_style

DEFAULT_JOB_TYPE = "Full-time"
JOB_REQUIRED_FIELDS = ["title", "department", "location", "description", "type"]


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


@dataclass
class LoginForm:
    """Draft login state. Role defaults to EMPLOYEE."""

    name: str = ""
    email: str = ""
    role: UserRole = UserRole.EMPLOYEE
    missing: List[str] = field(default_factory=list)

    def submit(self) -> Optional[User]:
        """Return the composed user, or None if name or email is empty."""
        self.missing = [f for f in ("name", "email") if _blank(getattr(self, f))]
        if self.missing:
            return None
        return User(name=self.name.strip(), email=self.email.strip(), role=self.role)


@dataclass
class JobForm:
    """Draft posting state, pre-filled from ``initial`` when editing."""

    title: str = ""
    department: str = ""
    location: str = ""
    description: str = ""
    type: str = DEFAULT_JOB_TYPE
    salary_range: str = ""
    editing: Optional[Job] = None
    missing: List[str] = field(default_factory=list)

    @classmethod
    def for_job(cls, initial: Optional[Job] = None) -> "JobForm":
        if initial is None:
            return cls()
        return cls(
            title=initial.title,
            department=initial.department,
            location=initial.location,
            description=initial.description,
            type=initial.type,
            salary_range=initial.salary_range or "",
            editing=initial,
        )

    @property
    def heading(self) -> str:
        return "Edit job posting" if self.editing else "New job posting"

    def submit(self) -> Optional[JobInput]:
        """Return the posting input, or None while required fields are blank."""
        self.missing = [f for f in JOB_REQUIRED_FIELDS if _blank(getattr(self, f))]
        if self.missing:
            return None
        return JobInput(
            title=self.title.strip(),
            department=self.department.strip(),
            location=self.location.strip(),
            description=self.description.strip(),
            type=self.type.strip(),
            salary_range=self.salary_range.strip() or None,
        )


class JobCard:
    """Read-only rendering of a job with optional admin actions.

    Passing ``on_edit`` puts the card in admin context; without it the
    card is read-only and the action methods do nothing.
    """

    def __init__(
        self,
        job: Job,
        on_edit: Optional[Callable[[Job], None]] = None,
        on_delete: Optional[Callable[[str], None]] = None,
        on_archive: Optional[Callable[[str], None]] = None,
    ):
        self.job = job
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.on_archive = on_archive

    @property
    def is_admin(self) -> bool:
        return self.on_edit is not None

    @property
    def label(self) -> str:
        return status_label(self.job.status)

    @property
    def style(self) -> str:
        return status_style(self.job.status)

    @property
    def subtitle(self) -> str:
        return f"{self.job.department} • {self.job.location}"

    @property
    def can_archive(self) -> bool:
        return self.is_admin and self.job.status == JobStatus.OPEN

    def edit(self) -> None:
        if self.is_admin:
            self.on_edit(self.job)

    def delete(self) -> None:
        if self.is_admin and self.on_delete is not None:
            self.on_delete(self.job.id)

    def archive(self) -> None:
        if self.can_archive and self.on_archive is not None:
            self.on_archive(self.job.id)
