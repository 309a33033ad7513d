"""
Data models for the internal job board.

``Job`` is a single posting owned by the store; ``JobInput`` is the
editable subset accepted from the posting form; ``User`` is the
self-declared session record created at login.

Serialized dictionaries use the camelCase field names the board has
always stored (``salaryRange``, ``createdAt``), so records written by
``to_dict`` can be read back by ``from_dict`` unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class JobStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    ARCHIVED = "ARCHIVED"


# Pseudo-status used by the tab filter to mean "no status restriction".
TAB_ALL = "ALL"


@dataclass(frozen=True)
class User:
    """A logged-in user.

    Attributes:
        name: Display name typed at login.
        email: Email typed at login. Not validated.
        role: Claimed role; trusted as-is.
    """

    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE

    def with_role(self, role: UserRole) -> "User":
        return replace(self, role=role)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email, "role": self.role.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            name=data["name"],
            email=data["email"],
            role=UserRole(data.get("role", UserRole.EMPLOYEE.value)),
        )


@dataclass(frozen=True)
class JobInput:
    """Fields an admin may set when creating or editing a posting."""

    title: str
    department: str
    location: str
    description: str
    type: str
    salary_range: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "title": self.title,
            "department": self.department,
            "location": self.location,
            "description": self.description,
            "type": self.type,
            "salaryRange": self.salary_range,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobInput":
        salary = data.get("salaryRange", data.get("salary_range"))
        return cls(
            title=data["title"],
            department=data["department"],
            location=data["location"],
            description=data["description"],
            type=data["type"],
            salary_range=salary or None,
        )


@dataclass(frozen=True)
class Job:
    """A job posting as held by the store.

    Attributes:
        id: Unique identifier assigned by the store.
        title: Position title.
        department: Owning department, searched together with the title.
        location: Free-form location string.
        description: Free-form description.
        type: Employment type, e.g. "Full-time".
        status: Lifecycle status.
        created_at: ISO-8601 UTC timestamp assigned by the store.
        salary_range: Optional free-form salary text.
    """

    id: str
    title: str
    department: str
    location: str
    description: str
    type: str
    status: JobStatus
    created_at: str
    salary_range: Optional[str] = None

    def editable_fields(self) -> JobInput:
        """Return the part of the job that the posting form edits."""
        return JobInput(
            title=self.title,
            department=self.department,
            location=self.location,
            description=self.description,
            type=self.type,
            salary_range=self.salary_range,
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "id": self.id,
            "title": self.title,
            "department": self.department,
            "location": self.location,
            "description": self.description,
            "type": self.type,
            "salaryRange": self.salary_range,
            "status": self.status.value,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Job":
        return cls(
            id=data["id"],
            title=data["title"],
            department=data["department"],
            location=data["location"],
            description=data["description"],
            type=data["type"],
            status=JobStatus(data["status"]),
            created_at=data["createdAt"],
            salary_range=data.get("salaryRange") or None,
        )
