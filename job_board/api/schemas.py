"""
Pydantic schemas for API request/response models.

Bodies use the same camelCase field names as the stored records
(``salaryRange``, ``createdAt``); snake_case names are accepted on input
as well.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional

from job_board.models import Job, JobInput, JobStatus, User, UserRole
from job_board.views import status_label, status_style


def _to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def _required_text(v: str) -> str:
    if v is None or not str(v).strip():
        raise ValueError("must not be blank")
    return str(v).strip()


# ============================================================================
# Session Schemas
# ============================================================================

class LoginRequest(BaseModel):
    """Self-declared login. Email format is deliberately not checked."""
    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE

    @field_validator("name", "email", mode="before")
    @classmethod
    def not_blank(cls, v):
        return _required_text(v)

    def to_user(self) -> User:
        return User(name=self.name, email=self.email, role=self.role)


class UserResponse(BaseModel):
    name: str
    email: str
    role: UserRole

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(name=user.name, email=user.email, role=user.role)


# ============================================================================
# Job Schemas
# ============================================================================

class JobInputRequest(BaseModel):
    """Editable posting fields sent by the create/edit form."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=_to_camel)

    title: str
    department: str
    location: str
    description: str
    type: str = "Full-time"
    salary_range: Optional[str] = None

    @field_validator("title", "department", "location", "description", "type", mode="before")
    @classmethod
    def not_blank(cls, v):
        return _required_text(v)

    @field_validator("salary_range", mode="before")
    @classmethod
    def empty_salary_is_none(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    def to_input(self) -> JobInput:
        return JobInput(
            title=self.title,
            department=self.department,
            location=self.location,
            description=self.description,
            type=self.type,
            salary_range=self.salary_range,
        )


class JobResponse(BaseModel):
    """Schema for job information in responses."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=_to_camel)

    id: str
    title: str
    department: str
    location: str
    description: str
    type: str
    salary_range: Optional[str] = None
    status: JobStatus
    created_at: str
    status_label: str = Field(default="")
    status_style: str = Field(default="")

    @classmethod
    def from_job(cls, job: Job) -> "JobResponse":
        return cls(
            id=job.id,
            title=job.title,
            department=job.department,
            location=job.location,
            description=job.description,
            type=job.type,
            salary_range=job.salary_range,
            status=job.status,
            created_at=job.created_at,
            status_label=status_label(job.status),
            status_style=status_style(job.status),
        )


class JobListResponse(BaseModel):
    jobs: List[JobResponse]
    total: int
    search: str
    tab: str
    role: UserRole


class TabResponse(BaseModel):
    value: str
    label: str


# ============================================================================
# Explorer Schemas
# ============================================================================

class ExplorerResponse(BaseModel):
    format: str
    total: int
    content: Any


class MessageResponse(BaseModel):
    message: str
    details: Optional[Dict[str, Any]] = None
