"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Callable, List

from fastapi.testclient import TestClient

from job_board.api.dependencies import get_settings
from job_board.api.main import app
from job_board.config import Settings
from job_board.db import Database
from job_board.models import Job, JobInput, JobStatus, User, UserRole


def make_input(**overrides) -> JobInput:
    fields = {
        "title": "Engineer",
        "department": "R&D",
        "location": "Bangkok",
        "description": "Build internal tools.",
        "type": "Full-time",
        "salary_range": None,
    }
    fields.update(overrides)
    return JobInput(**fields)


def make_job(job_id: str, title: str, department: str, status: JobStatus) -> Job:
    return Job(
        id=job_id,
        title=title,
        department=department,
        location="Bangkok",
        description=f"{title} role",
        type="Full-time",
        status=status,
        created_at="2026-01-01T00:00:00+00:00",
    )


@pytest.fixture
def job_input() -> Callable[..., JobInput]:
    """Factory for JobInput with sensible defaults."""
    return make_input


@pytest.fixture
def db(tmp_path):
    """Create a temporary store and close it afterwards."""
    database = Database(tmp_path / "board.db")
    yield database
    database.close()


@pytest.fixture
def engineer_and_analyst() -> List[Job]:
    """The two-job collection used by the filter scenarios."""
    return [
        make_job("j1", "Engineer", "R&D", JobStatus.OPEN),
        make_job("j2", "Analyst", "Finance", JobStatus.CLOSED),
    ]


@pytest.fixture
def mixed_jobs() -> List[Job]:
    """A collection with every status and a few searchable names."""
    return [
        make_job("a", "Backend Engineer", "R&D", JobStatus.OPEN),
        make_job("b", "Analyst", "Finance", JobStatus.CLOSED),
        make_job("c", "Recruiter", "People", JobStatus.ARCHIVED),
        make_job("d", "Data Analyst", "Engineering Ops", JobStatus.OPEN),
        make_job("e", "Office Manager", "Facilities", JobStatus.CLOSED),
        make_job("f", "QA Engineer", "R&D", JobStatus.ARCHIVED),
    ]


@pytest.fixture
def admin() -> User:
    return User(name="Somchai", email="somchai@company.com", role=UserRole.ADMIN)


@pytest.fixture
def employee() -> User:
    return User(name="Malee", email="malee@company.com", role=UserRole.EMPLOYEE)


@pytest.fixture
def client(tmp_path):
    """API client bound to a temporary database."""
    settings = Settings(db_path=str(tmp_path / "api.db"))
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
