"""
Derived view computation for the job board.

``filter_jobs`` is the pure function that turns the full cached
collection plus the UI filter state into the list actually rendered.
The remaining helpers are the fixed label and style mappings shown next
to statuses and tabs, and the raw renderings used by the database
explorer panel.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .models import TAB_ALL, Job, JobStatus, UserRole

Tab = Union[JobStatus, str]

STATUS_LABELS: Dict[str, str] = {
    TAB_ALL: "All",
    JobStatus.OPEN.value: "Open",
    JobStatus.CLOSED.value: "Closed",
    JobStatus.ARCHIVED.value: "Archived",
}

STATUS_STYLES: Dict[str, str] = {
    JobStatus.OPEN.value: "bg-green-100 text-green-800",
    JobStatus.CLOSED.value: "bg-red-100 text-red-800",
    JobStatus.ARCHIVED.value: "bg-slate-100 text-slate-800",
}
DEFAULT_STYLE = "bg-slate-100 text-slate-800"

EXPLORER_COLUMNS = [
    "id",
    "title",
    "department",
    "location",
    "type",
    "salaryRange",
    "status",
    "createdAt",
]


def _tab_value(tab: Optional[Tab]) -> str:
    if tab is None:
        return TAB_ALL
    return tab.value if isinstance(tab, JobStatus) else str(tab)


def filter_jobs(
    jobs: Sequence[Job],
    role: Optional[UserRole],
    search: str = "",
    tab: Optional[Tab] = TAB_ALL,
) -> List[Job]:
    """Return the jobs to render for the given viewer and filters.

    Anyone but an admin, including no viewer at all, only ever sees OPEN
    jobs, whatever tab they ask for. The search text matches title or
    department case-insensitively and an empty query matches everything.
    Input order is preserved.

    Args:
        jobs: Full cached collection.
        role: Role of the viewer.
        search: Free-text query.
        tab: ``"ALL"`` or a ``JobStatus`` (or its value).

    Returns:
        A new list; ``jobs`` is not modified.
    """
    working: Iterable[Job] = jobs
    if role != UserRole.ADMIN:
        working = [job for job in working if job.status == JobStatus.OPEN]

    query = (search or "").lower()
    tab_value = _tab_value(tab)

    result = []
    for job in working:
        matches_search = query in job.title.lower() or query in job.department.lower()
        matches_tab = tab_value == TAB_ALL or job.status.value == tab_value
        if matches_search and matches_tab:
            result.append(job)
    return result


def available_tabs(role: Optional[UserRole]) -> List[str]:
    """Tabs offered to a viewer; employees only get ALL and OPEN."""
    if role == UserRole.ADMIN:
        return [TAB_ALL] + [status.value for status in JobStatus]
    return [TAB_ALL, JobStatus.OPEN.value]


def tab_label(tab: Tab) -> str:
    value = _tab_value(tab)
    return STATUS_LABELS.get(value, value)


def status_label(status: Tab) -> str:
    return tab_label(status)


def status_style(status: Tab) -> str:
    return STATUS_STYLES.get(_tab_value(status), DEFAULT_STYLE)


# Database explorer renderings

def explorer_json(jobs: Sequence[Job]) -> str:
    return json.dumps([job.to_dict() for job in jobs], indent=2, ensure_ascii=False)


def explorer_rows(jobs: Sequence[Job]) -> Dict[str, Any]:
    rows = []
    for job in jobs:
        record = job.to_dict()
        rows.append([record[column] for column in EXPLORER_COLUMNS])
    return {"columns": list(EXPLORER_COLUMNS), "rows": rows}
