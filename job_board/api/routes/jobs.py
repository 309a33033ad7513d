"""
Job board API endpoints.

Listing returns the derived view for the session's role; the mutating
endpoints are admin-only and each one re-synchronizes the board after
calling the store.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from typing import List

from job_board.api.schemas import (
    JobInputRequest,
    JobListResponse,
    JobResponse,
    MessageResponse,
    TabResponse,
)
from job_board.api.dependencies import (
    get_board,
    get_confirming_board,
    require_admin,
    require_session,
)
from job_board.board import JobBoard
from job_board.models import TAB_ALL, User
from job_board.views import tab_label

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
async def list_jobs(
    search: str = Query("", description="Case-insensitive match on title or department"),
    tab: str = Query(TAB_ALL, description="ALL, OPEN, CLOSED or ARCHIVED"),
    user: User = Depends(require_session),
    board: JobBoard = Depends(get_board)
):
    """
    List the jobs visible to the current session.

    Employees only ever receive OPEN jobs, whatever tab they ask for.
    """
    try:
        board.set_tab(tab.upper())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    board.set_search(search)
    board.fetch_jobs()

    jobs = board.visible_jobs
    return JobListResponse(
        jobs=[JobResponse.from_job(job) for job in jobs],
        total=len(jobs),
        search=board.search,
        tab=board.active_tab,
        role=user.role,
    )


@router.get("/tabs", response_model=List[TabResponse])
async def list_tabs(
    _user: User = Depends(require_session),
    board: JobBoard = Depends(get_board)
):
    """Tabs offered to the current session's role."""
    return [TabResponse(value=tab, label=tab_label(tab)) for tab in board.tabs]


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: JobInputRequest,
    _admin: User = Depends(require_admin),
    board: JobBoard = Depends(get_board)
):
    """Post a new job. New postings start OPEN."""
    board.open_create()
    job = board.submit_job(payload.to_input())
    return JobResponse.from_job(job)


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: str,
    payload: JobInputRequest,
    _admin: User = Depends(require_admin),
    board: JobBoard = Depends(get_board)
):
    """Replace the editable fields of a job. Status is left as is."""
    board.open_edit(board.db.get_job(job_id))
    job = board.submit_job(payload.to_input())
    return JobResponse.from_job(job)


@router.post("/{job_id}/archive", response_model=MessageResponse)
async def archive_job(
    job_id: str,
    _admin: User = Depends(require_admin),
    board: JobBoard = Depends(get_board)
):
    """Move a job to ARCHIVED."""
    board.archive_job(job_id)
    return MessageResponse(message="Job archived successfully")


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: str,
    _admin: User = Depends(require_admin),
    board: JobBoard = Depends(get_confirming_board)
):
    """
    Delete a job permanently.

    Requires ``confirm=true``; there is no undo.
    """
    if not board.delete_job(job_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deletion not confirmed; pass confirm=true"
        )
    return MessageResponse(message="Job deleted successfully")
