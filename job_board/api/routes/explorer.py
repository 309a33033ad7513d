"""
Database explorer endpoints for admins: raw dump and full reset.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from job_board.api.schemas import ExplorerResponse, MessageResponse
from job_board.api.dependencies import get_board, get_confirming_board, require_admin
from job_board.board import EXPLORER_TABLE, JobBoard
from job_board.models import User

router = APIRouter(prefix="/api/explorer", tags=["explorer"])


@router.get("", response_model=ExplorerResponse)
async def explore(
    format: str = Query(EXPLORER_TABLE, description="TABLE or JSON"),
    _admin: User = Depends(require_admin),
    board: JobBoard = Depends(get_board)
):
    """Dump the unfiltered job collection."""
    try:
        board.set_explorer_format(format)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    board.open_explorer()
    board.fetch_jobs()
    return ExplorerResponse(
        format=board.explorer_format,
        total=len(board.jobs),
        content=board.explorer_view(),
    )


@router.post("/reset", response_model=MessageResponse)
async def reset(
    _admin: User = Depends(require_admin),
    board: JobBoard = Depends(get_confirming_board)
):
    """Clear the whole job collection. There is no undo."""
    if not board.reset_all():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Reset not confirmed; pass confirm=true"
        )
    return MessageResponse(message="All job data cleared", details={"remaining": len(board.jobs)})
