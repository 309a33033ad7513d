"""
Session API endpoints.

Login is self-declared: whatever name, email and role the caller sends
becomes the session. There is no password and no server-side check of
the role.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from job_board.api.schemas import LoginRequest, MessageResponse, UserResponse
from job_board.api.dependencies import get_board, require_session
from job_board.board import JobBoard
from job_board.models import User

router = APIRouter(prefix="/api/session", tags=["session"])


@router.get("", response_model=UserResponse)
async def current_session(user: User = Depends(require_session)):
    """Return the logged-in user."""
    return UserResponse.from_user(user)


@router.post("/login", response_model=UserResponse)
async def login(
    login_data: LoginRequest,
    board: JobBoard = Depends(get_board)
):
    """
    Start a session for the given user.

    Replaces any existing session. The session is kept even if the
    initial job listing fails.
    """
    user = board.login(login_data.to_user())
    return UserResponse.from_user(user)


@router.post("/logout", response_model=MessageResponse)
async def logout(board: JobBoard = Depends(get_board)):
    """Clear the stored session."""
    board.logout()
    return MessageResponse(message="Logged out successfully")


@router.post("/toggle-role", response_model=UserResponse)
async def toggle_role(
    _user: User = Depends(require_session),
    board: JobBoard = Depends(get_board)
):
    """Switch the session between the admin and employee views."""
    user = board.toggle_role()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required"
        )
    return UserResponse.from_user(user)
