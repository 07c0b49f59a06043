"""
Auth endpoint - the identity behind the current session (login itself happens at the provider).
"""

from fastapi import APIRouter

from app.core.dependencies import CurrentUser
from app.schemas.user import UserResponse

router = APIRouter()


@router.get("/user", response_model=UserResponse)
async def current_user(user: CurrentUser):
    return user
