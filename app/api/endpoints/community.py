"""
Community endpoints - public rooms, room ratings, own rating and dashboard stats.
Challenge: Listing and detail are anonymous; rating requires a session.
"""

from fastapi import APIRouter

from app.core.dependencies import CurrentUserId
from app.db.repositories.community_repository import CommunityRepository
from app.db.repositories.room_rating_repository import RoomRatingRepository
from app.db.repositories.trophy_repository import TrophyRepository
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.community import (
    PublicRoom,
    PublicRoomDetail,
    RateRoomRequest,
    RatingSummary,
    RoomRatingResponse,
    StatsResponse,
)
from app.services.community_service import CommunityService
from app.services.stats_service import StatsService

router = APIRouter()


def _get_community_service(session: DbSession) -> CommunityService:
    return CommunityService(
        CommunityRepository(session),
        RoomRatingRepository(session),
        TrophyRepository(session),
        UserRepository(session),
    )


@router.get("/community/rooms", response_model=list[PublicRoom])
async def list_public_rooms(session: DbSession):
    """Every public room with its community rating and trophy count. No auth."""
    return await _get_community_service(session).list_rooms()


@router.get("/community/room/{user_id}", response_model=PublicRoomDetail)
async def get_public_room(session: DbSession, user_id: str):
    """Public room with trophies and community rating. 404 when unknown or private."""
    return await _get_community_service(session).get_room(user_id)


@router.post("/community/rate", response_model=RoomRatingResponse)
async def rate_room(session: DbSession, data: RateRoomRequest, user_id: CurrentUserId):
    """Submit or replace the caller's 1-5 rating of another user's room."""
    return await _get_community_service(session).rate_room(user_id, data)


@router.get("/my-room-rating", response_model=RatingSummary)
async def my_room_rating(session: DbSession, user_id: CurrentUserId):
    return await _get_community_service(session).rating_summary(user_id)


@router.get("/stats", response_model=StatsResponse)
async def stats(session: DbSession, user_id: CurrentUserId):
    """Dashboard summary; room rating falls back to the completeness heuristic."""
    svc = StatsService(TrophyRepository(session), RoomRatingRepository(session))
    return await svc.summary(user_id)
