"""
Community service - public rooms and room ratings.
Challenge: Only public rooms are exposed; a user can rate others but never themselves.
"""

import logging

from app.core.exceptions import NotFoundError, SelfRatingError
from app.db.models.room_rating import RoomRating
from app.db.repositories.community_repository import CommunityRepository
from app.db.repositories.room_rating_repository import RoomRatingRepository
from app.db.repositories.trophy_repository import TrophyRepository
from app.db.repositories.user_repository import UserRepository
from app.schemas.community import PublicRoom, PublicRoomDetail, RateRoomRequest, RatingSummary
from app.schemas.preferences import PreferencesResponse
from app.schemas.trophy import TrophyResponse
from app.schemas.user import PublicUser
from app.services.rating import community_average

logger = logging.getLogger(__name__)


class CommunityService:
    def __init__(
        self,
        community_repo: CommunityRepository,
        rating_repo: RoomRatingRepository,
        trophy_repo: TrophyRepository,
        user_repo: UserRepository,
    ):
        self.community_repo = community_repo
        self.rating_repo = rating_repo
        self.trophy_repo = trophy_repo
        self.user_repo = user_repo

    async def list_rooms(self) -> list[PublicRoom]:
        """Public rooms with community rating (no heuristic fallback) and trophy count."""
        rows = await self.community_repo.list_public_rooms()
        return [
            PublicRoom(
                user_id=row.user.id,
                first_name=row.user.first_name,
                last_name=row.user.last_name,
                profile_image_url=row.preferences.profile_image_url or row.user.profile_image_url,
                theme=row.preferences.theme,
                avg_score=community_average(row.avg_score, row.total_ratings),
                total_ratings=row.total_ratings,
                trophy_count=row.trophy_count,
            )
            for row in rows
        ]

    async def get_room(self, user_id: str) -> PublicRoomDetail:
        """Room detail. Unknown users and private rooms are both reported as not found."""
        found = await self.community_repo.get_public_room(user_id)
        if found is None:
            raise NotFoundError("Room", context={"userId": user_id}, message="Room not found or is private")
        user, prefs = found
        trophies = await self.trophy_repo.list_for_owner(user_id)
        return PublicRoomDetail(
            user=PublicUser.model_validate(user),
            preferences=PreferencesResponse.model_validate(prefs),
            trophies=[TrophyResponse.model_validate(t) for t in trophies],
            rating=await self.rating_summary(user_id),
        )

    async def rating_summary(self, room_owner_id: str) -> RatingSummary:
        avg, count = await self.rating_repo.aggregate_for_owner(room_owner_id)
        return RatingSummary(avg_score=community_average(avg, count), total_ratings=count)

    async def rate_room(self, rater_id: str, data: RateRoomRequest) -> RoomRating:
        """Create or overwrite the rater's vote for another user's room."""
        if data.room_owner_id == rater_id:
            logger.warning("User %s attempted to rate their own room", rater_id)
            raise SelfRatingError()
        if await self.user_repo.get_by_id(data.room_owner_id) is None:
            raise NotFoundError("Room")
        rating = await self.rating_repo.upsert(data.room_owner_id, rater_id, data.score)
        logger.info("User %s rated room %s: %d", rater_id, data.room_owner_id, data.score)
        return rating
