"""
Community repository - read-only views over public rooms.
Challenge: Avoid N+1 when listing rooms; ratings and trophy counts come from one aggregated query.
"""

from dataclasses import dataclass

from sqlalchemy import func, select

from app.db.models.preferences import UserPreferences
from app.db.models.room_rating import RoomRating
from app.db.models.trophy import Trophy
from app.db.models.user import User
from app.db.repositories.base_repository import BaseRepository

PUBLIC = "public"


@dataclass
class PublicRoomRow:
    user: User
    preferences: UserPreferences
    avg_score: float | None
    total_ratings: int
    trophy_count: int


class CommunityRepository(BaseRepository[UserPreferences]):
    """Queries joining users, preferences, ratings and trophies. Only public rooms are visible."""

    def __init__(self, session):
        super().__init__(session, UserPreferences)

    async def list_public_rooms(self) -> list[PublicRoomRow]:
        ratings = (
            select(
                RoomRating.room_owner_id.label("owner_id"),
                func.avg(RoomRating.score).label("avg_score"),
                func.count(RoomRating.id).label("total_ratings"),
            )
            .group_by(RoomRating.room_owner_id)
            .subquery()
        )
        trophies = (
            select(Trophy.user_id.label("owner_id"), func.count(Trophy.id).label("trophy_count"))
            .group_by(Trophy.user_id)
            .subquery()
        )
        stmt = (
            select(
                User,
                UserPreferences,
                ratings.c.avg_score,
                ratings.c.total_ratings,
                trophies.c.trophy_count,
            )
            .join(UserPreferences, UserPreferences.user_id == User.id)
            .outerjoin(ratings, ratings.c.owner_id == User.id)
            .outerjoin(trophies, trophies.c.owner_id == User.id)
            .where(UserPreferences.room_visibility == PUBLIC)
            .order_by(User.id)
        )
        result = await self.session.execute(stmt)
        return [
            PublicRoomRow(
                user=user,
                preferences=prefs,
                avg_score=float(avg) if avg is not None else None,
                total_ratings=total or 0,
                trophy_count=count or 0,
            )
            for user, prefs, avg, total, count in result.all()
        ]

    async def get_public_room(self, user_id: str) -> tuple[User, UserPreferences] | None:
        """User and preferences when the room exists and is public; None otherwise."""
        result = await self.session.execute(
            select(User, UserPreferences)
            .join(UserPreferences, UserPreferences.user_id == User.id)
            .where(User.id == user_id, UserPreferences.room_visibility == PUBLIC)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return row[0], row[1]
