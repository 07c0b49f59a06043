"""
Room rating repository - rating upsert and per-room aggregation.
Challenge: One row per (owner, rater) under concurrent requests; enforced by the
unique constraint and ON CONFLICT, not by a read-then-write.
"""

from sqlalchemy import func, select

from app.db.models.room_rating import RoomRating
from app.db.repositories.base_repository import BaseRepository


class RoomRatingRepository(BaseRepository[RoomRating]):
    def __init__(self, session):
        super().__init__(session, RoomRating)

    async def upsert(self, room_owner_id: str, rater_id: str, score: int) -> RoomRating:
        """Insert the rater's vote or overwrite their previous score in place."""
        stmt = self.insert().values(room_owner_id=room_owner_id, rater_id=rater_id, score=score)
        stmt = stmt.on_conflict_do_update(
            index_elements=[RoomRating.room_owner_id, RoomRating.rater_id],
            set_={"score": stmt.excluded.score, "updated_at": func.now()},
        ).returning(RoomRating)
        result = await self.session.scalars(stmt, execution_options={"populate_existing": True})
        return result.one()

    async def aggregate_for_owner(self, room_owner_id: str) -> tuple[float | None, int]:
        """(mean score or None, number of ratings) for one room."""
        result = await self.session.execute(
            select(func.avg(RoomRating.score), func.count(RoomRating.id)).where(
                RoomRating.room_owner_id == room_owner_id
            )
        )
        avg, count = result.one()
        return (float(avg) if avg is not None else None), count
