"""
Stats service - dashboard summary of one user's room.
"""

from app.db.repositories.room_rating_repository import RoomRatingRepository
from app.db.repositories.trophy_repository import TrophyRepository
from app.schemas.community import StatsResponse
from app.services.rating import has_text, room_rating


class StatsService:
    def __init__(self, trophy_repo: TrophyRepository, rating_repo: RoomRatingRepository):
        self.trophy_repo = trophy_repo
        self.rating_repo = rating_repo

    async def summary(self, user_id: str) -> StatsResponse:
        """Hunts, qualifying (scored) trophies, species and the visible room rating."""
        trophies = await self.trophy_repo.list_for_owner(user_id)  # newest first
        avg, count = await self.rating_repo.aggregate_for_owner(user_id)
        rating = room_rating(avg, count, trophies)
        return StatsResponse(
            total_hunts=len(trophies),
            total_trophies=sum(1 for t in trophies if has_text(t.score)),
            species_collected=len({t.species for t in trophies}),
            recent_species=trophies[0].species if trophies else None,
            room_rating=rating.value,
            room_rating_source=rating.source,
            room_rating_count=count,
        )
