"""Community, rating and stats schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.preferences import PreferencesResponse
from app.schemas.trophy import TrophyResponse
from app.schemas.user import PublicUser


class RateRoomRequest(CamelModel):
    room_owner_id: str = Field(..., min_length=1)
    score: int = Field(..., ge=1, le=5)


class RoomRatingResponse(CamelModel):
    id: str
    room_owner_id: str
    rater_id: str
    score: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RatingSummary(CamelModel):
    avg_score: float
    total_ratings: int


class PublicRoom(CamelModel):
    user_id: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    theme: str | None = None
    avg_score: float
    total_ratings: int
    trophy_count: int


class PublicRoomDetail(CamelModel):
    user: PublicUser
    preferences: PreferencesResponse
    trophies: list[TrophyResponse]
    rating: RatingSummary


class StatsResponse(CamelModel):
    total_hunts: int
    total_trophies: int
    species_collected: int
    recent_species: str | None = None
    room_rating: float | None = None
    room_rating_source: Literal["community", "auto"] | None = None
    room_rating_count: int
