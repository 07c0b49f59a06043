# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from app.db.repositories.community_repository import CommunityRepository
from app.db.repositories.preferences_repository import PreferencesRepository
from app.db.repositories.room_rating_repository import RoomRatingRepository
from app.db.repositories.trophy_repository import TrophyRepository
from app.db.repositories.user_repository import UserRepository
from app.db.repositories.weapon_repository import WeaponRepository

__all__ = [
    "CommunityRepository",
    "PreferencesRepository",
    "RoomRatingRepository",
    "TrophyRepository",
    "UserRepository",
    "WeaponRepository",
]
