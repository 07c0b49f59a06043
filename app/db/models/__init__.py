from app.db.models.user import User
from app.db.models.weapon import Weapon
from app.db.models.trophy import Trophy
from app.db.models.preferences import UserPreferences
from app.db.models.room_rating import RoomRating

__all__ = ["User", "Weapon", "Trophy", "UserPreferences", "RoomRating"]
