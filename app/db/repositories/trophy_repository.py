"""
Trophy repository - trophies of one room, always filtered by owner.
"""

from app.db.models.trophy import Trophy
from app.db.repositories.base_repository import OwnedRepository


class TrophyRepository(OwnedRepository[Trophy]):
    def __init__(self, session):
        super().__init__(session, Trophy)
