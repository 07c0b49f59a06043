"""
Weapon repository - the user's safe, always filtered by owner.
"""

from app.db.models.weapon import Weapon
from app.db.repositories.base_repository import OwnedRepository


class WeaponRepository(OwnedRepository[Weapon]):
    def __init__(self, session):
        super().__init__(session, Weapon)
