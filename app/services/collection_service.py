"""
Collection service - weapons (the safe) and trophies (the room) of one owner.
Challenge: Every read and write is scoped to the caller; other users' rows look missing.
Design: Returns None for missing/not-owned rows; the route layer turns that into 404.
"""

import logging

from app.core.exceptions import ValidationError
from app.db.models.trophy import Trophy
from app.db.models.weapon import Weapon
from app.db.repositories.trophy_repository import TrophyRepository
from app.db.repositories.weapon_repository import WeaponRepository
from app.schemas.trophy import TrophyCreate, TrophyUpdate
from app.schemas.weapon import WeaponCreate, WeaponUpdate

logger = logging.getLogger(__name__)


class CollectionService:
    """Weapon and trophy use cases for the authenticated owner."""

    def __init__(self, weapon_repo: WeaponRepository, trophy_repo: TrophyRepository):
        self.weapon_repo = weapon_repo
        self.trophy_repo = trophy_repo

    # Weapons

    async def list_weapons(self, user_id: str) -> list[Weapon]:
        return await self.weapon_repo.list_for_owner(user_id)

    async def get_weapon(self, id: str, user_id: str) -> Weapon | None:
        return await self.weapon_repo.get_for_owner(id, user_id)

    async def create_weapon(self, user_id: str, data: WeaponCreate) -> Weapon:
        weapon = await self.weapon_repo.create_for_owner(user_id, **data.model_dump())
        logger.info("Weapon %s created for user %s", weapon.id, user_id)
        return weapon

    async def update_weapon(self, id: str, user_id: str, data: WeaponUpdate) -> Weapon | None:
        return await self.weapon_repo.update_for_owner(id, user_id, **data.model_dump(exclude_unset=True))

    async def delete_weapon(self, id: str, user_id: str) -> bool:
        deleted = await self.weapon_repo.delete_for_owner(id, user_id)
        if deleted:
            logger.info("Weapon %s deleted for user %s", id, user_id)
        return deleted

    # Trophies

    async def list_trophies(self, user_id: str) -> list[Trophy]:
        return await self.trophy_repo.list_for_owner(user_id)

    async def get_trophy(self, id: str, user_id: str) -> Trophy | None:
        return await self.trophy_repo.get_for_owner(id, user_id)

    async def create_trophy(self, user_id: str, data: TrophyCreate) -> Trophy:
        await self._check_weapon_link(data.weapon_id, user_id)
        trophy = await self.trophy_repo.create_for_owner(user_id, **data.model_dump())
        logger.info("Trophy %s created for user %s", trophy.id, user_id)
        return trophy

    async def update_trophy(self, id: str, user_id: str, data: TrophyUpdate) -> Trophy | None:
        changes = data.model_dump(exclude_unset=True)
        if "weapon_id" in changes:
            if await self.trophy_repo.get_for_owner(id, user_id) is None:
                return None
            await self._check_weapon_link(changes["weapon_id"], user_id)
        return await self.trophy_repo.update_for_owner(id, user_id, **changes)

    async def delete_trophy(self, id: str, user_id: str) -> bool:
        deleted = await self.trophy_repo.delete_for_owner(id, user_id)
        if deleted:
            logger.info("Trophy %s deleted for user %s", id, user_id)
        return deleted

    async def _check_weapon_link(self, weapon_id: str | None, user_id: str) -> None:
        """A trophy may only reference a weapon from the same safe."""
        if weapon_id is None:
            return
        if await self.weapon_repo.get_for_owner(weapon_id, user_id) is None:
            raise ValidationError("Linked weapon not found", context={"field": "weaponId"})
