"""
Weapon CRUD endpoints - the user's safe (GET/POST/PATCH/DELETE).
Design: Thin controller; rows of other users are reported as 404, same as missing ones.
"""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import CurrentUserId
from app.db.repositories.trophy_repository import TrophyRepository
from app.db.repositories.weapon_repository import WeaponRepository
from app.db.session import DbSession
from app.schemas.weapon import WeaponCreate, WeaponResponse, WeaponUpdate
from app.services.collection_service import CollectionService

router = APIRouter()

NOT_FOUND = "Weapon not found"


def _get_collection_service(session: DbSession) -> CollectionService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return CollectionService(WeaponRepository(session), TrophyRepository(session))


@router.get("", response_model=list[WeaponResponse])
async def list_weapons(session: DbSession, user_id: CurrentUserId):
    return await _get_collection_service(session).list_weapons(user_id)


@router.get("/{weapon_id}", response_model=WeaponResponse)
async def get_weapon(session: DbSession, weapon_id: str, user_id: CurrentUserId):
    weapon = await _get_collection_service(session).get_weapon(weapon_id, user_id)
    if not weapon:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return weapon


@router.post("", response_model=WeaponResponse, status_code=status.HTTP_201_CREATED)
async def create_weapon(session: DbSession, data: WeaponCreate, user_id: CurrentUserId):
    """Create weapon. Id and owner are assigned server-side."""
    return await _get_collection_service(session).create_weapon(user_id, data)


@router.patch("/{weapon_id}", response_model=WeaponResponse)
async def update_weapon(session: DbSession, weapon_id: str, data: WeaponUpdate, user_id: CurrentUserId):
    """Partial update: only fields present in the body change."""
    weapon = await _get_collection_service(session).update_weapon(weapon_id, user_id, data)
    if not weapon:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return weapon


@router.delete("/{weapon_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_weapon(session: DbSession, weapon_id: str, user_id: CurrentUserId):
    ok = await _get_collection_service(session).delete_weapon(weapon_id, user_id)
    if not ok:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
