"""
Trophy CRUD endpoints - the user's room (GET/POST/PATCH/DELETE).
"""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import CurrentUserId
from app.db.repositories.trophy_repository import TrophyRepository
from app.db.repositories.weapon_repository import WeaponRepository
from app.db.session import DbSession
from app.schemas.trophy import TrophyCreate, TrophyResponse, TrophyUpdate
from app.services.collection_service import CollectionService

router = APIRouter()

NOT_FOUND = "Trophy not found"


def _get_collection_service(session: DbSession) -> CollectionService:
    return CollectionService(WeaponRepository(session), TrophyRepository(session))


@router.get("", response_model=list[TrophyResponse])
async def list_trophies(session: DbSession, user_id: CurrentUserId):
    """Caller's trophies, newest first."""
    return await _get_collection_service(session).list_trophies(user_id)


@router.get("/{trophy_id}", response_model=TrophyResponse)
async def get_trophy(session: DbSession, trophy_id: str, user_id: CurrentUserId):
    trophy = await _get_collection_service(session).get_trophy(trophy_id, user_id)
    if not trophy:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return trophy


@router.post("", response_model=TrophyResponse, status_code=status.HTTP_201_CREATED)
async def create_trophy(session: DbSession, data: TrophyCreate, user_id: CurrentUserId):
    """Create trophy. A linked weapon must belong to the caller (400 otherwise)."""
    return await _get_collection_service(session).create_trophy(user_id, data)


@router.patch("/{trophy_id}", response_model=TrophyResponse)
async def update_trophy(session: DbSession, trophy_id: str, data: TrophyUpdate, user_id: CurrentUserId):
    trophy = await _get_collection_service(session).update_trophy(trophy_id, user_id, data)
    if not trophy:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return trophy


@router.delete("/{trophy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trophy(session: DbSession, trophy_id: str, user_id: CurrentUserId):
    ok = await _get_collection_service(session).delete_trophy(trophy_id, user_id)
    if not ok:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
