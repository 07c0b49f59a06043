"""
Preferences endpoints - read and upsert the caller's settings, profile image upload.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from app.core.dependencies import CurrentUserId
from app.db.repositories.preferences_repository import PreferencesRepository
from app.db.session import DbSession
from app.schemas.preferences import PreferencesResponse, PreferencesUpdate, UploadImageResponse
from app.services.file_service import FileService, get_file_service
from app.services.preferences_service import PreferencesService

router = APIRouter()


def _get_preferences_service(session: DbSession) -> PreferencesService:
    return PreferencesService(PreferencesRepository(session))


@router.get("/preferences", response_model=PreferencesResponse | None)
async def get_preferences(session: DbSession, user_id: CurrentUserId):
    """Caller's preferences, or null before the first save."""
    return await _get_preferences_service(session).get(user_id)


@router.put("/preferences", response_model=PreferencesResponse)
async def save_preferences(session: DbSession, data: PreferencesUpdate, user_id: CurrentUserId):
    """Upsert. Fields missing from the body keep their current values."""
    return await _get_preferences_service(session).save(user_id, data)


@router.post("/profile/upload-image", response_model=UploadImageResponse)
async def upload_profile_image(
    session: DbSession,
    user_id: CurrentUserId,
    file_service: Annotated[FileService, Depends(get_file_service)],
    image: UploadFile | None = File(None),
):
    """Store a profile image (JPEG/PNG/WebP/GIF, size-limited) and point preferences at it."""
    image_url = await file_service.save_profile_image(image)
    prefs = await _get_preferences_service(session).set_profile_image(user_id, image_url)
    return UploadImageResponse(image_url=image_url, preferences=PreferencesResponse.model_validate(prefs))
