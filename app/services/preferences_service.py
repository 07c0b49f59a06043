"""
Preferences service - per-user settings singleton.
"""

import logging

from app.db.models.preferences import UserPreferences
from app.db.repositories.preferences_repository import PreferencesRepository
from app.schemas.preferences import PreferencesUpdate

logger = logging.getLogger(__name__)


class PreferencesService:
    def __init__(self, prefs_repo: PreferencesRepository):
        self.prefs_repo = prefs_repo

    async def get(self, user_id: str) -> UserPreferences | None:
        return await self.prefs_repo.get_for_user(user_id)

    async def save(self, user_id: str, data: PreferencesUpdate) -> UserPreferences:
        """Upsert only the fields present in the request; the rest keep their stored (or default) values."""
        changes = data.model_dump(exclude_unset=True)
        prefs = await self.prefs_repo.upsert(user_id, **changes)
        logger.info("Preferences saved for user %s (%s)", user_id, ", ".join(sorted(changes)) or "no changes")
        return prefs

    async def set_profile_image(self, user_id: str, image_url: str) -> UserPreferences:
        return await self.prefs_repo.upsert(user_id, profile_image_url=image_url)
