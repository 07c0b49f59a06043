"""
Preferences repository - one row per user, merged through INSERT ... ON CONFLICT.
"""

from typing import Any

from sqlalchemy import select

from app.db.models.preferences import UserPreferences
from app.db.repositories.base_repository import BaseRepository


class PreferencesRepository(BaseRepository[UserPreferences]):
    """Preferences singleton per user. Column defaults only apply when the row is first created."""

    def __init__(self, session):
        super().__init__(session, UserPreferences)

    async def get_for_user(self, user_id: str) -> UserPreferences | None:
        result = await self.session.execute(
            select(UserPreferences).where(UserPreferences.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def upsert(self, user_id: str, **changes: Any) -> UserPreferences:
        """Insert with defaults for omitted fields, or merge only the given fields into the existing row."""
        changes.pop("id", None)
        changes.pop("user_id", None)
        stmt = self.insert().values(user_id=user_id, **changes)
        # Empty body still needs a DO UPDATE target so RETURNING yields the row
        set_ = {k: stmt.excluded[k] for k in changes} or {"user_id": stmt.excluded.user_id}
        stmt = stmt.on_conflict_do_update(
            index_elements=[UserPreferences.user_id], set_=set_
        ).returning(UserPreferences)
        result = await self.session.scalars(stmt, execution_options={"populate_existing": True})
        return result.one()
