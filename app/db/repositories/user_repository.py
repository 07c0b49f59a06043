"""
User repository - identity records mirrored from the identity provider.
"""

from sqlalchemy import func

from app.db.models.user import User
from app.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with domain logic."""

    def __init__(self, session):
        super().__init__(session, User)

    async def upsert_from_claims(
        self,
        id: str,
        *,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
    ) -> User:
        """Create the user on first sight, refresh profile fields afterwards (keyed on provider id)."""
        values = {
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "profile_image_url": profile_image_url,
        }
        stmt = self.insert().values(id=id, **values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[User.id],
            set_={**{k: stmt.excluded[k] for k in values}, "updated_at": func.now()},
        ).returning(User)
        result = await self.session.scalars(stmt, execution_options={"populate_existing": True})
        return result.one()

    async def sync_from_claims(self, id: str, **claims: str | None) -> User:
        """Return the stored user, writing only when it is new or its profile claims changed."""
        user = await self.get_by_id(id)
        if user is not None and all(getattr(user, k) == v for k, v in claims.items()):
            return user
        return await self.upsert_from_claims(id, **claims)
