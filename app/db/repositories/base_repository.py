"""
Base repositories - generic CRUD interface (SOLID: Interface Segregation, Dependency Inversion).
Challenge: Consistent data access, tenant isolation, query optimization in one place.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: str) -> ModelType | None:
        """Fetch single entity by primary key. Used for detail endpoints."""
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller commits session."""
        self.session.add(entity)
        await self.session.flush()  # Get ID without committing
        await self.session.refresh(entity)
        return entity

    def insert(self):
        """Dialect-specific INSERT supporting ON CONFLICT (PostgreSQL in prod, SQLite in tests)."""
        dialect = self.session.get_bind().dialect.name
        if dialect == "sqlite":
            return sqlite.insert(self.model)
        return postgresql.insert(self.model)


class OwnedRepository(BaseRepository[ModelType]):
    """
    Repository scoped by owning user id. Every query filters on user_id, so a row
    owned by someone else is indistinguishable from a missing one.
    """

    async def list_for_owner(self, user_id: str) -> list[ModelType]:
        """All rows of one owner, newest first."""
        result = await self.session.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at.desc(), self.model.id)
        )
        return list(result.scalars().all())

    async def get_for_owner(self, id: str, user_id: str) -> ModelType | None:
        result = await self.session.execute(
            select(self.model).where(self.model.id == id, self.model.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create_for_owner(self, user_id: str, **fields: Any) -> ModelType:
        """Id and owner are assigned here; callers cannot set them."""
        fields.pop("id", None)
        fields.pop("user_id", None)
        return await self.add(self.model(user_id=user_id, **fields))

    async def update_for_owner(self, id: str, user_id: str, **changes: Any) -> ModelType | None:
        """Partial update. Returns None when the row is missing or not owned."""
        entity = await self.get_for_owner(id, user_id)
        if entity is None:
            return None
        changes.pop("id", None)
        changes.pop("user_id", None)
        for field, value in changes.items():
            setattr(entity, field, value)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete_for_owner(self, id: str, user_id: str) -> bool:
        """Delete in one statement. True when a row was removed."""
        result = await self.session.execute(
            delete(self.model).where(self.model.id == id, self.model.user_id == user_id)
        )
        if result.rowcount:
            # ON DELETE rules may have changed rows already loaded in this session
            self.session.expire_all()
        return result.rowcount > 0

