"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions and migrations.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


def new_id() -> str:
    """Server-side primary key for collection entities (UUID4 string)."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Insert-time timestamp with microseconds, so rows created in the same second still sort by age."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all ORM models. Enables Alembic migrations."""

    pass
