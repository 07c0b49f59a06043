"""
User preferences - one row per user, written through an upsert.
"""

from sqlalchemy import JSON, Boolean, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, new_id

THEMES = ("lodge", "manor", "minimal")
UNITS = ("imperial", "metric")
VISIBILITIES = ("public", "private")


class UserPreferences(Base):
    """Theme, scoring and room visibility settings. Defaults apply to the first insert only."""

    __tablename__ = "user_preferences"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    theme: Mapped[str] = mapped_column(String(32), default="lodge", nullable=False)
    pursuit: Mapped[str | None] = mapped_column(String(255), nullable=True)
    scoring_system: Mapped[str] = mapped_column(String(64), default="SCI", nullable=False)
    units: Mapped[str] = mapped_column(String(16), default="imperial", nullable=False)
    room_visibility: Mapped[str] = mapped_column(
        String(16), default="private", nullable=False, index=True
    )
    hunting_locations: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    profile_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    is_premium: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<UserPreferences(user_id={self.user_id}, theme={self.theme})>"
