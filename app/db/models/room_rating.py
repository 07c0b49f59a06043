"""
Room rating - one 1-5 score per (room owner, rater) pair.
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, Integer, String, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, new_id


class RoomRating(Base):
    """Community vote on another user's room. Re-rating updates the existing row."""

    __tablename__ = "room_ratings"
    __table_args__ = (
        UniqueConstraint("room_owner_id", "rater_id", name="uq_room_ratings_owner_rater"),
        CheckConstraint("score BETWEEN 1 AND 5", name="ck_room_ratings_score"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    room_owner_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rater_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<RoomRating(owner={self.room_owner_id}, rater={self.rater_id}, score={self.score})>"
