"""Initial schema: users, weapons, trophies, user_preferences, room_ratings

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("profile_image_url", sa.String(1024), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "weapons",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("caliber", sa.String(255), nullable=True),
        sa.Column("make", sa.String(255), nullable=True),
        sa.Column("model", sa.String(255), nullable=True),
        sa.Column("optic", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_weapons_user_id", "weapons", ["user_id"], unique=False)

    op.create_table(
        "trophies",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("species", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("date", sa.String(64), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("score", sa.String(255), nullable=True),
        sa.Column("method", sa.String(32), nullable=False),
        sa.Column("weapon_id", sa.String(36), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["weapon_id"], ["weapons.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_trophies_user_id", "trophies", ["user_id"], unique=False)

    op.create_table(
        "user_preferences",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("theme", sa.String(32), nullable=False, server_default="lodge"),
        sa.Column("pursuit", sa.String(255), nullable=True),
        sa.Column("scoring_system", sa.String(64), nullable=False, server_default="SCI"),
        sa.Column("units", sa.String(16), nullable=False, server_default="imperial"),
        sa.Column("room_visibility", sa.String(16), nullable=False, server_default="private"),
        sa.Column("hunting_locations", sa.JSON(), nullable=False),
        sa.Column("profile_image_url", sa.String(1024), nullable=True),
        sa.Column("is_premium", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index("ix_user_preferences_room_visibility", "user_preferences", ["room_visibility"], unique=False)

    op.create_table(
        "room_ratings",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("room_owner_id", sa.String(255), nullable=False),
        sa.Column("rater_id", sa.String(255), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("score BETWEEN 1 AND 5", name="ck_room_ratings_score"),
        sa.ForeignKeyConstraint(["room_owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["rater_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("room_owner_id", "rater_id", name="uq_room_ratings_owner_rater"),
    )
    op.create_index("ix_room_ratings_room_owner_id", "room_ratings", ["room_owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_room_ratings_room_owner_id", "room_ratings")
    op.drop_table("room_ratings")
    op.drop_index("ix_user_preferences_room_visibility", "user_preferences")
    op.drop_table("user_preferences")
    op.drop_index("ix_trophies_user_id", "trophies")
    op.drop_table("trophies")
    op.drop_index("ix_weapons_user_id", "weapons")
    op.drop_table("weapons")
    op.drop_index("ix_users_email", "users")
    op.drop_table("users")
