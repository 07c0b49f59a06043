"""User response schemas. Identity is managed by the provider; there is no create schema."""

from datetime import datetime

from app.schemas.base import CamelModel


class PublicUser(CamelModel):
    id: str
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class UserResponse(PublicUser):
    email: str | None = None
    created_at: datetime | None = None
