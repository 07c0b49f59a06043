"""Preferences request/response schemas. PUT bodies are partial: only sent fields are written."""

from typing import Literal

from pydantic import Field, ValidationInfo, field_validator

from app.schemas.base import CamelModel, reject_null

Theme = Literal["lodge", "manor", "minimal"]
Units = Literal["imperial", "metric"]
RoomVisibility = Literal["public", "private"]


class PreferencesUpdate(CamelModel):
    theme: Theme | None = None
    pursuit: str | None = Field(None, max_length=255)
    scoring_system: str | None = Field(None, min_length=1, max_length=64)
    units: Units | None = None
    room_visibility: RoomVisibility | None = None
    hunting_locations: list[str] | None = None
    profile_image_url: str | None = Field(None, max_length=1024)

    @field_validator("theme", "scoring_system", "units", "room_visibility", "hunting_locations")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class PreferencesResponse(CamelModel):
    id: str
    user_id: str
    theme: Theme
    pursuit: str | None = None
    scoring_system: str
    units: Units
    room_visibility: RoomVisibility
    hunting_locations: list[str] = []
    profile_image_url: str | None = None
    is_premium: bool = False


class UploadImageResponse(CamelModel):
    image_url: str
    preferences: PreferencesResponse
