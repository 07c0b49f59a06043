"""Trophy request/response schemas - REST API contract."""

from datetime import datetime
from typing import Literal

from pydantic import Field, ValidationInfo, field_validator

from app.schemas.base import CamelModel, reject_null

TrophyMethod = Literal["Rifle", "Bow", "Muzzleloader"]


class TrophyBase(CamelModel):
    species: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    date: str = Field(..., min_length=1, max_length=64)
    location: str = Field(..., min_length=1, max_length=255)
    score: str | None = Field(None, max_length=255)
    method: TrophyMethod
    weapon_id: str | None = None
    notes: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    featured: bool = False


class TrophyCreate(TrophyBase):
    pass


class TrophyUpdate(CamelModel):
    species: str | None = Field(None, min_length=1, max_length=255)
    name: str | None = Field(None, min_length=1, max_length=255)
    date: str | None = Field(None, min_length=1, max_length=64)
    location: str | None = Field(None, min_length=1, max_length=255)
    score: str | None = Field(None, max_length=255)
    method: TrophyMethod | None = None
    weapon_id: str | None = None
    notes: str | None = None
    image_url: str | None = Field(None, max_length=1024)
    featured: bool | None = None

    @field_validator("species", "name", "date", "location", "method", "featured")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class TrophyResponse(TrophyBase):
    id: str
    user_id: str
    created_at: datetime | None = None
