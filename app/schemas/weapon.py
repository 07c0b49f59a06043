"""Weapon request/response schemas - REST API contract."""

from datetime import datetime
from typing import Literal

from pydantic import Field, ValidationInfo, field_validator

from app.schemas.base import CamelModel, reject_null

WeaponType = Literal["Rifle", "Bow", "Muzzleloader", "Handgun", "Shotgun"]


class WeaponBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: WeaponType
    caliber: str | None = Field(None, max_length=255)
    make: str | None = Field(None, max_length=255)
    model: str | None = Field(None, max_length=255)
    optic: str | None = Field(None, max_length=255)
    notes: str | None = None
    image_url: str | None = Field(None, max_length=1024)


class WeaponCreate(WeaponBase):
    pass


class WeaponUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    type: WeaponType | None = None
    caliber: str | None = Field(None, max_length=255)
    make: str | None = Field(None, max_length=255)
    model: str | None = Field(None, max_length=255)
    optic: str | None = Field(None, max_length=255)
    notes: str | None = None
    image_url: str | None = Field(None, max_length=1024)

    @field_validator("name", "type")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info.field_name)


class WeaponResponse(WeaponBase):
    id: str
    user_id: str
    created_at: datetime | None = None
