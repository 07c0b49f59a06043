"""Shared schema base - camelCase on the wire, snake_case in Python."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_null(value, field_name: str):
    """PATCH bodies may omit non-nullable columns but not set them to null."""
    if value is None:
        raise ValueError(f"{field_name} may not be null")
    return value
