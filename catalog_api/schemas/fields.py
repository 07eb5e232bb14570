"""Shared Field Types — reusable annotated types and model config for request schemas.

Invariants:
    - Wire names are camelCase (courseName); Python names are snake_case
    - Only wire names validate: a snake_case key is an unknown field
    - Unknown fields are ignored, never stored
    - IsoDateString keeps the client's original string (no re-formatting)
    - JSON booleans never satisfy an integer field
    - An optional field left out defaults; an explicit null is a type violation

Design Decisions:
    - PydanticCustomError for date checks: error type and message controlled here,
      so core/validation.py formats them without string matching
"""

from datetime import date, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def _check_iso_date(value: str) -> str:
    """Accept a calendar date or a date-time, ISO-8601."""
    try:
        date.fromisoformat(value)
    except ValueError:
        try:
            datetime.fromisoformat(value)
        except ValueError:
            raise PydanticCustomError(
                "iso_date", "must be in ISO 8601 date format",
            ) from None
    return value


IsoDateString = Annotated[str, AfterValidator(_check_iso_date)]


def _refuse_bool(value):
    # bool subclasses int; JSON true/false is not a number
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    return value


def _refuse_null(value):
    if value is None:
        raise PydanticCustomError("string_type", "Input should be a valid string")
    return value


StrictNumber = BeforeValidator(_refuse_bool)
"""Integer fields: rejects booleans before lax int coercion runs."""

OmittableString = BeforeValidator(_refuse_null)
"""Optional text fields: may be left out, but an explicit null is not a string."""


class CamelModel(BaseModel):
    """Base for request payloads exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """Sanitized field set for storage — known fields only, wire names."""
        return self.model_dump(by_alias=True)
