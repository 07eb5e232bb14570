"""Schema Validator — checks a payload against a resource schema, first violation only.

Invariants:
    - Pure: no IO, no logging, no database access
    - Exactly one message per failed payload (the first violated field, in schema order)
    - Messages name the field in double quotes: '"credits" must be less than or equal to 6'

Design Decisions:
    - Pydantic does the checking, this module only phrases the result
      (ADR: one source of truth for constraints, the schema classes)
    - Unknown error types fall back to pydantic's own msg rather than failing
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from catalog_api.core.errors import PayloadValidationError

M = TypeVar("M", bound=BaseModel)

_PHRASES = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_long": "length must be less than or equal to {max_length} characters long",
    "int_type": "must be a number",
    "int_parsing": "must be a number",
    "int_from_float": "must be an integer",
    "greater_than_equal": "must be greater than or equal to {ge}",
    "less_than_equal": "must be less than or equal to {le}",
    "list_type": "must be an array",
    "model_type": "must be of type object",
    "model_attributes_type": "must be of type object",
    "dict_type": "must be of type object",
}


def field_label(loc: tuple) -> str:
    """('prerequisites', 1) -> 'prerequisites[1]'; () -> 'value'."""
    label = ""
    for part in loc:
        if isinstance(part, int):
            label += f"[{part}]"
        else:
            label = f"{label}.{part}" if label else str(part)
    return label or "value"


def format_error(error: dict[str, Any]) -> str:
    """Phrase a single pydantic error dict."""
    label = field_label(tuple(error.get("loc", ())))
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "string_too_short":
        min_length = ctx.get("min_length", 1)
        if min_length <= 1:
            phrase = "is not allowed to be empty"
        else:
            phrase = f"length must be at least {min_length} characters long"
    elif error_type in _PHRASES:
        phrase = _PHRASES[error_type].format(**ctx)
    else:
        phrase = str(error.get("msg", "is invalid")).removeprefix("Value error, ")
    return f'"{label}" {phrase}'


def first_violation(schema: type[BaseModel], payload: Any) -> str | None:
    """Return the first violation message, or None when payload is valid."""
    try:
        schema.model_validate(payload)
    except ValidationError as exc:
        return format_error(exc.errors()[0])
    return None


def validate_payload(schema: type[M], payload: Any) -> M:
    """Validate and return the parsed model. Raises PayloadValidationError."""
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        error = exc.errors()[0]
        raise PayloadValidationError(
            format_error(error),
            field=field_label(tuple(error.get("loc", ()))),
        ) from None
