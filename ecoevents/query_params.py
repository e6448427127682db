"""Lenient parsing for values that arrive as raw query-string or path text."""
from typing import Annotated, Optional

from fastapi import Path
from pydantic import TypeAdapter, ValidationError

from ecoevents.config import settings
from ecoevents.exceptions import ValidationFailedError

# ids outside this range cannot exist in the database
IdPath = Annotated[int, Path(ge=1, le=settings.MAX_DB_INTEGER)]

_bool_adapter = TypeAdapter(bool)


def parse_bool_param(value: Optional[str], name: str) -> Optional[bool]:
    """Parse a boolean query parameter against pydantic's token allow-list.

    ``true/1/yes/on/t/y`` and ``false/0/no/off/f/n`` are accepted in any case.
    A missing or empty value means "no filter"; any other token is a 422.
    """
    if value is None or not value.strip():
        return None
    try:
        return _bool_adapter.validate_python(value.strip().lower())
    except ValidationError:
        raise ValidationFailedError.single(
            ["query", name],
            f"Invalid boolean value '{value}'. Use true/false, 1/0, yes/no or on/off.",
            "bool_parsing",
        )


def parse_positive_int(value: Optional[str], default: int, maximum: Optional[int] = None) -> int:
    # malformed, zero and negative values fall back to the default instead of erroring
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    if maximum is not None and number > maximum:
        return maximum
    return number


def first_given(*values: Optional[str]) -> Optional[str]:
    return next((v for v in values if v is not None), None)
