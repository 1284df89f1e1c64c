from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Type, TypeVar

from ..core.exceptions import MissingFieldError, ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)


def require_present(value: Any) -> str:
    """Return the string unchanged, or raise MissingFieldError for absent/empty input."""
    if not isinstance(value, str) or value == "":
        raise MissingFieldError()
    return value


def require_choice(value: str, enum_cls: Type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None


def require_iso_date(value: str, field_name: str) -> date:
    try:
        parsed = parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date") from None
    # strptime accepts single-digit month/day; the wire format does not.
    if parsed.isoformat() != value:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return parsed
