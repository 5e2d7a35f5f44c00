from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def optional_amount(value: Any, field_name: str) -> Optional[Decimal]:
    """Numeric money column; NULL/blank stay ``None`` and are defaulted later."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError(f"{field_name} is not a number: {value!r}") from exc


def require_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise ValidationError(f"{field_name} has unexpected value {value!r}") from exc


def require_date(value: Any, field_name: str) -> date:
    """DATE columns come back as ``date``; text columns as YYYY-MM-DD."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value[:10], "%Y-%m-%d").date()
        except ValueError as exc:
            raise ValidationError(f"{field_name} is not a YYYY-MM-DD date: {value!r}") from exc
    raise ValidationError(f"{field_name} is missing")
