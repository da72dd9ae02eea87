from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import as_naive_local

E = TypeVar("E", bound=Enum)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_amount(value: Decimal, field_name: str) -> Decimal:
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return value


def require_non_negative(value: Decimal, field_name: str) -> Decimal:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return value


def require_month_index(value: Any) -> int:
    try:
        month = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Month must be a number between 0 and 11")
    if not 0 <= month <= 11:
        raise ValidationError("Month must be a number between 0 and 11")
    return month


def require_year(value: Any) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Year must be a number")
    if year < 1:
        raise ValidationError("Year must be a number")
    return year


def parse_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool) or str(value).strip() == "":
        raise ValidationError(f"{field_name} is required")
    try:
        # str() first so floats keep their printed value (0.1 -> Decimal('0.1'))
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} is not a valid number")
    if not parsed.is_finite():
        raise ValidationError(f"{field_name} is not a valid number")
    return parsed


def parse_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = (value or "").strip() if isinstance(value, str) else ""
    if not raw:
        raise ValidationError(f"{field_name} is required")
    try:
        return datetime.fromisoformat(raw).date() if "T" in raw else date.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date (YYYY-MM-DD)")


def parse_datetime(value: Any, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return as_naive_local(value)
    raw = (value or "").strip() if isinstance(value, str) else ""
    if not raw:
        raise ValidationError(f"{field_name} is required")
    try:
        return as_naive_local(datetime.fromisoformat(raw))
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date/time (ISO 8601)")


def parse_optional_datetime(value: Any, field_name: str) -> Optional[datetime]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_datetime(value, field_name)


def parse_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(m.value) for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def parse_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"1", "true", "yes"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"0", "false", "no"}:
        return False
    if isinstance(value, int):
        return bool(value)
    raise ValidationError(f"{field_name} must be true or false")


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
