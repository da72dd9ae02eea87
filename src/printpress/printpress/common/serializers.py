from __future__ import annotations

import dataclasses
import types
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .datetime_utils import as_naive_local

T = TypeVar("T")

_UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)


def to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_json_dict(value)
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    return value


def to_json_dict(obj: Any) -> Dict[str, Any]:
    """Dataclass -> JSON-safe dict (ISO dates, decimal strings, enum values)."""

    return {f.name: to_json_value(getattr(obj, f.name)) for f in dataclasses.fields(obj)}


def _coerce(hint: Any, value: Any) -> Any:
    if value is None:
        return None

    if get_origin(hint) in _UNION_TYPES:
        args = [a for a in get_args(hint) if a is not type(None)]
        return _coerce(args[0], value) if len(args) == 1 else value

    # datetime is a subclass of date, check it first.
    if hint is datetime:
        return as_naive_local(value if isinstance(value, datetime) else datetime.fromisoformat(value))
    if hint is date:
        if isinstance(value, datetime):
            return value.date()
        return value if isinstance(value, date) else date.fromisoformat(value[:10])
    if hint is Decimal:
        return value if isinstance(value, Decimal) else Decimal(str(value))
    if isinstance(hint, type) and issubclass(hint, Enum):
        return hint(value)
    if hint is bool:
        # JSON booleans only; "false" must not turn into True.
        if not isinstance(value, bool):
            raise ValueError(f"expected a boolean, got {value!r}")
        return value
    return value


def from_json_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """Inverse of :func:`to_json_dict`, driven by the dataclass type hints.

    Keys the dataclass does not declare are ignored; missing keys fall back
    to the field defaults.
    """

    hints = get_type_hints(cls)
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name in data:
            kwargs[f.name] = _coerce(hints[f.name], data[f.name])
    return cls(**kwargs)
