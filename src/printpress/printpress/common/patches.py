from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, ClassVar, Dict, Mapping, TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Patch:
    """Partial update of one entity.

    Subclasses list exactly the mutable fields (all defaulting to ``UNSET``)
    and map each to a converter that turns raw payload values into domain
    values. Anything not declared is rejected, so identifiers and derived
    fields cannot be overwritten through an update.
    """

    converters: ClassVar[Mapping[str, Callable[[Any], Any]]] = {}

    @classmethod
    def from_payload(cls, data: Any):
        if not isinstance(data, Mapping):
            raise ValidationError("Update payload must be an object")

        allowed = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - allowed)
        if unknown:
            raise ValidationError(f"Unknown or read-only field(s): {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for name, raw in data.items():
            convert = cls.converters.get(name)
            values[name] = convert(raw) if convert else raw
        return cls(**values)

    def changes(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def is_empty(self) -> bool:
        return not self.changes()

    def apply(self, record: T) -> T:
        return replace(record, **self.changes())
