from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.patches import UNSET, Patch
from ..common.validators import optional_text, require_non_empty


@dataclass(frozen=True)
class Department:
    department_id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class DepartmentPatch(Patch):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET

    converters = {
        "name": lambda v: require_non_empty(v, "Department name"),
        "description": lambda v: optional_text(v) or "",
    }
