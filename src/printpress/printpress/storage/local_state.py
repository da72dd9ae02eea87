"""Local-first record store.

The whole data set lives in one :class:`AppState` held by a
:class:`LocalStateStore`. Every write made through a local repository is
persisted immediately to a JSON file (or kept in memory when the store has no
path, which is what tests use).
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..attendance.model import AttendanceRecord
from ..common.serializers import from_json_dict, to_json_dict
from ..company.model import CompanyInfo
from ..core.exceptions import ValidationError
from ..departments.model import Department
from ..employees.model import Employee
from ..finance.model import Advance, SalaryDeduction
from ..tasks.model import Task
from ..worklogs.model import WorkLog

logger = logging.getLogger(__name__)

# JSON key -> (AppState attribute, record class)
_COLLECTIONS = {
    "departments": ("departments", Department),
    "employees": ("employees", Employee),
    "tasks": ("tasks", Task),
    "logs": ("work_logs", WorkLog),
    "attendance": ("attendance", AttendanceRecord),
    "advances": ("advances", Advance),
    "deductions": ("deductions", SalaryDeduction),
}


@dataclass
class AppState:
    """Everything the application knows, in one explicit struct."""

    departments: List[Department] = field(default_factory=list)
    employees: List[Employee] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    work_logs: List[WorkLog] = field(default_factory=list)
    attendance: List[AttendanceRecord] = field(default_factory=list)
    advances: List[Advance] = field(default_factory=list)
    deductions: List[SalaryDeduction] = field(default_factory=list)
    company_info: CompanyInfo = field(default_factory=CompanyInfo.default)

    def to_json_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key, (attr, _) in _COLLECTIONS.items():
            data[key] = [to_json_dict(r) for r in getattr(self, attr)]
        data["company_info"] = to_json_dict(self.company_info)
        return data


def _parse_collections(data: Any) -> Dict[str, Any]:
    """Decode the collections present in ``data``.

    Only keys that are present are returned, so callers can merge a partial
    import over the current state.
    """

    if not isinstance(data, dict):
        raise ValidationError("Invalid data format")

    parsed: Dict[str, Any] = {}
    try:
        for key, (attr, record_cls) in _COLLECTIONS.items():
            if key in data:
                if not isinstance(data[key], list):
                    raise ValidationError("Invalid data format")
                parsed[attr] = [from_json_dict(record_cls, item) for item in data[key]]
        if "company_info" in data:
            parsed["company_info"] = from_json_dict(CompanyInfo, data["company_info"])
    except (TypeError, ValueError, KeyError, ArithmeticError) as e:
        raise ValidationError("Invalid data format") from e
    return parsed


class LocalStateStore:
    def __init__(self, path: Optional[str | Path] = None, *, state: Optional[AppState] = None):
        self._path = Path(path) if path else None
        self._state = state or AppState()

    @classmethod
    def open(cls, path: Optional[str | Path]) -> "LocalStateStore":
        """Load ``path`` when it exists, otherwise start empty (and create it)."""

        store = cls(path)
        if store._path and store._path.exists():
            text = store._path.read_text(encoding="utf-8")
            if text.strip():
                try:
                    store._state = AppState(**_parse_collections(json.loads(text)))
                except (ValueError, ValidationError) as e:
                    logger.error("Local data file %s is unreadable: %s", store._path, e)
                    raise ValidationError(
                        f"Local data file {store._path} is not valid printpress data; fix or remove it"
                    ) from e
            logger.info("Loaded local state from %s", store._path)
        else:
            store.save()
        return store

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def save(self) -> None:
        if not self._path:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(self._state.to_json_dict(), ensure_ascii=False, indent=2)
        # Write to a sibling temp file first so a crash never leaves half a file.
        fd, tmp_name = tempfile.mkstemp(dir=str(self._path.parent), prefix=".state-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self._path)
        except Exception:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def export_json(self) -> str:
        return json.dumps(self._state.to_json_dict(), ensure_ascii=False)

    def import_json(self, text: str) -> None:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            logger.warning("Rejected data import: %s", e)
            raise ValidationError("Invalid data format") from e

        parsed = _parse_collections(data)
        for attr, value in parsed.items():
            setattr(self._state, attr, value)
        self.save()
        logger.info("Imported local data (%s)", ", ".join(sorted(parsed)) or "nothing")

    def reset(self) -> None:
        self._state = AppState()
        self.save()
        logger.info("Local data reset")
