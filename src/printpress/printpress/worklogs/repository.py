from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import LogStatus
from .model import WorkLog, WorkLogPatch


class WorkLogRepository(Protocol):
    def get_by_id(self, log_id: str) -> Optional[WorkLog]:
        raise NotImplementedError

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        task_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[WorkLog]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        start_time: datetime,
        end_time: Optional[datetime],
        description: str,
        task_id: Optional[str],
        status: LogStatus,
        hours_worked: Decimal,
    ) -> str:
        raise NotImplementedError

    def update(self, log_id: str, patch: WorkLogPatch) -> bool:
        raise NotImplementedError

    def delete(self, log_id: str) -> bool:
        raise NotImplementedError
