from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..common.ids import new_id
from ..core.enums import LogStatus
from ..storage.local_base import LocalRepositoryBase
from .model import WorkLog, WorkLogPatch
from .repository import WorkLogRepository


class LocalWorkLogRepository(LocalRepositoryBase[WorkLog], WorkLogRepository):
    collection = "work_logs"
    key = "log_id"

    def get_by_id(self, log_id: str) -> Optional[WorkLog]:
        return self._find(log_id)

    def list_all(
        self,
        *,
        employee_id: Optional[str] = None,
        task_id: Optional[str] = None,
        work_date: Optional[date] = None,
    ) -> Sequence[WorkLog]:
        items = self._filter(
            lambda log: employee_id is None or log.employee_id == employee_id,
            lambda log: task_id is None or log.task_id == task_id,
            lambda log: work_date is None or log.work_date == work_date,
        )
        return sorted(items, key=lambda log: log.start_time, reverse=True)

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
        return self._insert(
            WorkLog(
                log_id=new_id(),
                employee_id=employee_id,
                work_date=work_date,
                start_time=start_time,
                end_time=end_time,
                description=description,
                task_id=task_id,
                status=status,
                hours_worked=hours_worked,
            )
        )

    def update(self, log_id: str, patch: WorkLogPatch) -> bool:
        return self._patch(log_id, patch)

    def delete(self, log_id: str) -> bool:
        return self._remove(log_id)
