from datetime import date, datetime

import pytest

from src.printpress.printpress.core.enums import TaskPriority, TaskStatus
from src.printpress.printpress.core.exceptions import NotFoundError, ValidationError
from src.printpress.printpress.tasks.model import TaskPatch


def _assign(container, employee_id, title="Print flyers", due=date(2024, 3, 20), assigned=date(2024, 3, 1)):
    return container.task_service.assign(
        employee_id=employee_id,
        title=title,
        description="",
        due_date=due,
        priority=TaskPriority.HIGH,
        assigned_date=assigned,
    )


def test_assign_and_complete_task(container, add_employee):
    employee_id = add_employee()
    task_id = _assign(container, employee_id)

    assert container.task_service.get(task_id).status == TaskStatus.PENDING
    assert container.task_service.mark_completed(task_id).status == TaskStatus.COMPLETED


def test_assign_requires_active_employee_and_sane_due_date(container, add_employee):
    employee_id = add_employee()
    with pytest.raises(ValidationError):
        _assign(container, "missing")
    with pytest.raises(ValidationError):
        _assign(container, employee_id, due=date(2024, 2, 1), assigned=date(2024, 3, 1))


def test_upcoming_orders_open_tasks_by_due_date(container, add_employee):
    employee_id = add_employee()
    late = _assign(container, employee_id, "Late", due=date(2024, 4, 1))
    soon = _assign(container, employee_id, "Soon", due=date(2024, 3, 5))
    done = _assign(container, employee_id, "Done", due=date(2024, 3, 2))
    container.task_service.mark_completed(done)

    assert [t.task_id for t in container.task_service.upcoming()] == [soon, late]


def test_update_rejects_unknown_fields(container, add_employee):
    task_id = _assign(container, add_employee())

    with pytest.raises(ValidationError, match="task_id"):
        TaskPatch.from_payload({"task_id": "other"})
    assert container.task_service.update(task_id, TaskPatch.from_payload({"priority": "Low"})).priority == TaskPriority.LOW


def test_delete_refused_while_work_logs_reference_task(container, add_employee):
    employee_id = add_employee()
    task_id = _assign(container, employee_id)
    log_id = container.worklog_service.start_work(employee_id, task_id=task_id, now=datetime(2024, 3, 2, 8, 0))

    with pytest.raises(ValidationError):
        container.task_service.delete(task_id)

    container.worklog_service.delete(log_id)
    container.task_service.delete(task_id)
    with pytest.raises(NotFoundError):
        container.task_service.get(task_id)
