from datetime import date, datetime, timedelta
from decimal import Decimal

from src.printpress.printpress.core.enums import TaskPriority


def test_dashboard_summary(container, add_employee, fixed_now):
    today = fixed_now.date()
    ada = add_employee("Ada")
    bob = add_employee("Bob")
    gone = add_employee("Gone")
    container.employee_service.deactivate(gone)

    container.worklog_service.start_work(ada, now=fixed_now)
    finished = container.worklog_service.start_work(bob, now=fixed_now - timedelta(hours=3))
    container.worklog_service.finish_work(finished, now=fixed_now - timedelta(hours=1))

    task_id = container.task_service.assign(
        employee_id=ada,
        title="Business cards",
        description="",
        due_date=date(2024, 3, 20),
        priority=TaskPriority.MEDIUM,
        assigned_date=date(2024, 3, 10),
    )
    container.task_service.assign(
        employee_id=bob,
        title="Posters",
        description="",
        due_date=date(2024, 3, 18),
        priority=TaskPriority.LOW,
        assigned_date=date(2024, 3, 11),
    )
    container.task_service.mark_completed(task_id)

    summary = container.dashboard_service.summary(today=today)

    assert summary.total_employees == 2
    assert summary.active_today == 1
    assert summary.total_hours_today == Decimal("2.00")
    assert summary.tasks_completed == 1
    assert summary.tasks_pending == 1
    assert [t.title for t in summary.upcoming_tasks] == ["Posters"]
    assert summary.recent_activity[0].kind == "log"
    assert summary.recent_activity[0].timestamp == fixed_now


def test_recent_activity_is_capped_at_five(container, add_employee):
    employee_id = add_employee()
    for day in range(1, 9):
        container.finance_service.record_advance(
            employee_id=employee_id, amount=Decimal("10"), advance_date=date(2024, 3, day)
        )

    activity = container.dashboard_service.summary(today=date(2024, 3, 15)).recent_activity

    assert len(activity) == 5
    assert activity[0].timestamp == datetime(2024, 3, 8)
    assert activity[0].message == "Advance of 10 given to Ada"
