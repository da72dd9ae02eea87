from datetime import date, datetime
from decimal import Decimal

from src.printpress.printpress.container import build_container
from src.printpress.printpress.core.enums import SalaryType


def test_compute_net_balance_matches_worked_example(container, add_employee):
    employee_id = add_employee(rate="3000.00")
    container.finance_service.record_advance(
        employee_id=employee_id, amount=Decimal("500.00"), advance_date=date(2024, 3, 5)
    )
    container.finance_service.record_deduction(
        employee_id=employee_id, amount=Decimal("200.00"), deduction_date=date(2024, 3, 20), reason="Damage"
    )

    assert container.payroll_service.compute_net_balance(employee_id, 2, 2024) == Decimal("2300.00")


def test_settling_advance_through_deduction_removes_it_from_balance(container, add_employee):
    employee_id = add_employee(rate="3000")
    advance_id = container.finance_service.record_advance(
        employee_id=employee_id, amount=Decimal("500"), advance_date=date(2024, 3, 5)
    )
    assert container.payroll_service.compute_net_balance(employee_id, 2, 2024) == Decimal("2500")

    container.finance_service.record_deduction(
        employee_id=employee_id, amount=Decimal("500"), deduction_date=date(2024, 4, 1), advance_id=advance_id
    )

    # The deduction lands in April; March now only sees the base salary.
    assert container.payroll_service.compute_net_balance(employee_id, 2, 2024) == Decimal("3000")
    assert container.payroll_service.compute_net_balance(employee_id, 3, 2024) == Decimal("2500")


def test_hourly_balance_uses_finished_shift_hours(container, add_employee):
    employee_id = add_employee(salary_type=SalaryType.HOURLY, rate="20")
    log_id = container.worklog_service.start_work(employee_id, now=datetime(2024, 3, 4, 8, 0))
    container.worklog_service.finish_work(log_id, now=datetime(2024, 3, 4, 15, 30))

    assert container.payroll_service.compute_net_balance(employee_id, 2, 2024) == Decimal("150.00")


def test_unknown_employee_balance_is_zero(container):
    assert container.payroll_service.compute_net_balance("missing", 0, 2024) == Decimal("0")


def test_salary_report_lists_active_employees_only(container, add_employee):
    active = add_employee("Active", rate="1000")
    gone = add_employee("Gone", rate="2000")
    container.employee_service.deactivate(gone)

    rows = container.payroll_service.build_salary_report(2, 2024)

    assert [r.employee_id for r in rows] == [active]
    assert rows[0].net_salary == Decimal("1000")
    assert rows[0].salary_type == SalaryType.MONTHLY


def test_chronological_cutoff_is_selected_by_configuration(store, add_employee):
    chrono = build_container(backend="local", local_store=store, advance_cutoff="chronological")
    standard = build_container(backend="local", local_store=store)
    employee_id = add_employee(rate="3000")
    standard.finance_service.record_advance(
        employee_id=employee_id, amount=Decimal("400"), advance_date=date(2023, 12, 1)
    )

    assert standard.payroll_service.compute_net_balance(employee_id, 2, 2024) == Decimal("3000")
    assert chrono.payroll_service.compute_net_balance(employee_id, 2, 2024) == Decimal("2600")
