from datetime import date, datetime
from decimal import Decimal

from src.printpress.printpress.core.enums import EmployeeStatus, EmploymentType, LogStatus, SalaryType
from src.printpress.printpress.employees.model import Employee
from src.printpress.printpress.finance.model import Advance, SalaryDeduction
from src.printpress.printpress.payroll.calculator.chronological_calculator import ChronologicalPayrollCalculator
from src.printpress.printpress.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.printpress.printpress.payroll.model import PayrollSnapshot
from src.printpress.printpress.worklogs.model import WorkLog

MARCH = 2


def _employee(employee_id="e1", salary_type=SalaryType.MONTHLY, rate="3000.00"):
    return Employee(
        employee_id=employee_id,
        name="E",
        department="Printing",
        position="Operator",
        phone="",
        email="",
        joining_date=date(2023, 1, 1),
        employment_type=EmploymentType.FULL_TIME,
        salary_type=salary_type,
        salary_rate=Decimal(rate),
        status=EmployeeStatus.ACTIVE,
    )


def _log(day: date, hours: str, employee_id="e1"):
    start = datetime(day.year, day.month, day.day, 8, 0)
    return WorkLog(
        log_id=f"l-{day.isoformat()}-{hours}",
        employee_id=employee_id,
        work_date=day,
        start_time=start,
        end_time=start,
        description="",
        task_id=None,
        status=LogStatus.FINISHED,
        hours_worked=Decimal(hours),
    )


def _advance(day: date, amount: str, *, is_paid=False, advance_id="a1", employee_id="e1"):
    return Advance(
        advance_id=advance_id,
        employee_id=employee_id,
        amount=Decimal(amount),
        advance_date=day,
        is_paid=is_paid,
    )


def _deduction(day: date, amount: str, deduction_id="d1", employee_id="e1"):
    return SalaryDeduction(
        deduction_id=deduction_id,
        employee_id=employee_id,
        amount=Decimal(amount),
        deduction_date=day,
    )


def test_monthly_employee_without_adjustments_gets_flat_rate():
    snapshot = PayrollSnapshot(employees=[_employee()])
    assert StandardPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("3000.00")


def test_hourly_employee_is_paid_hours_in_month_times_rate():
    snapshot = PayrollSnapshot(
        employees=[_employee(salary_type=SalaryType.HOURLY, rate="12.50")],
        work_logs=[
            _log(date(2024, 3, 1), "8"),
            _log(date(2024, 3, 2), "4.5"),
            _log(date(2024, 4, 1), "8"),  # other month
            _log(date(2023, 3, 1), "8"),  # other year
            _log(date(2024, 3, 3), "6", employee_id="e2"),
        ],
    )
    assert StandardPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("12.5") * Decimal("12.50")


def test_unpaid_advance_is_subtracted_and_paid_advance_is_not():
    calc = StandardPayrollCalculator()
    base = PayrollSnapshot(employees=[_employee()])
    unpaid = PayrollSnapshot(employees=[_employee()], advances=[_advance(date(2024, 3, 5), "500")])
    paid = PayrollSnapshot(employees=[_employee()], advances=[_advance(date(2024, 3, 5), "500", is_paid=True)])

    assert calc.net_balance(base, "e1", MARCH, 2024) - calc.net_balance(unpaid, "e1", MARCH, 2024) == Decimal("500")
    assert calc.net_balance(paid, "e1", MARCH, 2024) == calc.net_balance(base, "e1", MARCH, 2024)


def test_deduction_only_counts_in_its_own_month():
    calc = StandardPayrollCalculator()
    in_month = PayrollSnapshot(employees=[_employee()], deductions=[_deduction(date(2024, 3, 28), "200")])
    other_month = PayrollSnapshot(employees=[_employee()], deductions=[_deduction(date(2024, 2, 28), "200")])

    assert calc.net_balance(in_month, "e1", MARCH, 2024) == Decimal("2800.00")
    assert calc.net_balance(other_month, "e1", MARCH, 2024) == Decimal("3000.00")


def test_unknown_employee_yields_zero():
    snapshot = PayrollSnapshot(employees=[_employee()], advances=[_advance(date(2024, 3, 5), "500", employee_id="x")])
    for calc in (StandardPayrollCalculator(), ChronologicalPayrollCalculator()):
        assert calc.net_balance(snapshot, "x", MARCH, 2024) == Decimal("0")
        assert calc.net_balance(PayrollSnapshot(), "x", 0, 1999) == Decimal("0")


def test_worked_example_nets_2300():
    snapshot = PayrollSnapshot(
        employees=[_employee()],
        advances=[_advance(date(2024, 3, 10), "500.00")],
        deductions=[_deduction(date(2024, 3, 20), "200.00")],
    )
    breakdown = StandardPayrollCalculator().breakdown(snapshot, "e1", MARCH, 2024)
    assert breakdown.base_pay == Decimal("3000.00")
    assert breakdown.advances_total == Decimal("500.00")
    assert breakdown.deductions_total == Decimal("200.00")
    assert breakdown.net == Decimal("2300.00")


def test_result_is_not_clamped_at_zero():
    snapshot = PayrollSnapshot(
        employees=[_employee(rate="100")],
        advances=[_advance(date(2024, 1, 1), "250")],
    )
    assert StandardPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("-150")


def test_componentwise_cutoff_skips_later_month_of_earlier_year():
    december = _advance(date(2023, 12, 1), "400")
    snapshot = PayrollSnapshot(employees=[_employee()], advances=[december])

    assert StandardPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("3000.00")
    assert ChronologicalPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("2600.00")


def test_componentwise_cutoff_counts_smaller_month_of_earlier_year():
    february = _advance(date(2023, 2, 1), "400")
    snapshot = PayrollSnapshot(employees=[_employee()], advances=[february])

    assert StandardPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("2600.00")
    assert ChronologicalPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("2600.00")

def test_future_advance_is_ignored_by_both_cutoffs():
    snapshot = PayrollSnapshot(employees=[_employee()], advances=[_advance(date(2024, 4, 1), "400")])
    assert StandardPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("3000.00")
    assert ChronologicalPayrollCalculator().net_balance(snapshot, "e1", MARCH, 2024) == Decimal("3000.00")


def test_calculation_is_repeatable_and_does_not_mutate_snapshot():
    advances = [_advance(date(2024, 3, 10), "500.00")]
    snapshot = PayrollSnapshot(employees=[_employee()], advances=advances)
    calc = StandardPayrollCalculator()

    first = calc.net_balance(snapshot, "e1", MARCH, 2024)
    second = calc.net_balance(snapshot, "e1", MARCH, 2024)

    assert first == second == Decimal("2500.00")
    assert advances[0].is_paid is False
