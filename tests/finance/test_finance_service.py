import logging
from datetime import date
from decimal import Decimal

import pytest

from src.printpress.printpress.core.exceptions import NotFoundError, ValidationError
from src.printpress.printpress.finance.model import Advance, AdvancePatch, DeductionPatch
from src.printpress.printpress.finance.service import FinanceService


def test_deduction_with_advance_marks_advance_paid(container, add_employee):
    employee_id = add_employee()
    finance = container.finance_service
    advance_id = finance.record_advance(employee_id=employee_id, amount=Decimal("500"), advance_date=date(2024, 3, 1))

    deduction_id = finance.record_deduction(
        employee_id=employee_id,
        amount=Decimal("500"),
        deduction_date=date(2024, 3, 31),
        advance_id=advance_id,
    )

    assert finance.get_advance(advance_id).is_paid is True
    assert [d.deduction_id for d in finance.list_deductions(employee_id=employee_id)] == [deduction_id]
    assert finance.list_advances(employee_id=employee_id, is_paid=False) == []


def test_deduction_without_advance_leaves_advances_alone(container, add_employee):
    employee_id = add_employee()
    finance = container.finance_service
    advance_id = finance.record_advance(employee_id=employee_id, amount=Decimal("100"), advance_date=date(2024, 3, 1))

    finance.record_deduction(employee_id=employee_id, amount=Decimal("50"), deduction_date=date(2024, 3, 2))

    assert finance.get_advance(advance_id).is_paid is False


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5")])
def test_amounts_must_be_positive(container, add_employee, amount):
    employee_id = add_employee()
    with pytest.raises(ValidationError):
        container.finance_service.record_advance(employee_id=employee_id, amount=amount, advance_date=date(2024, 1, 1))
    with pytest.raises(ValidationError):
        container.finance_service.record_deduction(
            employee_id=employee_id, amount=amount, deduction_date=date(2024, 1, 1)
        )


def test_deduction_rejects_foreign_missing_or_paid_advance(container, add_employee):
    finance = container.finance_service
    alice = add_employee("Alice")
    bob = add_employee("Bob")
    advance_id = finance.record_advance(employee_id=alice, amount=Decimal("100"), advance_date=date(2024, 3, 1))

    with pytest.raises(ValidationError, match="another employee"):
        finance.record_deduction(employee_id=bob, amount=Decimal("100"), deduction_date=date(2024, 3, 2), advance_id=advance_id)
    with pytest.raises(ValidationError, match="does not exist"):
        finance.record_deduction(employee_id=alice, amount=Decimal("100"), deduction_date=date(2024, 3, 2), advance_id="nope")

    finance.record_deduction(employee_id=alice, amount=Decimal("100"), deduction_date=date(2024, 3, 2), advance_id=advance_id)
    with pytest.raises(ValidationError, match="already paid"):
        finance.record_deduction(employee_id=alice, amount=Decimal("100"), deduction_date=date(2024, 3, 3), advance_id=advance_id)


def test_advance_referenced_by_deduction_cannot_be_deleted(container, add_employee):
    employee_id = add_employee()
    finance = container.finance_service
    advance_id = finance.record_advance(employee_id=employee_id, amount=Decimal("100"), advance_date=date(2024, 3, 1))
    deduction_id = finance.record_deduction(
        employee_id=employee_id, amount=Decimal("100"), deduction_date=date(2024, 3, 2), advance_id=advance_id
    )

    with pytest.raises(ValidationError):
        finance.delete_advance(advance_id)

    finance.delete_deduction(deduction_id)
    # Settled advances stay settled.
    assert finance.get_advance(advance_id).is_paid is True
    finance.delete_advance(advance_id)
    with pytest.raises(NotFoundError):
        finance.get_advance(advance_id)


def test_update_advance_and_deduction(container, add_employee):
    employee_id = add_employee()
    finance = container.finance_service
    advance_id = finance.record_advance(employee_id=employee_id, amount=Decimal("100"), advance_date=date(2024, 3, 1))
    deduction_id = finance.record_deduction(employee_id=employee_id, amount=Decimal("10"), deduction_date=date(2024, 3, 2))

    assert finance.update_advance(advance_id, AdvancePatch.from_payload({"amount": "150.25"})).amount == Decimal("150.25")
    assert finance.update_deduction(deduction_id, DeductionPatch(reason="Late")).reason == "Late"
    with pytest.raises(ValidationError):
        finance.update_advance(advance_id, AdvancePatch(amount=Decimal("0")))
    with pytest.raises(NotFoundError):
        finance.update_deduction("missing", DeductionPatch(reason="x"))


def test_monthly_summary_totals(container, add_employee):
    employee_id = add_employee()
    finance = container.finance_service
    finance.record_advance(employee_id=employee_id, amount=Decimal("100"), advance_date=date(2024, 3, 1))
    finance.record_advance(employee_id=employee_id, amount=Decimal("40"), advance_date=date(2024, 3, 9))
    finance.record_advance(employee_id=employee_id, amount=Decimal("999"), advance_date=date(2024, 4, 1))
    finance.record_deduction(employee_id=employee_id, amount=Decimal("25"), deduction_date=date(2024, 3, 15))

    summary = finance.monthly_summary(month=2, year=2024)

    assert summary.total_advances == Decimal("140")
    assert summary.total_deductions == Decimal("25")
    assert len(summary.advances) == 2
    with pytest.raises(ValidationError):
        finance.monthly_summary(month=12, year=2024)


class _StuckAdvances:
    """Advance store whose settle step never takes effect."""

    def __init__(self, advance):
        self._advance = advance

    def get_by_id(self, advance_id):
        return self._advance if advance_id == self._advance.advance_id else None

    def list_all(self, *, employee_id=None, is_paid=None):
        return [self._advance]


class _Deductions:
    def __init__(self):
        self.created = []

    def create(self, **kwargs):
        self.created.append(kwargs)
        return "d1"


class _Employees:
    def require_active(self, employee_id):
        return None


def test_unsettled_advance_after_deduction_is_logged(caplog):
    advance = Advance(advance_id="a1", employee_id="e1", amount=Decimal("10"), advance_date=date(2024, 1, 1))
    deductions = _Deductions()
    service = FinanceService(_StuckAdvances(advance), deductions, _Employees())

    with caplog.at_level(logging.ERROR):
        service.record_deduction(employee_id="e1", amount=Decimal("10"), deduction_date=date(2024, 1, 2), advance_id="a1")

    assert deductions.created[0]["advance_id"] == "a1"
    assert "was not marked paid" in caplog.text
