from datetime import date
from decimal import Decimal

import pytest

from src.printpress.printpress.common.patches import UNSET
from src.printpress.printpress.core.enums import SalaryType
from src.printpress.printpress.core.exceptions import ValidationError
from src.printpress.printpress.employees.model import EmployeePatch
from src.printpress.printpress.finance.model import DeductionPatch


def test_from_payload_converts_known_fields():
    patch = EmployeePatch.from_payload({"salary_rate": "12.5", "salary_type": "Hourly", "joining_date": "2024-02-03"})

    assert patch.changes() == {
        "salary_rate": Decimal("12.5"),
        "salary_type": SalaryType.HOURLY,
        "joining_date": date(2024, 2, 3),
    }
    assert patch.name is UNSET


@pytest.mark.parametrize("payload", [{"employee_id": "x"}, {"isActive": False}, {"nickname": "a"}])
def test_unknown_or_read_only_fields_are_rejected(payload):
    with pytest.raises(ValidationError, match="Unknown or read-only"):
        EmployeePatch.from_payload(payload)


def test_deduction_patch_cannot_relink_advance():
    with pytest.raises(ValidationError):
        DeductionPatch.from_payload({"advance_id": "a2"})


def test_payload_must_be_an_object():
    with pytest.raises(ValidationError):
        EmployeePatch.from_payload(["name"])


def test_empty_patch_changes_nothing():
    assert EmployeePatch.from_payload({}).is_empty()


def test_invalid_values_raise_validation_error():
    with pytest.raises(ValidationError):
        EmployeePatch.from_payload({"salary_rate": "abc"})
    with pytest.raises(ValidationError):
        EmployeePatch.from_payload({"name": "  "})
