from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.printpress.printpress.container import build_container
from src.printpress.printpress.core.enums import EmploymentType, SalaryType
from src.printpress.printpress.employees.model import NewEmployee
from src.printpress.printpress.storage.local_state import LocalStateStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 0, 0)


@pytest.fixture
def store() -> LocalStateStore:
    return LocalStateStore()


@pytest.fixture
def container(store):
    return build_container(backend="local", local_store=store)


@pytest.fixture
def add_employee(container):
    """Create an employee through the service and return its id."""

    def _add(
        name: str = "Ada",
        *,
        salary_type: SalaryType = SalaryType.MONTHLY,
        rate: str = "3000",
        department: str = "Printing",
    ) -> str:
        return container.employee_service.create(
            NewEmployee(
                name=name,
                department=department,
                position="Operator",
                phone="",
                email="",
                joining_date=date(2023, 1, 2),
                employment_type=EmploymentType.FULL_TIME,
                salary_type=salary_type,
                salary_rate=Decimal(rate),
            )
        )

    return _add
