"""Example: drive the service layer directly (no Flask).

Uses an in-memory local store, so nothing is written to disk.
"""

from datetime import date, datetime
from decimal import Decimal

from src.printpress.printpress.container import build_container
from src.printpress.printpress.core.enums import EmploymentType, SalaryType
from src.printpress.printpress.employees.model import NewEmployee


def main():
    container = build_container(backend="local")

    employee_id = container.employee_service.create(
        NewEmployee(
            name="Ada Press",
            department="Printing",
            position="Operator",
            phone="",
            email="",
            joining_date=date(2024, 1, 8),
            employment_type=EmploymentType.FULL_TIME,
            salary_type=SalaryType.MONTHLY,
            salary_rate=Decimal("3000"),
        )
    )
    container.finance_service.record_advance(
        employee_id=employee_id, amount=Decimal("500"), advance_date=date(2024, 3, 5)
    )
    container.finance_service.record_deduction(
        employee_id=employee_id, amount=Decimal("200"), deduction_date=date(2024, 3, 20)
    )
    container.worklog_service.start_work(employee_id, now=datetime(2024, 3, 21, 8, 0))

    # March is month index 2: 3000 - 500 - 200
    print(container.payroll_service.compute_net_balance(employee_id, 2, 2024))


if __name__ == "__main__":
    main()
