from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.patches import UNSET, Patch
from ..common.validators import optional_text, parse_date, parse_decimal, parse_enum, require_non_empty
from ..core.enums import EmployeeStatus, EmploymentType, SalaryType


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee of the press.

    ``salary_rate`` is per hour for HOURLY staff and per month for MONTHLY staff.
    """

    employee_id: str
    name: str
    department: str
    position: str
    phone: str
    email: str
    joining_date: date
    employment_type: EmploymentType
    salary_type: SalaryType
    salary_rate: Decimal
    status: EmployeeStatus = EmployeeStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE


@dataclass(frozen=True)
class NewEmployee:
    name: str
    department: str
    position: str
    phone: str
    email: str
    joining_date: date
    employment_type: EmploymentType
    salary_type: SalaryType
    salary_rate: Decimal

    @classmethod
    def from_payload(cls, data: dict) -> "NewEmployee":
        return cls(
            name=require_non_empty(data.get("name", ""), "Name"),
            department=require_non_empty(data.get("department", ""), "Department"),
            position=optional_text(data.get("position")) or "",
            phone=optional_text(data.get("phone")) or "",
            email=optional_text(data.get("email")) or "",
            joining_date=parse_date(data.get("joining_date"), "Joining date"),
            employment_type=parse_enum(EmploymentType, data.get("employment_type"), "Employment type"),
            salary_type=parse_enum(SalaryType, data.get("salary_type"), "Salary type"),
            salary_rate=parse_decimal(data.get("salary_rate"), "Salary rate"),
        )


@dataclass(frozen=True)
class EmployeePatch(Patch):
    name: Optional[str] = UNSET
    department: Optional[str] = UNSET
    position: Optional[str] = UNSET
    phone: Optional[str] = UNSET
    email: Optional[str] = UNSET
    joining_date: Optional[date] = UNSET
    employment_type: Optional[EmploymentType] = UNSET
    salary_type: Optional[SalaryType] = UNSET
    salary_rate: Optional[Decimal] = UNSET
    status: Optional[EmployeeStatus] = UNSET

    converters = {
        "name": lambda v: require_non_empty(v, "Name"),
        "department": lambda v: require_non_empty(v, "Department"),
        "position": lambda v: optional_text(v) or "",
        "phone": lambda v: optional_text(v) or "",
        "email": lambda v: optional_text(v) or "",
        "joining_date": lambda v: parse_date(v, "Joining date"),
        "employment_type": lambda v: parse_enum(EmploymentType, v, "Employment type"),
        "salary_type": lambda v: parse_enum(SalaryType, v, "Salary type"),
        "salary_rate": lambda v: parse_decimal(v, "Salary rate"),
        "status": lambda v: parse_enum(EmployeeStatus, v, "Status"),
    }
