from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.local_attendance_repository import LocalAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.validators import parse_enum
from .company.local_company_repository import LocalCompanyInfoRepository
from .company.mysql_company_repository import MySQLCompanyInfoRepository
from .company.repository import CompanyInfoRepository
from .company.service import CompanyService
from .core.enums import AdvanceCutoff, StorageBackend
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, db_config_from_settings
from .departments.local_department_repository import LocalDepartmentRepository
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.local_employee_repository import LocalEmployeeRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .finance.local_finance_repository import LocalAdvanceRepository, LocalDeductionRepository
from .finance.mysql_finance_repository import MySQLAdvanceRepository, MySQLDeductionRepository
from .finance.repository import AdvanceRepository, DeductionRepository
from .finance.service import FinanceService
from .payroll.calculator.base import PayrollCalculator
from .payroll.calculator.chronological_calculator import ChronologicalPayrollCalculator
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .storage.local_state import LocalStateStore
from .tasks.local_task_repository import LocalTaskRepository
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService
from .worklogs.local_worklog_repository import LocalWorkLogRepository
from .worklogs.mysql_worklog_repository import MySQLWorkLogRepository
from .worklogs.repository import WorkLogRepository
from .worklogs.service import WorkLogService


@dataclass(frozen=True)
class Repositories:
    employees: EmployeeRepository
    departments: DepartmentRepository
    tasks: TaskRepository
    work_logs: WorkLogRepository
    attendance: AttendanceRepository
    advances: AdvanceRepository
    deductions: DeductionRepository
    company: CompanyInfoRepository


@dataclass(frozen=True)
class Container:
    backend: StorageBackend
    conn: Optional[DatabaseConnection]
    local_store: Optional[LocalStateStore]
    repos: Repositories

    employee_service: EmployeeService
    department_service: DepartmentService
    task_service: TaskService
    worklog_service: WorkLogService
    attendance_service: AttendanceService
    finance_service: FinanceService
    payroll_service: PayrollService
    dashboard_service: DashboardService
    company_service: CompanyService


def mysql_repositories(conn: DatabaseConnection) -> Repositories:
    return Repositories(
        employees=MySQLEmployeeRepository(conn),
        departments=MySQLDepartmentRepository(conn),
        tasks=MySQLTaskRepository(conn),
        work_logs=MySQLWorkLogRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        advances=MySQLAdvanceRepository(conn),
        deductions=MySQLDeductionRepository(conn),
        company=MySQLCompanyInfoRepository(conn),
    )


def local_repositories(store: LocalStateStore) -> Repositories:
    return Repositories(
        employees=LocalEmployeeRepository(store),
        departments=LocalDepartmentRepository(store),
        tasks=LocalTaskRepository(store),
        work_logs=LocalWorkLogRepository(store),
        attendance=LocalAttendanceRepository(store),
        advances=LocalAdvanceRepository(store),
        deductions=LocalDeductionRepository(store),
        company=LocalCompanyInfoRepository(store),
    )


def payroll_calculator(cutoff: AdvanceCutoff) -> PayrollCalculator:
    if cutoff == AdvanceCutoff.CHRONOLOGICAL:
        return ChronologicalPayrollCalculator()
    return StandardPayrollCalculator()


def build_container(
    *,
    backend: str = StorageBackend.MYSQL.value,
    db_config: Optional[dict] = None,
    local_store: Optional[LocalStateStore] = None,
    local_data_path: Optional[str] = None,
    advance_cutoff: str = AdvanceCutoff.COMPONENTWISE.value,
) -> Container:
    storage = parse_enum(StorageBackend, backend, "STORAGE_BACKEND")
    cutoff = parse_enum(AdvanceCutoff, advance_cutoff, "PAYROLL_ADVANCE_CUTOFF")

    conn: Optional[DatabaseConnection] = None
    if storage == StorageBackend.MYSQL:
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql backend")
        conn = DatabaseConnection.get_instance(db_config_from_settings(db_config))
        repos = mysql_repositories(conn)
    else:
        local_store = local_store or LocalStateStore.open(local_data_path or None)
        repos = local_repositories(local_store)

    employee_service = EmployeeService(repos.employees)

    return Container(
        backend=storage,
        conn=conn,
        local_store=local_store if storage == StorageBackend.LOCAL else None,
        repos=repos,
        employee_service=employee_service,
        department_service=DepartmentService(repos.departments, repos.employees),
        task_service=TaskService(repos.tasks, employee_service, repos.work_logs),
        worklog_service=WorkLogService(repos.work_logs, employee_service, repos.tasks),
        attendance_service=AttendanceService(repos.attendance, employee_service),
        finance_service=FinanceService(repos.advances, repos.deductions, employee_service),
        payroll_service=PayrollService(
            repos.employees,
            repos.work_logs,
            repos.advances,
            repos.deductions,
            calculator=payroll_calculator(cutoff),
        ),
        dashboard_service=DashboardService(repos.employees, repos.tasks, repos.work_logs, repos.advances),
        company_service=CompanyService(repos.company),
    )
