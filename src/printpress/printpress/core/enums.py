from __future__ import annotations

from enum import Enum


class SalaryType(str, Enum):
    """How an employee's base pay is derived."""

    HOURLY = "Hourly"
    MONTHLY = "Monthly"


class EmploymentType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACTUAL = "Contractual"


class EmployeeStatus(str, Enum):
    """Employee lifecycle. Employees are deactivated, never removed."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class TaskPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TaskStatus(str, Enum):
    COMPLETED = "Completed"
    IN_PROGRESS = "In Progress"
    PENDING = "Pending"


class LogStatus(str, Enum):
    """A work log stays PENDING while the shift is open."""

    FINISHED = "Finished"
    PENDING = "Pending"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half-day"
    LATE = "Late"


class StorageBackend(str, Enum):
    MYSQL = "mysql"
    LOCAL = "local"


class AdvanceCutoff(str, Enum):
    """Which unpaid advances count against a payroll month."""

    COMPONENTWISE = "componentwise"
    CHRONOLOGICAL = "chronological"
