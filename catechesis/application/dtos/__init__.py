"""Application DTOs (frozen dataclasses, no ORM dependency)."""

from catechesis.application.dtos.attendance import (
    AttendanceFact,
    AttendanceRecordResult,
    AttendanceSummaryRow,
    AttendanceTally,
    BatchResult,
    BatchSummary,
    ItemOutcome,
)
from catechesis.application.dtos.eligibility import EligibilitySnapshot, EligibilityVerdict
from catechesis.application.dtos.enrollment import (
    AssistedEnrollmentResult,
    EnrollmentCreate,
    EnrollmentResult,
    EnrollmentToPersist,
    EnrollmentTransferResult,
)
from catechesis.application.dtos.group import GroupResult
from catechesis.application.dtos.level import LevelResult
from catechesis.application.dtos.parish import ParishResult
from catechesis.application.dtos.person import PersonResult
from catechesis.application.dtos.user import UserCreate, UserResult

__all__ = [
    "AssistedEnrollmentResult",
    "AttendanceFact",
    "AttendanceRecordResult",
    "AttendanceSummaryRow",
    "AttendanceTally",
    "BatchResult",
    "BatchSummary",
    "EligibilitySnapshot",
    "EligibilityVerdict",
    "EnrollmentCreate",
    "EnrollmentResult",
    "EnrollmentToPersist",
    "EnrollmentTransferResult",
    "GroupResult",
    "ItemOutcome",
    "LevelResult",
    "ParishResult",
    "PersonResult",
    "UserCreate",
    "UserResult",
]
