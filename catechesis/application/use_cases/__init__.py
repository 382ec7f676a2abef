"""Application use cases: one entry point per workflow."""

from catechesis.application.use_cases.attendance import (
    AttendanceReconciler,
    AttendanceReportService,
)
from catechesis.application.use_cases.enrollments import EnrollmentWriter
from catechesis.application.use_cases.users import UserOperations

__all__ = [
    "AttendanceReconciler",
    "AttendanceReportService",
    "EnrollmentWriter",
    "UserOperations",
]
