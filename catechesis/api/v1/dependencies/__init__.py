"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the caller's Principal and application use
cases. Routes depend only on these, not on infrastructure directly.
"""

from catechesis.api.v1.dependencies.auth import (
    CurrentPrincipal,
    get_principal,
    get_principal_optional,
    get_user_repo,
)
from catechesis.api.v1.dependencies.services import (
    get_access_guard,
    get_attendance_reader,
    get_attendance_reconciler,
    get_attendance_report_service,
    get_eligibility_validator,
    get_enrollment_writer,
    get_user_operations,
)

__all__ = [
    "CurrentPrincipal",
    "get_access_guard",
    "get_attendance_reader",
    "get_attendance_reconciler",
    "get_attendance_report_service",
    "get_eligibility_validator",
    "get_enrollment_writer",
    "get_principal",
    "get_principal_optional",
    "get_user_operations",
    "get_user_repo",
]
