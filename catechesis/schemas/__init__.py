"""Pydantic request/response schemas for the API."""

from catechesis.schemas.attendance import (
    AttendanceBatchRequest,
    AttendanceRecordResponse,
    AttendanceReportResponse,
    BatchResultResponse,
)
from catechesis.schemas.eligibility import EligibilityCheckRequest, EligibilityVerdictResponse
from catechesis.schemas.enrollment import (
    AssistedEnrollmentRequest,
    AssistedEnrollmentResponse,
    EnrollmentCreateRequest,
    EnrollmentResponse,
)
from catechesis.schemas.error import ErrorResponse
from catechesis.schemas.health import HealthResponse
from catechesis.schemas.user import UserCreateRequest, UserResponse

__all__ = [
    "AssistedEnrollmentRequest",
    "AssistedEnrollmentResponse",
    "AttendanceBatchRequest",
    "AttendanceRecordResponse",
    "AttendanceReportResponse",
    "BatchResultResponse",
    "EligibilityCheckRequest",
    "EligibilityVerdictResponse",
    "EnrollmentCreateRequest",
    "EnrollmentResponse",
    "ErrorResponse",
    "HealthResponse",
    "UserCreateRequest",
    "UserResponse",
]
