"""Attendance API schemas.

Batch items are deliberately loose: the reconciler checks their structure
and answers INVALID_ATTENDANCE_BATCH (400) for malformed batches. The batch
day accepts a plain date or a timestamp; timestamps are reduced to their
calendar day (UTC for aware values).
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catechesis.shared.utils.datetime import to_calendar_day


class AttendanceItemRequest(BaseModel):
    """One attendance fact."""

    enrollment_id: Any = None
    present: Any = None


class AttendanceBatchRequest(BaseModel):
    """Request body for POST /attendance/groups/{group_id}/batch."""

    day: date | datetime = Field(..., description="Calendar day the session took place")
    items: list[AttendanceItemRequest]

    @field_validator("day")
    @classmethod
    def reduce_to_calendar_day(cls, value: date | datetime) -> date:
        return to_calendar_day(value)


class BatchSummaryResponse(BaseModel):
    """Scalar counts for a batch."""

    total: int
    succeeded: int
    updated: int
    failed: int


class BatchDetailsResponse(BaseModel):
    """Per-item outcomes grouped by kind."""

    created: list[dict[str, Any]]
    updated: list[dict[str, Any]]
    errors: list[dict[str, Any]]


class BatchResultResponse(BaseModel):
    """Response for an attendance batch (200 even when some items failed)."""

    group_id: str
    day: date
    summary: BatchSummaryResponse
    details: BatchDetailsResponse


class AttendanceRecordResponse(BaseModel):
    """Attendance record."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    enrollment_id: str
    attended_on: date
    present: bool


class AttendanceUpdateRequest(BaseModel):
    """Request body for PATCH /attendance/{id}."""

    present: bool


class AttendanceSummaryRowResponse(BaseModel):
    """Per-enrollment totals in an attendance report."""

    model_config = ConfigDict(from_attributes=True)

    enrollment_id: str
    person_id: str
    full_name: str
    document_id: str
    classes: int
    present: int
    absent: int
    percentage: float
    low_attendance: bool


class AttendanceReportResponse(BaseModel):
    """JSON attendance report for a group."""

    group_id: str
    start: date | None = None
    end: date | None = None
    rows: list[AttendanceSummaryRowResponse]
