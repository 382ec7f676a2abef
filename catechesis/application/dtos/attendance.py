"""DTOs for attendance reconciliation and reporting."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from catechesis.domain.enums import OutcomeKind


@dataclass(frozen=True)
class AttendanceFact:
    """One item of an attendance batch as received (validated by the reconciler)."""

    enrollment_id: Any
    present: Any


@dataclass(frozen=True)
class AttendanceRecordResult:
    """Attendance record read-model (one per enrollment and calendar day)."""

    id: str
    enrollment_id: str
    attended_on: date
    present: bool


@dataclass(frozen=True)
class ItemOutcome:
    """Outcome of applying one fact.

    created: record_id and new are set.
    updated: record_id, previous and new are set.
    error: error_code and message are set.
    """

    kind: OutcomeKind
    enrollment_id: str | None
    record_id: str | None = None
    previous: bool | None = None
    new: bool | None = None
    error_code: str | None = None
    message: str | None = None

    @classmethod
    def created(cls, enrollment_id: str, record_id: str, present: bool) -> "ItemOutcome":
        return cls(OutcomeKind.CREATED, enrollment_id, record_id=record_id, new=present)

    @classmethod
    def updated(
        cls, enrollment_id: str, record_id: str, previous: bool, new: bool
    ) -> "ItemOutcome":
        return cls(
            OutcomeKind.UPDATED,
            enrollment_id,
            record_id=record_id,
            previous=previous,
            new=new,
        )

    @classmethod
    def error(cls, enrollment_id: str | None, error_code: str, message: str) -> "ItemOutcome":
        return cls(OutcomeKind.ERROR, enrollment_id, error_code=error_code, message=message)


@dataclass(frozen=True)
class BatchSummary:
    """Scalar counts for a batch; succeeded counts created records."""

    total: int
    succeeded: int
    updated: int
    failed: int


@dataclass(frozen=True)
class BatchResult:
    """Aggregated result of one attendance batch."""

    group_id: str
    day: date
    summary: BatchSummary
    created: list[dict[str, Any]] = field(default_factory=list)
    updated: list[dict[str, Any]] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class AttendanceTally:
    """Raw per-enrollment counts loaded from the store for a date range."""

    enrollment_id: str
    person_id: str
    first_names: str
    last_names: str
    document_id: str
    classes: int
    present: int


@dataclass(frozen=True)
class AttendanceSummaryRow:
    """Per-enrollment attendance summary for a group over a date range."""

    enrollment_id: str
    person_id: str
    full_name: str
    document_id: str
    classes: int
    present: int
    absent: int
    percentage: float
    low_attendance: bool
