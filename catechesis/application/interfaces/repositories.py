"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Store uniqueness violations surface as domain conflict exceptions.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol

from catechesis.domain.enums import Role

if TYPE_CHECKING:
    from catechesis.application.dtos.attendance import AttendanceRecordResult, AttendanceTally
    from catechesis.application.dtos.enrollment import (
        EnrollmentResult,
        EnrollmentToPersist,
        EnrollmentTransferResult,
    )
    from catechesis.application.dtos.group import GroupResult
    from catechesis.application.dtos.level import LevelResult
    from catechesis.application.dtos.parish import ParishResult
    from catechesis.application.dtos.person import PersonResult
    from catechesis.application.dtos.user import UserCreate, UserResult


class IParishRepository(Protocol):
    """Protocol for parish repository."""

    async def get_by_id(self, parish_id: str) -> ParishResult | None:
        """Return parish by ID."""


class IUserRepository(Protocol):
    """Protocol for user repository (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""

    async def get_by_username(self, username: str) -> UserResult | None:
        """Return user by username (unique across parishes)."""

    async def create_user(self, data: UserCreate) -> UserResult:
        """Create user. Raises UserAlreadyExistsException on duplicate username."""

    async def update_role(
        self, user_id: str, role: Role, tenant_id: str | None
    ) -> UserResult | None:
        """Set role and parish together; returns None if user not found."""

    async def set_active(self, user_id: str, is_active: bool) -> UserResult | None:
        """Activate or deactivate user; returns None if user not found."""


class ILevelRepository(Protocol):
    """Protocol for curriculum level repository."""

    async def get_by_id(self, level_id: str) -> LevelResult | None:
        """Return level by ID."""


class IGroupRepository(Protocol):
    """Protocol for group repository."""

    async def get_by_id(self, group_id: str) -> GroupResult | None:
        """Return group by ID."""


class IPersonRepository(Protocol):
    """Protocol for catechumen repository and the records hanging off a person."""

    async def get_by_id(self, person_id: str) -> PersonResult | None:
        """Return person by ID."""

    async def has_baptism_record(self, person_id: str) -> bool:
        """Return True if baptism data is on file for the person."""

    async def count_legal_representatives(self, person_id: str) -> int:
        """Return number of legal representatives registered for the person."""


class ICertificateRepository(Protocol):
    """Protocol for certificate reads (read-only input to eligibility)."""

    async def get_approved_level_orders(self, person_id: str) -> frozenset[int]:
        """Return the orders of distinct levels the person holds an approved certificate for."""


class IEnrollmentRepository(Protocol):
    """Protocol for enrollment repository."""

    async def get_by_id(self, enrollment_id: str) -> EnrollmentResult | None:
        """Return enrollment by ID."""

    async def get_by_person_and_group(
        self, person_id: str, group_id: str
    ) -> EnrollmentResult | None:
        """Return the enrollment of person in group, if any."""

    async def list_level_periods_for_person(self, person_id: str) -> list[tuple[str, str]]:
        """Return (level_id, period) of every group the person is enrolled in, any parish."""

    async def get_ids_for_group(self, group_id: str) -> list[str]:
        """Return IDs of all enrollments in the group."""

    async def create_enrollment(self, data: EnrollmentToPersist) -> EnrollmentResult:
        """Insert enrollment. Raises EnrollmentAlreadyExistsException on (person, group) conflict."""

    async def update_payment(self, enrollment_id: str, paid: bool) -> EnrollmentResult | None:
        """Set paid flag; returns None if enrollment not found."""

    async def move_to_group(self, enrollment_id: str, to_group_id: str) -> EnrollmentResult:
        """Point enrollment at another group. Raises EnrollmentAlreadyExistsException on conflict."""

    async def record_transfer(
        self,
        enrollment_id: str,
        from_group_id: str,
        to_group_id: str,
        reason: str | None,
        transferred_by: str,
    ) -> EnrollmentTransferResult:
        """Append a transfer log row."""

    async def delete_enrollment(self, enrollment_id: str) -> bool:
        """Delete enrollment (attendance cascades). Returns False if not found."""


class IAttendanceRepository(Protocol):
    """Protocol for attendance record repository. Records are keyed by calendar day."""

    async def get_by_id(self, record_id: str) -> AttendanceRecordResult | None:
        """Return record by ID."""

    async def get_for_enrollment_and_day(
        self, enrollment_id: str, day: date
    ) -> AttendanceRecordResult | None:
        """Return the record for (enrollment, day), if any."""

    async def create_record(
        self, enrollment_id: str, day: date, present: bool
    ) -> AttendanceRecordResult:
        """Insert record. Raises AttendanceAlreadyRecordedException on (enrollment, day) conflict."""

    async def update_present(
        self, record_id: str, present: bool
    ) -> AttendanceRecordResult | None:
        """Set present flag; returns None if record not found."""

    async def delete_record(self, record_id: str) -> bool:
        """Delete record. Returns False if not found."""

    async def list_for_group_and_day(
        self, group_id: str, day: date
    ) -> list[AttendanceRecordResult]:
        """Return all records of the group's enrollments on the day."""

    async def tally_for_group(
        self, group_id: str, start: date | None, end: date | None
    ) -> list[AttendanceTally]:
        """Return per-enrollment class and present counts for the group in [start, end]."""
