"""Use case and service dependencies (composition root).

Repositories are built on the request's session. Write use cases get the
transactional session so the whole request commits or rolls back together,
except attendance writes, which commit item by item through a unit of work.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.services.access_guard import AccessGuard
from catechesis.application.services.eligibility_validator import EligibilityValidator
from catechesis.application.use_cases.attendance import (
    AttendanceReconciler,
    AttendanceReportService,
)
from catechesis.application.use_cases.enrollments import EnrollmentWriter
from catechesis.application.use_cases.users import UserOperations
from catechesis.core.config import get_settings
from catechesis.infrastructure.persistence.database import get_db, get_db_transactional
from catechesis.infrastructure.persistence.repositories import (
    AttendanceRepository,
    CertificateRepository,
    EnrollmentRepository,
    GroupRepository,
    LevelRepository,
    ParishRepository,
    PersonRepository,
    UserRepository,
)
from catechesis.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

_guard = AccessGuard()


def get_access_guard() -> AccessGuard:
    """Shared access guard (stateless; capability table is static)."""
    return _guard


def _build_eligibility_validator(db: AsyncSession, guard: AccessGuard) -> EligibilityValidator:
    settings = get_settings()
    return EligibilityValidator(
        person_repo=PersonRepository(db),
        level_repo=LevelRepository(db),
        certificate_repo=CertificateRepository(db),
        enrollment_repo=EnrollmentRepository(db),
        minimum_age=settings.minimum_enrollment_age,
        adult_age=settings.adult_age,
        guard=guard,
    )


async def get_eligibility_validator(
    db: Annotated[AsyncSession, Depends(get_db)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> EligibilityValidator:
    """Eligibility validator on a read session."""
    return _build_eligibility_validator(db, guard)


async def get_enrollment_writer(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> EnrollmentWriter:
    """Enrollment writer on a transactional session."""
    return EnrollmentWriter(
        guard=guard,
        group_repo=GroupRepository(db),
        person_repo=PersonRepository(db),
        enrollment_repo=EnrollmentRepository(db),
        eligibility_validator=_build_eligibility_validator(db, guard),
    )


async def get_attendance_reconciler(
    db: Annotated[AsyncSession, Depends(get_db)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> AttendanceReconciler:
    """Attendance reconciler for writes (batch, update, delete), committing per item."""
    return AttendanceReconciler(
        guard=guard,
        group_repo=GroupRepository(db),
        enrollment_repo=EnrollmentRepository(db),
        attendance_repo=AttendanceRepository(db),
        unit_of_work=SqlAlchemyUnitOfWork(db),
    )


async def get_attendance_reader(
    db: Annotated[AsyncSession, Depends(get_db)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> AttendanceReconciler:
    """Attendance reconciler on a read session (listing only)."""
    return AttendanceReconciler(
        guard=guard,
        group_repo=GroupRepository(db),
        enrollment_repo=EnrollmentRepository(db),
        attendance_repo=AttendanceRepository(db),
    )


async def get_attendance_report_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> AttendanceReportService:
    """Attendance report service (read session)."""
    return AttendanceReportService(
        guard=guard,
        group_repo=GroupRepository(db),
        attendance_repo=AttendanceRepository(db),
        low_attendance_threshold=get_settings().low_attendance_threshold,
    )


async def get_user_operations(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
) -> UserOperations:
    """User administration on a transactional session."""
    return UserOperations(
        guard=guard,
        user_repo=UserRepository(db),
        parish_repo=ParishRepository(db),
    )
