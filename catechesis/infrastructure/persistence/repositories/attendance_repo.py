"""Attendance repository. Records are keyed by (enrollment_id, calendar day)."""

from datetime import date

from sqlalchemy import and_, case, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.dtos.attendance import AttendanceRecordResult, AttendanceTally
from catechesis.domain.exceptions import AttendanceAlreadyRecordedException
from catechesis.infrastructure.persistence.models.attendance import AttendanceRecord
from catechesis.infrastructure.persistence.models.enrollment import Enrollment
from catechesis.infrastructure.persistence.models.person import Person
from catechesis.infrastructure.persistence.repositories.base import (
    BaseRepository,
    is_unique_violation,
)


def _record_to_result(r: AttendanceRecord) -> AttendanceRecordResult:
    return AttendanceRecordResult(
        id=r.id,
        enrollment_id=r.enrollment_id,
        attended_on=r.attended_on,
        present=r.present,
    )


class AttendanceRepository(BaseRepository[AttendanceRecord]):
    """Attendance reads and writes; writes run in savepoints so one failure does not poison the batch."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, AttendanceRecord)

    async def get_by_id(self, record_id: str) -> AttendanceRecordResult | None:
        record = await self._get(record_id)
        return _record_to_result(record) if record else None

    async def get_for_enrollment_and_day(
        self, enrollment_id: str, day: date
    ) -> AttendanceRecordResult | None:
        result = await self.db.execute(
            select(AttendanceRecord).where(
                AttendanceRecord.enrollment_id == enrollment_id,
                AttendanceRecord.attended_on == day,
            )
        )
        record = result.scalar_one_or_none()
        return _record_to_result(record) if record else None

    async def create_record(
        self, enrollment_id: str, day: date, present: bool
    ) -> AttendanceRecordResult:
        """Insert; raise AttendanceAlreadyRecordedException on (enrollment_id, day) conflict."""
        record = AttendanceRecord(enrollment_id=enrollment_id, attended_on=day, present=present)
        try:
            async with self.db.begin_nested():
                created = await self.create(record)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise AttendanceAlreadyRecordedException(enrollment_id, day.isoformat())
            raise
        return _record_to_result(created)

    async def update_present(
        self, record_id: str, present: bool
    ) -> AttendanceRecordResult | None:
        async with self.db.begin_nested():
            record = await self._get(record_id)
            if not record:
                return None
            record.present = present
            updated = await self.update(record)
        return _record_to_result(updated)

    async def delete_record(self, record_id: str) -> bool:
        record = await self._get(record_id)
        if not record:
            return False
        await self.delete(record)
        return True

    async def list_for_group_and_day(
        self, group_id: str, day: date
    ) -> list[AttendanceRecordResult]:
        result = await self.db.execute(
            select(AttendanceRecord)
            .join(Enrollment, Enrollment.id == AttendanceRecord.enrollment_id)
            .where(Enrollment.group_id == group_id, AttendanceRecord.attended_on == day)
            .order_by(AttendanceRecord.enrollment_id)
        )
        return [_record_to_result(r) for r in result.scalars().all()]

    async def tally_for_group(
        self, group_id: str, start: date | None, end: date | None
    ) -> list[AttendanceTally]:
        join_on = [AttendanceRecord.enrollment_id == Enrollment.id]
        if start is not None:
            join_on.append(AttendanceRecord.attended_on >= start)
        if end is not None:
            join_on.append(AttendanceRecord.attended_on <= end)
        present_count = func.count(case((AttendanceRecord.present.is_(True), 1)))
        result = await self.db.execute(
            select(
                Enrollment.id,
                Person.id,
                Person.first_names,
                Person.last_names,
                Person.document_id,
                func.count(AttendanceRecord.id),
                present_count,
            )
            .join(Person, Person.id == Enrollment.person_id)
            .outerjoin(AttendanceRecord, and_(*join_on))
            .where(Enrollment.group_id == group_id)
            .group_by(
                Enrollment.id,
                Person.id,
                Person.first_names,
                Person.last_names,
                Person.document_id,
            )
        )
        return [
            AttendanceTally(
                enrollment_id=enrollment_id,
                person_id=person_id,
                first_names=first_names,
                last_names=last_names,
                document_id=document_id,
                classes=int(classes),
                present=int(present),
            )
            for enrollment_id, person_id, first_names, last_names, document_id, classes, present in result.all()
        ]
