"""Enrollment repository. Unique (person_id, group_id) violations become domain conflicts."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catechesis.application.dtos.enrollment import (
    EnrollmentResult,
    EnrollmentToPersist,
    EnrollmentTransferResult,
)
from catechesis.domain.exceptions import EnrollmentAlreadyExistsException
from catechesis.infrastructure.persistence.models.enrollment import (
    Enrollment,
    EnrollmentTransfer,
)
from catechesis.infrastructure.persistence.models.group import Group
from catechesis.infrastructure.persistence.repositories.base import (
    BaseRepository,
    is_unique_violation,
)
from catechesis.shared.utils.datetime import as_utc


def _enrollment_to_result(e: Enrollment) -> EnrollmentResult:
    return EnrollmentResult(
        id=e.id,
        person_id=e.person_id,
        group_id=e.group_id,
        tenant_id=e.tenant_id,
        enrolled_at=as_utc(e.enrolled_at),
        paid=e.paid,
        notes=e.notes,
    )


def _transfer_to_result(t: EnrollmentTransfer) -> EnrollmentTransferResult:
    return EnrollmentTransferResult(
        id=t.id,
        enrollment_id=t.enrollment_id,
        from_group_id=t.from_group_id,
        to_group_id=t.to_group_id,
        reason=t.reason,
        transferred_at=as_utc(t.transferred_at),
        transferred_by=t.transferred_by or "",
    )


class EnrollmentRepository(BaseRepository[Enrollment]):
    """Enrollment reads and writes; every write runs in its own savepoint."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Enrollment)

    async def get_by_id(self, enrollment_id: str) -> EnrollmentResult | None:
        enrollment = await self._get(enrollment_id)
        return _enrollment_to_result(enrollment) if enrollment else None

    async def get_by_person_and_group(
        self, person_id: str, group_id: str
    ) -> EnrollmentResult | None:
        result = await self.db.execute(
            select(Enrollment).where(
                Enrollment.person_id == person_id,
                Enrollment.group_id == group_id,
            )
        )
        enrollment = result.scalar_one_or_none()
        return _enrollment_to_result(enrollment) if enrollment else None

    async def list_level_periods_for_person(self, person_id: str) -> list[tuple[str, str]]:
        result = await self.db.execute(
            select(Group.level_id, Group.period)
            .join(Enrollment, Enrollment.group_id == Group.id)
            .where(Enrollment.person_id == person_id)
        )
        return [(level_id, period) for level_id, period in result.all()]

    async def get_ids_for_group(self, group_id: str) -> list[str]:
        result = await self.db.execute(
            select(Enrollment.id).where(Enrollment.group_id == group_id)
        )
        return list(result.scalars().all())

    async def create_enrollment(self, data: EnrollmentToPersist) -> EnrollmentResult:
        """Insert; raise EnrollmentAlreadyExistsException on (person_id, group_id) conflict."""
        enrollment = Enrollment(
            person_id=data.person_id,
            group_id=data.group_id,
            tenant_id=data.tenant_id,
            paid=data.paid,
            notes=data.notes,
        )
        try:
            async with self.db.begin_nested():
                created = await self.create(enrollment)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise EnrollmentAlreadyExistsException(data.person_id, data.group_id)
            raise
        return _enrollment_to_result(created)

    async def update_payment(self, enrollment_id: str, paid: bool) -> EnrollmentResult | None:
        enrollment = await self._get(enrollment_id)
        if not enrollment:
            return None
        enrollment.paid = paid
        return _enrollment_to_result(await self.update(enrollment))

    async def move_to_group(self, enrollment_id: str, to_group_id: str) -> EnrollmentResult:
        enrollment = await self._get(enrollment_id)
        if enrollment is None:
            raise ValueError(f"Enrollment {enrollment_id} disappeared during transfer")
        person_id = enrollment.person_id
        try:
            async with self.db.begin_nested():
                enrollment.group_id = to_group_id
                updated = await self.update(enrollment)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise EnrollmentAlreadyExistsException(person_id, to_group_id)
            raise
        return _enrollment_to_result(updated)

    async def record_transfer(
        self,
        enrollment_id: str,
        from_group_id: str,
        to_group_id: str,
        reason: str | None,
        transferred_by: str,
    ) -> EnrollmentTransferResult:
        transfer = EnrollmentTransfer(
            enrollment_id=enrollment_id,
            from_group_id=from_group_id,
            to_group_id=to_group_id,
            reason=reason,
            transferred_by=transferred_by,
        )
        self.db.add(transfer)
        await self.db.flush()
        await self.db.refresh(transfer)
        return _transfer_to_result(transfer)

    async def delete_enrollment(self, enrollment_id: str) -> bool:
        enrollment = await self._get(enrollment_id)
        if not enrollment:
            return False
        await self.delete(enrollment)
        return True
