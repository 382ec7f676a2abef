"""Attendance reconciler: idempotent upsert of a batch of attendance facts.

A batch is (group, day, [(enrollment_id, present), ...]). Each fact becomes
a create or an in-place update of the record for (enrollment, day). Items are
applied in input order and fail independently: an error on one item is
reported in the result and never stops the rest. Only authorization and a
structurally invalid batch fail the call as a whole.

With a unit of work, every item is committed (or rolled back) on its own, so
items applied before a failure or a cancelled request stay recorded.

Applying the same batch twice converges: the second run creates nothing and
every update reports previous == new.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime
from typing import TYPE_CHECKING

from catechesis.application.dtos.attendance import (
    AttendanceFact,
    AttendanceRecordResult,
    BatchResult,
    ItemOutcome,
)
from catechesis.application.services.result_aggregator import aggregate_outcomes
from catechesis.domain.entities.principal import Principal
from catechesis.domain.enums import Capability
from catechesis.domain.exceptions import (
    AttendanceAlreadyRecordedException,
    AttendanceRecordNotFoundException,
    CatechesisException,
    EnrollmentNotFoundException,
    GroupNotFoundException,
    InvalidAttendanceBatchException,
)
from catechesis.shared.utils.datetime import to_calendar_day

if TYPE_CHECKING:
    from catechesis.application.dtos.group import GroupResult
    from catechesis.application.interfaces.repositories import (
        IAttendanceRepository,
        IEnrollmentRepository,
        IGroupRepository,
    )
    from catechesis.application.interfaces.unit_of_work import IUnitOfWork
    from catechesis.application.services.access_guard import AccessGuard

logger = logging.getLogger(__name__)

NOT_IN_GROUP = "NOT_IN_GROUP"
INTERNAL_ERROR = "INTERNAL_ERROR"


def validate_batch(facts: Sequence[AttendanceFact]) -> None:
    """Reject empty batches, items without an enrollment id, and non-boolean present values."""
    if not facts:
        raise InvalidAttendanceBatchException("Attendance batch is empty")
    for index, fact in enumerate(facts):
        if not isinstance(fact.enrollment_id, str) or not fact.enrollment_id.strip():
            raise InvalidAttendanceBatchException(
                f"Item {index} has no enrollment_id", index=index
            )
        if not isinstance(fact.present, bool):
            raise InvalidAttendanceBatchException(
                f"Item {index} has a non-boolean 'present' value", index=index
            )


class AttendanceReconciler:
    """Applies attendance batches and single-record edits inside the access boundary."""

    def __init__(
        self,
        guard: AccessGuard,
        group_repo: IGroupRepository,
        enrollment_repo: IEnrollmentRepository,
        attendance_repo: IAttendanceRepository,
        unit_of_work: IUnitOfWork | None = None,
    ) -> None:
        self.guard = guard
        self.group_repo = group_repo
        self.enrollment_repo = enrollment_repo
        self.attendance_repo = attendance_repo
        self.unit_of_work = unit_of_work

    async def _commit(self) -> None:
        if self.unit_of_work is not None:
            await self.unit_of_work.commit()

    async def _rollback(self) -> None:
        if self.unit_of_work is not None:
            await self.unit_of_work.rollback()

    async def _authorize_group(
        self, principal: Principal, group_id: str, capability: Capability
    ) -> GroupResult:
        group = await self.group_repo.get_by_id(group_id)
        if not group:
            raise self.guard.missing_resource(
                principal, capability, GroupNotFoundException(group_id)
            )
        self.guard.require(principal, group.tenant_id, capability)
        return group

    async def reconcile_batch(
        self,
        principal: Principal,
        group_id: str,
        day: date | datetime,
        facts: Sequence[AttendanceFact],
    ) -> BatchResult:
        """Apply every fact for the group on the given calendar day.

        Raises:
            GroupNotFoundException: group does not exist (admin only).
            AuthorizationException: attendance:record denied for the group's parish,
                or the group does not exist for a non-admin.
            InvalidAttendanceBatchException: batch is empty or malformed.
        """
        group = await self._authorize_group(principal, group_id, Capability.ATTENDANCE_RECORD)
        validate_batch(facts)

        attended_on = to_calendar_day(day)
        members = frozenset(await self.enrollment_repo.get_ids_for_group(group.id))

        outcomes: list[ItemOutcome] = []
        for fact in facts:
            outcomes.append(await self._apply_isolated(group.id, attended_on, members, fact))

        result = aggregate_outcomes(group.id, attended_on, outcomes)
        logger.info(
            "Attendance batch applied: group=%s day=%s total=%d created=%d updated=%d failed=%d by=%s",
            group.id,
            attended_on.isoformat(),
            result.summary.total,
            result.summary.succeeded,
            result.summary.updated,
            result.summary.failed,
            principal.user_id,
        )
        return result

    async def _apply_isolated(
        self,
        group_id: str,
        day: date,
        members: frozenset[str],
        fact: AttendanceFact,
    ) -> ItemOutcome:
        """Apply and commit one fact; every failure becomes an error outcome for this item only."""
        try:
            outcome = await self._apply(day, members, fact)
            await self._commit()
            return outcome
        except CatechesisException as exc:
            await self._rollback()
            logger.warning(
                "Attendance item failed: group=%s day=%s enrollment=%s code=%s",
                group_id,
                day.isoformat(),
                fact.enrollment_id,
                exc.error_code,
            )
            return ItemOutcome.error(fact.enrollment_id, exc.error_code, exc.message)
        except Exception:
            await self._rollback()
            logger.exception(
                "Unexpected error reconciling attendance: group=%s day=%s enrollment=%s",
                group_id,
                day.isoformat(),
                fact.enrollment_id,
            )
            return ItemOutcome.error(
                fact.enrollment_id, INTERNAL_ERROR, "Attendance could not be recorded"
            )

    async def _apply(
        self, day: date, members: frozenset[str], fact: AttendanceFact
    ) -> ItemOutcome:
        enrollment_id: str = fact.enrollment_id
        present: bool = fact.present
        if enrollment_id not in members:
            return ItemOutcome.error(
                enrollment_id, NOT_IN_GROUP, "Enrollment does not belong to this group"
            )

        existing = await self.attendance_repo.get_for_enrollment_and_day(enrollment_id, day)
        if existing:
            return await self._update(existing, present)

        try:
            created = await self.attendance_repo.create_record(enrollment_id, day, present)
        except AttendanceAlreadyRecordedException:
            # Recorded concurrently since the lookup; last write wins.
            current = await self.attendance_repo.get_for_enrollment_and_day(enrollment_id, day)
            if current is None:
                raise
            return await self._update(current, present)
        return ItemOutcome.created(enrollment_id, created.id, created.present)

    async def _update(self, existing: AttendanceRecordResult, present: bool) -> ItemOutcome:
        if existing.present != present:
            updated = await self.attendance_repo.update_present(existing.id, present)
            if updated is None:
                raise AttendanceRecordNotFoundException(existing.id)
        return ItemOutcome.updated(existing.enrollment_id, existing.id, existing.present, present)

    async def _authorize_record(
        self, principal: Principal, record_id: str, capability: Capability
    ) -> AttendanceRecordResult:
        """Resolve record -> enrollment -> parish and require capability there."""
        record = await self.attendance_repo.get_by_id(record_id)
        if not record:
            raise self.guard.missing_resource(
                principal, capability, AttendanceRecordNotFoundException(record_id)
            )
        enrollment = await self.enrollment_repo.get_by_id(record.enrollment_id)
        if not enrollment:
            raise self.guard.missing_resource(
                principal, capability, EnrollmentNotFoundException(record.enrollment_id)
            )
        self.guard.require(principal, enrollment.tenant_id, capability)
        return record

    async def update_attendance(
        self, principal: Principal, record_id: str, present: bool
    ) -> AttendanceRecordResult:
        """Change the present flag of a single record."""
        await self._authorize_record(principal, record_id, Capability.ATTENDANCE_UPDATE)
        updated = await self.attendance_repo.update_present(record_id, present)
        if not updated:
            raise AttendanceRecordNotFoundException(record_id)
        await self._commit()
        return updated

    async def delete_attendance(self, principal: Principal, record_id: str) -> None:
        """Delete a single record."""
        await self._authorize_record(principal, record_id, Capability.ATTENDANCE_DELETE)
        if not await self.attendance_repo.delete_record(record_id):
            raise AttendanceRecordNotFoundException(record_id)
        await self._commit()
        logger.info("Attendance record deleted: id=%s by=%s", record_id, principal.user_id)

    async def list_for_group_and_day(
        self, principal: Principal, group_id: str, day: date | datetime
    ) -> list[AttendanceRecordResult]:
        """Return the group's records for one calendar day."""
        group = await self._authorize_group(principal, group_id, Capability.ATTENDANCE_READ)
        return await self.attendance_repo.list_for_group_and_day(
            group.id, to_calendar_day(day)
        )
