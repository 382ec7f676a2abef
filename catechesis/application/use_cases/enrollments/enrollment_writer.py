"""Enrollment writer: guarded creation and maintenance of enrollments.

Creation order (both paths):
group and authorize against its parish (403; 404 only for admin) -> person (404)
-> supplied parish must match the group's (400) -> duplicate pre-check (409)
-> [assisted: eligibility] -> insert.

The (person_id, group_id) unique constraint is the authority for duplicates;
the pre-check only gives the common case a friendly error before the insert.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from catechesis.application.dtos.enrollment import (
    AssistedEnrollmentResult,
    EnrollmentCreate,
    EnrollmentResult,
    EnrollmentToPersist,
    EnrollmentTransferResult,
)
from catechesis.domain.entities.principal import Principal
from catechesis.domain.enums import Capability
from catechesis.domain.exceptions import (
    EligibilityRequirementsNotMetException,
    EnrollmentAlreadyExistsException,
    EnrollmentNotFoundException,
    GroupNotFoundException,
    GroupTenantMismatchException,
    InvalidTransferException,
    PersonNotFoundException,
)

if TYPE_CHECKING:
    from catechesis.application.dtos.group import GroupResult
    from catechesis.application.interfaces.repositories import (
        IEnrollmentRepository,
        IGroupRepository,
        IPersonRepository,
    )
    from catechesis.application.services.access_guard import AccessGuard
    from catechesis.application.services.eligibility_validator import EligibilityValidator

logger = logging.getLogger(__name__)


class EnrollmentWriter:
    """Creates, transfers, updates and deletes enrollments inside the access boundary."""

    def __init__(
        self,
        guard: AccessGuard,
        group_repo: IGroupRepository,
        person_repo: IPersonRepository,
        enrollment_repo: IEnrollmentRepository,
        eligibility_validator: EligibilityValidator,
    ) -> None:
        self.guard = guard
        self.group_repo = group_repo
        self.person_repo = person_repo
        self.enrollment_repo = enrollment_repo
        self.eligibility_validator = eligibility_validator

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

    async def _prepare(
        self, principal: Principal, data: EnrollmentCreate
    ) -> tuple[GroupResult, EnrollmentToPersist]:
        """Run the shared checks and return the group and the row to insert."""
        group = await self._authorize_group(
            principal, data.group_id, Capability.ENROLLMENT_CREATE
        )

        person = await self.person_repo.get_by_id(data.person_id)
        if not person:
            raise PersonNotFoundException(data.person_id)

        if data.tenant_id is not None and data.tenant_id != group.tenant_id:
            raise GroupTenantMismatchException(group.id, group.tenant_id, data.tenant_id)

        existing = await self.enrollment_repo.get_by_person_and_group(person.id, group.id)
        if existing:
            raise EnrollmentAlreadyExistsException(person.id, group.id)

        return group, EnrollmentToPersist(
            person_id=person.id,
            group_id=group.id,
            tenant_id=group.tenant_id,
            paid=data.paid,
            notes=data.notes,
        )

    async def _insert(self, principal: Principal, row: EnrollmentToPersist) -> EnrollmentResult:
        # Repository translates a unique-constraint race into EnrollmentAlreadyExistsException.
        enrollment = await self.enrollment_repo.create_enrollment(row)
        logger.info(
            "Enrollment created: id=%s person=%s group=%s tenant=%s by=%s",
            enrollment.id,
            enrollment.person_id,
            enrollment.group_id,
            enrollment.tenant_id,
            principal.user_id,
        )
        return enrollment

    async def create_enrollment(
        self, principal: Principal, data: EnrollmentCreate
    ) -> EnrollmentResult:
        """Create an enrollment without eligibility checks (office override path)."""
        _, row = await self._prepare(principal, data)
        return await self._insert(principal, row)

    async def create_enrollment_assisted(
        self,
        principal: Principal,
        data: EnrollmentCreate,
        enforce_eligibility: bool = True,
    ) -> AssistedEnrollmentResult:
        """Create an enrollment after running eligibility with the sequence rule as a warning.

        With enforce_eligibility, any hard failure aborts with the full verdict.
        Without it, the enrollment is written and hard failures are returned
        alongside the warnings.

        Raises:
            EligibilityRequirementsNotMetException: enforce_eligibility and a hard rule failed.
        """
        group, row = await self._prepare(principal, data)
        verdict = await self.eligibility_validator.validate(
            row.person_id, group.level_id, assisted=True
        )
        if not verdict.eligible and enforce_eligibility:
            logger.info(
                "Assisted enrollment rejected: person=%s group=%s hard=%s",
                row.person_id,
                group.id,
                ",".join(verdict.hard_failures),
            )
            raise EligibilityRequirementsNotMetException(
                hard_failures=list(verdict.hard_failures),
                soft_warnings=list(verdict.soft_warnings),
            )
        enrollment = await self._insert(principal, row)
        return AssistedEnrollmentResult(
            enrollment=enrollment,
            warnings=list(verdict.soft_warnings),
            hard_failures=[] if enforce_eligibility else list(verdict.hard_failures),
        )

    async def _authorize_enrollment(
        self, principal: Principal, enrollment_id: str, capability: Capability
    ) -> EnrollmentResult:
        enrollment = await self.enrollment_repo.get_by_id(enrollment_id)
        if not enrollment:
            raise self.guard.missing_resource(
                principal, capability, EnrollmentNotFoundException(enrollment_id)
            )
        self.guard.require(principal, enrollment.tenant_id, capability)
        return enrollment

    async def update_payment(
        self, principal: Principal, enrollment_id: str, paid: bool
    ) -> EnrollmentResult:
        """Set or clear the paid flag."""
        enrollment = await self._authorize_enrollment(
            principal, enrollment_id, Capability.ENROLLMENT_PAYMENT
        )
        updated = await self.enrollment_repo.update_payment(enrollment_id, paid)
        if not updated:
            raise EnrollmentNotFoundException(enrollment_id)
        return updated

    async def transfer_enrollment(
        self,
        principal: Principal,
        enrollment_id: str,
        to_group_id: str,
        reason: str | None = None,
    ) -> tuple[EnrollmentResult, EnrollmentTransferResult]:
        """Move an enrollment to another group of the same parish and log the move.

        Returns:
            (updated enrollment, transfer log row).
        """
        enrollment = await self._authorize_enrollment(
            principal, enrollment_id, Capability.ENROLLMENT_TRANSFER
        )

        target = await self._authorize_group(
            principal, to_group_id, Capability.ENROLLMENT_TRANSFER
        )
        if target.id == enrollment.group_id:
            raise InvalidTransferException(
                "Enrollment is already in the target group", enrollment_id, to_group_id
            )
        if target.tenant_id != enrollment.tenant_id:
            raise GroupTenantMismatchException(
                target.id, target.tenant_id, enrollment.tenant_id
            )
        existing = await self.enrollment_repo.get_by_person_and_group(
            enrollment.person_id, target.id
        )
        if existing:
            raise EnrollmentAlreadyExistsException(enrollment.person_id, target.id)

        moved = await self.enrollment_repo.move_to_group(enrollment_id, target.id)
        transfer = await self.enrollment_repo.record_transfer(
            enrollment_id=enrollment_id,
            from_group_id=enrollment.group_id,
            to_group_id=target.id,
            reason=reason,
            transferred_by=principal.user_id,
        )
        logger.info(
            "Enrollment transferred: id=%s from=%s to=%s by=%s",
            enrollment_id,
            enrollment.group_id,
            target.id,
            principal.user_id,
        )
        return moved, transfer

    async def delete_enrollment(self, principal: Principal, enrollment_id: str) -> None:
        """Delete an enrollment; its attendance records go with it."""
        enrollment = await self._authorize_enrollment(
            principal, enrollment_id, Capability.ENROLLMENT_DELETE
        )
        if not await self.enrollment_repo.delete_enrollment(enrollment_id):
            raise EnrollmentNotFoundException(enrollment_id)
        logger.info("Enrollment deleted: id=%s by=%s", enrollment_id, principal.user_id)
