"""Eligibility validator: may a person enter a curriculum level?

Rules are evaluated by evaluate_eligibility, a pure function of an
EligibilitySnapshot; EligibilityValidator only loads the snapshot. Every
rule is evaluated (no short-circuit) so the caller sees all reasons.

Rules:
- AGE_FLOOR: whole-year age below the minimum, unless special_case. Hard.
- ACTIVE_ENROLLMENT_EXISTS: already enrolled in a group of the same level
  in the current period (any parish). Hard.
- LEVEL_SEQUENCE_INCOMPLETE: for order > 1, fewer than order - 1 distinct
  lower levels with an approved certificate. Hard on the strict path,
  soft on the assisted path.
- BAPTISM_RECORD_MISSING: for order >= 2, no baptism data. Soft.
- LEGAL_REPRESENTATIVE_MISSING: minor with no representative. Soft.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

from catechesis.application.dtos.eligibility import EligibilitySnapshot, EligibilityVerdict
from catechesis.domain.entities.principal import Principal
from catechesis.domain.enums import Capability, EligibilityReason
from catechesis.domain.exceptions import LevelNotFoundException, PersonNotFoundException
from catechesis.shared.utils.datetime import age_in_years, period_contains_year, today_utc

if TYPE_CHECKING:
    from catechesis.application.interfaces.repositories import (
        ICertificateRepository,
        IEnrollmentRepository,
        ILevelRepository,
        IPersonRepository,
    )
    from catechesis.application.services.access_guard import AccessGuard

DEFAULT_MINIMUM_AGE = 6
DEFAULT_ADULT_AGE = 18


def evaluate_eligibility(
    snapshot: EligibilitySnapshot,
    *,
    sequence_is_hard: bool = True,
    minimum_age: int = DEFAULT_MINIMUM_AGE,
    adult_age: int = DEFAULT_ADULT_AGE,
) -> EligibilityVerdict:
    """Apply every eligibility rule to the snapshot and return the verdict.

    Deterministic: the same snapshot and options always give the same verdict.

    Args:
        snapshot: Person, target level and the records the rules read.
        sequence_is_hard: False on the assisted path (sequence becomes a warning).
        minimum_age: Age floor in whole years.
        adult_age: Age from which no legal representative is expected.
    """
    hard: list[str] = []
    soft: list[str] = []
    satisfied: list[str] = []

    person = snapshot.person
    level = snapshot.level
    age = age_in_years(person.birth_date, snapshot.today)

    if age < minimum_age and not person.special_case:
        hard.append(EligibilityReason.AGE_FLOOR.value)
    else:
        satisfied.append(EligibilityReason.AGE_FLOOR.value)

    if level.id in snapshot.current_period_level_ids:
        hard.append(EligibilityReason.ACTIVE_ENROLLMENT_EXISTS.value)
    else:
        satisfied.append(EligibilityReason.ACTIVE_ENROLLMENT_EXISTS.value)

    if level.order > 1:
        completed = sum(1 for o in snapshot.approved_level_orders if o < level.order)
        if completed < level.order - 1:
            target = hard if sequence_is_hard else soft
            target.append(EligibilityReason.LEVEL_SEQUENCE_INCOMPLETE.value)
        else:
            satisfied.append(EligibilityReason.LEVEL_SEQUENCE_INCOMPLETE.value)

    if level.order >= 2:
        if not snapshot.has_baptism_record:
            soft.append(EligibilityReason.BAPTISM_RECORD_MISSING.value)
        else:
            satisfied.append(EligibilityReason.BAPTISM_RECORD_MISSING.value)

    if age < adult_age:
        if snapshot.representative_count == 0:
            soft.append(EligibilityReason.LEGAL_REPRESENTATIVE_MISSING.value)
        else:
            satisfied.append(EligibilityReason.LEGAL_REPRESENTATIVE_MISSING.value)

    return EligibilityVerdict(
        eligible=not hard,
        hard_failures=tuple(hard),
        soft_warnings=tuple(soft),
        satisfied=tuple(satisfied),
    )


class EligibilityValidator:
    """Loads eligibility snapshots from repositories and evaluates them."""

    def __init__(
        self,
        person_repo: IPersonRepository,
        level_repo: ILevelRepository,
        certificate_repo: ICertificateRepository,
        enrollment_repo: IEnrollmentRepository,
        *,
        minimum_age: int = DEFAULT_MINIMUM_AGE,
        adult_age: int = DEFAULT_ADULT_AGE,
        clock: Callable[[], date] = today_utc,
        guard: AccessGuard | None = None,
    ) -> None:
        self._person_repo = person_repo
        self._level_repo = level_repo
        self._certificate_repo = certificate_repo
        self._enrollment_repo = enrollment_repo
        self._minimum_age = minimum_age
        self._adult_age = adult_age
        self._clock = clock
        self._guard = guard

    async def load_snapshot(self, person_id: str, level_id: str) -> EligibilitySnapshot:
        """Read everything the rules need. Raises 404 exceptions for unknown person or level."""
        person = await self._person_repo.get_by_id(person_id)
        if not person:
            raise PersonNotFoundException(person_id)
        level = await self._level_repo.get_by_id(level_id)
        if not level:
            raise LevelNotFoundException(level_id)

        today = self._clock()
        placements = await self._enrollment_repo.list_level_periods_for_person(person_id)
        current_level_ids = frozenset(
            lid for lid, period in placements if period_contains_year(period, today.year)
        )
        return EligibilitySnapshot(
            person=person,
            level=level,
            approved_level_orders=await self._certificate_repo.get_approved_level_orders(
                person_id
            ),
            current_period_level_ids=current_level_ids,
            has_baptism_record=await self._person_repo.has_baptism_record(person_id),
            representative_count=await self._person_repo.count_legal_representatives(
                person_id
            ),
            today=today,
        )

    async def validate(
        self, person_id: str, level_id: str, *, assisted: bool = False
    ) -> EligibilityVerdict:
        """Return the verdict for person entering level (sequence is soft when assisted)."""
        snapshot = await self.load_snapshot(person_id, level_id)
        return evaluate_eligibility(
            snapshot,
            sequence_is_hard=not assisted,
            minimum_age=self._minimum_age,
            adult_age=self._adult_age,
        )

    async def check(
        self, principal: Principal, person_id: str, level_id: str
    ) -> EligibilityVerdict:
        """Strict-path check for a caller: requires eligibility:read in the caller's parish."""
        if self._guard is not None:
            self._guard.require(principal, principal.tenant_id, Capability.ELIGIBILITY_READ)
        return await self.validate(person_id, level_id)
