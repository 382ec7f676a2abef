"""DTOs for eligibility evaluation.

EligibilitySnapshot is everything the rules need; evaluating it is pure.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from catechesis.application.dtos.level import LevelResult
from catechesis.application.dtos.person import PersonResult


@dataclass(frozen=True)
class EligibilitySnapshot:
    """Inputs for the eligibility rules, loaded once per evaluation."""

    person: PersonResult
    level: LevelResult
    approved_level_orders: frozenset[int]
    current_period_level_ids: frozenset[str]
    has_baptism_record: bool
    representative_count: int
    today: date


@dataclass(frozen=True)
class EligibilityVerdict:
    """Structured verdict: hard failures block, soft warnings advise."""

    eligible: bool
    hard_failures: tuple[str, ...] = ()
    soft_warnings: tuple[str, ...] = ()
    satisfied: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "eligible": self.eligible,
            "hard_failures": list(self.hard_failures),
            "soft_warnings": list(self.soft_warnings),
            "satisfied": list(self.satisfied),
        }
