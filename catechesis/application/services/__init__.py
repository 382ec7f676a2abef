"""Application services: access guard, eligibility rules, batch result shaping."""

from catechesis.application.services.access_guard import (
    CAPABILITY_TABLE,
    AccessDecision,
    AccessGuard,
)
from catechesis.application.services.eligibility_validator import (
    EligibilityValidator,
    evaluate_eligibility,
)
from catechesis.application.services.result_aggregator import aggregate_outcomes

__all__ = [
    "CAPABILITY_TABLE",
    "AccessDecision",
    "AccessGuard",
    "EligibilityValidator",
    "aggregate_outcomes",
    "evaluate_eligibility",
]
