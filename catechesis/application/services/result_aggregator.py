"""Shapes per-item reconciliation outcomes into a batch result (pure, no I/O)."""

from collections.abc import Iterable
from datetime import date
from typing import Any

from catechesis.application.dtos.attendance import BatchResult, BatchSummary, ItemOutcome
from catechesis.domain.enums import OutcomeKind


def _created_detail(outcome: ItemOutcome) -> dict[str, Any]:
    return {
        "enrollment_id": outcome.enrollment_id,
        "record_id": outcome.record_id,
        "present": outcome.new,
    }


def _updated_detail(outcome: ItemOutcome) -> dict[str, Any]:
    return {
        "enrollment_id": outcome.enrollment_id,
        "record_id": outcome.record_id,
        "previous": outcome.previous,
        "new": outcome.new,
    }


def _error_detail(outcome: ItemOutcome) -> dict[str, Any]:
    return {
        "enrollment_id": outcome.enrollment_id,
        "error": outcome.error_code,
        "message": outcome.message,
    }


def aggregate_outcomes(
    group_id: str, day: date, outcomes: Iterable[ItemOutcome]
) -> BatchResult:
    """Group outcomes by kind, preserving input order within each list.

    summary.succeeded counts created records; updated and failed are
    reported separately, so total == succeeded + updated + failed.
    """
    created: list[dict[str, Any]] = []
    updated: list[dict[str, Any]] = []
    errors: list[dict[str, Any]] = []
    for outcome in outcomes:
        if outcome.kind is OutcomeKind.CREATED:
            created.append(_created_detail(outcome))
        elif outcome.kind is OutcomeKind.UPDATED:
            updated.append(_updated_detail(outcome))
        else:
            errors.append(_error_detail(outcome))
    summary = BatchSummary(
        total=len(created) + len(updated) + len(errors),
        succeeded=len(created),
        updated=len(updated),
        failed=len(errors),
    )
    return BatchResult(
        group_id=group_id,
        day=day,
        summary=summary,
        created=created,
        updated=updated,
        errors=errors,
    )
