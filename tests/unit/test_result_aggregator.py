"""Tests for aggregate_outcomes (pure)."""

from datetime import date

from catechesis.application.dtos.attendance import ItemOutcome
from catechesis.application.services.result_aggregator import aggregate_outcomes


def test_groups_by_kind_preserving_order() -> None:
    outcomes = [
        ItemOutcome.error("e3", "NOT_IN_GROUP", "nope"),
        ItemOutcome.created("e1", "r1", True),
        ItemOutcome.updated("e2", "r2", False, True),
        ItemOutcome.created("e4", "r4", False),
    ]
    result = aggregate_outcomes("g1", date(2024, 3, 10), outcomes)
    assert [c["enrollment_id"] for c in result.created] == ["e1", "e4"]
    assert result.updated == [
        {"enrollment_id": "e2", "record_id": "r2", "previous": False, "new": True}
    ]
    assert result.errors == [{"enrollment_id": "e3", "error": "NOT_IN_GROUP", "message": "nope"}]
    s = result.summary
    assert (s.total, s.succeeded, s.updated, s.failed) == (4, 2, 1, 1)


def test_empty_outcomes() -> None:
    result = aggregate_outcomes("g1", date(2024, 3, 10), [])
    assert result.summary.total == 0
    assert result.created == result.updated == result.errors == []
