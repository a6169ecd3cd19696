"""Tests for compute_customer_stats — pure aggregation, no IO."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from customer_health.core.checklist_stats import (
    compute_customer_stats, round_half_up,
)

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


def _rows(*scores):
    """Newest-first rows, one day apart."""
    return [
        SimpleNamespace(score=s, created_at=NOW - timedelta(days=i))
        for i, s in enumerate(scores)
    ]


def test_empty_rows_yield_zero_stats():
    stats = compute_customer_stats([])
    assert stats == {
        "totalChecklists": 0,
        "averageScore": 0,
        "latestScore": None,
        "scoreHistory": [],
    }


def test_latest_score_is_first_row():
    stats = compute_customer_stats(_rows(90, 70, 80))
    assert stats["latestScore"] == 90
    assert stats["totalChecklists"] == 3
    assert stats["averageScore"] == 80


def test_history_keeps_newest_first_order():
    stats = compute_customer_stats(_rows(10, 20))
    assert [h["score"] for h in stats["scoreHistory"]] == [10, 20]
    assert stats["scoreHistory"][0]["date"] == NOW


def test_average_rounds_to_two_places():
    assert compute_customer_stats(_rows(1, 2, 2))["averageScore"] == 1.67


def test_round_half_up():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(2.5, places=0) == 3
    assert round_half_up(80.0) == 80.0
