"""Domain Types — verifies enum wire values, bounds and score tiers.

Tests:
    - Sort enums serialize to their API names
    - classify_score thresholds are inclusive at 80 and 60
    - Every tier has a display label
"""

import pytest

from customer_health.core.domain_types import (
    SCORE_MAX, SCORE_MIN, ScoreTier, SortField, SortOrder, classify_score,
)


def test_sort_fields_use_api_names():
    assert [f.value for f in SortField] == ["createdAt", "updatedAt", "score"]
    assert SortField("score") is SortField.SCORE


def test_sort_order_values():
    assert {o.value for o in SortOrder} == {"asc", "desc"}


def test_score_bounds():
    assert (SCORE_MIN, SCORE_MAX) == (0, 100)


@pytest.mark.parametrize("score,tier", [
    (100, ScoreTier.EXCELLENT),
    (80, ScoreTier.EXCELLENT),
    (79, ScoreTier.GOOD),
    (60, ScoreTier.GOOD),
    (59, ScoreTier.NEEDS_ATTENTION),
    (0, ScoreTier.NEEDS_ATTENTION),
])
def test_classify_score_thresholds(score, tier):
    assert classify_score(score) is tier


def test_every_tier_has_label():
    assert ScoreTier.EXCELLENT.label == "Excellent"
    assert ScoreTier.GOOD.label == "Good"
    assert ScoreTier.NEEDS_ATTENTION.label == "Needs Attention"
