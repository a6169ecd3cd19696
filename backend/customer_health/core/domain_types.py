"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Score is an integer bounded SCORE_MIN..SCORE_MAX inclusive
    - All valid sort fields/orders encoded as Enums — no raw string matching
    - classify_score is the single source of tier thresholds (>=80, >=60)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums whose values are the wire names: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ChecklistId = NewType("ChecklistId", str)
CustomerId = NewType("CustomerId", str)


# ─── Value Bounds ────────────────────────────────────────────────

SCORE_MIN = 0
SCORE_MAX = 100
CUSTOMER_ID_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 1000

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


# ─── Enums ───────────────────────────────────────────────────────

class SortField(str, Enum):
    """Sortable checklist fields — values are the API (camelCase) names."""
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    SCORE = "score"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ScoreTier(str, Enum):
    """Presentation tier for a health score."""
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_ATTENTION = "needs-attention"

    @property
    def label(self) -> str:
        return _TIER_LABELS[self]


_TIER_LABELS = {
    ScoreTier.EXCELLENT: "Excellent",
    ScoreTier.GOOD: "Good",
    ScoreTier.NEEDS_ATTENTION: "Needs Attention",
}


def classify_score(score: int) -> ScoreTier:
    """Map a score to its presentation tier."""
    if score >= 80:
        return ScoreTier.EXCELLENT
    if score >= 60:
        return ScoreTier.GOOD
    return ScoreTier.NEEDS_ATTENTION
