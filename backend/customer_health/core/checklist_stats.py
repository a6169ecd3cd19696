"""Customer Statistics — pure aggregation over one customer's checklists.

Invariants:
    - Input rows are already ordered newest-first; output history keeps that order
    - Empty input yields averageScore 0 and latestScore None (never NaN, never raises)
    - averageScore rounds half-up to 2 decimals

Design Decisions:
    - Pure function over (score, created_at) pairs: the service does the IO,
      this module only computes — testable without a database
"""

import math
from datetime import datetime
from typing import Iterable, Protocol


class ScoredRow(Protocol):
    score: int
    created_at: datetime


def round_half_up(value: float, places: int = 2) -> float:
    """Round like Math.round(value * 10^places) / 10^places."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def compute_customer_stats(rows: Iterable[ScoredRow]) -> dict:
    rows = list(rows)
    total = len(rows)
    average = sum(r.score for r in rows) / total if total else 0
    return {
        "totalChecklists": total,
        "averageScore": round_half_up(average) if total else 0,
        "latestScore": rows[0].score if rows else None,
        "scoreHistory": [
            {"date": r.created_at, "score": r.score} for r in rows
        ],
    }
