"""List Query — filter and page-window values for checklist listing.

Invariants:
    - Score bounds are inclusive and independently optional (applied by the
      repository query)
    - Empty customer_id means "no customer filter" (same as None)
    - has_more is strictly offset + limit < total (equal boundary is not "more")
"""

from dataclasses import dataclass

from customer_health.core.domain_types import DEFAULT_PAGE_LIMIT


@dataclass(frozen=True)
class ChecklistFilter:
    customer_id: str | None = None
    min_score: int | None = None
    max_score: int | None = None

    @property
    def has_customer(self) -> bool:
        return bool(self.customer_id)


@dataclass(frozen=True)
class PageWindow:
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0


def has_more(offset: int, limit: int, total: int) -> bool:
    return offset + limit < total


def pagination_meta(window: PageWindow, total: int) -> dict:
    """Pagination block of a list response."""
    return {
        "total": total,
        "limit": window.limit,
        "offset": window.offset,
        "hasMore": has_more(window.offset, window.limit, total),
    }
