"""Checklist Repository — SQLAlchemy implementation of ChecklistRepository.

Invariants:
    - Each call opens its own session: find_many and count may run concurrently
    - Writes commit inside the call; callers never see an open transaction
    - get/update/delete return None for a missing id instead of raising
    - SortField values map to columns through _SORT_COLUMNS only

Design Decisions:
    - Session per call over session per request: the list endpoint issues its
      page fetch and total count in parallel, which one AsyncSession forbids
"""

import logging
from typing import Any, Sequence

from sqlalchemy import Select, func, select

from customer_health.core.domain_types import SortField, SortOrder
from customer_health.core.list_query import ChecklistFilter, PageWindow
from customer_health.infrastructure.database import DatabaseSessionManager
from customer_health.models.checklist import Checklist

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    SortField.CREATED_AT: Checklist.created_at,
    SortField.UPDATED_AT: Checklist.updated_at,
    SortField.SCORE: Checklist.score,
}


def apply_filter(stmt: Select, flt: ChecklistFilter) -> Select:
    """Add WHERE clauses for customer and inclusive score bounds."""
    if flt.has_customer:
        stmt = stmt.where(Checklist.customer_id == flt.customer_id)
    if flt.min_score is not None:
        stmt = stmt.where(Checklist.score >= flt.min_score)
    if flt.max_score is not None:
        stmt = stmt.where(Checklist.score <= flt.max_score)
    return stmt


class SqlAlchemyChecklistRepository:
    """Checklist persistence over a DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def create(self, values: dict[str, Any]) -> Checklist:
        async with self._db.session() as session:
            checklist = Checklist(**values)
            session.add(checklist)
            await session.commit()
            await session.refresh(checklist)
            return checklist

    async def get(self, checklist_id: str) -> Checklist | None:
        async with self._db.session() as session:
            return await session.get(Checklist, checklist_id)

    async def find_many(
        self,
        flt: ChecklistFilter,
        sort_by: SortField,
        sort_order: SortOrder,
        window: PageWindow,
    ) -> Sequence[Checklist]:
        column = _SORT_COLUMNS[sort_by]
        ordering = column.asc() if sort_order is SortOrder.ASC else column.desc()
        stmt = (
            apply_filter(select(Checklist), flt)
            .order_by(ordering)
            .limit(window.limit)
            .offset(window.offset)
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            return result.scalars().all()

    async def count(self, flt: ChecklistFilter) -> int:
        stmt = apply_filter(select(func.count()).select_from(Checklist), flt)
        async with self._db.session() as session:
            result = await session.execute(stmt)
            return result.scalar_one()

    async def update(
        self, checklist_id: str, values: dict[str, Any],
    ) -> Checklist | None:
        async with self._db.session() as session:
            checklist = await session.get(Checklist, checklist_id)
            if checklist is None:
                return None
            for field, value in values.items():
                setattr(checklist, field, value)
            await session.commit()
            await session.refresh(checklist)
            return checklist

    async def delete(self, checklist_id: str) -> Checklist | None:
        async with self._db.session() as session:
            checklist = await session.get(Checklist, checklist_id)
            if checklist is None:
                return None
            await session.delete(checklist)
            await session.commit()
            return checklist

    async def find_by_customer(self, customer_id: str) -> Sequence[Any]:
        """(score, created_at) rows for one customer, newest first."""
        stmt = (
            select(Checklist.score, Checklist.created_at)
            .where(Checklist.customer_id == customer_id)
            .order_by(Checklist.created_at.desc())
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            return result.all()
