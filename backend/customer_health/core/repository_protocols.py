"""Boundary Protocols — contracts between the service layer and the store.

Invariants:
    - Services depend on ChecklistRepository, never on SQLAlchemy directly
    - get/update/delete return None when the row does not exist (no exception)
    - find_by_customer returns rows newest-first by created_at

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol, Sequence

from customer_health.core.domain_types import (
    ChecklistId, CustomerId, SortField, SortOrder,
)
from customer_health.core.list_query import ChecklistFilter, PageWindow


class ChecklistLike(Protocol):
    """Structural contract for checklist rows handed back by a repository."""
    id: ChecklistId
    customer_id: str
    score: int
    notes: str | None


class ChecklistRepository(Protocol):
    """Contract for checklist persistence — implemented by infrastructure."""
    async def create(self, values: dict[str, Any]) -> ChecklistLike: ...
    async def get(self, checklist_id: ChecklistId) -> ChecklistLike | None: ...
    async def find_many(
        self,
        flt: ChecklistFilter,
        sort_by: SortField,
        sort_order: SortOrder,
        window: PageWindow,
    ) -> Sequence[ChecklistLike]: ...
    async def count(self, flt: ChecklistFilter) -> int: ...
    async def update(
        self, checklist_id: ChecklistId, values: dict[str, Any],
    ) -> ChecklistLike | None: ...
    async def delete(self, checklist_id: ChecklistId) -> ChecklistLike | None: ...
    async def find_by_customer(self, customer_id: CustomerId) -> Sequence[Any]: ...
