"""Checklist Service — CRUD, listing and customer statistics over a ChecklistRepository.

Invariants:
    - create() stores notes as None when omitted (never "")
    - list() issues page fetch and total count concurrently, joined before returning
    - update()/delete() confirm existence first; a missing id is NotFoundError,
      never DatabaseError
    - update() writes exactly the fields present in the request, None included
    - customer_stats() never raises NotFoundError: unknown customer = zero rows

Design Decisions:
    - Repository injected through the constructor (no module-level instance);
      main.py builds one service per process in the lifespan
    - Read-then-act on update/delete kept as-is: a row deleted between the
      existence check and the mutation surfaces as DatabaseError, the same
      outcome the store reports for "no such row"
"""

import asyncio
import logging
from contextlib import contextmanager
from typing import Any, Iterator

from customer_health.core.checklist_stats import compute_customer_stats
from customer_health.core.domain_types import ChecklistId, CustomerId
from customer_health.core.errors import (
    AppError, DatabaseError, ErrorKind, NotFoundError,
)
from customer_health.core.list_query import pagination_meta
from customer_health.core.repository_protocols import (
    ChecklistLike, ChecklistRepository,
)
from customer_health.schemas.checklist import (
    ChecklistCreate, ChecklistListQuery, ChecklistUpdate,
)

logger = logging.getLogger(__name__)

RESOURCE = "Checklist"


@contextmanager
def _store_errors(message: str, operation: str) -> Iterator[None]:
    """Wrap any store failure as DatabaseError; NotFoundError passes through."""
    try:
        yield
    except AppError as e:
        if e.kind is ErrorKind.NOT_FOUND:
            raise
        logger.error(
            f"{message}: {e.message}", extra={"operation": operation},
        )
        raise DatabaseError(message, operation) from e
    except Exception as e:
        logger.error(
            f"{message}: {e}", extra={"operation": operation}, exc_info=True,
        )
        raise DatabaseError(message, operation) from e


class ChecklistService:
    """Business operations for customer health checklists."""

    def __init__(self, repository: ChecklistRepository):
        self._repo = repository

    async def create(self, data: ChecklistCreate) -> ChecklistLike:
        with _store_errors("Failed to create checklist", "create"):
            checklist = await self._repo.create({
                "customer_id": data.customer_id,
                "score": data.score,
                "notes": data.notes,
            })
        logger.info(
            "Checklist created",
            extra={"checklist_id": checklist.id, "customer_id": checklist.customer_id},
        )
        return checklist

    async def get_by_id(self, checklist_id: ChecklistId) -> ChecklistLike:
        with _store_errors("Failed to retrieve checklist", "get"):
            checklist = await self._repo.get(checklist_id)
            if checklist is None:
                raise NotFoundError(RESOURCE, checklist_id)
        return checklist

    async def list(self, params: ChecklistListQuery) -> dict[str, Any]:
        flt = params.to_filter()
        window = params.to_window()
        with _store_errors("Failed to list checklists", "list"):
            checklists, total = await asyncio.gather(
                self._repo.find_many(
                    flt, params.sort_by, params.sort_order, window,
                ),
                self._repo.count(flt),
            )
        return {
            "data": list(checklists),
            "pagination": pagination_meta(window, total),
        }

    async def update(
        self, checklist_id: ChecklistId, data: ChecklistUpdate,
    ) -> ChecklistLike:
        with _store_errors("Failed to update checklist", "update"):
            await self.get_by_id(checklist_id)
            updated = await self._repo.update(checklist_id, data.changes())
            if updated is None:
                # Deleted by a concurrent request after the existence check
                raise DatabaseError(
                    f"Checklist {checklist_id} no longer exists", "update",
                )
        logger.info(
            "Checklist updated",
            extra={"checklist_id": checklist_id, "operation": "update"},
        )
        return updated

    async def delete(self, checklist_id: ChecklistId) -> ChecklistLike:
        with _store_errors("Failed to delete checklist", "delete"):
            await self.get_by_id(checklist_id)
            deleted = await self._repo.delete(checklist_id)
            if deleted is None:
                raise DatabaseError(
                    f"Checklist {checklist_id} no longer exists", "delete",
                )
        logger.info(
            "Checklist deleted",
            extra={"checklist_id": checklist_id, "operation": "delete"},
        )
        return deleted

    async def customer_stats(self, customer_id: CustomerId) -> dict[str, Any]:
        with _store_errors("Failed to get customer statistics", "stats"):
            rows = await self._repo.find_by_customer(customer_id)
        return compute_customer_stats(rows)
