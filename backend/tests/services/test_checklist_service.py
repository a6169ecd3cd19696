"""Checklist Service — verifies CRUD, listing and error wrapping against a real store.

Invariants:
    - Omitted notes stored as None
    - Missing ids raise NotFoundError on get/update/delete
    - Any repository failure surfaces as DatabaseError with the operation message
    - Statistics for an unknown customer are zeros, not an error
"""

import pytest

from customer_health.core.domain_types import SortField, SortOrder
from customer_health.core.errors import DatabaseError, ErrorKind, NotFoundError
from customer_health.schemas.checklist import (
    ChecklistCreate, ChecklistListQuery, ChecklistUpdate,
)
from customer_health.services.checklist_service import ChecklistService


def _create(customer_id="cust-1", score=75, **extra):
    return ChecklistCreate(customer_id=customer_id, score=score, **extra)


async def test_create_stores_none_notes_when_omitted(service):
    checklist = await service.create(_create())
    assert checklist.notes is None
    assert checklist.id
    assert checklist.created_at is not None


async def test_create_keeps_notes(service):
    checklist = await service.create(_create(notes="Renewal at risk"))
    fetched = await service.get_by_id(checklist.id)
    assert fetched.notes == "Renewal at risk"


async def test_get_missing_raises_not_found(service):
    with pytest.raises(NotFoundError) as exc_info:
        await service.get_by_id("does-not-exist")
    assert exc_info.value.message == "Checklist with id 'does-not-exist' not found"


async def test_list_filters_sorts_and_paginates(service):
    for score in (40, 90, 65, 80):
        await service.create(_create(score=score))
    await service.create(_create(customer_id="other", score=99))

    result = await service.list(ChecklistListQuery(
        customer_id="cust-1", min_score=60,
        sort_by=SortField.SCORE, sort_order=SortOrder.DESC, limit=2,
    ))

    assert [c.score for c in result["data"]] == [90, 80]
    assert result["pagination"] == {
        "total": 3, "limit": 2, "offset": 0, "hasMore": True,
    }


async def test_list_last_page_has_no_more(service):
    for score in (10, 20, 30):
        await service.create(_create(score=score))
    result = await service.list(ChecklistListQuery(
        sort_by=SortField.SCORE, sort_order=SortOrder.ASC, limit=2, offset=2,
    ))
    assert [c.score for c in result["data"]] == [30]
    assert result["pagination"]["hasMore"] is False


async def test_update_changes_only_supplied_fields(service):
    checklist = await service.create(_create(notes="keep me"))
    updated = await service.update(checklist.id, ChecklistUpdate(score=95))
    assert updated.score == 95
    assert updated.customer_id == "cust-1"
    assert updated.notes == "keep me"


async def test_update_explicit_null_clears_notes(service):
    checklist = await service.create(_create(notes="temporary"))
    update = ChecklistUpdate.model_validate({"notes": None})
    updated = await service.update(checklist.id, update)
    assert updated.notes is None


async def test_update_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.update("missing", ChecklistUpdate(score=10))


async def test_delete_returns_deleted_record(service):
    checklist = await service.create(_create())
    deleted = await service.delete(checklist.id)
    assert deleted.id == checklist.id
    with pytest.raises(NotFoundError):
        await service.get_by_id(checklist.id)


async def test_delete_missing_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.delete("missing")


async def test_customer_stats(service):
    for score in (70, 80, 90):
        await service.create(_create(score=score))
    stats = await service.customer_stats("cust-1")
    assert stats["totalChecklists"] == 3
    assert stats["averageScore"] == 80
    assert stats["latestScore"] == 90
    assert len(stats["scoreHistory"]) == 3


async def test_customer_stats_unknown_customer(service):
    stats = await service.customer_stats("nobody")
    assert stats["totalChecklists"] == 0
    assert stats["averageScore"] == 0
    assert stats["latestScore"] is None
    assert stats["scoreHistory"] == []


# ─── Store failures ─────────────────────────────────────────────

class _FailingRepository:
    """Every call fails the way a lost connection would."""

    async def _boom(self, *args, **kwargs):
        raise ConnectionError("connection refused")

    create = get = find_many = count = update = delete = find_by_customer = _boom


@pytest.mark.parametrize("call,message", [
    (lambda s: s.create(_create()), "Failed to create checklist"),
    (lambda s: s.get_by_id("x"), "Failed to retrieve checklist"),
    (lambda s: s.list(ChecklistListQuery()), "Failed to list checklists"),
    (lambda s: s.update("x", ChecklistUpdate()), "Failed to update checklist"),
    (lambda s: s.delete("x"), "Failed to delete checklist"),
    (lambda s: s.customer_stats("c"), "Failed to get customer statistics"),
])
async def test_store_failure_becomes_database_error(call, message):
    service = ChecklistService(_FailingRepository())
    with pytest.raises(DatabaseError) as exc_info:
        await call(service)
    assert exc_info.value.message == message
    assert exc_info.value.kind is ErrorKind.DATABASE
    assert exc_info.value.__cause__ is not None


class _VanishingRepository(_FailingRepository):
    """Row exists at the check, gone at the mutation."""

    def __init__(self, row):
        self._row = row

    async def get(self, checklist_id):
        return self._row

    async def update(self, checklist_id, values):
        return None

    async def delete(self, checklist_id):
        return None


async def test_row_deleted_between_check_and_update_is_database_error(service):
    row = await service.create(_create())
    racing = ChecklistService(_VanishingRepository(row))
    with pytest.raises(DatabaseError) as exc_info:
        await racing.update(row.id, ChecklistUpdate(score=1))
    assert exc_info.value.message == "Failed to update checklist"
    with pytest.raises(DatabaseError):
        await racing.delete(row.id)
