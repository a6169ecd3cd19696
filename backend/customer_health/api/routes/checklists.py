"""Checklist Routes — CRUD, listing and per-customer statistics.

Invariants:
    - Bodies, query strings and path ids are validated before the service is called
    - A missing body counts as {}
    - Collection routes answer at /api/checklists and /api/checklists/ alike
    - Success envelopes: {data, message} for writes, {data, pagination} for
      listing, {data} for reads
    - Errors propagate to the global handlers (api/error_handlers.py)
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from customer_health.api.deps import get_checklist_service
from customer_health.api.validation import validate_body, validate_query
from customer_health.core.domain_types import ChecklistId, CustomerId
from customer_health.schemas.checklist import (
    ChecklistCreate, ChecklistListQuery, ChecklistRead, ChecklistUpdate,
    CustomerStatsRead,
)
from customer_health.services.checklist_service import ChecklistService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/checklists", tags=["checklists"])

ChecklistIdPath = Annotated[str, Path(min_length=1)]
Service = Annotated[ChecklistService, Depends(get_checklist_service)]


def serialize(checklist) -> dict:
    return ChecklistRead.model_validate(checklist).model_dump(
        mode="json", by_alias=True,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
@router.post(
    "/", status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
async def create_checklist(
    service: Service,
    body: ChecklistCreate = Depends(validate_body(ChecklistCreate)),
):
    """Create a new customer health checklist."""
    checklist = await service.create(body)
    return {
        "data": serialize(checklist),
        "message": "Checklist created successfully",
    }


@router.get("")
@router.get("/", include_in_schema=False)
async def list_checklists(
    service: Service,
    params: ChecklistListQuery = Depends(validate_query(ChecklistListQuery)),
):
    """List checklists with filtering, sorting and pagination."""
    result = await service.list(params)
    return {
        "data": [serialize(c) for c in result["data"]],
        "pagination": result["pagination"],
    }


@router.get("/customer/{customer_id}/stats")
async def get_customer_stats(customer_id: str, service: Service):
    """Aggregated statistics for one customer."""
    stats = await service.customer_stats(CustomerId(customer_id))
    return {
        "data": CustomerStatsRead.model_validate(stats).model_dump(
            mode="json", by_alias=True,
        ),
    }


@router.get("/{checklist_id}")
async def get_checklist(checklist_id: ChecklistIdPath, service: Service):
    """Get a single checklist."""
    checklist = await service.get_by_id(ChecklistId(checklist_id))
    return {"data": serialize(checklist)}


@router.put("/{checklist_id}")
async def update_checklist(
    checklist_id: ChecklistIdPath,
    service: Service,
    body: ChecklistUpdate = Depends(validate_body(ChecklistUpdate)),
):
    """Partially update a checklist — only supplied fields change."""
    checklist = await service.update(ChecklistId(checklist_id), body)
    return {
        "data": serialize(checklist),
        "message": "Checklist updated successfully",
    }


@router.delete("/{checklist_id}")
async def delete_checklist(checklist_id: ChecklistIdPath, service: Service):
    """Delete a checklist and return the deleted record."""
    checklist = await service.delete(ChecklistId(checklist_id))
    return {
        "data": serialize(checklist),
        "message": "Checklist deleted successfully",
    }
