"""Checklist API — typed wrappers over ApiClient for every checklist endpoint.

Invariants:
    - Single-resource calls unwrap the {data} envelope
    - list() returns the whole {data, pagination} page
    - Responses are parsed into the same pydantic schemas the server emits
"""

from typing import Any, Mapping
from urllib.parse import quote

from customer_health.client.api_client import ApiClient
from customer_health.schemas.checklist import (
    ChecklistPage, ChecklistRead, CustomerStatsRead,
)
from customer_health.schemas.health import HealthSummaryRead


class ChecklistApi:
    """Checklist operations as the UI uses them."""

    base_path = "/api/checklists"

    def __init__(self, client: ApiClient):
        self._client = client

    def _item_path(self, checklist_id: str) -> str:
        return f"{self.base_path}/{quote(checklist_id, safe='')}"

    async def create(self, data: Mapping[str, Any]) -> ChecklistRead:
        response = await self._client.post(self.base_path, dict(data))
        return ChecklistRead.model_validate(response["data"])

    async def list(self, params: Mapping[str, Any] | None = None) -> ChecklistPage:
        response = await self._client.get(self.base_path, params)
        return ChecklistPage.model_validate(response)

    async def get_by_id(self, checklist_id: str) -> ChecklistRead:
        response = await self._client.get(self._item_path(checklist_id))
        return ChecklistRead.model_validate(response["data"])

    async def update(
        self, checklist_id: str, data: Mapping[str, Any],
    ) -> ChecklistRead:
        response = await self._client.put(self._item_path(checklist_id), dict(data))
        return ChecklistRead.model_validate(response["data"])

    async def delete(self, checklist_id: str) -> ChecklistRead:
        response = await self._client.delete(self._item_path(checklist_id))
        return ChecklistRead.model_validate(response["data"])

    async def get_customer_stats(self, customer_id: str) -> CustomerStatsRead:
        response = await self._client.get(
            f"{self.base_path}/customer/{quote(customer_id, safe='')}/stats",
        )
        return CustomerStatsRead.model_validate(response["data"])

    async def get_health(self) -> HealthSummaryRead:
        response = await self._client.get("/health")
        return HealthSummaryRead.model_validate(response)
