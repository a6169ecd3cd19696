"""API Client — verifies error mapping and parameter handling over httpx.MockTransport.

Invariants:
    - Non-2xx JSON → ApiClientError with body message, code and details
    - Non-JSON failure → "Request failed" with the response status
    - Transport failure → status 0, NETWORK_ERROR
    - None-valued params are never sent
"""

import httpx
import pytest

from customer_health.client.api_client import (
    NETWORK_ERROR_MESSAGE, ApiClient, ApiClientError, build_params,
)
from customer_health.client.checklist_api import ChecklistApi
from customer_health.core.domain_types import SortField

CHECKLIST = {
    "id": "abc", "customerId": "acme", "score": 82, "notes": None,
    "createdAt": "2026-01-01T00:00:00Z", "updatedAt": "2026-01-01T00:00:00Z",
}


def _client(handler) -> ApiClient:
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://api.test",
    )
    return ApiClient(http)


def test_build_params_drops_none_and_stringifies():
    assert build_params({
        "customerId": None, "limit": 10, "sortBy": SortField.SCORE, "flag": True,
    }) == {"limit": "10", "sortBy": "score", "flag": "true"}
    assert build_params(None) == {}


async def test_success_returns_json():
    client = _client(lambda req: httpx.Response(200, json={"data": CHECKLIST}))
    assert await client.get("/api/checklists/abc") == {"data": CHECKLIST}


async def test_error_json_maps_message_code_details():
    details = [{"path": "score", "message": "too big"}]

    def handler(request):
        return httpx.Response(400, json={
            "error": "Validation failed", "details": details,
        })

    with pytest.raises(ApiClientError) as exc_info:
        await _client(handler).post("/api/checklists", {"score": 500})
    err = exc_info.value
    assert err.status == 400
    assert err.code == "Validation failed"
    assert err.message == "Request failed"
    assert err.field_errors == {"score": "too big"}


async def test_error_json_with_message():
    def handler(request):
        return httpx.Response(404, json={
            "error": "NOT_FOUND", "message": "Checklist with id 'x' not found",
        })

    with pytest.raises(ApiClientError) as exc_info:
        await _client(handler).get("/api/checklists/x")
    assert exc_info.value.status == 404
    assert exc_info.value.code == "NOT_FOUND"
    assert exc_info.value.message == "Checklist with id 'x' not found"


async def test_non_json_failure_keeps_status():
    client = _client(lambda req: httpx.Response(502, text="Bad Gateway"))
    with pytest.raises(ApiClientError) as exc_info:
        await client.get("/api/checklists")
    assert exc_info.value.status == 502
    assert exc_info.value.message == "Request failed"
    assert exc_info.value.code is None


async def test_non_json_success_returns_empty_dict():
    client = _client(lambda req: httpx.Response(204))
    assert await client.delete("/api/checklists/abc") == {}


async def test_transport_failure_is_network_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ApiClientError) as exc_info:
        await _client(handler).get("/api/checklists")
    assert exc_info.value.status == 0
    assert exc_info.value.code == "NETWORK_ERROR"
    assert exc_info.value.message == NETWORK_ERROR_MESSAGE


async def test_list_sends_only_present_params():
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        return httpx.Response(200, json={
            "data": [CHECKLIST],
            "pagination": {"total": 1, "limit": 10, "offset": 0, "hasMore": False},
        })

    page = await ChecklistApi(_client(handler)).list(
        {"customerId": None, "minScore": 60, "limit": 10},
    )
    assert seen == {"minScore": "60", "limit": "10"}
    assert page.data[0].customer_id == "acme"
    assert page.pagination.has_more is False


async def test_ids_are_url_encoded():
    paths = []

    def handler(request):
        paths.append(request.url.raw_path.decode())
        return httpx.Response(200, json={"data": CHECKLIST})

    await ChecklistApi(_client(handler)).get_by_id("a/b c")
    assert paths == ["/api/checklists/a%2Fb%20c"]
