"""API Client — one request function over httpx.AsyncClient with typed errors.

Invariants:
    - Query values are stringified; None values are dropped
    - Non-2xx JSON response → ApiClientError(status, code=body.error, details=body.details)
    - Non-2xx non-JSON response → ApiClientError(status) with no code
    - Transport failure (no response) → ApiClientError(status=0, code="NETWORK_ERROR")
    - Successful non-JSON response → {}

Design Decisions:
    - The httpx.AsyncClient is injected: one pooled client per process, and
      tests can hand in an ASGITransport or MockTransport
"""

import logging
from typing import Any, Literal, Mapping

import httpx

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

NETWORK_ERROR_MESSAGE = "Network error - please check your connection"


class ApiClientError(Exception):
    """Any failed API call, as seen by UI code."""

    def __init__(
        self,
        message: str,
        status: int,
        code: str | None = None,
        details: list[dict[str, str]] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.details = details

    @property
    def field_errors(self) -> dict[str, str]:
        """Validation details keyed by field path (first message wins)."""
        errors: dict[str, str] = {}
        for item in self.details or []:
            errors.setdefault(item.get("path", ""), item.get("message", ""))
        return errors

    def __repr__(self) -> str:
        return (
            f"ApiClientError(status={self.status}, code={self.code!r}, "
            f"message={self.message!r})"
        )


def build_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    if not params:
        return {}
    return {
        key: _stringify(value)
        for key, value in params.items()
        if value is not None
    }


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if hasattr(value, "value"):  # str Enums
        return str(value.value)
    return str(value)


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


class ApiClient:
    """Typed HTTP access to the customer health API."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def request(
        self,
        method: HttpMethod,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        try:
            response = await self._http.request(
                method,
                path,
                json=body,
                params=build_params(params),
            )
        except httpx.TransportError as e:
            logger.warning(f"API transport failure on {method} {path}: {e}")
            raise ApiClientError(NETWORK_ERROR_MESSAGE, 0, "NETWORK_ERROR") from e

        if not _is_json(response):
            if not response.is_success:
                raise ApiClientError("Request failed", response.status_code)
            return {}

        try:
            data = response.json()
        except ValueError as e:
            if not response.is_success:
                raise ApiClientError("Request failed", response.status_code) from e
            raise ApiClientError(
                "An unexpected error occurred", 500, "UNKNOWN_ERROR",
            ) from e

        if not response.is_success:
            payload = data if isinstance(data, dict) else {}
            raise ApiClientError(
                payload.get("message") or "Request failed",
                response.status_code,
                payload.get("error"),
                payload.get("details"),
            )
        return data

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
