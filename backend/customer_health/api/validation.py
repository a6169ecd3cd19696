"""Request Validation — schema-driven body/query validation and error detail formatting.

Invariants:
    - Query strings and bodies are validated by the same pydantic schemas
    - A missing or empty body is validated as {} (per-field errors on create,
      no-op on partial update), never reported as a missing "body"
    - Every violation becomes one {path, message} entry; path omits the
      request location prefix ("body", "query", "path")
"""

import json
from typing import Any, Awaitable, Callable, Sequence, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

M = TypeVar("M", bound=BaseModel)

_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _validate(schema: type[M], data: Any, location: str) -> M:
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise RequestValidationError([
            {**err, "loc": (location, *err["loc"])}
            for err in e.errors(include_url=False, include_context=False)
        ]) from e


def validate_query(schema: type[M]) -> Callable[[Request], M]:
    """Build a dependency that validates request.query_params against schema."""

    def dependency(request: Request) -> M:
        return _validate(schema, dict(request.query_params), "query")

    return dependency


def validate_body(schema: type[M]) -> Callable[[Request], Awaitable[M]]:
    """Build a dependency that validates the JSON body against schema."""

    async def dependency(request: Request) -> M:
        raw = await request.body()
        if not raw.strip():
            return _validate(schema, {}, "body")
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise RequestValidationError([{
                "type": "json_invalid",
                "loc": ("body",),
                "msg": "Malformed JSON body",
                "input": None,
            }]) from e
        return _validate(schema, data, "body")

    return dependency


def error_path(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATIONS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts)


def validation_details(errors: Sequence[dict]) -> list[dict[str, str]]:
    """Flatten pydantic/FastAPI errors into {path, message} pairs."""
    return [
        {"path": error_path(e.get("loc", ())), "message": e.get("msg", "Invalid value")}
        for e in errors
    ]
