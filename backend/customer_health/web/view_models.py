"""View Models — page state and form handling for the browser UI.

Invariants:
    - ListState built from a query string never carries unparsable numbers
    - Changing any filter or sort restarts the listing at offset 0 (the
      filter form has no offset field)
    - validate_checklist_form applies the same limits as ChecklistCreate and
      reports one message per field
"""

from dataclasses import dataclass, field, replace
from typing import Any, Mapping
from urllib.parse import urlencode

from customer_health.core.domain_types import (
    CUSTOMER_ID_MAX_LENGTH, DEFAULT_PAGE_LIMIT, NOTES_MAX_LENGTH,
    SCORE_MAX, SCORE_MIN, SortField, SortOrder,
)


def _int_or_none(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class ListState:
    """Filters, sort and page window of the list page."""
    customer_id: str | None = None
    min_score: int | None = None
    max_score: int | None = None
    sort_by: str = SortField.CREATED_AT.value
    sort_order: str = SortOrder.DESC.value
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "ListState":
        limit = _int_or_none(query.get("limit"))
        offset = _int_or_none(query.get("offset"))
        return cls(
            customer_id=(query.get("customerId") or "").strip() or None,
            min_score=_int_or_none(query.get("minScore")),
            max_score=_int_or_none(query.get("maxScore")),
            sort_by=query.get("sortBy") or SortField.CREATED_AT.value,
            sort_order=query.get("sortOrder") or SortOrder.DESC.value,
            limit=limit if limit and limit > 0 else DEFAULT_PAGE_LIMIT,
            offset=offset if offset and offset > 0 else 0,
        )

    @property
    def has_active_filters(self) -> bool:
        return any(
            v is not None
            for v in (self.customer_id, self.min_score, self.max_score)
        )

    def api_params(self) -> dict[str, Any]:
        return {
            "customerId": self.customer_id,
            "minScore": self.min_score,
            "maxScore": self.max_score,
            "limit": self.limit,
            "offset": self.offset,
            "sortBy": self.sort_by,
            "sortOrder": self.sort_order,
        }

    def query_string(self) -> str:
        params = {k: v for k, v in self.api_params().items() if v is not None}
        if not params.get("offset"):
            params.pop("offset", None)
        return urlencode(params)

    def previous_page(self) -> "ListState":
        return replace(self, offset=max(0, self.offset - self.limit))

    def next_page(self) -> "ListState":
        return replace(self, offset=self.offset + self.limit)

    @property
    def page_number(self) -> int:
        return self.offset // self.limit + 1

    def total_pages(self, total: int) -> int:
        return max(1, -(-total // self.limit))


@dataclass
class ChecklistForm:
    """Raw form values plus per-field error messages."""
    customer_id: str = ""
    score: str = ""
    notes: str = ""
    errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "ChecklistForm":
        return cls(
            customer_id=str(form.get("customerId", "")),
            score=str(form.get("score", "")),
            notes=str(form.get("notes", "")),
        )

    @classmethod
    def from_checklist(cls, checklist) -> "ChecklistForm":
        return cls(
            customer_id=checklist.customer_id,
            score=str(checklist.score),
            notes=checklist.notes or "",
        )

    def validate(self) -> bool:
        self.errors = validate_checklist_form(
            self.customer_id, self.score, self.notes,
        )
        return not self.errors

    def payload(self) -> dict[str, Any]:
        """Request body for create/update; blank notes are sent as null."""
        return {
            "customerId": self.customer_id,
            "score": int(self.score.strip()),
            "notes": self.notes.strip() or None,
        }

    def merge_api_errors(self, details: Mapping[str, str]) -> None:
        for path, message in details.items():
            if path in ("customerId", "score", "notes"):
                self.errors.setdefault(path, message)


def validate_checklist_form(
    customer_id: str, score: str, notes: str,
) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not customer_id.strip():
        errors["customerId"] = "Customer ID is required"
    elif len(customer_id) > CUSTOMER_ID_MAX_LENGTH:
        errors["customerId"] = (
            f"Customer ID must be less than {CUSTOMER_ID_MAX_LENGTH} characters"
        )

    if not score.strip():
        errors["score"] = "Score is required"
    else:
        value = _int_or_none(score)
        if value is None:
            errors["score"] = "Score must be a number"
        elif value < SCORE_MIN:
            errors["score"] = f"Score must be at least {SCORE_MIN}"
        elif value > SCORE_MAX:
            errors["score"] = f"Score must be at most {SCORE_MAX}"

    if notes and len(notes) > NOTES_MAX_LENGTH:
        errors["notes"] = (
            f"Notes must be less than {NOTES_MAX_LENGTH} characters"
        )
    return errors


def format_duration(seconds: int) -> str:
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"
