"""Checklist Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ChecklistCreate: customerId 1-100 chars, score integer 0-100, notes <=1000 chars or null
    - ChecklistUpdate: same rules, every field optional; explicit null only allowed for notes
    - ChecklistUpdate.changes() contains exactly the fields present in the request
    - ChecklistListQuery parses query-string values (all strings) into typed params
    - Wire names are camelCase; Python attributes are snake_case

Design Decisions:
    - Strict types for score/customerId: "85", 85.5 and true are rejected, not
      coerced; a whole-number float (85.0) is the integer 85
    - Timestamps read without an offset are UTC, so responses always carry one
    - Absent vs present-null vs present-value tracked by pydantic's fields_set
      (exclude_unset) rather than a sentinel: "notes": null clears, no "notes" keeps
"""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import (
    AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, StrictInt,
    StrictStr, field_validator,
)
from pydantic.alias_generators import to_camel

from customer_health.core.domain_types import (
    CUSTOMER_ID_MAX_LENGTH, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT,
    NOTES_MAX_LENGTH, SCORE_MAX, SCORE_MIN, SortField, SortOrder,
)
from customer_health.core.list_query import ChecklistFilter, PageWindow

CustomerIdField = Annotated[
    StrictStr, Field(min_length=1, max_length=CUSTOMER_ID_MAX_LENGTH),
]


def _whole_float_to_int(v: Any) -> Any:
    # JSON has one number type: 85.0 is the integer 85, 85.5 is not
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


def _as_utc(v: datetime) -> datetime:
    # SQLite drops the offset of timestamptz columns; stored values are UTC
    return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v


ScoreField = Annotated[
    StrictInt, BeforeValidator(_whole_float_to_int),
    Field(ge=SCORE_MIN, le=SCORE_MAX),
]
NotesField = Annotated[StrictStr, Field(max_length=NOTES_MAX_LENGTH)]
UtcDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChecklistCreate(CamelModel):
    """Checklist creation — all rules enforced before the service is called."""
    customer_id: CustomerIdField
    score: ScoreField
    notes: NotesField | None = None


class ChecklistUpdate(CamelModel):
    """Partial update — an empty body is a valid no-op."""
    customer_id: CustomerIdField | None = None
    score: ScoreField | None = None
    notes: NotesField | None = None

    @field_validator("customer_id", "score")
    @classmethod
    def reject_explicit_null(cls, v: Any) -> Any:
        # Only runs for supplied values; defaults are not validated
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> dict[str, Any]:
        """Fields supplied by the caller, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class ChecklistListQuery(CamelModel):
    """List query parameters — defaults applied when absent."""
    customer_id: str | None = None
    min_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)
    max_score: int | None = Field(None, ge=SCORE_MIN, le=SCORE_MAX)
    limit: int = Field(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    offset: int = Field(0, ge=0)
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    def to_filter(self) -> ChecklistFilter:
        return ChecklistFilter(
            customer_id=self.customer_id,
            min_score=self.min_score,
            max_score=self.max_score,
        )

    def to_window(self) -> PageWindow:
        return PageWindow(limit=self.limit, offset=self.offset)


class ChecklistRead(CamelModel):
    """Checklist response — public-facing record."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: str
    customer_id: str
    score: int
    notes: str | None
    created_at: UtcDateTime
    updated_at: UtcDateTime


class ScoreHistoryEntry(CamelModel):
    date: UtcDateTime
    score: int


class CustomerStatsRead(CamelModel):
    """Aggregated statistics for one customer."""
    total_checklists: int
    average_score: float
    latest_score: int | None
    score_history: list[ScoreHistoryEntry]


class PaginationRead(CamelModel):
    total: int
    limit: int
    offset: int
    has_more: bool


class ChecklistPage(CamelModel):
    """One page of a checklist listing."""
    data: list[ChecklistRead]
    pagination: PaginationRead
