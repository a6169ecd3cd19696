"""Checklist ORM — persists one customer health checklist.

Invariants:
    - id is an opaque uuid4 string generated on insert
    - score is an integer in 0..100 (check constraint mirrors schema validation)
    - created_at stamped on insert; updated_at stamped on insert and every update
    - Flat table: no relationships, no soft delete

Design Decisions:
    - String(36) id over native UUID: works identically on PostgreSQL and SQLite
    - Python-side timestamp defaults: values are available on the instance
      without a refresh round-trip
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from customer_health.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Checklist(Base):
    """Customer health checklist — the only persisted entity."""
    __tablename__ = "customer_health_checklists"
    __table_args__ = (
        CheckConstraint(
            "score >= 0 AND score <= 100", name="ck_checklist_score_range",
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    customer_id: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return (
            f"Checklist(id={self.id!r}, customer_id={self.customer_id!r}, "
            f"score={self.score})"
        )
