"""Template Environment — Jinja2 templates plus the filters every page shares.

Invariants:
    - Score tiers in templates come only from classify_score (score_tier global)
"""

from datetime import datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

from customer_health.core.domain_types import classify_score
from customer_health.web.view_models import format_duration

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_date(value: datetime) -> str:
    return value.strftime("%b %d, %Y")


def format_datetime(value: datetime) -> str:
    return value.strftime("%B %d, %Y %H:%M")


def format_short_date(value: datetime) -> str:
    return value.strftime("%b %d")


templates.env.globals["score_tier"] = classify_score
templates.env.filters["date"] = format_date
templates.env.filters["datetime"] = format_datetime
templates.env.filters["short_date"] = format_short_date
templates.env.filters["duration"] = format_duration
