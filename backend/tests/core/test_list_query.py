"""Tests for list query helpers — customer filter and pagination metadata."""

from customer_health.core.list_query import (
    ChecklistFilter, PageWindow, has_more, pagination_meta,
)


def test_empty_customer_id_is_no_filter():
    assert not ChecklistFilter(customer_id="").has_customer
    assert ChecklistFilter(customer_id="cust-1").has_customer


def test_has_more_is_strict():
    assert has_more(0, 10, 11)
    assert not has_more(0, 10, 10)
    assert not has_more(20, 10, 5)


def test_pagination_meta_shape():
    assert pagination_meta(PageWindow(limit=2, offset=2), 5) == {
        "total": 5, "limit": 2, "offset": 2, "hasMore": True,
    }
    assert pagination_meta(PageWindow(), 0)["hasMore"] is False
