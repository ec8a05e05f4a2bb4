"""Pagination arithmetic, sort resolution and filter compilation."""

from __future__ import annotations

import pytest

from app.domain.models.product import Product
from app.domain.models.plan import SubPlan
from app.domain.queries import (
    Equals,
    PageRequest,
    SortSpec,
    between,
    build_pagination,
    compact,
    contains,
    equals,
    product_sort,
    search,
)
from app.infrastructure.query_builder import criterion, order_clauses


@pytest.mark.parametrize(
    ("page", "limit", "total", "pages", "has_next", "has_prev"),
    [
        (1, 10, 0, 0, False, False),
        (1, 10, 10, 1, False, False),
        (1, 10, 11, 2, True, False),
        (2, 10, 11, 2, False, True),
        (5, 10, 11, 2, False, True),
    ],
)
def test_build_pagination(page, limit, total, pages, has_next, has_prev):
    pagination = build_pagination(PageRequest(page, limit), total)

    assert pagination.total_pages == pages
    assert pagination.has_next_page is has_next
    assert pagination.has_prev_page is has_prev
    assert pagination.current_page == page
    assert pagination.items_per_page == limit


def test_page_request_bounds_and_offset():
    request = PageRequest.bounded(3, 500, 100)

    assert request.limit == 100
    assert request.offset == 200
    assert PageRequest.bounded(0, 0, 100) == PageRequest(1, 1)


def test_product_sort_allow_list():
    assert product_sort("price", "asc") == SortSpec("price", descending=False)
    assert product_sort("createdAt", None) == SortSpec("created_at", descending=True)
    assert product_sort("rating", "sideways") == SortSpec("rating", descending=True)
    assert product_sort("password", "asc") is None
    assert product_sort(None, "asc") is None


def test_compact_drops_absent_parameters():
    filters = compact([
        search(None, "name"),
        search("", "name"),
        equals("category_id", None),
        equals("is_active", False),
        contains("brand", ""),
        between("price"),
        between("price", upper=10),
    ])

    assert [type(f).__name__ for f in filters] == ["Equals", "Range"]


def test_criterion_rejects_unknown_column():
    with pytest.raises(ValueError):
        criterion(Product, Equals("no_such_column", 1))


def test_criterion_rejects_non_column_attribute():
    with pytest.raises(ValueError):
        criterion(Product, Equals("__tablename__", "products"))


def test_search_escapes_like_wildcards():
    params = criterion(Product, search("50%_off", "name")).compile().params

    assert list(params.values()) == ["%50\\%\\_off%"]


def test_equals_through_relationship():
    compiled = str(criterion(SubPlan, Equals("owner_id", 7, via="plan")))

    assert "EXISTS" in compiled
    assert "plans.owner_id" in compiled


def test_order_clauses_end_with_primary_key():
    clauses = order_clauses(Product, [SortSpec("price", descending=False)])

    assert [str(c) for c in clauses] == ["products.price ASC", "products.id ASC"]
