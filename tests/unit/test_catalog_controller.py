"""Unit tests for catalog filtering, pagination and page buttons."""

import pytest

from resumekit.contexts.catalog.controller import (
    ELLIPSIS,
    TEMPLATES_PER_PAGE,
    clamp_page,
    filter_templates,
    page_buttons,
    paginate,
    total_pages,
)
from resumekit.contexts.templating.template_registry import ALL_CATEGORY


class TestFilter:
    @pytest.mark.unit
    def test_all_returns_catalog_order(self, registry):
        assert filter_templates(registry.list()) == registry.list()

    @pytest.mark.unit
    def test_category(self, registry):
        creative = filter_templates(registry.list(), "creative")
        assert creative
        assert {info.category for info in creative} == {"creative"}
        assert [info.id for info in creative] == [i.id for i in registry.list() if i.category == "creative"]

    @pytest.mark.unit
    def test_query_matches_label_and_description(self, registry):
        assert [info.id for info in filter_templates(registry.list(), query="  TECH ")] == ["tech"]
        by_description = filter_templates(registry.list(), query="sidebar")
        assert "modern" in [info.id for info in by_description]

    @pytest.mark.unit
    def test_category_and_query_combine(self, registry):
        assert filter_templates(registry.list(), "simple", "modern") == []
        assert filter_templates(registry.list(), ALL_CATEGORY, "") == registry.list()

    @pytest.mark.unit
    def test_unknown_category_is_empty(self, registry):
        assert filter_templates(registry.list(), "brutalist") == []


class TestPagination:
    @pytest.mark.unit
    @pytest.mark.parametrize("count, expected", [(0, 0), (1, 1), (12, 1), (13, 2), (30, 3)])
    def test_total_pages(self, count, expected):
        assert total_pages(count, TEMPLATES_PER_PAGE) == expected

    @pytest.mark.unit
    def test_total_pages_rejects_bad_size(self):
        with pytest.raises(ValueError):
            total_pages(10, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize("page, count, expected", [(0, 3, 1), (2, 3, 2), (9, 3, 3), (5, 0, 1)])
    def test_clamp_page(self, page, count, expected):
        assert clamp_page(page, count) == expected

    @pytest.mark.unit
    def test_paginate(self):
        items = list(range(30))
        assert paginate(items, 12, 1) == list(range(12))
        assert paginate(items, 12, 3) == list(range(24, 30))
        assert paginate(items, 12, 99) == list(range(24, 30))
        assert paginate(items, 12, -1) == list(range(12))
        assert paginate([], 12, 1) == []

    @pytest.mark.unit
    def test_pages_cover_every_item_once(self, registry):
        templates = registry.list()
        pages = total_pages(len(templates), 5)
        seen = [info.id for page in range(1, pages + 1) for info in paginate(templates, 5, page)]
        assert seen == registry.ids()


class TestPageButtons:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "count, current, expected",
        [
            (0, 1, []),
            (1, 1, [1]),
            (2, 2, [1, 2]),
            (5, 1, [1, 2, "...", 5]),
            (5, 3, [1, 2, 3, 4, 5]),
            (10, 5, [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]),
            (10, 3, [1, 2, 3, 4, ELLIPSIS, 10]),
            (10, 10, [1, ELLIPSIS, 9, 10]),
            (10, 42, [1, ELLIPSIS, 9, 10]),
        ],
    )
    def test_buttons(self, count, current, expected):
        assert page_buttons(count, current) == expected
