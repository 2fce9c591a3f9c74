"""
Catalog Controller

Pure helpers behind the template picker: category/search filtering, pagination
and the page-button row.
"""

import math
from typing import List, Optional, Sequence, TypeVar, Union

from resumekit.contexts.templating.template_registry import ALL_CATEGORY, TemplateInfo

TEMPLATES_PER_PAGE = 12
ELLIPSIS = "..."

T = TypeVar("T")
PageButton = Union[int, str]


def filter_templates(
    templates: Sequence[TemplateInfo], category: str = ALL_CATEGORY, query: Optional[str] = None
) -> List[TemplateInfo]:
    """
    Templates matching a category and a search query, in catalog order.

    A template matches when the category is "all" or equals its category, and
    the query is empty or a case-insensitive substring of its label or
    description.
    """
    needle = (query or "").strip().lower()
    return [
        info
        for info in templates
        if (category == ALL_CATEGORY or info.category == category)
        and (not needle or needle in info.label.lower() or needle in info.description.lower())
    ]


def total_pages(item_count: int, page_size: int = TEMPLATES_PER_PAGE) -> int:
    """Number of pages needed (0 for no items)."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(max(0, item_count) / page_size)


def clamp_page(page_number: int, page_count: int) -> int:
    """Clamp a 1-based page number into [1, max(1, page_count)]."""
    return max(1, min(page_number, max(1, page_count)))


def paginate(items: Sequence[T], page_size: int = TEMPLATES_PER_PAGE, page_number: int = 1) -> List[T]:
    """
    One page of items.

    The page number is clamped to the valid range first, so an out-of-range
    page shows the nearest page rather than nothing.

    Examples:
        >>> paginate(list(range(30)), 12, 3)
        [24, 25, 26, 27, 28, 29]
        >>> paginate(list(range(30)), 12, 99)
        [24, 25, 26, 27, 28, 29]
    """
    page = clamp_page(page_number, total_pages(len(items), page_size))
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def page_buttons(page_count: int, current: int) -> List[PageButton]:
    """
    Page-button row: first, last, current and its neighbors.

    A gap of exactly one page shows that page; a longer gap becomes a single
    ELLIPSIS marker.

    Examples:
        >>> page_buttons(10, 5)
        [1, '...', 4, 5, 6, '...', 10]
        >>> page_buttons(10, 3)
        [1, 2, 3, 4, '...', 10]
    """
    if page_count <= 0:
        return []
    current = clamp_page(current, page_count)

    shown = sorted({1, page_count, current - 1, current, current + 1} & set(range(1, page_count + 1)))

    buttons: List[PageButton] = []
    previous = 0
    for page in shown:
        gap = page - previous - 1
        if gap == 1:
            buttons.append(previous + 1)
        elif gap > 1:
            buttons.append(ELLIPSIS)
        buttons.append(page)
        previous = page
    return buttons
