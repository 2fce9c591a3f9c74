"""
Catalog Context

Responsibilities:
- Filters the template catalog by category and search text
- Paginates results and computes the page-button row

Owns: Template picker navigation state helpers
Never: Renders previews (the rendering context does)
"""

from resumekit.contexts.catalog.controller import (
    ELLIPSIS,
    TEMPLATES_PER_PAGE,
    clamp_page,
    filter_templates,
    page_buttons,
    paginate,
    total_pages,
)

__all__ = [
    "ELLIPSIS",
    "TEMPLATES_PER_PAGE",
    "clamp_page",
    "filter_templates",
    "page_buttons",
    "paginate",
    "total_pages",
]
