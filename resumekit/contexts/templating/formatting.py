"""
Shared date and label formatting used by every layout.

Dates are rendered as "Mon YYYY" with fixed English month abbreviations, so
output never depends on the host locale.
"""

from datetime import date
from typing import Optional

from resumekit.contexts.templating.defaults import (
    DATE_RANGE_SEPARATOR,
    MONTH_ABBREVIATIONS,
    PRESENT_LABEL,
)


def format_month_year(value: Optional[date]) -> str:
    """
    Format a date as "Mon YYYY".

    Examples:
        >>> format_month_year(date(2024, 1, 15))
        'Jan 2024'
        >>> format_month_year(None)
        ''
    """
    if value is None:
        return ""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def format_date_range(start: Optional[date], end: Optional[date], is_current: bool = False) -> str:
    """
    Format a start/end pair.

    A current entry always ends with "Present" regardless of end; a missing end
    on a finished entry shows the start alone.

    Examples:
        >>> format_date_range(date(2021, 3, 1), None, is_current=True)
        'Mar 2021 - Present'
        >>> format_date_range(date(2017, 6, 1), date(2021, 2, 28))
        'Jun 2017 - Feb 2021'
    """
    first = format_month_year(start)
    last = PRESENT_LABEL if is_current else format_month_year(end)

    if first and last:
        return f"{first}{DATE_RANGE_SEPARATOR}{last}"
    return first or last


def join_nonempty(*parts: Optional[str], separator: str = " | ") -> str:
    """Join the non-blank parts with a separator."""
    return separator.join(part for part in parts if part and part.strip())
