"""
Theme Function

Derives the complete, deterministic color palette of a rendering from a single
accent color. Layouts take every color-bearing style value from a Theme, so
changing the accent recolors the whole document and nothing else.

Example:
    >>> theme = build_theme("#2563EB")
    >>> theme.accent
    '#2563eb'
    >>> theme.tint(0.5), theme.shade(0.5)
    ('#92b1f5', '#133276')
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

from resumekit.contexts.templating.defaults import NEUTRALS, ON_ACCENT_LUMINANCE_THRESHOLD
from resumekit.contexts.templating.exceptions import InvalidColorError

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

RGB = Tuple[int, int, int]


def normalize_hex(value: str) -> str:
    """
    Normalize a hex color to lowercase "#rrggbb".

    Accepts surrounding whitespace, a missing "#", and the 3-digit short form.

    Raises:
        InvalidColorError: For anything that is not a hex color
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    match = _HEX_COLOR.fullmatch(value.strip())
    if not match:
        raise InvalidColorError(value)

    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def hex_to_rgb(value: str) -> RGB:
    digits = normalize_hex(value)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(rgb: RGB) -> str:
    return "#" + "".join(f"{channel:02x}" for channel in rgb)


def relative_luminance(value: str) -> float:
    """WCAG relative luminance of a hex color, in [0, 1]."""

    def linear(channel: int) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(value)
    return 0.2126 * linear(r) + 0.7152 * linear(g) + 0.0722 * linear(b)


def _check_fraction(fraction: float) -> float:
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"Color fraction must be within [0, 1], got {fraction}")
    return float(fraction)


@dataclass(frozen=True)
class Theme:
    """
    Color palette derived from one accent.

    Attributes:
        accent: Normalized accent color
        ink: Body text color
        muted: Secondary text color (dates, locations)
        paper: Page background
        rule: Divider and meter track color
        on_accent: Text color readable on an accent fill
    """

    accent: str
    ink: str = NEUTRALS["ink"]
    muted: str = NEUTRALS["muted"]
    paper: str = NEUTRALS["paper"]
    rule: str = NEUTRALS["rule"]
    on_accent: str = NEUTRALS["paper"]

    def tint(self, fraction: float) -> str:
        """Mix the accent toward white; 0 is the accent, 1 is white."""
        fraction = _check_fraction(fraction)
        return rgb_to_hex(
            tuple(int(c + (255 - c) * fraction + 0.5) for c in hex_to_rgb(self.accent))
        )

    def shade(self, fraction: float) -> str:
        """Mix the accent toward black; 0 is the accent, 1 is black."""
        fraction = _check_fraction(fraction)
        return rgb_to_hex(tuple(int(c * (1 - fraction) + 0.5) for c in hex_to_rgb(self.accent)))

    @property
    def neutrals(self) -> Dict[str, str]:
        return {"ink": self.ink, "muted": self.muted, "paper": self.paper, "rule": self.rule}


@lru_cache(maxsize=128)
def _theme_for(accent: str) -> Theme:
    on_accent = NEUTRALS["ink"] if relative_luminance(accent) > ON_ACCENT_LUMINANCE_THRESHOLD else NEUTRALS["paper"]
    return Theme(accent=accent, on_accent=on_accent)


def build_theme(accent_hex: str) -> Theme:
    """
    Build (or fetch the cached) theme for an accent color.

    Args:
        accent_hex: Hex color in any accepted spelling

    Returns:
        Theme; equal inputs after normalization return the same instance

    Raises:
        InvalidColorError: If accent_hex is not a hex color
    """
    return _theme_for(normalize_hex(accent_hex))
