"""Timestamp helpers for naming output directories and files."""

from datetime import datetime


def now() -> str:
    """Current local time as a filesystem-safe stamp (e.g., "20251114_123456")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def today() -> str:
    """Current local date (e.g., "2025-11-14")."""
    return datetime.now().strftime("%Y-%m-%d")


def elapsed_label(seconds: float) -> str:
    """
    Compact duration label for log lines.

    Examples:
        elapsed_label(0.0421)  # "42ms"
        elapsed_label(3.5)     # "3.50s"
    """
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.2f}s"
