"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumekit.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, phase: str = "layout") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        phase: Phase name for provenance (e.g., "layout", "catalog")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_catalog_loaded(catalog_path: Path, num_templates: int, num_layouts: int) -> None:
    """Log registry construction from the catalog file."""
    _log_info(f"Loaded {num_templates} templates over {num_layouts} layouts")
    _log_debug(f"  Catalog: {catalog_path}")


def log_layout_built(template_id: str, layout_name: str, page_tree) -> None:
    """Log a finished page tree with its section inventory."""
    sections = page_tree.section_ids()
    _log_debug(f"{template_id} ({layout_name}): {len(sections)} sections {sections}")


def log_input_degraded(field_name: str, value: object, reason: str) -> None:
    """Log an optional input value that was dropped instead of rendered."""
    _log_debug(f"Dropped {field_name}={value!r}: {reason}")
