"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix,
and [preview] for the preview pipeline. All rendering modules should import from
this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumekit.utils.logger import setup_logger as _setup_logger
from resumekit.utils.timestamp import elapsed_label

CONTEXT_PREFIX = "[render]"
PREVIEW_PREFIX = "[preview]"


def setup_rendering_logger(log_dir: Path) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session

    Returns:
        Path to log file

    Example:
        from resumekit.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir)
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Serializer": "WeasyPrint (HTML -> PDF)"},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_composition_start(template_id: str, accent: str, resume_name: str) -> None:
    """Log start of a composition."""
    _log_info(f"Composing {resume_name or 'resume'} with '{template_id}' ({accent})")


def log_composition_result(artifact, elapsed_time: float) -> None:
    """
    Log a finished composition.

    Args:
        artifact: BinaryArtifact from compose()
        elapsed_time: Time taken to compose
    """
    pages = artifact.page_count if artifact.page_count is not None else "?"
    _log_success(f"{artifact.template_id}: {pages} page(s), {len(artifact.content)} bytes ({elapsed_label(elapsed_time)})")


def log_composition_failure(template_id: str, error: Exception) -> None:
    _log_error(f"{template_id}: {type(error).__name__}: {error}")


def log_artifact_event(action: str, handle_id: str, path: Path) -> None:
    """Log artifact handle creation/revocation (debug level, can be chatty)."""
    _log_debug(f"{action} handle {handle_id}: {path}")


# Preview pipeline helpers with [preview] prefix


def log_preview_transition(consumer_id: str, old_state, new_state, token: int) -> None:
    """Log a preview state change."""
    logger.debug(f"{PREVIEW_PREFIX} {consumer_id}: {old_state.value} -> {new_state.value} (#{token})")


def log_preview_stale(consumer_id: str, token: int, current_token: int) -> None:
    logger.debug(f"{PREVIEW_PREFIX} {consumer_id}: discarded stale result #{token} (current #{current_token})")


def log_preview_failure(consumer_id: str, key, error: Exception) -> None:
    logger.warning(
        f"{PREVIEW_PREFIX} {consumer_id}: {key.template_id} ({key.accent_color}) failed: "
        f"{type(error).__name__}: {error}"
    )


def log_preview_closed(consumer_id: str, released: bool) -> None:
    logger.debug(f"{PREVIEW_PREFIX} {consumer_id}: closed ({'released handle' if released else 'no live handle'})")
