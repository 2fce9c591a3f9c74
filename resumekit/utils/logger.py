"""
Shared loguru setup for resumekit sessions.

Each context (template, render, preview) logs one session into its own
directory: a DEBUG-level file for the record, plus an INFO-level console sink.
Prefixed wrappers live in contexts/{context}/logger.py; only those wrappers and
the CLI call into this module.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

import resumekit

load_dotenv()

CONSOLE_LEVEL = os.getenv("RESUMEKIT_CONSOLE_LOG_LEVEL", "INFO").upper()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"

RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console_level: str = CONSOLE_LEVEL,
) -> Path:
    """
    Route loguru output for one session to <log_dir>/<context_name>.log and stdout.

    Any sinks configured earlier are removed, so the last session set up in a
    process owns the output. The log opens with a provenance block.

    Args:
        context_name: Session context ("template", "render", "preview")
        log_dir: Directory for this session, created if missing
        extra_provenance: Extra lines for the provenance block
        console_level: Minimum level shown on stdout

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(context_name, extra_provenance)
    return log_file


def provenance(context_name: str, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Key/value lines identifying the session: what ran, where, with which versions."""
    lines = {
        "Context": context_name,
        "resumekit": resumekit.__version__,
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": sys.version.split()[0],
    }
    lines.update(extra or {})
    return lines


def log_provenance(context_name: str, extra: Optional[Dict[str, str]] = None) -> None:
    logger.info(RULE)
    for key, value in provenance(context_name, extra).items():
        logger.info(f"{key}: {value}")
    logger.info(RULE)
