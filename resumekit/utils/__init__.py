"""
Shared utilities for resumekit.

Common functionality used across contexts:
- Logger setup with provenance tracking
- PDF inspection
- Timestamps for output naming
"""

from resumekit.utils.timestamp import now, today

__all__ = ["now", "today"]
