"""
PDF processing utilities for inspecting rendered documents.

Helper functions:
    page_count: Quick page count without full extraction.
    extract_lines: Text lines per page, top-to-bottom.
    normalize_for_matching: Text normalization for fuzzy matching.
    find_line: Locate the first line containing some text.
"""

import io
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import pdfplumber
from PyPDF2 import PdfReader

PdfSource = Union[bytes, str, Path]


def _open_stream(source: PdfSource):
    """Return something both PyPDF2 and pdfplumber accept."""
    if isinstance(source, bytes):
        return io.BytesIO(source)
    return str(source)


def page_count(source: PdfSource) -> Optional[int]:
    """Get page count from PDF bytes or path, or None if unreadable."""
    try:
        reader = PdfReader(_open_stream(source))
        return len(reader.pages)
    except Exception:
        return None


def normalize_for_matching(text: str) -> str:
    """Keep only lowercase alphanumeric characters for fuzzy text matching."""
    return "".join(c for c in text.lower() if c.isalnum())


def extract_lines(source: PdfSource, max_pages: int = 50) -> Dict[int, List[str]]:
    """
    Extract text lines from every page.

    Args:
        source: PDF bytes or path to a PDF file
        max_pages: Stop after this many pages

    Returns:
        Dict mapping page number (1-indexed) to its text lines, top-to-bottom.
    """
    pages: Dict[int, List[str]] = {}

    with pdfplumber.open(_open_stream(source)) as pdf:
        for page_num, page in enumerate(pdf.pages[:max_pages], start=1):
            text = page.extract_text() or ""
            pages[page_num] = [line for line in text.splitlines() if line.strip()]

    return pages


def find_line(lines_by_page: Dict[int, List[str]], text: str) -> Optional[Tuple[int, int]]:
    """
    Find the first line containing text (normalized substring match).

    Returns:
        (page, line_index) of the first match, or None.
    """
    needle = normalize_for_matching(text)
    for page_num in sorted(lines_by_page):
        for line_idx, line in enumerate(lines_by_page[page_num]):
            if needle in normalize_for_matching(line):
                return page_num, line_idx
    return None
