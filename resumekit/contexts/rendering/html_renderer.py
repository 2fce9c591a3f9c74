"""
HTML Renderer

Turns a PageTree into a standalone HTML document using Jinja2 templates in
rendering/templates/. The HTML is print-oriented: page size and margins come
from the tree, entries avoid page breaks inside themselves, and everything else
flows, so long resumes continue onto further pages.
"""

import re
from pathlib import Path
from typing import Dict, Iterable, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from markupsafe import Markup, escape

from resumekit.contexts.rendering.exceptions import SerializationError
from resumekit.contexts.rendering.logger import _log_warning
from resumekit.contexts.templating.defaults import DEFAULT_FONT_FAMILY
from resumekit.contexts.templating.page_tree import PageTree
from resumekit.contexts.templating.rich_text import TextRun

TEMPLATES_DIR = Path(__file__).parent / "templates"
DOCUMENT_TEMPLATE = "resume.html.jinja"

# Style keys consumed by templates rather than emitted as CSS
NON_CSS_KEYS = ("fill", "track")

DOT_COUNT = 5

# Family names, quotes, commas and spaces only: no ";", braces or "<"
FONT_FAMILY_PATTERN = re.compile(r"^[\w\s,'\"-]+$")


def style_to_css(style: Dict[str, str], exclude: Sequence[str] = NON_CSS_KEYS) -> str:
    """
    Serialize a node style dict to an inline CSS declaration list.

    Example:
        >>> style_to_css({"color": "#111827", "fill": "#2563eb"})
        'color: #111827'
    """
    return "; ".join(f"{key}: {value}" for key, value in style.items() if key not in exclude)


def runs_to_html(runs: Iterable[TextRun]) -> Markup:
    """Render styled runs as escaped inline HTML."""
    parts = []
    for run in runs:
        html = escape(run.text)
        if run.underline:
            html = Markup("<u>%s</u>") % html
        if run.italic:
            html = Markup("<em>%s</em>") % html
        if run.bold:
            html = Markup("<strong>%s</strong>") % html
        if run.href:
            html = Markup('<a href="%s">%s</a>') % (run.href, html)
        parts.append(html)
    return Markup("").join(parts)


def filled_dots(value: float, count: int = DOT_COUNT) -> int:
    """Number of filled dots for a meter value in [0, 1]."""
    return max(0, min(count, int(value * count + 0.5)))


def font_family_css(value: str) -> Markup:
    """
    Mark a font-family list safe for the document's <style> block.

    Autoescaping would turn the quotes in "'Times New Roman'" into entities,
    which CSS does not decode. Values with anything beyond family names fall
    back to the default stack.
    """
    if value and FONT_FAMILY_PATTERN.match(value):
        return Markup(value)
    _log_warning(f"Ignoring unsafe font family {value!r}, using {DEFAULT_FONT_FAMILY}")
    return Markup(DEFAULT_FONT_FAMILY)


class HtmlRenderer:
    """
    Jinja2-backed PageTree serializer.

    Templates are loaded once per renderer and cached by Jinja2's environment.
    """

    def __init__(self, templates_dir: Path = TEMPLATES_DIR):
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["css"] = style_to_css
        self.env.filters["runs_html"] = runs_to_html
        self.env.filters["font_family"] = font_family_css
        self.env.globals["filled_dots"] = filled_dots
        self.env.globals["dot_count"] = DOT_COUNT

    def render(self, tree: PageTree) -> str:
        """
        Render a page tree to an HTML string.

        Raises:
            SerializationError: If the template fails to render
        """
        try:
            template = self.env.get_template(DOCUMENT_TEMPLATE)
            return template.render(tree=tree, root=tree.root)
        except TemplateError as e:
            raise SerializationError(
                "HTML rendering failed", template_id=tree.template_id, original_error=e
            ) from e
