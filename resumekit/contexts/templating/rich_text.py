"""
Inline Rich-Text Renderer

Converts the constrained markup allowed in free-text resume fields (summaries,
descriptions) into ordered, styled text runs.

Supported subset:
    Markdown-style:  **bold**  *italic*  __underline__  [label](https://url)
    HTML tags:       <b> <strong> <i> <em> <u> <ins> <a href="...">
    Block structure: <p> <br> <div> <ul>/<ol>/<li>, lines starting with "• " or "- "

Anything else is stripped down to its text content. Malformed markup never
raises: unclosed tags simply stop applying at the end of the input, stray
closing tags are ignored.

Example:
    >>> render_runs("Shipped **v2** on *time*")
    [TextRun(text='Shipped '), TextRun(text='v2', bold=True), TextRun(text=' on '),
     TextRun(text='time', italic=True)]
"""

import html
import re
from dataclasses import dataclass, replace
from html.parser import HTMLParser
from typing import List, Optional, Tuple

# Markdown emphasis must hug non-space characters, so "5 * 3 * 2" stays plain
MARKDOWN_PATTERNS = [
    (re.compile(r"\[([^\]\n]+)\]\(([^)\s]+)\)"), "link"),
    (re.compile(r"\*\*(?=\S)(.+?)(?<=\S)\*\*", re.DOTALL), "strong"),
    (re.compile(r"__(?=\S)(.+?)(?<=\S)__", re.DOTALL), "u"),
    (re.compile(r"(?<![*\w])\*(?=[^\s*])([^*]+?)(?<=[^\s*])\*(?![*\w])"), "em"),
]

# Cheap check for anything that could be markup
MARKUP_HINT = re.compile(r"<[A-Za-z/!]|&#?\w+;|\*\*|__|\*\S|\[[^\]]+\]\(")

# A "<" that does not open a complete tag (or comment) is literal text
STRAY_LT = re.compile(r"<(?!/?[A-Za-z][\w-]*(?:\s[^<>]*)?/?>|!--)")

STYLE_TAGS = {
    "b": "bold",
    "strong": "bold",
    "i": "italic",
    "em": "italic",
    "u": "underline",
    "ins": "underline",
}
BLOCK_TAGS = {"p", "div", "ul", "ol", "li", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote"}
SKIPPED_TAGS = {"script", "style", "head", "title"}

BULLET_MARKERS = ("• ", "- ", "* ")
LIST_ITEM_MARKER = "• "


@dataclass(frozen=True)
class TextRun:
    """
    A span of text with uniform inline style.

    Attributes:
        text: Literal text (may contain newlines only inside render_runs output)
        bold / italic / underline: Inline style flags
        href: Link target for hyperlink runs
    """

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    href: Optional[str] = None

    @property
    def is_plain(self) -> bool:
        return not (self.bold or self.italic or self.underline or self.href)

    def same_style(self, other: "TextRun") -> bool:
        return (self.bold, self.italic, self.underline, self.href) == (
            other.bold,
            other.italic,
            other.underline,
            other.href,
        )


@dataclass(frozen=True)
class RichBlock:
    """
    A block of rich text: one paragraph, or a bullet list.

    Attributes:
        kind: PARAGRAPH or BULLETS
        items: For a paragraph, a single tuple of runs. For bullets, one tuple per item.
    """

    PARAGRAPH = "paragraph"
    BULLETS = "bullets"

    kind: str
    items: Tuple[Tuple[TextRun, ...], ...]


class _MarkupParser(HTMLParser):
    """Walks tag soup and collects styled runs, keeping a count per open style."""

    def __init__(self, mark_list_items: bool = False):
        super().__init__(convert_charrefs=True)
        self.mark_list_items = mark_list_items
        self.runs: List[TextRun] = []
        self._depth = {"bold": 0, "italic": 0, "underline": 0}
        self._links: List[Optional[str]] = []
        self._skip = 0

    def handle_starttag(self, tag, attrs):
        if tag in SKIPPED_TAGS:
            self._skip += 1
        elif tag == "br":
            self._append("\n")
        elif tag in STYLE_TAGS:
            self._depth[STYLE_TAGS[tag]] += 1
        elif tag == "a":
            href = dict(attrs).get("href")
            self._links.append(href.strip() if href else None)
        elif tag in BLOCK_TAGS:
            self._newline()
            if tag == "li" and self.mark_list_items:
                self._append(LIST_ITEM_MARKER)

    def handle_startendtag(self, tag, attrs):
        if tag == "br":
            self._append("\n")

    def handle_endtag(self, tag):
        if tag in SKIPPED_TAGS:
            self._skip = max(0, self._skip - 1)
        elif tag in STYLE_TAGS:
            style = STYLE_TAGS[tag]
            self._depth[style] = max(0, self._depth[style] - 1)
        elif tag == "a":
            if self._links:
                self._links.pop()
        elif tag in BLOCK_TAGS:
            self._newline()

    def handle_data(self, data):
        if self._skip:
            return
        # Source formatting between block tags is not content
        if not data.strip() and "\n" in data:
            self._newline()
            return
        self._append(data)

    def _newline(self) -> None:
        if self.runs and not self.runs[-1].text.endswith("\n"):
            self._append("\n")

    def _append(self, text: str) -> None:
        if not text:
            return
        run = TextRun(
            text=text,
            bold=self._depth["bold"] > 0,
            italic=self._depth["italic"] > 0,
            underline=self._depth["underline"] > 0,
            href=self._links[-1] if self._links else None,
        )
        if self.runs and self.runs[-1].same_style(run):
            self.runs[-1] = replace(self.runs[-1], text=self.runs[-1].text + text)
        else:
            self.runs.append(run)


def _markdown_to_tags(text: str) -> str:
    """Rewrite the markdown subset as equivalent HTML tags."""
    for pattern, tag in MARKDOWN_PATTERNS:
        if tag == "link":
            text = pattern.sub(
                lambda m: f'<a href="{html.escape(m.group(2), quote=True)}">{m.group(1)}</a>', text
            )
        else:
            text = pattern.sub(rf"<{tag}>\1</{tag}>", text)
    return text


def _parse(markup: str, mark_list_items: bool) -> List[TextRun]:
    parser = _MarkupParser(mark_list_items=mark_list_items)
    parser.feed(STRAY_LT.sub("&lt;", _markdown_to_tags(markup)))
    parser.close()
    return parser.runs


def _strip_runs(runs: List[TextRun]) -> List[TextRun]:
    """Trim whitespace at both ends of a run sequence, dropping emptied runs."""
    runs = list(runs)
    while runs and not runs[0].text.strip():
        runs.pop(0)
    while runs and not runs[-1].text.strip():
        runs.pop()
    if runs:
        runs[0] = replace(runs[0], text=runs[0].text.lstrip())
        runs[-1] = replace(runs[-1], text=runs[-1].text.rstrip())
    return runs


def is_plain(markup: Optional[str]) -> bool:
    """True when the text contains nothing the renderer would interpret."""
    return not markup or MARKUP_HINT.search(markup) is None


def render_runs(markup: Optional[str]) -> List[TextRun]:
    """
    Render inline markup to an ordered list of styled runs.

    Plain text comes back unchanged as a single plain run; empty input yields
    an empty list. Block tags become newlines inside the runs.

    Args:
        markup: Text from a rich-text field

    Returns:
        List of TextRun in reading order, adjacent same-style runs merged
    """
    if not markup:
        return []
    if is_plain(markup):
        return [TextRun(text=markup)]
    return _strip_runs(_parse(markup, mark_list_items=False))


def _split_lines(runs: List[TextRun]) -> List[List[TextRun]]:
    """Split a run sequence at newlines, keeping each fragment's style."""
    lines: List[List[TextRun]] = [[]]
    for run in runs:
        fragments = run.text.split("\n")
        for i, fragment in enumerate(fragments):
            if i > 0:
                lines.append([])
            if fragment:
                lines[-1].append(replace(run, text=fragment))
    return lines


def _strip_bullet(line: List[TextRun]) -> Optional[List[TextRun]]:
    """Return the line without its bullet marker, or None if it has none."""
    first = line[0]
    for marker in BULLET_MARKERS:
        if first.text.startswith(marker):
            rest = first.text[len(marker):]
            stripped = ([replace(first, text=rest)] if rest else []) + line[1:]
            return _strip_runs(stripped)
    return None


def render_blocks(markup: Optional[str]) -> List[RichBlock]:
    """
    Render markup into paragraphs and bullet lists.

    Consecutive text lines form one paragraph (joined by a space), blank lines
    separate paragraphs, and consecutive bullet lines form one list.

    Args:
        markup: Text from a rich-text field

    Returns:
        List of RichBlock in reading order
    """
    if not markup:
        return []

    runs = _parse(markup, mark_list_items=True) if not is_plain(markup) else [TextRun(markup)]

    blocks: List[RichBlock] = []
    paragraph: List[TextRun] = []
    bullets: List[Tuple[TextRun, ...]] = []

    def flush_paragraph():
        if paragraph:
            blocks.append(RichBlock(RichBlock.PARAGRAPH, (tuple(_merge(paragraph)),)))
            paragraph.clear()

    def flush_bullets():
        if bullets:
            blocks.append(RichBlock(RichBlock.BULLETS, tuple(bullets)))
            bullets.clear()

    for raw_line in _split_lines(runs):
        line = _strip_runs(raw_line)
        if not line:
            flush_paragraph()
            flush_bullets()
            continue

        item = _strip_bullet(line)
        if item is not None:
            flush_paragraph()
            if item:
                bullets.append(tuple(item))
        else:
            flush_bullets()
            if paragraph:
                paragraph.append(TextRun(" "))
            paragraph.extend(line)

    flush_paragraph()
    flush_bullets()
    return blocks


def _merge(runs: List[TextRun]) -> List[TextRun]:
    """Merge adjacent runs that share a style."""
    merged: List[TextRun] = []
    for run in runs:
        if merged and merged[-1].same_style(run):
            merged[-1] = replace(merged[-1], text=merged[-1].text + run.text)
        else:
            merged.append(run)
    return merged


def to_plaintext(markup: Optional[str]) -> str:
    """Strip all formatting, keeping the text content."""
    return "".join(run.text for run in render_runs(markup))
