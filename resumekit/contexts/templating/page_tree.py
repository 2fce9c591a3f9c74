"""
Page Tree

Format-neutral, in-memory description of a rendered resume: a tree of typed
nodes carrying text runs, style values and attributes. Layouts build page trees;
the rendering context serializes them (HTML, then PDF).

Pagination is expressed structurally rather than by coordinates: entries are
marked keep_together and everything else flows, so content that does not fit
on one page continues on the next.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from resumekit.contexts.templating.rich_text import TextRun

# Node kinds understood by the serializer
DOCUMENT = "document"
HEADER = "header"
SECTION = "section"
HEADING = "heading"
PARAGRAPH = "paragraph"
LIST = "list"
ITEM = "item"
ENTRY = "entry"
COLUMNS = "columns"
COLUMN = "column"
METER = "meter"
LINKS = "links"
TAGS = "tags"
DIVIDER = "divider"
RAIL = "rail"

NODE_KINDS = {
    DOCUMENT, HEADER, SECTION, HEADING, PARAGRAPH, LIST, ITEM, ENTRY,
    COLUMNS, COLUMN, METER, LINKS, TAGS, DIVIDER, RAIL,
}

# Style properties whose values are colors
COLOR_PROPERTIES = (
    "color",
    "background",
    "border-color",
    "border-left-color",
    "border-bottom-color",
    "fill",
    "track",
)


@dataclass
class Node:
    """
    One element of a page tree.

    Attributes:
        kind: One of NODE_KINDS
        children: Child nodes in reading order
        runs: Styled text for leaf nodes (headings, paragraphs, items)
        style: CSS-like style properties (colors always theme-derived)
        attrs: Non-visual attributes (section_id, level, keep_together, href, value)
    """

    kind: str
    children: List["Node"] = field(default_factory=list)
    runs: List[TextRun] = field(default_factory=list)
    style: Dict[str, str] = field(default_factory=dict)
    attrs: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.kind not in NODE_KINDS:
            raise ValueError(f"Unknown node kind: {self.kind}")

    @property
    def text(self) -> str:
        """Plain text of this node and its descendants."""
        own = "".join(run.text for run in self.runs)
        nested = " ".join(child.text for child in self.children if child.text)
        return " ".join(part for part in (own, nested) if part)

    def walk(self) -> Iterator["Node"]:
        """Depth-first, pre-order traversal including this node."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class PageTree:
    """
    A laid-out resume, ready to serialize.

    Attributes:
        template_id: Template that produced the tree
        accent: Accent color of the theme used
        root: Document node
        page_size: CSS page size (e.g., "A4")
        margins: CSS margin per side
        font_family: Body font stack
        metadata: Document metadata (title, author)
    """

    template_id: str
    accent: str
    root: Node
    page_size: str
    margins: Dict[str, str]
    font_family: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def walk(self) -> Iterator[Node]:
        return self.root.walk()

    def sections(self) -> List[Node]:
        return [node for node in self.walk() if node.kind == SECTION]

    def section_ids(self) -> List[str]:
        """Section ids in document order."""
        return [node.attrs.get("section_id") for node in self.sections()]

    def find_section(self, section_id: str) -> Optional[Node]:
        for node in self.sections():
            if node.attrs.get("section_id") == section_id:
                return node
        return None

    def colors(self) -> List[str]:
        """Every color value used by any node, in traversal order."""
        return [
            node.style[prop]
            for node in self.walk()
            for prop in COLOR_PROPERTIES
            if prop in node.style
        ]

    @property
    def text(self) -> str:
        return self.root.text
