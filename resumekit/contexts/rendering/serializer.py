"""
Document serializers.

A serializer turns a PageTree into document bytes. PdfSerializer renders the
tree to HTML and prints it with WeasyPrint; HtmlSerializer stops at the HTML
(used by the CLI for inspection and by tests that do not need native PDF
libraries).
"""

from typing import Optional

from typing_extensions import Protocol

from resumekit.contexts.rendering.exceptions import SerializationError
from resumekit.contexts.rendering.html_renderer import HtmlRenderer
from resumekit.contexts.templating.page_tree import PageTree

PDF_MEDIA_TYPE = "application/pdf"
HTML_MEDIA_TYPE = "text/html"


class Serializer(Protocol):
    media_type: str
    extension: str

    def serialize(self, tree: PageTree) -> bytes:
        ...


class HtmlSerializer:
    media_type = HTML_MEDIA_TYPE
    extension = "html"

    def __init__(self, renderer: Optional[HtmlRenderer] = None):
        self.renderer = renderer or HtmlRenderer()

    def serialize(self, tree: PageTree) -> bytes:
        return self.renderer.render(tree).encode("utf-8")


class PdfSerializer:
    """
    PageTree -> HTML (Jinja2) -> PDF (WeasyPrint).

    WeasyPrint is imported on first use so that building page trees and HTML
    does not require its native libraries (Pango, HarfBuzz).
    """

    media_type = PDF_MEDIA_TYPE
    extension = "pdf"

    def __init__(self, renderer: Optional[HtmlRenderer] = None):
        self.renderer = renderer or HtmlRenderer()

    def serialize(self, tree: PageTree) -> bytes:
        """
        Serialize a page tree to PDF bytes.

        Raises:
            SerializationError: If HTML rendering or PDF generation fails
        """
        html = self.renderer.render(tree)

        from weasyprint import HTML

        try:
            return HTML(string=html, base_url=str(self.renderer.templates_dir)).write_pdf()
        except Exception as e:
            raise SerializationError("PDF generation failed", template_id=tree.template_id, original_error=e) from e
