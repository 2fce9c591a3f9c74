"""Unit tests for the Jinja2 HTML renderer."""

import pytest

from resumekit.contexts.rendering.html_renderer import (
    HtmlRenderer,
    filled_dots,
    font_family_css,
    runs_to_html,
    style_to_css,
)
from resumekit.contexts.rendering.compositor import build_page_tree
from resumekit.contexts.templating.defaults import DEFAULT_FONT_FAMILY
from resumekit.contexts.templating.resume_data_structure import PersonalInfo, ResumeData, ResumeSettings
from resumekit.contexts.templating.rich_text import TextRun
from resumekit.contexts.templating.template_registry import get_registry


@pytest.fixture(scope="module")
def renderer():
    return HtmlRenderer()


class TestHelpers:
    @pytest.mark.unit
    def test_style_to_css_skips_meter_keys(self):
        css = style_to_css({"color": "#111827", "fill": "#2563eb", "track": "#dbeafe", "width": "32%"})
        assert css == "color: #111827; width: 32%"

    @pytest.mark.unit
    def test_runs_to_html_nesting(self):
        html = runs_to_html([TextRun(text="Docs", bold=True, href="https://example.com/?a=1&b=2")])
        assert html == '<a href="https://example.com/?a=1&amp;b=2"><strong>Docs</strong></a>'

    @pytest.mark.unit
    def test_runs_to_html_escapes_text(self):
        html = runs_to_html([TextRun(text="a < b & "), TextRun(text="c", italic=True, underline=True)])
        assert html == "a &lt; b &amp; <em><u>c</u></em>"

    @pytest.mark.unit
    @pytest.mark.parametrize("value, expected", [(1.0, 5), (0.75, 4), (0.4, 2), (0.0, 0), (1.7, 5)])
    def test_filled_dots(self, value, expected):
        assert filled_dots(value) == expected


class TestDocument:
    @pytest.mark.unit
    @pytest.mark.parametrize("template_id", get_registry().ids())
    def test_every_template_renders(self, renderer, template_id, sample_data):
        tree = build_page_tree(template_id, sample_data, ResumeSettings())
        html = renderer.render(tree)

        assert html.lstrip().startswith("<!DOCTYPE html>")
        assert "size: A4" in html
        assert "<title>Jordan Rivera - Resume</title>" in html
        assert "Northwind Labs" in html
        assert "break-inside: avoid" in html

    @pytest.mark.unit
    def test_rich_text_markup_survives(self, renderer, sample_data):
        html = renderer.render(build_page_tree("professional", sample_data, ResumeSettings()))
        assert "<strong>8+ years</strong>" in html
        assert "<strong>event schema</strong>" in html

    @pytest.mark.unit
    def test_user_text_is_escaped(self, renderer):
        data = ResumeData(
            personal_info=PersonalInfo(first_name="<script>alert(1)</script>", headline="R&D lead")
        )
        html = renderer.render(build_page_tree("minimal", data, ResumeSettings()))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
        assert "R&amp;D lead" in html

    @pytest.mark.unit
    def test_meter_dots(self, renderer, sample_data):
        html = renderer.render(build_page_tree("creative", sample_data, ResumeSettings()))
        assert 'class="dots"' in html

    @pytest.mark.unit
    def test_timeline_rail(self, renderer, sample_data):
        html = renderer.render(build_page_tree("journey", sample_data, ResumeSettings()))
        assert "marker square" in html
        assert "rail-entry" in html


def body_rule(html: str) -> str:
    return next(line for line in html.splitlines() if line.startswith("body {"))


class TestFontFamily:
    """The font stack lands in the <style> block verbatim, quotes included."""

    @pytest.mark.unit
    def test_quoted_family_not_entity_escaped(self, renderer, sample_data):
        html = renderer.render(build_page_tree("professional", sample_data, ResumeSettings()))
        rule = body_rule(html)

        assert "'Times New Roman'" in rule
        assert "&#39;" not in rule

    @pytest.mark.unit
    def test_override_with_double_quotes(self, renderer, sample_data):
        settings = ResumeSettings(font_family='"Fira Sans", sans-serif')
        html = renderer.render(build_page_tree("minimal", sample_data, settings))

        assert 'font-family: "Fira Sans", sans-serif;' in body_rule(html)

    @pytest.mark.unit
    def test_unsafe_value_falls_back_to_default(self, renderer, sample_data):
        settings = ResumeSettings(font_family="x; } body { color: red")
        html = renderer.render(build_page_tree("minimal", sample_data, settings))

        assert f"font-family: {DEFAULT_FONT_FAMILY};" in body_rule(html)
        assert "color: red" not in html

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["Arial</style><script>", "a{b}", ""])
    def test_font_family_css_rejects_markup(self, value):
        assert font_family_css(value) == DEFAULT_FONT_FAMILY
