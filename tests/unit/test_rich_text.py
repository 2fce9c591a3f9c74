"""Unit tests for the inline rich-text renderer."""

import pytest

from resumekit.contexts.templating.rich_text import (
    RichBlock,
    TextRun,
    render_blocks,
    render_runs,
    to_plaintext,
)


class TestPlainText:
    """Text without markup passes through untouched."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["Hello world", "  padded  ", "5 * 3 * 2", "a < b and c > d"])
    def test_plain_text_is_single_run(self, text):
        assert render_runs(text) == [TextRun(text)]

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input_has_no_runs(self, text):
        assert render_runs(text) == []


class TestMarkdownSubset:
    @pytest.mark.unit
    def test_bold_and_italic(self):
        assert render_runs("Shipped **v2** on *time*") == [
            TextRun("Shipped "),
            TextRun("v2", bold=True),
            TextRun(" on "),
            TextRun("time", italic=True),
        ]

    @pytest.mark.unit
    def test_underline(self):
        assert render_runs("__key__ point") == [TextRun("key", underline=True), TextRun(" point")]

    @pytest.mark.unit
    def test_link(self):
        assert render_runs("[site](https://example.com) now") == [
            TextRun("site", href="https://example.com"),
            TextRun(" now"),
        ]

    @pytest.mark.unit
    def test_bold_link_label(self):
        runs = render_runs("[**Repo**](https://github.com/x)")
        assert runs == [TextRun("Repo", bold=True, href="https://github.com/x")]


class TestHtmlSubset:
    @pytest.mark.unit
    def test_basic_tags(self):
        assert render_runs("<b>bold</b> and <i>it</i> <u>u</u>") == [
            TextRun("bold", bold=True),
            TextRun(" and "),
            TextRun("it", italic=True),
            TextRun(" "),
            TextRun("u", underline=True),
        ]

    @pytest.mark.unit
    def test_nested_styles_combine(self):
        assert render_runs("<b>a <i>b</i></b>") == [
            TextRun("a ", bold=True),
            TextRun("b", bold=True, italic=True),
        ]

    @pytest.mark.unit
    def test_anchor_href(self):
        assert render_runs('see <a href="https://x.io">docs</a>') == [
            TextRun("see "),
            TextRun("docs", href="https://x.io"),
        ]

    @pytest.mark.unit
    def test_entities_decoded(self):
        assert render_runs("Tom &amp; Jerry") == [TextRun("Tom & Jerry")]

    @pytest.mark.unit
    def test_adjacent_same_style_merged(self):
        assert render_runs("<b>a</b><strong>b</strong>") == [TextRun("ab", bold=True)]


class TestMalformedMarkup:
    """Malformed markup degrades to text, never raises."""

    @pytest.mark.unit
    def test_unclosed_tag_applies_to_end(self):
        assert render_runs("<b>unclosed") == [TextRun("unclosed", bold=True)]

    @pytest.mark.unit
    def test_stray_closing_tag_ignored(self):
        assert render_runs("stray</b> text") == [TextRun("stray text")]

    @pytest.mark.unit
    def test_unsupported_tags_stripped(self):
        assert render_runs("<span class='x'>hi</span> <script>bad()</script>there") == [TextRun("hi there")]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "markup",
        ["<b><i>x</b></i>", "**unterminated", "<a href=>", "[](", "<<>>", "<b", "&bogus;", "<!-- c"],
    )
    def test_never_raises(self, markup):
        runs = render_runs(markup)
        assert isinstance(runs, list)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "markup, expected",
        [
            ("x<y and **bold**", "x<y and bold"),
            ("if a<b then **c**", "if a<b then c"),
            ("cut cost<budget by **30%**", "cut cost<budget by 30%"),
            ("<b>1<2</b> and <i>3 <4</i>", "1<2 and 3 <4"),
            ("**x** then <b", "x then <b"),
        ],
    )
    def test_stray_angle_bracket_is_text(self, markup, expected):
        assert to_plaintext(markup) == expected

    @pytest.mark.unit
    def test_stray_angle_bracket_keeps_styles(self):
        assert render_runs("a<b **c**") == [TextRun("a<b "), TextRun("c", bold=True)]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "markup",
        ["**a** *b* c", "<b>a</b><i>b</i><b>c</b>", "x <u>y</u> z [l](http://q)", "<b>a<i>b</i>c</b>"],
    )
    def test_adjacent_runs_differ_in_style(self, markup):
        runs = render_runs(markup)
        for left, right in zip(runs, runs[1:]):
            assert not left.same_style(right)


class TestBlocks:
    @pytest.mark.unit
    def test_html_paragraph_and_list(self):
        markup = (
            "<p>Built ingestion pipelines.</p> "
            "<ul><li>Owned the <strong>event schema</strong> registry</li><li>Introduced contract tests</li></ul>"
        )
        blocks = render_blocks(markup)

        assert [b.kind for b in blocks] == [RichBlock.PARAGRAPH, RichBlock.BULLETS]
        assert blocks[0].items == ((TextRun("Built ingestion pipelines."),),)
        assert blocks[1].items == (
            (TextRun("Owned the "), TextRun("event schema", bold=True), TextRun(" registry")),
            (TextRun("Introduced contract tests"),),
        )

    @pytest.mark.unit
    def test_plain_bullet_lines(self):
        blocks = render_blocks("Intro line\n- one\n- two\n\nOutro")

        assert [b.kind for b in blocks] == [RichBlock.PARAGRAPH, RichBlock.BULLETS, RichBlock.PARAGRAPH]
        assert blocks[1].items == ((TextRun("one"),), (TextRun("two"),))
        assert blocks[2].items == ((TextRun("Outro"),),)

    @pytest.mark.unit
    def test_consecutive_lines_join_into_one_paragraph(self):
        blocks = render_blocks("first line\nsecond line")
        assert blocks == [RichBlock(RichBlock.PARAGRAPH, ((TextRun("first line second line"),),))]

    @pytest.mark.unit
    def test_unicode_bullets(self):
        blocks = render_blocks("• alpha\n• beta")
        assert blocks == [RichBlock(RichBlock.BULLETS, ((TextRun("alpha"),), (TextRun("beta"),)))]

    @pytest.mark.unit
    def test_empty(self):
        assert render_blocks("") == []
        assert render_blocks("   \n  ") == []


@pytest.mark.unit
def test_to_plaintext_strips_formatting():
    assert to_plaintext("**Bold** and [link](http://a.b)") == "Bold and link"
    assert to_plaintext(None) == ""
