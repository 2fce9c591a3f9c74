"""
Integration tests for PDF rendering - real WeasyPrint output.

Skipped when WeasyPrint or its native libraries (Pango, HarfBuzz) are missing.
"""

from dataclasses import replace
from datetime import date

import pytest

from resumekit.contexts.rendering.compositor import compose, render_resume_file
from resumekit.contexts.templating.resume_data_structure import SAMPLE_RESUME_PATH, Experience, ResumeSettings
from resumekit.contexts.templating.template_registry import get_registry
from resumekit.utils.pdf_processing import extract_lines, find_line, page_count

try:
    import weasyprint  # noqa: F401

    WEASYPRINT_AVAILABLE = True
except (ImportError, OSError):
    WEASYPRINT_AVAILABLE = False

skip_if_no_weasyprint = pytest.mark.skipif(
    not WEASYPRINT_AVAILABLE, reason="WeasyPrint not installed or missing native libraries"
)


@pytest.mark.integration
@pytest.mark.pdf
@skip_if_no_weasyprint
@pytest.mark.parametrize("template_id", get_registry().ids())
def test_every_template_produces_pdf(template_id, sample_data):
    """Each catalog template renders the sample resume to a readable PDF."""
    artifact = compose(template_id, sample_data, ResumeSettings())

    assert artifact.content.startswith(b"%PDF")
    assert artifact.media_type == "application/pdf"
    assert artifact.page_count >= 1
    assert artifact.suggested_filename == "Jordan_Rivera_Resume.pdf"

    lines = extract_lines(artifact.content)
    assert find_line(lines, "Jordan Rivera") is not None
    assert find_line(lines, "Northwind Labs") is not None


@pytest.mark.integration
@pytest.mark.pdf
@skip_if_no_weasyprint
@pytest.mark.parametrize("template_id", ["professional", "modern", "timeline"])
def test_long_resume_flows_onto_more_pages(template_id, sample_data):
    """Content that does not fit on one page continues instead of being cut."""
    jobs = tuple(
        Experience(
            title=f"Engineer {i}",
            company_name=f"Company {i}",
            start_date=date(2000 + i, 1, 1),
            end_date=date(2001 + i, 1, 1),
            achievements=tuple(f"Delivered milestone {i}.{n} on schedule and under budget" for n in range(6)),
        )
        for i in range(14)
    )
    data = replace(sample_data, experience=jobs)

    artifact = compose(template_id, data, ResumeSettings())

    assert artifact.page_count >= 2
    lines = extract_lines(artifact.content)
    first = find_line(lines, "Company 0")
    last = find_line(lines, "Company 13")
    assert first is not None and last is not None
    assert first < last


@pytest.mark.integration
@pytest.mark.pdf
@skip_if_no_weasyprint
def test_render_resume_file_writes_pdf(tmp_path, monkeypatch):
    monkeypatch.setattr("resumekit.contexts.rendering.compositor.LOGS_PATH", tmp_path / "logs")

    output = render_resume_file(SAMPLE_RESUME_PATH, template_id="infographic", output_dir=tmp_path)

    assert output.suffix == ".pdf"
    assert page_count(output) >= 1
