"""
Document Compositor

Produces the final document for a (template, data, settings) triple:
resolve the template, derive the theme, lay out the page tree, serialize.

compose() is the pure core used by previews and downloads. render_resume_file()
is the orchestration wrapper used by the CLI: it sets up session logging, and
writes the PDF to a dated results directory.
"""

import os
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from resumekit.contexts.rendering.logger import (
    _log_info,
    log_composition_failure,
    log_composition_result,
    log_composition_start,
    setup_rendering_logger,
)
from resumekit.contexts.rendering.serializer import PDF_MEDIA_TYPE, PdfSerializer, Serializer
from resumekit.contexts.templating.exceptions import TemplateRenderError
from resumekit.contexts.templating.page_tree import PageTree
from resumekit.contexts.templating.resume_data_structure import (
    PersonalInfo,
    ResumeData,
    ResumeSettings,
    load_resume,
    load_settings,
)
from resumekit.contexts.templating.template_registry import TemplateRegistry, get_registry
from resumekit.contexts.templating.theme import build_theme
from resumekit.utils.pdf_processing import page_count
from resumekit.utils.timestamp import now, today

load_dotenv()
LOGS_PATH = Path(os.getenv("RESUMEKIT_LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESUMEKIT_RESULTS_PATH", "outs/results"))

_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w-]+")


@dataclass(frozen=True)
class BinaryArtifact:
    """
    A serialized resume.

    Attributes:
        content: Document bytes
        template_id: Template that produced the document
        accent_color: Normalized accent the theme was derived from
        page_count: Number of pages (None when not a readable PDF)
        media_type: MIME type of content
        suggested_filename: Download name, e.g. "Jordan_Rivera_Resume.pdf"
    """

    content: bytes
    template_id: str
    accent_color: str
    page_count: Optional[int] = None
    media_type: str = PDF_MEDIA_TYPE
    suggested_filename: str = "Resume.pdf"

    @property
    def size(self) -> int:
        return len(self.content)


def suggested_filename(info: PersonalInfo, extension: str = "pdf") -> str:
    """
    Download file name built from the person's name.

    Examples:
        >>> suggested_filename(PersonalInfo(first_name="Jordan", last_name="Rivera"))
        'Jordan_Rivera_Resume.pdf'
        >>> suggested_filename(PersonalInfo())
        'Resume.pdf'
    """
    parts = [_UNSAFE_FILENAME_CHARS.sub("_", p).strip("_") for p in (info.first_name, info.last_name)]
    parts = [p for p in parts if p]
    return "_".join(parts + ["Resume"]) + f".{extension}"


def build_page_tree(
    template_id: str,
    data: ResumeData,
    settings: ResumeSettings,
    registry: Optional[TemplateRegistry] = None,
) -> PageTree:
    """
    Resolve the template, derive the theme and lay out the resume.

    template_id wins over settings.template; a missing accent falls back to the
    template's default accent.

    Raises:
        UnknownTemplateError: If template_id is not registered
        InvalidColorError: If the accent is not a hex color
        TemplateRenderError: If the layout raises; chained to the original error
    """
    registry = registry or get_registry()
    layout = registry.resolve(template_id)
    accent = settings.accent_color or registry.get_info(template_id).default_accent
    theme = build_theme(accent)

    try:
        return layout.layout(data, theme, settings)
    except Exception as e:
        raise TemplateRenderError(
            "Layout failed while building the page tree",
            template_id=template_id,
            layout_name=type(layout).__name__,
            original_error=e,
        ) from e


def compose(
    template_id: str,
    data: ResumeData,
    settings: ResumeSettings,
    registry: Optional[TemplateRegistry] = None,
    serializer: Optional[Serializer] = None,
) -> BinaryArtifact:
    """
    Compose a resume into a binary document.

    Args:
        template_id: Template to use
        data: Resume content
        settings: Render settings (accent, section order, ...)
        registry: Template registry (default: the process-wide registry)
        serializer: Serializer (default: PdfSerializer)

    Returns:
        BinaryArtifact with the serialized document

    Raises:
        UnknownTemplateError / InvalidColorError: Configuration errors, unchanged
        TemplateRenderError: Layout failures, naming the template
        SerializationError: HTML or PDF stage failures
    """
    serializer = serializer or PdfSerializer()
    start_time = time.time()

    try:
        tree = build_page_tree(template_id, data, settings, registry)
        log_composition_start(template_id, tree.accent, data.personal_info.full_name)
        content = serializer.serialize(tree)
    except Exception as e:
        log_composition_failure(template_id, e)
        raise

    artifact = BinaryArtifact(
        content=content,
        template_id=template_id,
        accent_color=tree.accent,
        page_count=page_count(content) if serializer.media_type == PDF_MEDIA_TYPE else None,
        media_type=serializer.media_type,
        suggested_filename=suggested_filename(data.personal_info, serializer.extension),
    )
    log_composition_result(artifact, time.time() - start_time)
    return artifact


def render_resume_file(
    resume_file: Path,
    template_id: Optional[str] = None,
    accent_color: Optional[str] = None,
    output_dir: Optional[Path] = None,
    serializer: Optional[Serializer] = None,
) -> Path:
    """
    Render a resume YAML file to disk with session logging.

    Creates outs/logs/render_<timestamp>/ for the log and, unless output_dir is
    given, writes the document to outs/results/<YYYY-MM-DD>/.

    Args:
        resume_file: Resume YAML (resume record plus optional settings block)
        template_id: Template override (default: the file's settings.template)
        accent_color: Accent override (default: the file's settings accent)
        output_dir: Destination directory
        serializer: Serializer (default: PdfSerializer)

    Returns:
        Path to the written document
    """
    resume_file = Path(resume_file).resolve()

    log_dir = LOGS_PATH / f"render_{now()}"
    log_dir.mkdir(parents=True, exist_ok=True)
    setup_rendering_logger(log_dir)

    data = load_resume(resume_file)
    settings = load_settings(resume_file)
    settings = settings.with_selection(template_id or settings.template, accent_color or settings.accent_color)

    artifact = compose(settings.template, data, settings, serializer=serializer)

    output_dir = Path(output_dir) if output_dir else RESULTS_PATH / today()
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / artifact.suggested_filename
    output_path.write_bytes(artifact.content)
    _log_info(f"Saved to: {output_path}")
    return output_path
