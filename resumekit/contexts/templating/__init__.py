"""
Templating Context

Responsibilities:
- Owns the template-agnostic resume data model and render settings
- Renders constrained rich text into styled runs
- Derives themes from an accent color
- Lays resumes out as page trees through interchangeable layout strategies
- Maintains the template catalog (templates = layout + options + metadata)

Owns: ResumeData, Theme, PageTree, layout strategies, template registry
Never: Serializes documents or manages preview resources
"""

from resumekit.contexts.templating.page_tree import Node, PageTree
from resumekit.contexts.templating.resume_data_structure import (
    ResumeData,
    ResumeSettings,
    load_resume,
    load_settings,
    sample_resume,
)
from resumekit.contexts.templating.rich_text import TextRun, render_blocks, render_runs, to_plaintext
from resumekit.contexts.templating.template_registry import (
    TemplateInfo,
    TemplateRegistry,
    get_registry,
)
from resumekit.contexts.templating.theme import Theme, build_theme

__all__ = [
    # Data model
    "ResumeData",
    "ResumeSettings",
    "load_resume",
    "load_settings",
    "sample_resume",
    # Rich text
    "TextRun",
    "render_runs",
    "render_blocks",
    "to_plaintext",
    # Theme
    "Theme",
    "build_theme",
    # Layout output
    "Node",
    "PageTree",
    # Registry
    "TemplateInfo",
    "TemplateRegistry",
    "get_registry",
]
