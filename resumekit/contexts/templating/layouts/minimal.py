"""Sparse single column that follows the caller's section order exactly."""

from dataclasses import replace
from typing import List

from resumekit.contexts.templating.layouts.base import LayoutStrategy
from resumekit.contexts.templating.page_tree import Node
from resumekit.contexts.templating.resume_data_structure import ResumeData, ResumeSettings
from resumekit.contexts.templating.sections import SectionStyles, build_header, build_sections
from resumekit.contexts.templating.theme import Theme


class MinimalLayout(LayoutStrategy):
    """
    Minimal layout.

    Unlike the other layouts the summary and contact blocks are ordinary
    sections here: they appear only where sections_order places them (the
    summary leads when the order does not mention it).
    """

    name = "minimal"
    OPTIONS = {
        "density": ("regular", "compact"),
        "skills_variant": ("inline", "list"),
    }

    def arrange(
        self, data: ResumeData, theme: Theme, styles: SectionStyles, settings: ResumeSettings
    ) -> List[Node]:
        # Quieter headings: ink-dark accent, no rule
        styles = replace(styles, heading={"color": theme.shade(0.45)})

        header = build_header(data.personal_info, styles)
        if self.options["density"] == "compact":
            header.style["margin-bottom"] = "2mm"

        order = list(settings.sections_order)
        if "summary" not in order:
            order.insert(0, "summary")

        options = self.section_options(settings, skills_variant=self.options["skills_variant"])
        return [header] + build_sections(order, data, styles, options)
