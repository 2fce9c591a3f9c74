"""Single column, centered header, accent-ruled section headings."""

from typing import List

from resumekit.contexts.templating.layouts.base import LayoutStrategy
from resumekit.contexts.templating.page_tree import Node
from resumekit.contexts.templating.resume_data_structure import ResumeData, ResumeSettings
from resumekit.contexts.templating.sections import (
    SectionStyles,
    build_header,
    build_sections,
    build_summary,
    divider,
)
from resumekit.contexts.templating.theme import Theme


class ProfessionalLayout(LayoutStrategy):
    name = "professional"
    OPTIONS = {
        "header_align": ("center", "left"),
        "skills_variant": ("inline", "list"),
    }
    font_family = "Georgia, 'Times New Roman', serif"

    def arrange(
        self, data: ResumeData, theme: Theme, styles: SectionStyles, settings: ResumeSettings
    ) -> List[Node]:
        nodes = [build_header(data.personal_info, styles, align=self.options["header_align"]), divider(styles)]

        summary = build_summary(data.personal_info, styles)
        if summary is not None:
            nodes.append(summary)

        options = self.section_options(settings, skills_variant=self.options["skills_variant"])
        nodes.extend(build_sections(self.flow_order(settings), data, styles, options))
        return nodes
