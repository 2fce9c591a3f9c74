"""Dated rail with accent markers for experience and education."""

from typing import List

from resumekit.contexts.templating.layouts.base import LayoutStrategy
from resumekit.contexts.templating.page_tree import RAIL, Node
from resumekit.contexts.templating.resume_data_structure import ResumeData, ResumeSettings
from resumekit.contexts.templating.sections import (
    SectionStyles,
    build_header,
    build_sections,
    build_summary,
    divider,
)
from resumekit.contexts.templating.theme import Theme


class TimelineLayout(LayoutStrategy):
    name = "timeline"
    OPTIONS = {
        "marker": ("dot", "square"),
        "skills_variant": ("tags", "inline"),
    }

    def arrange(
        self, data: ResumeData, theme: Theme, styles: SectionStyles, settings: ResumeSettings
    ) -> List[Node]:
        nodes = [build_header(data.personal_info, styles), divider(styles)]

        summary = build_summary(data.personal_info, styles)
        if summary is not None:
            nodes.append(summary)

        options = self.section_options(settings, skills_variant=self.options["skills_variant"], rail=True)
        sections = build_sections(self.flow_order(settings), data, styles, options)
        for node in sections:
            for child in node.walk():
                if child.kind == RAIL:
                    child.attrs["marker"] = self.options["marker"]
        return nodes + sections
