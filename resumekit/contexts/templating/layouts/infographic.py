"""Two columns with skill and language meters beside the narrative sections."""

from typing import List

from resumekit.contexts.templating.layouts.base import LayoutStrategy
from resumekit.contexts.templating.page_tree import COLUMN, COLUMNS, METER, Node
from resumekit.contexts.templating.resume_data_structure import ResumeData, ResumeSettings
from resumekit.contexts.templating.sections import (
    SectionStyles,
    build_contact,
    build_header,
    build_sections,
    build_summary,
)
from resumekit.contexts.templating.theme import Theme

METER_SECTIONS = ("skills", "languages")


class InfographicLayout(LayoutStrategy):
    name = "infographic"
    OPTIONS = {
        "meter_shape": ("bar", "dots"),
        "header_band": (True, False),
    }

    def arrange(
        self, data: ResumeData, theme: Theme, styles: SectionStyles, settings: ResumeSettings
    ) -> List[Node]:
        if self.options["header_band"]:
            header = build_header(data.personal_info, styles.on_accent(theme), include_contact=False)
            header.style.update({"background": theme.accent, "color": theme.on_accent})
        else:
            header = build_header(data.personal_info, styles, include_contact=False)

        options = self.section_options(settings, skills_variant="meters", languages_variant="meters")
        order = self.flow_order(settings)

        side = []
        contact = build_contact(data.personal_info, styles)
        if contact is not None:
            side.append(contact)
        side.extend(build_sections([s for s in order if s in METER_SECTIONS], data, styles, options))
        for node in side:
            for child in node.walk():
                if child.kind == METER:
                    child.attrs["shape"] = self.options["meter_shape"]

        main = []
        summary = build_summary(data.personal_info, styles)
        if summary is not None:
            main.append(summary)
        main.extend(build_sections([s for s in order if s not in METER_SECTIONS], data, styles, options))

        columns = Node(
            COLUMNS,
            children=[
                Node(COLUMN, children=main, style={"width": "62%"}, attrs={"role": "main"}),
                Node(
                    COLUMN,
                    children=side,
                    style={"width": "38%", "border-left-color": theme.tint(0.7)},
                    attrs={"role": "sidebar"},
                ),
            ],
        )
        return [header, columns]
