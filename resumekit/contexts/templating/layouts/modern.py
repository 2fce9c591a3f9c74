"""Accent header band with a tinted sidebar next to the main column."""

from typing import List

from resumekit.contexts.templating.layouts.base import LayoutStrategy
from resumekit.contexts.templating.page_tree import COLUMN, COLUMNS, Node
from resumekit.contexts.templating.resume_data_structure import ResumeData, ResumeSettings
from resumekit.contexts.templating.sections import (
    SectionStyles,
    build_contact,
    build_header,
    build_sections,
    build_summary,
)
from resumekit.contexts.templating.theme import Theme

# Sections that go in the sidebar; the rest flow in the main column
SIDEBAR_SECTIONS = ("skills", "languages", "certifications")


class ModernLayout(LayoutStrategy):
    name = "modern"
    OPTIONS = {
        "sidebar_side": ("left", "right"),
        "sidebar_width": ("32%", "28%", "38%"),
    }

    def arrange(
        self, data: ResumeData, theme: Theme, styles: SectionStyles, settings: ResumeSettings
    ) -> List[Node]:
        band_styles = styles.on_accent(theme)
        header = build_header(data.personal_info, band_styles, include_contact=False)
        header.style.update({"background": theme.accent, "color": theme.on_accent})

        options = self.section_options(settings, skills_variant="tags", languages_variant="list", project_tags=True)
        order = self.flow_order(settings)

        sidebar = []
        contact = build_contact(data.personal_info, styles)
        if contact is not None:
            sidebar.append(contact)
        sidebar.extend(build_sections([s for s in order if s in SIDEBAR_SECTIONS], data, styles, options))

        main = []
        summary = build_summary(data.personal_info, styles)
        if summary is not None:
            main.append(summary)
        main.extend(build_sections([s for s in order if s not in SIDEBAR_SECTIONS], data, styles, options))

        sidebar_column = Node(
            COLUMN,
            children=sidebar,
            style={"width": self.options["sidebar_width"], "background": theme.tint(0.92)},
            attrs={"role": "sidebar"},
        )
        main_column = Node(COLUMN, children=main, attrs={"role": "main"})

        columns = [sidebar_column, main_column]
        if self.options["sidebar_side"] == "right":
            columns.reverse()
        return [header, Node(COLUMNS, children=columns)]
