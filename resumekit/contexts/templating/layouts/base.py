"""
Layout Strategy contract.

A layout turns (ResumeData, Theme, ResumeSettings) into a PageTree and nothing
else: no I/O, no mutation of its inputs, no global state. Every template in the
catalog is a layout class plus a validated set of options.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from resumekit.contexts.templating.defaults import DEFAULT_FONT_FAMILY, PAGE_MARGINS, PAGE_SIZE
from resumekit.contexts.templating.exceptions import TemplateConfigError
from resumekit.contexts.templating.logger import log_layout_built
from resumekit.contexts.templating.page_tree import DOCUMENT, Node, PageTree
from resumekit.contexts.templating.resume_data_structure import ResumeData, ResumeSettings
from resumekit.contexts.templating.sections import SectionOptions, SectionStyles
from resumekit.contexts.templating.theme import Theme

FIXED_SECTIONS = ("summary", "contact")


class LayoutStrategy(ABC):
    """
    Base class for resume layouts.

    Subclasses set `name`, declare their options in OPTIONS (option name ->
    allowed values, first value is the default) and implement `arrange`.

    Attributes:
        template_id: Catalog id this instance is registered under
        options: Validated option values (defaults filled in)
    """

    name: str = ""
    OPTIONS: Dict[str, Tuple[Any, ...]] = {}
    font_family: str = DEFAULT_FONT_FAMILY

    def __init__(self, template_id: str, **options: Any):
        self.template_id = template_id
        self.options = self._validate_options(options)

    def _validate_options(self, options: Dict[str, Any]) -> Dict[str, Any]:
        unknown = sorted(set(options) - set(self.OPTIONS))
        if unknown:
            raise TemplateConfigError(
                f"Layout '{self.name}' has no option(s) {', '.join(unknown)}; "
                f"available: {', '.join(sorted(self.OPTIONS)) or 'none'}",
                template_id=self.template_id,
            )

        resolved = {}
        for key, allowed in self.OPTIONS.items():
            value = options.get(key, allowed[0])
            if value not in allowed:
                raise TemplateConfigError(
                    f"Layout '{self.name}' option {key}={value!r} must be one of {list(allowed)}",
                    template_id=self.template_id,
                )
            resolved[key] = value
        return resolved

    def section_options(self, settings: ResumeSettings, **overrides: Any) -> SectionOptions:
        return SectionOptions(show_levels=settings.show_skill_levels, **overrides)

    @staticmethod
    def flow_order(settings: ResumeSettings) -> List[str]:
        """Section order minus the blocks a layout places itself (summary, contact)."""
        return [s for s in settings.sections_order if s not in FIXED_SECTIONS]

    def layout(self, data: ResumeData, theme: Theme, settings: ResumeSettings) -> PageTree:
        """
        Build the page tree for a resume.

        Args:
            data: Resume content
            theme: Palette derived from the accent
            settings: Render settings (section order, skill levels, font)

        Returns:
            PageTree whose colors all come from theme
        """
        styles = SectionStyles.from_theme(theme)
        root = Node(
            DOCUMENT,
            children=self.arrange(data, theme, styles, settings),
            style={"color": theme.ink, "background": theme.paper},
        )
        full_name = data.personal_info.full_name
        tree = PageTree(
            template_id=self.template_id,
            accent=theme.accent,
            root=root,
            page_size=PAGE_SIZE,
            margins=dict(PAGE_MARGINS),
            font_family=settings.font_family or self.font_family,
            metadata={"title": f"{full_name} - Resume" if full_name else "Resume", "author": full_name},
        )
        log_layout_built(self.template_id, self.name, tree)
        return tree

    @abstractmethod
    def arrange(
        self, data: ResumeData, theme: Theme, styles: SectionStyles, settings: ResumeSettings
    ) -> List[Node]:
        """Return the document's top-level nodes in reading order."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(template_id={self.template_id!r}, options={self.options})"
