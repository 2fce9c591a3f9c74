"""
Template Registry

Maps template ids to layout strategies plus the metadata the template picker
shows. The process-wide registry is built once from catalog.yaml; catalog
defects (unknown layout, unknown option, bad accent, duplicate id) fail at load
time rather than at render time.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from resumekit.contexts.templating.defaults import DEFAULT_ACCENT
from resumekit.contexts.templating.exceptions import (
    InvalidColorError,
    TemplateConfigError,
    UnknownTemplateError,
)
from resumekit.contexts.templating.layouts import LAYOUTS, LayoutStrategy
from resumekit.contexts.templating.logger import log_catalog_loaded
from resumekit.contexts.templating.theme import normalize_hex

load_dotenv()
DEFAULT_CATALOG_PATH = Path(__file__).parent / "catalog.yaml"
CATALOG_PATH = Path(os.getenv("RESUMEKIT_CATALOG_PATH", str(DEFAULT_CATALOG_PATH)))

ALL_CATEGORY = "all"


@dataclass(frozen=True)
class TemplateInfo:
    """
    Catalog metadata for one template.

    Attributes:
        id: Stable template id (what ResumeSettings.template holds)
        label: Display name
        description: One-line description shown in the picker
        category: Category value used by the catalog filter
        is_popular: Show the "Popular" badge
        is_new: Show the "New" badge
        default_accent: Accent used when settings carry none
        layout: Layout name in LAYOUTS
        options: Layout options for this template
    """

    id: str
    label: str
    description: str = ""
    category: str = ""
    is_popular: bool = False
    is_new: bool = False
    default_accent: str = DEFAULT_ACCENT
    layout: str = ""
    options: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class TemplateCategory:
    value: str
    label: str


class TemplateRegistry:
    """
    Registry of templates, in registration order.

    Example:
        >>> registry = get_registry()
        >>> registry.resolve("modern").name
        'modern'
    """

    def __init__(self, categories: Optional[List[TemplateCategory]] = None):
        self._infos: Dict[str, TemplateInfo] = {}
        self._layouts: Dict[str, LayoutStrategy] = {}
        self._categories = list(categories or [])

    def register(self, info: TemplateInfo) -> LayoutStrategy:
        """
        Register a template and instantiate its layout.

        Raises:
            TemplateConfigError: Duplicate id, unknown layout, bad option or accent
        """
        if info.id in self._infos:
            raise TemplateConfigError(f"Duplicate template id '{info.id}'", template_id=info.id)

        layout_cls = LAYOUTS.get(info.layout)
        if layout_cls is None:
            raise TemplateConfigError(
                f"Unknown layout '{info.layout}'; available: {', '.join(sorted(LAYOUTS))}",
                template_id=info.id,
            )

        try:
            normalize_hex(info.default_accent)
        except InvalidColorError as e:
            raise TemplateConfigError(str(e), template_id=info.id) from e

        layout = layout_cls(info.id, **info.options)
        self._infos[info.id] = info
        self._layouts[info.id] = layout
        return layout

    def resolve(self, template_id: str) -> LayoutStrategy:
        """
        Get the layout strategy for a template id.

        Raises:
            UnknownTemplateError: If the id is not registered
        """
        try:
            return self._layouts[template_id]
        except KeyError:
            raise UnknownTemplateError(template_id, self._infos) from None

    def get_info(self, template_id: str) -> TemplateInfo:
        try:
            return self._infos[template_id]
        except KeyError:
            raise UnknownTemplateError(template_id, self._infos) from None

    def list(self) -> List[TemplateInfo]:
        """All templates in catalog order."""
        return list(self._infos.values())

    def ids(self) -> List[str]:
        return list(self._infos)

    def categories(self) -> List[TemplateCategory]:
        """
        Filter chips for the catalog: the configured list, or one per used category.

        The "all" chip always comes first.
        """
        if self._categories:
            return list(self._categories)
        used = dict.fromkeys(info.category for info in self._infos.values() if info.category)
        return [TemplateCategory(ALL_CATEGORY, "All Templates")] + [
            TemplateCategory(value, value.replace("_", " ").title()) for value in used
        ]

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._infos

    def __len__(self) -> int:
        return len(self._infos)

    @classmethod
    def from_catalog(cls, catalog_path: Path) -> "TemplateRegistry":
        """
        Build a registry from a catalog YAML file.

        Args:
            catalog_path: Path to a file with `templates` (and optional `categories`)

        Returns:
            Populated TemplateRegistry

        Raises:
            TemplateConfigError: If the catalog is malformed
        """
        content = OmegaConf.to_container(OmegaConf.load(catalog_path), resolve=True) or {}
        entries = content.get("templates")
        if not entries:
            raise TemplateConfigError(f"Catalog has no templates: {catalog_path}")

        categories = [
            TemplateCategory(value=str(c["value"]), label=str(c.get("label", c["value"])))
            for c in content.get("categories") or []
        ]
        registry = cls(categories=categories)

        for entry in entries:
            if "id" not in entry or "layout" not in entry:
                raise TemplateConfigError(f"Catalog entry needs 'id' and 'layout': {entry}")
            registry.register(
                TemplateInfo(
                    id=str(entry["id"]),
                    label=str(entry.get("label", entry["id"])),
                    description=str(entry.get("description", "")),
                    category=str(entry.get("category", "")),
                    is_popular=bool(entry.get("is_popular", False)),
                    is_new=bool(entry.get("is_new", False)),
                    default_accent=str(entry.get("default_accent", DEFAULT_ACCENT)),
                    layout=str(entry["layout"]),
                    options=dict(entry.get("options") or {}),
                )
            )

        log_catalog_loaded(catalog_path, len(registry), len({info.layout for info in registry.list()}))
        return registry


@lru_cache(maxsize=None)
def get_registry(catalog_path: Optional[Path] = None) -> TemplateRegistry:
    """The process-wide registry, built once per catalog path."""
    return TemplateRegistry.from_catalog(Path(catalog_path) if catalog_path else CATALOG_PATH)
