"""Unit tests for TemplateRegistry and the bundled catalog."""

import textwrap

import pytest

from resumekit.contexts.templating.exceptions import TemplateConfigError, UnknownTemplateError
from resumekit.contexts.templating.layouts import LAYOUTS, ModernLayout, ProfessionalLayout
from resumekit.contexts.templating.template_registry import (
    ALL_CATEGORY,
    TemplateInfo,
    TemplateRegistry,
    get_registry,
)


def write_catalog(tmp_path, body: str):
    path = tmp_path / "catalog.yaml"
    path.write_text(textwrap.dedent(body))
    return path


class TestBundledCatalog:
    @pytest.mark.unit
    def test_registry_is_built_once(self):
        assert get_registry() is get_registry()

    @pytest.mark.unit
    def test_more_templates_than_layouts(self, registry):
        layouts_used = {info.layout for info in registry.list()}
        assert layouts_used == set(LAYOUTS)
        assert len(registry) > len(LAYOUTS)

    @pytest.mark.unit
    def test_ids_are_unique_and_ordered(self, registry):
        ids = registry.ids()
        assert len(ids) == len(set(ids))
        assert ids[0] == "professional"

    @pytest.mark.unit
    def test_every_template_resolves(self, registry):
        for info in registry.list():
            layout = registry.resolve(info.id)
            assert layout.template_id == info.id
            assert layout.name == info.layout

    @pytest.mark.unit
    def test_resolve_types(self, registry):
        assert isinstance(registry.resolve("professional"), ProfessionalLayout)
        assert isinstance(registry.resolve("tech"), ModernLayout)
        assert registry.resolve("tech").options["sidebar_side"] == "right"

    @pytest.mark.unit
    def test_metadata(self, registry):
        info = registry.get_info("modern")
        assert info.label == "Modern"
        assert info.is_popular
        assert info.default_accent == "#7c3aed"

    @pytest.mark.unit
    def test_categories_start_with_all(self, registry):
        categories = registry.categories()
        assert categories[0].value == ALL_CATEGORY
        used = {info.category for info in registry.list()}
        assert used <= {c.value for c in categories}


class TestUnknownTemplate:
    @pytest.mark.unit
    def test_resolve_unknown_raises(self, registry):
        with pytest.raises(UnknownTemplateError) as exc_info:
            registry.resolve("does-not-exist")
        assert exc_info.value.template_id == "does-not-exist"
        assert "modern" in exc_info.value.known_ids
        assert "Unknown template: 'does-not-exist'" in str(exc_info.value)

    @pytest.mark.unit
    def test_unknown_is_a_key_error(self, registry):
        with pytest.raises(KeyError):
            registry.get_info("nope")

    @pytest.mark.unit
    def test_contains(self, registry):
        assert "minimal" in registry
        assert "nope" not in registry


class TestCatalogValidation:
    @pytest.mark.unit
    def test_minimal_catalog(self, tmp_path):
        path = write_catalog(
            tmp_path,
            """
            templates:
              - {id: one, label: One, layout: minimal, category: simple}
              - {id: two, label: Two, layout: timeline, options: {marker: square}}
            """,
        )
        registry = TemplateRegistry.from_catalog(path)
        assert registry.ids() == ["one", "two"]
        # No configured categories: derived from the entries
        assert [c.value for c in registry.categories()] == [ALL_CATEGORY, "simple"]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "entry, fragment",
        [
            ("{id: x, layout: brochure}", "Unknown layout"),
            ("{id: x, layout: modern, options: {sidebar_colour: red}}", "sidebar_colour"),
            ("{id: x, layout: modern, options: {sidebar_side: top}}", "sidebar_side"),
            ("{id: x, layout: modern, default_accent: teal}", "Invalid color"),
            ("{label: No id, layout: modern}", "needs 'id'"),
        ],
    )
    def test_invalid_entries_fail_at_load(self, tmp_path, entry, fragment):
        path = write_catalog(tmp_path, f"templates:\n  - {entry}\n")
        with pytest.raises(TemplateConfigError) as exc_info:
            TemplateRegistry.from_catalog(path)
        assert fragment in str(exc_info.value)

    @pytest.mark.unit
    def test_empty_catalog(self, tmp_path):
        path = write_catalog(tmp_path, "templates: []\n")
        with pytest.raises(TemplateConfigError):
            TemplateRegistry.from_catalog(path)

    @pytest.mark.unit
    def test_duplicate_id(self):
        registry = TemplateRegistry()
        registry.register(TemplateInfo(id="a", label="A", layout="minimal"))
        with pytest.raises(TemplateConfigError, match="Duplicate"):
            registry.register(TemplateInfo(id="a", label="A again", layout="modern"))
