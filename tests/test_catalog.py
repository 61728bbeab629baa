"""Tests for ComponentCatalog lookups and search."""

import pytest

from uimagic.catalog import ComponentCatalog, DEFAULT_COMPONENTS
from uimagic.orchestrator import ComponentGenerator
from uimagic.tracing import TraceLogger


class TestLookup:

    def test_default_catalog_has_core_kinds(self, catalog):
        assert catalog.kinds() == ["button", "input", "card", "modal", "alert"]
        assert len(catalog) == len(DEFAULT_COMPONENTS)

    @pytest.mark.asyncio
    async def test_find_component(self, catalog):
        definition = await catalog.find_component("button")
        assert definition is not None
        assert definition.name == "Button"
        assert [v.name for v in definition.variants] == ["primary", "secondary", "ghost"]

    @pytest.mark.asyncio
    async def test_missing_kind_is_none(self, catalog):
        assert await catalog.find_component("pricing-table") is None
        assert "pricing-table" not in catalog

    def test_by_category(self, catalog):
        assert len(catalog.get_components_by_category("core")) == 5
        assert catalog.get_components_by_category("composite") == []

    def test_custom_definitions(self):
        catalog = ComponentCatalog(DEFAULT_COMPONENTS[:1])
        assert catalog.kinds() == ["button"]
        assert catalog.get("modal") is None


class TestIsolation:

    def test_definition_containers_are_immutable(self, catalog):
        button = catalog.get("button")
        with pytest.raises(AttributeError):
            button.variants.clear()
        with pytest.raises(AttributeError):
            catalog.get("card").keywords.append("zzz")
        assert len(button.variants) == 3

    def test_fresh_catalog_unaffected_by_props_change(self, catalog):
        catalog.get("button").props.pop("variant")
        assert "variant" not in catalog.get("button").props
        assert "variant" in ComponentCatalog().get("button").props
        assert "variant" in DEFAULT_COMPONENTS[0].props

    @pytest.mark.asyncio
    async def test_generation_unaffected_by_other_catalog(self, catalog, config, templates):
        catalog.get("button").props.clear()
        gen = ComponentGenerator(config, templates=templates, tracer=TraceLogger(False, "unused"))
        result = await gen.quick_generate("create a button")
        assert len(result.variants) == 3
        assert "variant" in result.variants[0].props


class TestSearch:

    def test_by_name_case_insensitive(self, catalog):
        assert [c.name for c in catalog.search_components("BUTTON")] == ["Button"]

    def test_by_keyword(self, catalog):
        assert [c.name for c in catalog.search_components("dialog")] == ["Modal"]

    def test_by_description(self, catalog):
        assert [c.name for c in catalog.search_components("focus management")] == ["Modal"]

    def test_each_component_counted_once(self, catalog):
        results = catalog.search_components("component")
        assert len(results) == 5
        assert len({c.kind for c in results}) == 5

    def test_no_match(self, catalog):
        assert catalog.search_components("carousel") == []
