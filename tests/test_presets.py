"""Tests for the domain preset catalog (semid/presets/catalog.py)."""

import pytest

from semid.core.errors import ConfigurationError, UnknownPresetError
from semid.presets import (
    PresetCatalog,
    get_catalog,
    get_domain_preset,
    get_preset_metadata,
    list_domain_presets,
    resolve_preset_configuration,
)


class TestListing:
    def test_thirty_presets_in_order(self):
        names = list_domain_presets()
        assert len(names) == 30
        assert names[0] == "person"
        assert names[-1] == "dataset"
        assert names.index("order") < names.index("purchase_order")

    def test_listing_is_a_copy(self):
        names = list_domain_presets()
        names.clear()
        assert len(list_domain_presets()) == 30

    def test_process_wide_catalog(self):
        assert get_catalog() is get_catalog()


class TestGet:
    def test_shared_layout(self):
        preset = get_domain_preset("invoice")
        assert preset["data_concept_separator"] == "|"
        assert preset["compartment_separator"] == "-"
        assert [c["length"] for c in preset["compartments"]] == [4, 8, 24]

    def test_returns_deep_copies(self):
        preset = get_domain_preset("person")
        preset["compartments"][0]["length"] = 99
        preset["data_concept_separator"] = "#"
        fresh = get_domain_preset("person")
        assert fresh["compartments"][0]["length"] == 4
        assert fresh["data_concept_separator"] == "|"

    def test_presets_do_not_share_compartments(self):
        catalog = PresetCatalog()
        first = catalog.get("person")
        second = catalog.get("employee")
        assert first["compartments"] is not second["compartments"]

    @pytest.mark.parametrize("name", ["spaceship", "Person", "", None, 3])
    def test_unknown(self, name):
        with pytest.raises(UnknownPresetError):
            get_domain_preset(name)

    def test_unknown_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            get_domain_preset("spaceship")

    def test_contains(self):
        catalog = get_catalog()
        assert "invoice" in catalog
        assert "spaceship" not in catalog
        assert 42 not in catalog


class TestMetadata:
    def test_fields(self):
        metadata = get_preset_metadata("purchase_order")
        assert metadata.key == "purchase_order"
        assert metadata.schema_name == "PurchaseOrder"
        assert metadata.label == "PurchaseOrder"
        assert metadata.schema_class == "schema:Order"
        assert metadata.description

    def test_every_preset_has_metadata(self):
        for name in list_domain_presets():
            metadata = get_preset_metadata(name)
            assert metadata.key == name
            assert metadata.schema_class.startswith("schema:")

    def test_unknown(self):
        with pytest.raises(UnknownPresetError):
            get_preset_metadata("spaceship")


class TestResolve:
    def test_overrides_applied(self):
        resolved = resolve_preset_configuration("order", {"compartment_separator": "_"})
        assert resolved["compartment_separator"] == "_"
        assert resolved["data_concept_separator"] == "|"

    def test_none_overrides_skipped(self):
        resolved = resolve_preset_configuration(
            "order", {"compartment_separator": None, "compartments": None}
        )
        assert resolved["compartment_separator"] == "-"
        assert len(resolved["compartments"]) == 3

    def test_compartments_replaced_not_merged(self):
        compartments = [{"name": "x", "length": 2, "generation_strategy": "numbers"}]
        resolved = resolve_preset_configuration("order", {"compartments": compartments})
        assert resolved["compartments"] == compartments
        assert resolved["compartments"] is not compartments

    def test_resolve_unknown(self):
        with pytest.raises(UnknownPresetError):
            resolve_preset_configuration("spaceship")


class TestSeparatorHints:
    def test_hints_follow_catalog_order(self):
        hints = get_catalog().separator_hints()
        assert hints[0] == ("person", "|")
        assert [key for key, _ in hints] == list_domain_presets()
