"""Tests for configuration normalization.

Functions under test in semid/core/normalizer.py and the configuration
models in semid/core/models/configuration.py.
"""

import json

import pytest

from semid.core.errors import ConfigurationError, UnknownPresetError
from semid.core.models import Compartment, GenerationStrategy, IDConfiguration
from semid.core.normalizer import (
    DEFAULT_CONFIGURATION,
    load_configuration_file,
    normalize_configuration,
)
from semid.presets import get_domain_preset


def _compartment(name="part", length=4, strategy="numbers"):
    return {"name": name, "length": length, "generation_strategy": strategy}


class TestDefaults:
    def test_none_gives_default_layout(self):
        config = normalize_configuration(None)
        assert config.data_concept_separator == "|"
        assert config.compartment_separator == "-"
        assert [c.length for c in config.compartments] == [4, 8, 12]
        assert all(
            c.generation_strategy is GenerationStrategy.VISIBLE_CHARACTERS
            for c in config.compartments
        )
        assert config.preset is None
        assert config.language_code is None

    def test_fields_merge_over_defaults(self):
        config = normalize_configuration({"compartment_separator": "::"})
        assert config.compartment_separator == "::"
        assert config.data_concept_separator == "|"
        assert len(config.compartments) == 3

    def test_camel_case_keys(self):
        config = normalize_configuration(
            {
                "dataConceptSeparator": "#",
                "compartmentSeparator": ".",
                "languageCode": "fra",
                "compartments": [{"name": "x", "length": 3, "generationStrategy": "base64"}],
            }
        )
        assert config.separators == ("#", ".")
        assert config.language_code == "fra"
        assert config.compartments[0].generation_strategy is GenerationStrategy.BASE64

    def test_none_values_count_as_absent(self):
        config = normalize_configuration(
            {"preset": None, "dataConceptSeparator": None, "compartments": None}
        )
        assert config.data_concept_separator == "|"
        assert len(config.compartments) == 3

    def test_extra_keys_ignored(self):
        config = normalize_configuration({"comment": "ignored"})
        assert len(config.compartments) == 3

    def test_compartment_instances_accepted(self):
        config = normalize_configuration(
            {"compartments": [Compartment(name="n", length=2, generation_strategy="numbers")]}
        )
        assert config.compartments[0].name == "n"

    def test_existing_configuration_round_trips(self):
        original = normalize_configuration({"preset": "invoice", "language_code": "deu"})
        again = normalize_configuration(original)
        assert again == original


class TestPresets:
    def test_preset_layout(self):
        config = normalize_configuration({"preset": "person"})
        assert config.preset == "person"
        assert [(c.name, c.length, c.generation_strategy.value) for c in config.compartments] == [
            ("semantic_prefix", 4, "visible characters"),
            ("numeric_core", 8, "numbers"),
            ("semantic_suffix", 24, "hexadecimal"),
        ]

    def test_caller_compartments_replace_preset(self):
        config = normalize_configuration(
            {"preset": "invoice", "compartments": [_compartment(length=6)]}
        )
        assert config.preset == "invoice"
        assert len(config.compartments) == 1
        assert config.compartments[0].length == 6

    def test_caller_separators_override_preset(self):
        config = normalize_configuration({"preset": "order", "compartmentSeparator": "_"})
        assert config.compartment_separator == "_"
        assert config.data_concept_separator == "|"
        assert len(config.compartments) == 3

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError):
            normalize_configuration({"preset": "spaceship"})

    def test_unknown_preset_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            normalize_configuration({"preset": "spaceship"})


class TestValidation:
    @pytest.mark.parametrize(
        "config",
        [
            {"preset": 42},
            {"dataConceptSeparator": 1},
            {"compartmentSeparator": ""},
            {"data_concept_separator": ["|"]},
            {"compartments": "numbers"},
            {"compartments": {"name": "x"}},
            {"compartments": []},
            {"languageCode": 3},
        ],
    )
    def test_malformed_shapes(self, config):
        with pytest.raises(ConfigurationError):
            normalize_configuration(config)

    @pytest.mark.parametrize("length", [-1, 0, 2.5, "4", True, None])
    def test_bad_length(self, length):
        with pytest.raises(ConfigurationError, match="length"):
            normalize_configuration({"compartments": [_compartment(length=length)]})

    @pytest.mark.parametrize("name", ["", "   ", None, 7])
    def test_bad_name(self, name):
        with pytest.raises(ConfigurationError, match="name"):
            normalize_configuration({"compartments": [_compartment(name=name)]})

    @pytest.mark.parametrize("strategy", ["emoji", "", None, 3, ["numbers"]])
    def test_bad_strategy(self, strategy):
        with pytest.raises(ConfigurationError, match="generationStrategy"):
            normalize_configuration({"compartments": [_compartment(strategy=strategy)]})

    def test_compartment_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            normalize_configuration({"compartments": ["numbers"]})

    def test_configuration_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            normalize_configuration(["numbers"])

    def test_strategy_resolver_restricts_tags(self):
        config = {"compartments": [_compartment(strategy="passphrase")]}
        with pytest.raises(ConfigurationError):
            normalize_configuration(config, strategy_resolver=lambda s: s != "passphrase")
        assert normalize_configuration(config).compartments[0].generation_strategy.value == (
            "passphrase"
        )


class TestNoAliasing:
    def test_caller_mutation_does_not_leak(self):
        compartments = [_compartment(length=5)]
        config = normalize_configuration({"compartments": compartments})
        compartments[0]["length"] = 99
        compartments.append(_compartment())
        assert len(config.compartments) == 1
        assert config.compartments[0].length == 5

    def test_preset_table_untouched(self):
        before = get_domain_preset("invoice")
        normalize_configuration({"preset": "invoice", "compartments": [_compartment()]})
        assert get_domain_preset("invoice") == before

    def test_defaults_untouched(self):
        config = normalize_configuration({"compartments": [_compartment()]})
        assert len(config.compartments) == 1
        assert len(DEFAULT_CONFIGURATION["compartments"]) == 3

    def test_configuration_is_frozen(self):
        config = normalize_configuration(None)
        with pytest.raises(Exception):
            config.data_concept_separator = "#"


class TestConfigurationModel:
    def test_expected_length(self):
        config = normalize_configuration(None)
        assert config.expected_length("robot") == 5 + 1 + 24 + 2

    def test_to_dict_snake_and_camel(self):
        config = normalize_configuration({"preset": "person", "language_code": "eng"})
        snake = config.to_dict()
        camel = config.to_dict(camel_case=True)
        assert snake["data_concept_separator"] == "|"
        assert snake["compartments"][0]["generation_strategy"] == "visible characters"
        assert camel["dataConceptSeparator"] == "|"
        assert camel["languageCode"] == "eng"
        assert camel["compartments"][1]["generationStrategy"] == "numbers"
        assert snake["preset"] == "person"

    def test_to_dict_is_fresh(self):
        config = normalize_configuration(None)
        data = config.to_dict()
        data["compartments"].clear()
        assert len(config.to_dict()["compartments"]) == 3

    def test_summary(self):
        summary = normalize_configuration({"preset": "person"}).summary()
        assert "preset=person" in summary
        assert "numeric_core:8:numbers" in summary


class TestLoadConfigurationFile:
    def test_yaml(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text(
            "dataConceptSeparator: '#'\n"
            "languageCode: eng\n"
            "compartments:\n"
            "  - name: words\n"
            "    length: 10\n"
            "    generationStrategy: passphrase\n"
        )
        config = load_configuration_file(path)
        assert config.data_concept_separator == "#"
        assert config.compartments[0].generation_strategy is GenerationStrategy.PASSPHRASE

    def test_json(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"preset": "device"}))
        assert IDConfiguration.from_file(path).preset == "device"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert len(load_configuration_file(path).compartments) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_configuration_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("compartments: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_configuration_file(path)

    def test_invalid_configuration(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("compartments:\n  - name: x\n    length: -1\n    generationStrategy: numbers\n")
        with pytest.raises(ConfigurationError):
            load_configuration_file(path)
