"""Tests for semantic ID generation.

Functions under test in semid/generation/generator.py.
"""

import pytest

from semid import generate_semantic_id
from semid.core.errors import ConfigurationError, InvalidConceptNameError
from semid.core.models import GenerationStrategy
from semid.core.text import utf16_length
from semid.generation import SemanticIDGenerator


def _single(strategy, length=12, **extra):
    return {
        "compartments": [{"name": "value", "length": length, "generation_strategy": strategy}],
        **extra,
    }


class TestGenerate:
    def test_default_layout(self):
        semantic_id = SemanticIDGenerator().generate("robot")
        parts = semantic_id.split("|")
        assert len(parts) == 2
        assert parts[0] == "robot"
        compartments = parts[1].split("-")
        assert [len(c) for c in compartments] == [4, 8, 12]

    def test_person_has_two_top_level_segments(self):
        assert len(SemanticIDGenerator().generate("person").split("|")) == 2

    def test_preset_layout(self):
        semantic_id = SemanticIDGenerator({"preset": "invoice"}).generate("invoice")
        concept, rest = semantic_id.split("|")
        prefix, core, suffix = rest.split("-")
        assert concept == "invoice"
        assert len(prefix) == 4
        assert core.isdigit() and len(core) == 8
        assert len(suffix) == 24
        assert int(suffix, 16) >= 0

    @pytest.mark.parametrize("strategy", list(GenerationStrategy), ids=lambda s: s.value)
    def test_length_formula(self, strategy, dictionaries):
        generator = SemanticIDGenerator(
            {
                "dataConceptSeparator": "::",
                "compartmentSeparator": "~",
                "compartments": [
                    {"name": "a", "length": 5, "generationStrategy": strategy.value},
                    {"name": "b", "length": 9, "generationStrategy": strategy.value},
                ],
            },
            dictionaries=dictionaries,
        )
        for _ in range(10):
            semantic_id = generator.generate("concept")
            assert utf16_length(semantic_id) == generator.configuration.expected_length("concept")
            assert utf16_length(semantic_id) == 7 + 2 + 5 + 9 + 1

    def test_multi_character_separators(self):
        generator = SemanticIDGenerator(
            {
                "dataConceptSeparator": "::",
                "compartmentSeparator": "--",
                "compartments": [
                    {"name": "a", "length": 4, "generation_strategy": "numbers"},
                    {"name": "b", "length": 6, "generation_strategy": "hexadecimal"},
                ],
            }
        )
        semantic_id = generator.generate("user")
        assert semantic_id.startswith("user::")
        assert [len(p) for p in semantic_id.split("::", 1)[1].split("--")] == [4, 6]

    def test_ids_differ(self):
        generator = SemanticIDGenerator(_single("alphanumeric", 24))
        assert len({generator.generate("x") for _ in range(50)}) == 50

    def test_generate_many(self):
        ids = SemanticIDGenerator().generate_many("robot", 4)
        assert len(ids) == 4
        assert all(i.startswith("robot|") for i in ids)

    def test_alias(self):
        generator = SemanticIDGenerator(_single("numbers", 3))
        assert generator.generate_semantic_id("n").startswith("n|")

    def test_module_function(self):
        semantic_id = generate_semantic_id("order", {"preset": "order"})
        assert semantic_id.startswith("order|")

    def test_passphrase_with_language(self, dictionaries):
        generator = SemanticIDGenerator(
            _single("passphrase", 10, languageCode="eng"), dictionaries=dictionaries
        )
        value = generator.generate("session").split("|")[1]
        assert len(value) == 10
        assert dictionaries.get("eng").can_segment(value)


class TestErrors:
    @pytest.mark.parametrize("concept", ["", None, 42, b"robot"])
    def test_invalid_concept_name(self, concept):
        with pytest.raises(InvalidConceptNameError):
            SemanticIDGenerator().generate(concept)

    def test_bad_configuration_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            SemanticIDGenerator(_single("numbers", -1))

    def test_unknown_strategy_fails_at_construction(self):
        with pytest.raises(ConfigurationError):
            SemanticIDGenerator(_single("emoji"))


class TestIsolation:
    def test_generators_do_not_share_configuration(self):
        layout = _single("numbers", 4)
        first = SemanticIDGenerator(layout)
        layout["compartments"][0]["length"] = 8
        second = SemanticIDGenerator(layout)
        assert first.configuration.compartments[0].length == 4
        assert second.configuration.compartments[0].length == 8
        assert len(first.generate("a").split("|")[1]) == 4
