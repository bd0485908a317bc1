"""Configuration models for semantic IDs.

An IDConfiguration is the resolved, validated form of a user configuration:
separators, an ordered tuple of compartments, and the optional preset and
language it came from. Instances are frozen; build them through
semid.core.normalizer.normalize_configuration rather than directly.
"""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class GenerationStrategy(str, Enum):
    """The closed set of compartment generation strategies."""

    ALL_CHARACTERS = "all characters"
    VISIBLE_CHARACTERS = "visible characters"
    NUMBERS = "numbers"
    ALPHANUMERIC = "alphanumeric"
    HEXADECIMAL = "hexadecimal"
    BASE64 = "base64"
    PASSPHRASE = "passphrase"

    @classmethod
    def is_supported(cls, value: Any) -> bool:
        """True if value names one of the strategies (enum member or tag string)."""
        if isinstance(value, cls):
            return True
        if not isinstance(value, str):
            return False
        return value in {member.value for member in cls}


class Compartment(BaseModel, frozen=True):
    """One named, fixed-length segment of a semantic ID."""

    name: str = Field(description="Compartment name, non-empty")
    length: int = Field(gt=0, description="Exact length in UTF-16 code units")
    generation_strategy: GenerationStrategy

    def to_dict(self, camel_case: bool = False) -> dict[str, Any]:
        strategy_key = "generationStrategy" if camel_case else "generation_strategy"
        return {
            "name": self.name,
            "length": self.length,
            strategy_key: self.generation_strategy.value,
        }


DEFAULT_DATA_CONCEPT_SEPARATOR = "|"
DEFAULT_COMPARTMENT_SEPARATOR = "-"


class IDConfiguration(BaseModel, frozen=True):
    """Resolved configuration consumed by the generator and the inspector."""

    data_concept_separator: str = DEFAULT_DATA_CONCEPT_SEPARATOR
    compartment_separator: str = DEFAULT_COMPARTMENT_SEPARATOR
    compartments: tuple[Compartment, ...]
    language_code: str | None = None
    preset: str | None = None

    @property
    def separators(self) -> tuple[str, str]:
        return (self.data_concept_separator, self.compartment_separator)

    def expected_length(self, concept_name: str) -> int:
        """Length of an ID generated for concept_name under this configuration."""
        from ..text import utf16_length

        return (
            utf16_length(concept_name)
            + utf16_length(self.data_concept_separator)
            + sum(c.length for c in self.compartments)
            + (len(self.compartments) - 1) * utf16_length(self.compartment_separator)
        )

    def to_dict(self, camel_case: bool = False) -> dict[str, Any]:
        """Convert to a fresh plain dict (snake_case or wire camelCase keys)."""
        if camel_case:
            data: dict[str, Any] = {
                "dataConceptSeparator": self.data_concept_separator,
                "compartmentSeparator": self.compartment_separator,
                "compartments": [c.to_dict(camel_case=True) for c in self.compartments],
            }
            if self.language_code is not None:
                data["languageCode"] = self.language_code
        else:
            data = {
                "data_concept_separator": self.data_concept_separator,
                "compartment_separator": self.compartment_separator,
                "compartments": [c.to_dict() for c in self.compartments],
            }
            if self.language_code is not None:
                data["language_code"] = self.language_code
        if self.preset is not None:
            data["preset"] = self.preset
        return data

    @classmethod
    def from_file(cls, path: Path | str) -> "IDConfiguration":
        """Load and normalize a configuration from a YAML or JSON file."""
        from ..normalizer import load_configuration_file

        return load_configuration_file(path)

    def summary(self) -> str:
        """Get a one-line text summary of the configuration."""
        parts = ", ".join(
            f"{c.name}:{c.length}:{c.generation_strategy.value}"
            for c in self.compartments
        )
        origin = f"preset={self.preset}" if self.preset else "custom"
        return (
            f"{origin} concept-sep={self.data_concept_separator!r} "
            f"compartment-sep={self.compartment_separator!r} [{parts}]"
        )
