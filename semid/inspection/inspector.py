"""Semantic ID inspector.

Parses a candidate ID back into its concept name and compartments and
checks every compartment against the configuration it should have been
generated with. Problems are reported as issue strings on the report;
only caller errors (bad input, unresolvable configuration) raise.

Configuration resolution order for inspect():
    1. Explicit overrides passed to inspect()
    2. The configuration the inspector was constructed with
    3. Auto-detection: the first preset whose "<key><separator>" prefixes the ID
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.errors import ConfigurationResolutionError, InvalidInputError
from ..core.models import (
    Compartment,
    CompartmentReport,
    ConfigurationSummary,
    GenerationStrategy,
    IDConfiguration,
    InspectionReport,
)
from ..core.normalizer import normalize_configuration
from ..core.text import utf16_length
from ..passphrase import PassphraseDictionaryCache
from ..presets import get_catalog
from .validators import STRATEGY_VALIDATORS, ValidatorContext

logger = logging.getLogger(__name__)


def _reserved_separator(value: str, configuration: IDConfiguration) -> str | None:
    for separator in configuration.separators:
        if separator and separator in value:
            return separator
    return None


def _has_validator(strategy: Any) -> bool:
    return GenerationStrategy.is_supported(strategy) and (
        GenerationStrategy(strategy) in STRATEGY_VALIDATORS
    )


class SemanticIDInspector:
    """Validates semantic IDs and explains what is wrong with them.

    Example:
        >>> inspector = SemanticIDInspector()
        >>> report = inspector.inspect("invoice|a1b2-12345678-0123456789abcdef01234567")
        >>> report.is_valid
        True
    """

    def __init__(
        self,
        configuration: Mapping[str, Any] | IDConfiguration | None = None,
        *,
        dictionaries: PassphraseDictionaryCache | None = None,
        presets=None,
    ):
        self._presets = presets or get_catalog()
        self._dictionaries = dictionaries
        self._configuration = (
            self._normalize(configuration) if configuration is not None else None
        )

    @property
    def configuration(self) -> IDConfiguration | None:
        return self._configuration

    def _normalize(self, configuration: Mapping[str, Any] | IDConfiguration) -> IDConfiguration:
        return normalize_configuration(
            configuration,
            strategy_resolver=_has_validator,
            presets=self._presets,
        )

    def detect_preset(self, semantic_id: str) -> str | None:
        """First preset whose key plus data concept separator prefixes the ID."""
        for key, separator in self._presets.separator_hints():
            if separator and semantic_id.startswith(f"{key}{separator}"):
                return key
        return None

    def resolve_configuration(
        self,
        semantic_id: str,
        overrides: Mapping[str, Any] | IDConfiguration | None = None,
    ) -> IDConfiguration:
        """Pick the configuration to inspect semantic_id against.

        Raises:
            ConfigurationResolutionError: If nothing applies
        """
        if overrides is not None:
            if not isinstance(overrides, (Mapping, IDConfiguration)):
                raise InvalidInputError("Inspection overrides must be a mapping.")
            return self._normalize(overrides)

        if self._configuration is not None:
            return self._configuration

        detected = self.detect_preset(semantic_id)
        if detected is not None:
            logger.debug("Auto-detected preset %r", detected)
            return self._normalize({"preset": detected})

        raise ConfigurationResolutionError(
            "Unable to determine configuration for inspection. Provide a preset or configuration."
        )

    def inspect(
        self,
        semantic_id: str,
        overrides: Mapping[str, Any] | IDConfiguration | None = None,
    ) -> InspectionReport:
        """Inspect a candidate semantic ID.

        The candidate is parsed verbatim; it only has to contain something
        other than whitespace.

        Raises:
            InvalidInputError: If semantic_id is not a non-blank string
            ConfigurationResolutionError: If no configuration applies
        """
        if not isinstance(semantic_id, str) or not semantic_id.strip():
            raise InvalidInputError("Invalid semantic ID. Provide a non-empty string.")

        configuration = self.resolve_configuration(semantic_id, overrides)
        return self._inspect_with(semantic_id, configuration)

    def _inspect_with(self, semantic_id: str, configuration: IDConfiguration) -> InspectionReport:
        issues: list[str] = []
        concept_separator = configuration.data_concept_separator
        compartment_separator = configuration.compartment_separator

        index = semantic_id.find(concept_separator)
        if index == -1:
            issues.append(f'Missing data concept separator "{concept_separator}".')
            concept_name = ""
            remainder = ""
        else:
            concept_name = semantic_id[:index]
            remainder = semantic_id[index + len(concept_separator):]
        if not concept_name:
            issues.append("Missing data concept name.")

        values = remainder.split(compartment_separator) if remainder else []
        expected_count = len(configuration.compartments)
        if len(values) < expected_count:
            issues.append(f"Expected {expected_count} compartments but received {len(values)}.")
        elif len(values) > expected_count:
            issues.append(
                f"Found {len(values) - expected_count} unexpected compartment segment(s)."
            )

        context = ValidatorContext(
            language_code=configuration.language_code,
            dictionaries=self._dictionaries,
        )
        compartments = [
            self._check_compartment(
                compartment,
                position,
                values[position] if position < len(values) else None,
                configuration,
                context,
            )
            for position, compartment in enumerate(configuration.compartments)
        ]

        metadata = (
            self._presets.metadata(configuration.preset) if configuration.preset else None
        )
        is_valid = not issues and all(c.is_valid for c in compartments)
        logger.debug("Inspected %r: valid=%s", semantic_id, is_valid)

        return InspectionReport(
            semantic_id=semantic_id,
            data_concept_name=concept_name,
            preset=configuration.preset,
            metadata=metadata,
            configuration=ConfigurationSummary(
                data_concept_separator=concept_separator,
                compartment_separator=compartment_separator,
                language_code=configuration.language_code,
                compartment_count=expected_count,
            ),
            is_valid=is_valid,
            issues=issues,
            compartments=compartments,
        )

    def _check_compartment(
        self,
        compartment: Compartment,
        position: int,
        value: str | None,
        configuration: IDConfiguration,
        context: ValidatorContext,
    ) -> CompartmentReport:
        issues: list[str] = []
        if value is None:
            issues.append(
                f'Missing value for compartment "{compartment.name}" at position {position}.'
            )
            value = ""

        length = utf16_length(value)
        if length != compartment.length:
            issues.append(f"Expected length {compartment.length} but received {length}.")

        separator = _reserved_separator(value, configuration)
        if separator is not None:
            issues.append(f'Value contains reserved separator "{separator}".')

        validator = STRATEGY_VALIDATORS[compartment.generation_strategy]
        issues.extend(validator(value, context))

        return CompartmentReport(
            name=compartment.name,
            position=position,
            expected_length=compartment.length,
            generation_strategy=compartment.generation_strategy,
            value=value,
            is_valid=not issues,
            issues=issues,
        )


def inspect_semantic_id(
    semantic_id: str,
    configuration: Mapping[str, Any] | IDConfiguration | None = None,
    *,
    dictionaries: PassphraseDictionaryCache | None = None,
) -> InspectionReport:
    """One-shot convenience wrapper around SemanticIDInspector."""
    return SemanticIDInspector(configuration, dictionaries=dictionaries).inspect(semantic_id)
