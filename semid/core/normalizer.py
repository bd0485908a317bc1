"""Configuration normalizer.

Turns caller input (None, a mapping in snake_case or camelCase, or an
existing IDConfiguration) into a validated, immutable IDConfiguration.
With a preset, the preset's base configuration is resolved and the
caller's remaining fields are applied over it; without one, caller fields
are merged over the hard defaults. Either way the compartment list is
rebuilt from scratch, so the result never aliases caller or preset data.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from .errors import ConfigurationError
from .models import Compartment, GenerationStrategy, IDConfiguration
from .models.configuration import (
    DEFAULT_COMPARTMENT_SEPARATOR,
    DEFAULT_DATA_CONCEPT_SEPARATOR,
)

logger = logging.getLogger(__name__)

StrategyResolver = Callable[[Any], bool]

DEFAULT_CONFIGURATION: dict[str, Any] = {
    "data_concept_separator": DEFAULT_DATA_CONCEPT_SEPARATOR,
    "compartment_separator": DEFAULT_COMPARTMENT_SEPARATOR,
    "compartments": [
        {"name": "part1", "length": 4, "generation_strategy": "visible characters"},
        {"name": "part2", "length": 8, "generation_strategy": "visible characters"},
        {"name": "part3", "length": 12, "generation_strategy": "visible characters"},
    ],
}

# Wire (camelCase) key -> canonical key
_KEY_ALIASES = {
    "dataConceptSeparator": "data_concept_separator",
    "compartmentSeparator": "compartment_separator",
    "languageCode": "language_code",
    "generationStrategy": "generation_strategy",
}

_OVERRIDABLE_FIELDS = (
    "data_concept_separator",
    "compartment_separator",
    "compartments",
    "language_code",
)


def default_configuration() -> dict[str, Any]:
    """Fresh copy of the hard default configuration."""
    return copy.deepcopy(DEFAULT_CONFIGURATION)


def _canonicalize(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase keys to snake_case and drop None values."""
    canonical: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        canonical[_KEY_ALIASES.get(key, key)] = value
    return canonical


def _check_separator(canonical: dict[str, Any], key: str, label: str) -> None:
    if key not in canonical:
        return
    value = canonical[key]
    if not isinstance(value, str) or not value:
        raise ConfigurationError(f"Invalid {label}. It should be a non-empty string.")


def _normalize_compartment(
    raw: Any, position: int, strategy_resolver: StrategyResolver
) -> Compartment:
    if isinstance(raw, Compartment):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            f"Invalid compartment at position {position}. It should be an object."
        )
    fields = _canonicalize(raw)

    length = fields.get("length")
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise ConfigurationError("Invalid compartment length. It should be a positive integer.")

    name = fields.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError("Invalid compartment name. It should be a non-empty string.")

    strategy = fields.get("generation_strategy")
    if not strategy_resolver(strategy) or not GenerationStrategy.is_supported(strategy):
        raise ConfigurationError(
            "Invalid generationStrategy. Check the documentation for valid strategies."
        )

    return Compartment(
        name=name,
        length=length,
        generation_strategy=GenerationStrategy(strategy),
    )


def normalize_configuration(
    user_config: Mapping[str, Any] | IDConfiguration | None = None,
    strategy_resolver: StrategyResolver = GenerationStrategy.is_supported,
    presets=None,
) -> IDConfiguration:
    """Validate caller input and resolve it into an IDConfiguration.

    Args:
        user_config: None, a mapping (snake_case or camelCase keys), or an
            existing IDConfiguration
        strategy_resolver: Predicate deciding which strategy tags are accepted
        presets: Preset catalog to resolve `preset` against (default: the
            process-wide catalog)

    Returns:
        A new, frozen IDConfiguration

    Raises:
        ConfigurationError: On any malformed field, or UnknownPresetError
            for an unknown preset name
    """
    if user_config is None:
        user_config = {}
    elif isinstance(user_config, IDConfiguration):
        user_config = user_config.to_dict()
    if not isinstance(user_config, Mapping):
        raise ConfigurationError("Invalid configuration. It should be a mapping.")

    canonical = _canonicalize(user_config)

    preset = canonical.get("preset")
    if preset is not None and not isinstance(preset, str):
        raise ConfigurationError("Invalid preset. It should be a string.")
    _check_separator(canonical, "data_concept_separator", "dataConceptSeparator")
    _check_separator(canonical, "compartment_separator", "compartmentSeparator")
    if "compartments" in canonical and not isinstance(canonical["compartments"], (list, tuple)):
        raise ConfigurationError("Invalid compartments. It should be an array.")
    if "language_code" in canonical and not isinstance(canonical["language_code"], str):
        raise ConfigurationError("Invalid languageCode. It should be a string.")

    overrides = {key: canonical[key] for key in _OVERRIDABLE_FIELDS if key in canonical}

    if preset is not None:
        if presets is None:
            from ..presets import get_catalog

            presets = get_catalog()
        resolved = presets.resolve(preset, overrides)
    else:
        resolved = default_configuration()
        resolved.update(copy.deepcopy(overrides))

    raw_compartments = resolved.get("compartments") or []
    if not raw_compartments:
        raise ConfigurationError("Invalid compartments. At least one compartment is required.")
    compartments = tuple(
        _normalize_compartment(raw, position, strategy_resolver)
        for position, raw in enumerate(raw_compartments)
    )

    configuration = IDConfiguration(
        data_concept_separator=resolved["data_concept_separator"],
        compartment_separator=resolved["compartment_separator"],
        compartments=compartments,
        language_code=resolved.get("language_code"),
        preset=preset,
    )
    logger.debug("Normalized configuration: %s", configuration.summary())
    return configuration


def load_configuration_file(path: Path | str, presets=None) -> IDConfiguration:
    """Load a configuration from a YAML or JSON file and normalize it.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or the
            configuration it holds is invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid configuration file {path}: {exc}") from exc

    logger.debug("Loaded configuration file %s", path)
    return normalize_configuration(data, presets=presets)
