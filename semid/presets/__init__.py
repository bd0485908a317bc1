"""Domain presets: named, ready-made configurations for common concepts."""

from .catalog import (
    PresetCatalog,
    get_catalog,
    get_domain_preset,
    get_preset_metadata,
    list_domain_presets,
    resolve_preset_configuration,
)

__all__ = [
    "PresetCatalog",
    "get_catalog",
    "get_domain_preset",
    "get_preset_metadata",
    "list_domain_presets",
    "resolve_preset_configuration",
]
