"""CLI commands for semid."""

from . import (
    generate,
    inspect,
    presets,
    schema,
    config_cmd,
)

__all__ = [
    "generate",
    "inspect",
    "presets",
    "schema",
    "config_cmd",
]
