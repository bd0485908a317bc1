"""Schema export (JSON-LD and OWL) for domain presets."""

from .exporter import (
    SCHEMA_FORMATS,
    SCHEMA_VERSION,
    build_jsonld_schema,
    build_owl_schema,
    build_schema_for_preset,
    expand_schema_type,
    export_schema,
    render_schema,
    write_schema_artifacts,
)

__all__ = [
    "SCHEMA_FORMATS",
    "SCHEMA_VERSION",
    "build_jsonld_schema",
    "build_owl_schema",
    "build_schema_for_preset",
    "expand_schema_type",
    "export_schema",
    "render_schema",
    "write_schema_artifacts",
]
