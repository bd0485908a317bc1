"""JSON-LD and OWL schema export for domain presets.

Each preset can be described as a JSON-LD document (a plain dict) or as
an OWL ontology in RDF/XML, rendered through a Jinja2 template with XML
autoescaping.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any
from urllib.parse import quote

from jinja2 import BaseLoader, Environment

from ..core.errors import UnsupportedSchemaFormatError
from ..presets import get_catalog

logger = logging.getLogger(__name__)

BASE_IRI = "https://semantic-id-generator.dev"
SCHEMA_BASE_IRI = f"{BASE_IRI}/schema"
ENTITY_BASE_IRI = f"{BASE_IRI}/entity"
TERMS_BASE_IRI = f"{BASE_IRI}/terms"
SCHEMA_VERSION = "1.0.0"

JSONLD_CONTEXT = {
    "schema": "https://schema.org/",
    "sig": f"{TERMS_BASE_IRI}#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
}

SCHEMA_FORMATS = ("jsonld", "owl")
FORMAT_EXTENSIONS = {"jsonld": "jsonld", "owl": "owl"}


OWL_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:owl="http://www.w3.org/2002/07/owl#"
         xmlns:rdfs="http://www.w3.org/2000/01/rdf-schema#"
         xmlns:xsd="http://www.w3.org/2001/XMLSchema#"
         xmlns:schema="https://schema.org/"
         xmlns:sig="{{ terms_iri }}#">
    <owl:Ontology rdf:about="{{ schema_iri }}">
        <rdfs:comment>{{ metadata.description }}</rdfs:comment>
    </owl:Ontology>
    <owl:Class rdf:about="{{ class_iri }}">
        <rdfs:label>{{ metadata.schema_name }}</rdfs:label>
        <rdfs:comment>{{ metadata.description }}</rdfs:comment>
        <rdfs:subClassOf rdf:resource="{{ domain_class_iri }}" />
        <sig:entitySchema rdf:datatype="xsd:string">{{ metadata.schema_name }}</sig:entitySchema>
        <sig:entitySchemaIRI rdf:datatype="xsd:anyURI">{{ entity_iri }}</sig:entitySchemaIRI>
        <sig:dataConceptSeparator rdf:datatype="xsd:string">{{ config.data_concept_separator }}</sig:dataConceptSeparator>
        <sig:compartmentSeparator rdf:datatype="xsd:string">{{ config.compartment_separator }}</sig:compartmentSeparator>
    </owl:Class>
{%- for compartment in config.compartments %}
    <owl:DatatypeProperty rdf:about="{{ terms_iri }}#{{ preset }}/compartment/{{ compartment.name | fragment }}">
        <rdfs:label>{{ compartment.name }}</rdfs:label>
        <rdfs:comment>generationStrategy={{ compartment.generation_strategy }}; length={{ compartment.length }}; position={{ loop.index0 }}</rdfs:comment>
        <rdfs:domain rdf:resource="{{ class_iri }}" />
        <rdfs:range rdf:resource="http://www.w3.org/2001/XMLSchema#string" />
    </owl:DatatypeProperty>
{%- endfor %}
</rdf:RDF>
"""


def _create_jinja_environment() -> Environment:
    """Create a Jinja2 environment with XML escaping and the IRI fragment filter."""
    env = Environment(loader=BaseLoader(), autoescape=True)

    def fragment(value: str) -> str:
        """Lowercase, collapse whitespace runs to '-', then percent-encode."""
        return quote(re.sub(r"\s+", "-", str(value).lower()), safe="!'()*-._~")

    env.filters["fragment"] = fragment
    return env


_owl_template = _create_jinja_environment().from_string(OWL_TEMPLATE)


def expand_schema_type(schema_type: str | None) -> str:
    """Expand a `schema:` CURIE to a full IRI (schema:Thing when missing)."""
    if not schema_type:
        return f"{JSONLD_CONTEXT['schema']}Thing"
    if schema_type.startswith("schema:"):
        return JSONLD_CONTEXT["schema"] + schema_type[len("schema:"):]
    return schema_type


def build_jsonld_schema(preset: str) -> dict[str, Any]:
    """JSON-LD description of a preset's ID layout."""
    catalog = get_catalog()
    config = catalog.get(preset)
    metadata = catalog.metadata(preset)

    return {
        "@context": dict(JSONLD_CONTEXT),
        "@id": f"{SCHEMA_BASE_IRI}/{preset}",
        "@type": "sig:SemanticIdentifier",
        "schema:name": f"{metadata.schema_name} Semantic Identifier",
        "schema:description": metadata.description,
        "schema:schemaVersion": SCHEMA_VERSION,
        "sig:entitySchema": metadata.schema_name,
        "sig:entitySchemaIRI": f"{ENTITY_BASE_IRI}/{metadata.schema_name}",
        "sig:domainClass": metadata.schema_class,
        "sig:dataConceptSeparator": config["data_concept_separator"],
        "sig:compartmentSeparator": config["compartment_separator"],
        "sig:compartments": [
            {
                "@type": "sig:Compartment",
                "schema:name": compartment["name"],
                "sig:length": compartment["length"],
                "sig:generationStrategy": compartment["generation_strategy"],
                "sig:position": position,
            }
            for position, compartment in enumerate(config["compartments"])
        ],
    }


def build_owl_schema(preset: str) -> str:
    """OWL ontology (RDF/XML) describing a preset's ID layout."""
    catalog = get_catalog()
    config = catalog.get(preset)
    metadata = catalog.metadata(preset)
    schema_iri = f"{SCHEMA_BASE_IRI}/{preset}"

    return _owl_template.render(
        preset=preset,
        config=config,
        metadata=metadata,
        schema_iri=schema_iri,
        class_iri=f"{schema_iri}#{metadata.schema_name}",
        domain_class_iri=expand_schema_type(metadata.schema_class),
        entity_iri=f"{ENTITY_BASE_IRI}/{metadata.schema_name}",
        terms_iri=TERMS_BASE_IRI,
    )


def build_schema_for_preset(preset: str) -> dict[str, Any]:
    return {
        "preset": preset,
        "jsonld": build_jsonld_schema(preset),
        "owl": build_owl_schema(preset),
    }


def export_schema(preset: str, format: str = "jsonld") -> dict[str, Any] | str:
    """Export a preset schema in the requested format.

    Raises:
        UnsupportedSchemaFormatError: If format is not "jsonld" or "owl"
        UnknownPresetError: If the preset does not exist
    """
    if format == "jsonld":
        return build_jsonld_schema(preset)
    if format == "owl":
        return build_owl_schema(preset)
    raise UnsupportedSchemaFormatError(f"Unsupported schema format: {format}")


def render_schema(preset: str, format: str = "jsonld") -> str:
    """Export a preset schema as text (JSON-LD pretty-printed)."""
    schema = export_schema(preset, format)
    if isinstance(schema, str):
        return schema
    return json.dumps(schema, indent=2, ensure_ascii=False) + "\n"


def write_schema_artifacts(
    directory: Path | str,
    presets: list[str] | None = None,
    formats: tuple[str, ...] = SCHEMA_FORMATS,
) -> list[Path]:
    """Write `<preset>.jsonld` and `<preset>.owl` files for presets.

    Args:
        directory: Output directory (created if missing)
        presets: Preset keys to export (default: all presets)
        formats: Formats to write

    Returns:
        Paths of the files written, in order
    """
    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for preset in presets or get_catalog().names():
        for fmt in formats:
            path = output_dir / f"{preset}.{FORMAT_EXTENSIONS.get(fmt, fmt)}"
            path.write_text(render_schema(preset, fmt), encoding="utf-8")
            written.append(path)
    logger.info("Wrote %d schema files to %s", len(written), output_dir)
    return written
