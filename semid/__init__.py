"""semid: semantic ID generation and inspection.

A semantic ID is a concept name followed by fixed-length, randomly
generated compartments:

    person|k#9Q-48213377-3fa9c0d2e6b14a8f7c5d9e01

Quick start:
    from semid import SemanticIDGenerator, SemanticIDInspector

    generator = SemanticIDGenerator({"preset": "person"})
    semantic_id = generator.generate("person")
    report = SemanticIDInspector().inspect(semantic_id)
    assert report.is_valid
"""

__version__ = "0.4.0"

from .core.errors import (
    ConfigurationError,
    ConfigurationResolutionError,
    DictionaryLoadError,
    InvalidConceptNameError,
    InvalidInputError,
    InvalidLengthError,
    SemanticIDError,
    UnknownPresetError,
    UnsupportedSchemaFormatError,
)
from .core.models import (
    Compartment,
    CompartmentReport,
    GenerationStrategy,
    IDConfiguration,
    InspectionReport,
    PresetMetadata,
)
from .core.normalizer import load_configuration_file, normalize_configuration
from .generation import SemanticIDGenerator, generate_semantic_id
from .inspection import SemanticIDInspector, inspect_semantic_id
from .passphrase import PassphraseDictionaryCache, get_dictionary_cache
from .presets import (
    get_domain_preset,
    get_preset_metadata,
    list_domain_presets,
    resolve_preset_configuration,
)
from .schema import build_jsonld_schema, build_owl_schema, build_schema_for_preset, export_schema

__all__ = [
    "__version__",
    # Errors
    "SemanticIDError",
    "InvalidLengthError",
    "ConfigurationError",
    "UnknownPresetError",
    "InvalidConceptNameError",
    "InvalidInputError",
    "ConfigurationResolutionError",
    "DictionaryLoadError",
    "UnsupportedSchemaFormatError",
    # Models
    "GenerationStrategy",
    "Compartment",
    "IDConfiguration",
    "InspectionReport",
    "CompartmentReport",
    "PresetMetadata",
    # Configuration
    "normalize_configuration",
    "load_configuration_file",
    # Generation / inspection
    "SemanticIDGenerator",
    "generate_semantic_id",
    "SemanticIDInspector",
    "inspect_semantic_id",
    "PassphraseDictionaryCache",
    "get_dictionary_cache",
    # Presets
    "list_domain_presets",
    "get_domain_preset",
    "get_preset_metadata",
    "resolve_preset_configuration",
    # Schema
    "build_jsonld_schema",
    "build_owl_schema",
    "build_schema_for_preset",
    "export_schema",
]
