"""All Pydantic models for semid.

- configuration.py: generation strategies, compartments, resolved configurations
- inspection.py: preset metadata and inspection reports
"""

from .configuration import (
    DEFAULT_COMPARTMENT_SEPARATOR,
    DEFAULT_DATA_CONCEPT_SEPARATOR,
    Compartment,
    GenerationStrategy,
    IDConfiguration,
)
from .inspection import (
    CompartmentReport,
    ConfigurationSummary,
    InspectionReport,
    PresetMetadata,
)

__all__ = [
    # Configuration
    "GenerationStrategy",
    "Compartment",
    "IDConfiguration",
    "DEFAULT_DATA_CONCEPT_SEPARATOR",
    "DEFAULT_COMPARTMENT_SEPARATOR",
    # Inspection
    "PresetMetadata",
    "ConfigurationSummary",
    "CompartmentReport",
    "InspectionReport",
]
