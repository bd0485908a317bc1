"""Core types shared by generation and inspection."""

from .errors import (
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

__all__ = [
    "SemanticIDError",
    "InvalidLengthError",
    "ConfigurationError",
    "UnknownPresetError",
    "InvalidConceptNameError",
    "InvalidInputError",
    "ConfigurationResolutionError",
    "DictionaryLoadError",
    "UnsupportedSchemaFormatError",
]
