"""Semantic ID inspection: parsing, per-compartment checks and reports."""

from .inspector import SemanticIDInspector, inspect_semantic_id
from .validators import STRATEGY_VALIDATORS, ValidatorContext, get_validator

__all__ = [
    "SemanticIDInspector",
    "inspect_semantic_id",
    "STRATEGY_VALIDATORS",
    "ValidatorContext",
    "get_validator",
]
