"""Semantic ID generation: compartment strategies and the ID generator."""

from .generator import SemanticIDGenerator, generate_semantic_id
from .strategies import (
    STRATEGY_GENERATORS,
    StrategyContext,
    generate_all_characters,
    generate_alphanumeric,
    generate_base64,
    generate_hexadecimal,
    generate_numbers,
    generate_passphrase,
    generate_visible_characters,
    get_strategy,
    is_supported_strategy,
)

__all__ = [
    "SemanticIDGenerator",
    "generate_semantic_id",
    "STRATEGY_GENERATORS",
    "StrategyContext",
    "get_strategy",
    "is_supported_strategy",
    "generate_all_characters",
    "generate_visible_characters",
    "generate_numbers",
    "generate_alphanumeric",
    "generate_hexadecimal",
    "generate_base64",
    "generate_passphrase",
]
