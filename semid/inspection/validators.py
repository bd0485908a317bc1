"""Per-strategy content validators.

Each validator takes a compartment value and a ValidatorContext and
returns a list of issue strings; an empty list means the value is
acceptable for that strategy. Length and reserved-separator checks are
done by the inspector, not here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from ..core.models import GenerationStrategy
from ..core.text import is_printable_code_point, is_visible_ascii
from ..generation.strategies import STRATEGY_GENERATORS
from ..passphrase import PassphraseDictionaryCache, get_dictionary_cache

_NUMERIC = re.compile(r"[0-9]+")
_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")
_HEXADECIMAL = re.compile(r"[0-9a-fA-F]+")
_BASE64 = re.compile(r"[A-Za-z0-9+/=]+")
_LETTERS = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True)
class ValidatorContext:
    language_code: str | None = None
    dictionaries: PassphraseDictionaryCache | None = None

    def dictionary_cache(self) -> PassphraseDictionaryCache:
        return self.dictionaries or get_dictionary_cache()


ValidatorFunction = Callable[[str, ValidatorContext], list[str]]


def validate_all_characters(value: str, context: ValidatorContext) -> list[str]:
    invalid = sum(1 for ch in value if not is_printable_code_point(ord(ch)))
    if invalid:
        return [f"Contains {invalid} non-printable character(s)."]
    return []


def validate_visible_characters(value: str, context: ValidatorContext) -> list[str]:
    if not all(is_visible_ascii(ch) for ch in value):
        return ["Contains characters outside the visible ASCII range."]
    return []


def validate_numbers(value: str, context: ValidatorContext) -> list[str]:
    if not _NUMERIC.fullmatch(value):
        return ["Expected numeric characters (0-9) only."]
    return []


def validate_alphanumeric(value: str, context: ValidatorContext) -> list[str]:
    if not _ALPHANUMERIC.fullmatch(value):
        return ["Expected alphanumeric characters (A-Z, a-z, 0-9) only."]
    return []


def validate_hexadecimal(value: str, context: ValidatorContext) -> list[str]:
    if not _HEXADECIMAL.fullmatch(value):
        return ["Expected hexadecimal characters (0-9, a-f) only."]
    return []


def validate_base64(value: str, context: ValidatorContext) -> list[str]:
    if not _BASE64.fullmatch(value):
        return ["Expected Base64 characters (A-Z, a-z, 0-9, +, /, =) only."]
    return []


def validate_passphrase(value: str, context: ValidatorContext) -> list[str]:
    """Letters only, and exactly segmentable into dictionary words.

    Uses the dictionary for the context's language, or the union of all
    languages when the language is unset or unknown.
    """
    if not _LETTERS.fullmatch(value):
        return ["Passphrase compartments should only contain letters."]

    dictionary = context.dictionary_cache().get(context.language_code)
    if not dictionary.can_segment(value):
        return ["Value does not map to the known passphrase word lists."]
    return []


STRATEGY_VALIDATORS: Mapping[GenerationStrategy, ValidatorFunction] = MappingProxyType(
    {
        GenerationStrategy.ALL_CHARACTERS: validate_all_characters,
        GenerationStrategy.VISIBLE_CHARACTERS: validate_visible_characters,
        GenerationStrategy.NUMBERS: validate_numbers,
        GenerationStrategy.ALPHANUMERIC: validate_alphanumeric,
        GenerationStrategy.HEXADECIMAL: validate_hexadecimal,
        GenerationStrategy.BASE64: validate_base64,
        GenerationStrategy.PASSPHRASE: validate_passphrase,
    }
)

# Every strategy that can generate must also be checkable.
if set(STRATEGY_VALIDATORS) != set(GenerationStrategy) or set(STRATEGY_GENERATORS) != set(
    STRATEGY_VALIDATORS
):
    raise RuntimeError("Generation strategies and validators are out of sync")


def get_validator(strategy: GenerationStrategy | str) -> ValidatorFunction:
    return STRATEGY_VALIDATORS[GenerationStrategy(strategy)]
