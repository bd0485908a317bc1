"""Compartment string generation strategies.

Each strategy is a function (length, context) -> str returning exactly
`length` UTF-16 code units, drawn from a cryptographically strong source
(`secrets`), that never emits a character equal to either configured
separator.

Finite alphabets are sampled uniformly from the alphabet minus the
separator characters, which is the same distribution as rejection
sampling but needs no retry loop. "all characters" draws from the whole
Unicode scalar space and rejects what it cannot use.
"""

from __future__ import annotations

import base64
import logging
import math
import re
import secrets
import string
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Mapping

from ..core.errors import ConfigurationError, InvalidLengthError
from ..core.models import GenerationStrategy, IDConfiguration
from ..core.models.configuration import (
    DEFAULT_COMPARTMENT_SEPARATOR,
    DEFAULT_DATA_CONCEPT_SEPARATOR,
)
from ..core.text import MAX_CODE_POINT, is_printable_code_point, utf16_units
from ..passphrase import PassphraseDictionary, PassphraseDictionaryCache, get_dictionary_cache

logger = logging.getLogger(__name__)

VISIBLE_CHARACTERS = "".join(chr(cp) for cp in range(0x20, 0x7F))
DIGITS = string.digits
ALPHANUMERIC_CHARACTERS = string.ascii_uppercase + string.ascii_lowercase + string.digits
BASE64_CHARACTERS = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"

_LOWERCASE_WORD = re.compile(r"^[a-z]+$")


@dataclass(frozen=True)
class StrategyContext:
    """What a strategy needs to know besides the length."""

    data_concept_separator: str = DEFAULT_DATA_CONCEPT_SEPARATOR
    compartment_separator: str = DEFAULT_COMPARTMENT_SEPARATOR
    language_code: str | None = None
    dictionaries: PassphraseDictionaryCache | None = None

    @classmethod
    def from_configuration(
        cls,
        configuration: IDConfiguration,
        dictionaries: PassphraseDictionaryCache | None = None,
    ) -> "StrategyContext":
        return cls(
            data_concept_separator=configuration.data_concept_separator,
            compartment_separator=configuration.compartment_separator,
            language_code=configuration.language_code,
            dictionaries=dictionaries,
        )

    @property
    def separators(self) -> frozenset[str]:
        return frozenset((self.data_concept_separator, self.compartment_separator))

    def dictionary_cache(self) -> PassphraseDictionaryCache:
        return self.dictionaries or get_dictionary_cache()


StrategyFunction = Callable[[int, StrategyContext], str]


def _check_length(length: Any) -> None:
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidLengthError("Invalid length. It should be a positive integer.")


@lru_cache(maxsize=64)
def _allowed_alphabet(alphabet: str, separators: frozenset[str]) -> str:
    allowed = "".join(ch for ch in alphabet if ch not in separators)
    if not allowed:
        raise ConfigurationError("Separators exclude every character of the alphabet.")
    return allowed


def _sample(alphabet: str, length: int, context: StrategyContext) -> str:
    allowed = _allowed_alphabet(alphabet, context.separators)
    return "".join(secrets.choice(allowed) for _ in range(length))


# =============================================================================
# Strategies
# =============================================================================


def generate_all_characters(length: int, context: StrategyContext) -> str:
    """Any printable Unicode scalar value (no surrogates, no C0/C1 controls).

    Code points that would push the result past `length` code units are
    redrawn, so astral characters never overshoot the target.
    """
    _check_length(length)
    separators = context.separators
    chars: list[str] = []
    units = 0
    while units < length:
        code_point = secrets.randbelow(MAX_CODE_POINT + 1)
        if not is_printable_code_point(code_point):
            continue
        width = utf16_units(code_point)
        if units + width > length:
            continue
        ch = chr(code_point)
        if ch in separators:
            continue
        chars.append(ch)
        units += width
    return "".join(chars)


def generate_visible_characters(length: int, context: StrategyContext) -> str:
    """Printable ASCII, U+0020 through U+007E."""
    _check_length(length)
    return _sample(VISIBLE_CHARACTERS, length, context)


def generate_numbers(length: int, context: StrategyContext) -> str:
    """Decimal digits 0-9."""
    _check_length(length)
    return _sample(DIGITS, length, context)


def generate_alphanumeric(length: int, context: StrategyContext) -> str:
    """[A-Za-z0-9]."""
    _check_length(length)
    return _sample(ALPHANUMERIC_CHARACTERS, length, context)


def generate_hexadecimal(length: int, context: StrategyContext) -> str:
    """Lowercase hex digits from hex-encoded random bytes, truncated to length."""
    _check_length(length)
    separators = context.separators
    result = ""
    while len(result) < length:
        chunk = secrets.token_hex(math.ceil((length - len(result)) / 2))
        result += "".join(ch for ch in chunk if ch not in separators)
    return result[:length]


def generate_base64(length: int, context: StrategyContext) -> str:
    """Standard Base64 alphabet (A-Z a-z 0-9 + /), padding excluded.

    Bytes are drawn in batches sized to overproduce characters; characters
    equal to a separator are dropped and batches repeat until full.
    """
    _check_length(length)
    separators = context.separators
    collected: list[str] = []
    while len(collected) < length:
        encoded = base64.b64encode(secrets.token_bytes(math.ceil(length * 0.75)))
        for ch in encoded.decode("ascii"):
            if ch == "=" or ch in separators:
                continue
            collected.append(ch)
            if len(collected) == length:
                break
    return "".join(collected)


def _usable_word_groups(
    dictionary: PassphraseDictionary, separators: frozenset[str]
) -> Mapping[int, tuple[str, ...]]:
    """Words grouped by length, without words that contain a separator."""
    if not any(_LOWERCASE_WORD.match(sep) for sep in separators):
        return dictionary.words_by_length
    groups: dict[int, tuple[str, ...]] = {}
    for length, words in dictionary.words_by_length.items():
        kept = tuple(w for w in words if not any(sep in w for sep in separators))
        if kept:
            groups[length] = kept
    return groups


def generate_passphrase(length: int, context: StrategyContext) -> str:
    """Lowercase dictionary words packed to exactly `length` characters.

    Whole words are preferred: each step picks uniformly among the words
    that fit the remaining budget and leave a remainder that whole words
    can still fill. Only when no such word exists does a random word get
    appended character by character, skipping separator characters.
    """
    _check_length(length)
    dictionary = context.dictionary_cache().get(context.language_code)
    separators = context.separators
    groups = _usable_word_groups(dictionary, separators)
    fillable = dictionary.fillable_budgets(length, groups.keys())

    parts: list[str] = []
    remaining = length
    while remaining > 0:
        candidates = [n for n in groups if n <= remaining and fillable[remaining - n]]
        if candidates:
            index = secrets.randbelow(sum(len(groups[n]) for n in candidates))
            for n in candidates:
                if index < len(groups[n]):
                    word = groups[n][index]
                    break
                index -= len(groups[n])
            parts.append(word)
            remaining -= len(word)
            continue

        logger.debug("No whole-word completion for %d characters, padding", remaining)
        word = secrets.choice(dictionary.words)
        for ch in word:
            if remaining == 0:
                break
            if ch in separators:
                continue
            parts.append(ch)
            remaining -= 1
    return "".join(parts)


# =============================================================================
# Registry
# =============================================================================

STRATEGY_GENERATORS: Mapping[GenerationStrategy, StrategyFunction] = MappingProxyType(
    {
        GenerationStrategy.ALL_CHARACTERS: generate_all_characters,
        GenerationStrategy.VISIBLE_CHARACTERS: generate_visible_characters,
        GenerationStrategy.NUMBERS: generate_numbers,
        GenerationStrategy.ALPHANUMERIC: generate_alphanumeric,
        GenerationStrategy.HEXADECIMAL: generate_hexadecimal,
        GenerationStrategy.BASE64: generate_base64,
        GenerationStrategy.PASSPHRASE: generate_passphrase,
    }
)

_unmapped = set(GenerationStrategy) - set(STRATEGY_GENERATORS)
if _unmapped:
    raise RuntimeError(f"Strategies without a generator: {sorted(s.value for s in _unmapped)}")


def is_supported_strategy(value: Any) -> bool:
    """Strategy resolver predicate accepted by normalize_configuration."""
    return GenerationStrategy.is_supported(value)


def get_strategy(strategy: GenerationStrategy | str) -> StrategyFunction:
    """Look up the generator function for a strategy tag.

    Raises:
        ConfigurationError: If the tag is not a known strategy.
    """
    if not GenerationStrategy.is_supported(strategy):
        raise ConfigurationError(
            "Invalid generationStrategy. Check the documentation for valid strategies."
        )
    return STRATEGY_GENERATORS[GenerationStrategy(strategy)]
