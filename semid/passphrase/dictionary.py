"""Process-wide passphrase dictionaries.

Word lists are read once from the bundled JSON resource (or an injected
loader) and turned into one PassphraseDictionary per language key, plus
the union dictionary under the "all" key. Dictionaries are built lazily
on first use and never invalidated; a failed load is remembered so a
known-bad resource is not re-read on every call.

Thread-safe: the first load and each dictionary build run under a lock
with a double-checked cache read, so concurrent callers never build the
same entry twice.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Sequence

from ..core.errors import DictionaryLoadError

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
WORD_LISTS_PATH = _DATA_DIR / "word-lists.json"

ALL_LANGUAGES = "all"

_WORD_PATTERN = re.compile(r"^[a-z]+$")

WordListLoader = Callable[[], Mapping[str, Sequence[str]]]


def load_bundled_word_lists(path: Path = WORD_LISTS_PATH) -> dict[str, list[str]]:
    """Read the bundled word lists (language code -> words).

    Raises:
        DictionaryLoadError: If the file is missing, unreadable, or malformed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise DictionaryLoadError(
            f"Failed to load word lists from {path.name}: {exc}"
        ) from exc

    if not isinstance(data, dict) or not all(
        isinstance(words, list) for words in data.values()
    ):
        raise DictionaryLoadError(
            f"Failed to load word lists from {path.name}: expected an object of word arrays"
        )
    return data


@dataclass(frozen=True)
class PassphraseDictionary:
    """Normalized words for one language key.

    Attributes:
        key: Language code, or "all" for the union of every language
        words: Distinct lowercase words in first-seen order
        word_set: Same words, for membership tests
        lengths: Sorted distinct word lengths
        words_by_length: Words grouped by length
    """

    key: str
    words: tuple[str, ...]
    word_set: frozenset[str] = field(repr=False)
    lengths: tuple[int, ...]
    words_by_length: Mapping[int, tuple[str, ...]] = field(repr=False)

    @classmethod
    def build(cls, key: str, raw_words: Iterable[str]) -> "PassphraseDictionary":
        seen: dict[str, None] = {}
        dropped = 0
        for raw in raw_words:
            word = str(raw).strip().lower()
            if _WORD_PATTERN.match(word):
                seen.setdefault(word, None)
            else:
                dropped += 1
        if dropped:
            logger.debug("Dropped %d non a-z entries from word list %r", dropped, key)

        words = tuple(seen)
        grouped: dict[int, list[str]] = {}
        for word in words:
            grouped.setdefault(len(word), []).append(word)

        return cls(
            key=key,
            words=words,
            word_set=frozenset(words),
            lengths=tuple(sorted(grouped)),
            words_by_length=MappingProxyType(
                {length: tuple(group) for length, group in grouped.items()}
            ),
        )

    def __len__(self) -> int:
        return len(self.words)

    def can_segment(self, value: str) -> bool:
        """True if value (lowercased) is a concatenation of one or more words.

        Dynamic-programming reachability over the distinct word lengths:
        reachable[0] is true, and reachable[end] becomes true when some
        reachable[i] holds and value[i:end] is a word.
        """
        value = value.lower()
        if not value:
            return False

        reachable = [False] * (len(value) + 1)
        reachable[0] = True
        for i in range(len(value)):
            if not reachable[i]:
                continue
            for length in self.lengths:
                end = i + length
                if end > len(value):
                    break
                if value[i:end] in self.word_set:
                    reachable[end] = True
        return reachable[len(value)]

    def fillable_budgets(self, budget: int, lengths: Iterable[int] | None = None) -> list[bool]:
        """For each n in 0..budget, whether n characters can be filled by whole words."""
        usable = sorted(set(lengths if lengths is not None else self.lengths))
        fillable = [False] * (budget + 1)
        fillable[0] = True
        for n in range(1, budget + 1):
            fillable[n] = any(
                length <= n and fillable[n - length] for length in usable
            )
        return fillable


class PassphraseDictionaryCache:
    """Lazily-built, shared passphrase dictionaries.

    Singleton per process by default (see instance()), but a separate
    cache with its own loader can be created and injected into the
    generator and the inspector.
    """

    _instance: "PassphraseDictionaryCache | None" = None
    _lock_cls = threading.Lock()

    def __init__(self, loader: WordListLoader | None = None) -> None:
        self._loader: WordListLoader = loader or load_bundled_word_lists
        self._lock = threading.Lock()
        self._word_lists: Mapping[str, tuple[str, ...]] | None = None
        self._load_error: DictionaryLoadError | None = None
        self._dictionaries: dict[str, PassphraseDictionary] = {}
        self._build_errors: dict[str, DictionaryLoadError] = {}

    @classmethod
    def instance(cls) -> "PassphraseDictionaryCache":
        """Get the process-wide cache, creating it on first use."""
        if cls._instance is None:
            with cls._lock_cls:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide cache (tests only)."""
        with cls._lock_cls:
            cls._instance = None

    def word_lists(self) -> Mapping[str, tuple[str, ...]]:
        """Raw word lists by language code, loaded on first call.

        Raises:
            DictionaryLoadError: If loading fails now or failed before.
        """
        if self._word_lists is not None:
            return self._word_lists
        if self._load_error is not None:
            raise self._load_error

        with self._lock:
            if self._word_lists is not None:
                return self._word_lists
            if self._load_error is not None:
                raise self._load_error

            try:
                raw = self._loader()
                if not isinstance(raw, Mapping) or not all(
                    isinstance(words, (list, tuple)) for words in raw.values()
                ):
                    raise DictionaryLoadError(
                        "Failed to load word lists: expected a mapping of word arrays"
                    )
                word_lists = MappingProxyType(
                    {str(code): tuple(words) for code, words in raw.items()}
                )
            except DictionaryLoadError as exc:
                self._load_error = exc
                raise
            except Exception as exc:
                self._load_error = DictionaryLoadError(f"Failed to load word lists: {exc}")
                raise self._load_error from exc

            self._word_lists = word_lists
            logger.debug(
                "Loaded word lists for %d languages: %s",
                len(self._word_lists),
                ", ".join(self._word_lists),
            )
            return self._word_lists

    def languages(self) -> list[str]:
        return list(self.word_lists())

    def resolve_key(self, language_code: str | None) -> str:
        """Dictionary key for a language code; unknown or missing codes map to "all"."""
        if language_code and language_code in self.word_lists():
            return language_code
        if language_code:
            logger.debug("No word list for language %r, using all languages", language_code)
        return ALL_LANGUAGES

    def get(self, language_code: str | None = None) -> PassphraseDictionary:
        """Dictionary for a language code (or the union dictionary).

        Raises:
            DictionaryLoadError: If the word lists cannot be loaded or are empty.
        """
        key = self.resolve_key(language_code)
        cached = self._dictionaries.get(key)
        if cached is not None:
            return cached
        if key in self._build_errors:
            raise self._build_errors[key]

        word_lists = self.word_lists()
        with self._lock:
            cached = self._dictionaries.get(key)
            if cached is not None:
                return cached
            if key in self._build_errors:
                raise self._build_errors[key]

            if key == ALL_LANGUAGES:
                raw_words = [word for words in word_lists.values() for word in words]
            else:
                raw_words = list(word_lists[key])
            dictionary = PassphraseDictionary.build(key, raw_words)
            if not dictionary.words:
                self._build_errors[key] = DictionaryLoadError(
                    f"No words found in word lists for {key!r}"
                )
                raise self._build_errors[key]

            self._dictionaries[key] = dictionary
            logger.debug(
                "Built passphrase dictionary %r: %d words, lengths %s",
                key,
                len(dictionary),
                list(dictionary.lengths),
            )
            return dictionary


def get_dictionary_cache() -> PassphraseDictionaryCache:
    """Get the process-wide dictionary cache."""
    return PassphraseDictionaryCache.instance()
