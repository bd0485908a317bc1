"""Passphrase word lists and the shared dictionary cache.

Both the passphrase generation strategy and the passphrase validator read
dictionaries from a PassphraseDictionaryCache; by default the
process-wide one returned by get_dictionary_cache().
"""

from .dictionary import (
    ALL_LANGUAGES,
    WORD_LISTS_PATH,
    PassphraseDictionary,
    PassphraseDictionaryCache,
    get_dictionary_cache,
    load_bundled_word_lists,
)

__all__ = [
    "ALL_LANGUAGES",
    "WORD_LISTS_PATH",
    "PassphraseDictionary",
    "PassphraseDictionaryCache",
    "get_dictionary_cache",
    "load_bundled_word_lists",
]
