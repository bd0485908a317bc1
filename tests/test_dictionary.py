"""Tests for passphrase dictionaries and the shared dictionary cache.

Functions under test in semid/passphrase/dictionary.py.
"""

import json
import threading

import pytest

from semid.core.errors import DictionaryLoadError
from semid.passphrase import (
    ALL_LANGUAGES,
    PassphraseDictionary,
    PassphraseDictionaryCache,
    get_dictionary_cache,
    load_bundled_word_lists,
)


class TestPassphraseDictionary:
    def test_build_normalizes_words(self):
        dictionary = PassphraseDictionary.build(
            "eng", [" Apple ", "apple", "PEAR", "café", "two words", "", "fig"]
        )
        assert dictionary.words == ("apple", "pear", "fig")
        assert dictionary.word_set == frozenset({"apple", "pear", "fig"})
        assert dictionary.lengths == (3, 4, 5)
        assert dictionary.words_by_length[4] == ("pear",)
        assert len(dictionary) == 3

    def test_can_segment(self):
        dictionary = PassphraseDictionary.build("eng", ["apple", "pear", "a"])
        assert dictionary.can_segment("appleapple")
        assert dictionary.can_segment("apearapple")
        assert dictionary.can_segment("APPLEpear")
        assert not dictionary.can_segment("applezzzzz")
        assert not dictionary.can_segment("appl")
        assert not dictionary.can_segment("")

    def test_can_segment_needs_backtracking(self):
        """Greedy longest-match fails here; the DP scan does not."""
        dictionary = PassphraseDictionary.build("eng", ["ab", "abc", "cd"])
        assert dictionary.can_segment("abcd")
        assert dictionary.can_segment("abcabcd")

    def test_fillable_budgets(self):
        dictionary = PassphraseDictionary.build("eng", ["fig", "pears"])
        fillable = dictionary.fillable_budgets(10)
        assert [n for n, ok in enumerate(fillable) if ok] == [0, 3, 5, 6, 8, 9, 10]

    def test_fillable_budgets_with_subset(self):
        dictionary = PassphraseDictionary.build("eng", ["a", "fig"])
        assert dictionary.fillable_budgets(4, [3]) == [True, False, False, True, False]


class TestLoadBundledWordLists:
    def test_bundled_lists(self):
        lists = load_bundled_word_lists()
        assert {"eng", "fra", "spa", "ita", "deu", "nld", "wol"} <= set(lists)
        assert "apple" in lists["eng"]

    def test_every_language_has_short_words(self):
        """Short words keep every length fillable by whole words."""
        for code, words in load_bundled_word_lists().items():
            dictionary = PassphraseDictionary.build(code, words)
            assert min(dictionary.lengths) <= 2, code
            assert all(dictionary.fillable_budgets(40)), code

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryLoadError):
            load_bundled_word_lists(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "words.json"
        path.write_text("{not json")
        with pytest.raises(DictionaryLoadError):
            load_bundled_word_lists(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "words.json"
        path.write_text(json.dumps({"eng": "apple"}))
        with pytest.raises(DictionaryLoadError):
            load_bundled_word_lists(path)


class TestPassphraseDictionaryCache:
    def test_builds_once_per_key(self, dictionaries):
        first = dictionaries.get("eng")
        assert dictionaries.get("eng") is first
        assert first.key == "eng"

    def test_unknown_or_missing_language_uses_union(self, dictionaries):
        union = dictionaries.get(None)
        assert union.key == ALL_LANGUAGES
        assert dictionaries.get("xxx") is union
        assert dictionaries.get("") is union
        assert {"apple", "pomme"} <= union.word_set

    def test_languages(self, dictionaries):
        assert dictionaries.languages() == ["eng", "fra"]

    def test_loader_called_once(self):
        calls = []

        def loader():
            calls.append(1)
            return {"eng": ["apple"]}

        cache = PassphraseDictionaryCache(loader=loader)
        cache.get("eng")
        cache.get(None)
        cache.get("fra")
        assert len(calls) == 1

    def test_failed_load_is_sticky(self):
        calls = []

        def loader():
            calls.append(1)
            raise OSError("resource unavailable")

        cache = PassphraseDictionaryCache(loader=loader)
        with pytest.raises(DictionaryLoadError):
            cache.get("eng")
        with pytest.raises(DictionaryLoadError):
            cache.get("eng")
        assert len(calls) == 1

    @pytest.mark.parametrize(
        "result",
        [["apple", "pear"], {"eng": "apple"}, {"eng": 3}, None],
        ids=["list", "string-words", "int-words", "none"],
    )
    def test_malformed_loader_result_is_sticky(self, result):
        calls = []

        def loader():
            calls.append(1)
            return result

        cache = PassphraseDictionaryCache(loader=loader)
        with pytest.raises(DictionaryLoadError):
            cache.get("eng")
        with pytest.raises(DictionaryLoadError):
            cache.get("eng")
        assert len(calls) == 1

    def test_unexpected_loader_error_is_wrapped_and_sticky(self):
        calls = []

        def loader():
            calls.append(1)
            raise RuntimeError("resource gone")

        cache = PassphraseDictionaryCache(loader=loader)
        with pytest.raises(DictionaryLoadError, match="resource gone"):
            cache.get("eng")
        with pytest.raises(DictionaryLoadError):
            cache.languages()
        assert len(calls) == 1

    def test_empty_word_list(self):
        cache = PassphraseDictionaryCache(loader=lambda: {"eng": ["123", "é"]})
        with pytest.raises(DictionaryLoadError):
            cache.get("eng")

    def test_empty_word_list_is_sticky(self, monkeypatch):
        builds = []
        original_build = PassphraseDictionary.build

        def counting_build(key, raw_words):
            builds.append(key)
            return original_build(key, raw_words)

        monkeypatch.setattr(PassphraseDictionary, "build", counting_build)
        cache = PassphraseDictionaryCache(loader=lambda: {"eng": ["123"], "fra": ["pomme"]})
        for _ in range(3):
            with pytest.raises(DictionaryLoadError):
                cache.get("eng")
        assert builds == ["eng"]
        assert cache.get("fra").words == ("pomme",)

    def test_concurrent_first_use(self):
        calls = []
        barrier = threading.Barrier(8)

        def loader():
            calls.append(1)
            return {"eng": ["apple", "pear"]}

        cache = PassphraseDictionaryCache(loader=loader)
        results = []

        def worker():
            barrier.wait()
            results.append(cache.get("eng"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_process_wide_instance(self):
        cache = get_dictionary_cache()
        assert get_dictionary_cache() is cache
        PassphraseDictionaryCache.reset_instance()
        assert get_dictionary_cache() is not cache
