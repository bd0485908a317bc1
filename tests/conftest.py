"""Shared fixtures: isolated tool config and passphrase dictionaries."""

import pytest

from semid import config as semid_config
from semid.cli.commands import config_cmd
from semid.passphrase import PassphraseDictionaryCache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the tool config at a temp dir and clear SEMID_* env vars."""
    config_dir = tmp_path / "semid-config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(semid_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(semid_config, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for var in ("SEMID_DEFAULT_PRESET", "SEMID_LANGUAGE_CODE", "SEMID_DEFAULT_COUNT"):
        monkeypatch.delenv(var, raising=False)
    semid_config.reset_config()
    yield config_file
    semid_config.reset_config()


@pytest.fixture(autouse=True)
def fresh_dictionary_cache():
    """Each test starts with an empty process-wide dictionary cache."""
    PassphraseDictionaryCache.reset_instance()
    yield
    PassphraseDictionaryCache.reset_instance()


@pytest.fixture
def word_lists():
    return {
        "eng": ["apple", "pear", "fig", "a"],
        "fra": ["pomme", "poire", "y"],
    }


@pytest.fixture
def dictionaries(word_lists):
    """A dictionary cache backed by a small in-memory word list."""
    return PassphraseDictionaryCache(loader=lambda: word_lists)
