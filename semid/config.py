"""Configuration management for semid.

Tool settings only: defaults the CLI falls back to when a flag is not
given. ID layouts themselves are configured per call (presets,
configuration mappings or files), never here.

Config resolution order (highest priority first):
1. Programmatic (SemidConfig passed to configure())
2. Environment variables (SEMID_DEFAULT_PRESET, SEMID_LANGUAGE_CODE, SEMID_DEFAULT_COUNT)
3. Config file (~/.config/semid/config.json, managed by `semid config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "semid"
CONFIG_FILE = CONFIG_DIR / "config.json"


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """CLI defaults.

    - preset: preset used by `semid generate` when neither --preset nor --config is given
    - language_code: passphrase language when the configuration sets none
    - count: number of IDs `semid generate` prints
    """

    preset: str = ""  # empty = built-in default layout
    language_code: str = ""  # empty = union of all word lists
    count: int = 1


@dataclass
class SemidConfig:
    """Top-level semid configuration.

    Examples:
        # Package use, no files needed
        configure(SemidConfig(defaults=DefaultsConfig(preset="invoice")))

        # CLI use, loads from ~/.config/semid/config.json
        config = SemidConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "SemidConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, ValueError, TypeError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("SEMID_DEFAULT_PRESET"):
            config.defaults.preset = val
        if val := os.environ.get("SEMID_LANGUAGE_CODE"):
            config.defaults.language_code = val
        if val := os.environ.get("SEMID_DEFAULT_COUNT"):
            try:
                config.defaults.count = int(val)
            except ValueError:
                logger.warning("Invalid SEMID_DEFAULT_COUNT=%r, ignoring", val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/semid/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {"defaults": asdict(self.defaults)}


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: SemidConfig, data: dict) -> None:
    """Apply a dict of values onto a SemidConfig."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if hasattr(config.defaults, k):
                if k == "count":
                    v = int(v)
                setattr(config.defaults, k, v)


# =============================================================================
# Global config singleton
# =============================================================================

_config: SemidConfig | None = None


def get_config() -> SemidConfig:
    """Get the global SemidConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = SemidConfig.load()
    return _config


def configure(config: SemidConfig) -> None:
    """Set the global SemidConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
