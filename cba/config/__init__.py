"""
Configuration Package

Persists the OpenRouter credentials in a flat .env-style file that lives
next to the installed package:

    OPENROUTER_API_KEY='sk-or-...'
    OPENROUTER_MODEL_ID='z-ai/glm-4.5-air:free'

Set CBA_CONFIG to use a different file.
"""

import io
import os
from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, set_key

API_KEY_VAR = "OPENROUTER_API_KEY"
MODEL_ID_VAR = "OPENROUTER_MODEL_ID"
DEFAULT_MODEL_ID = "z-ai/glm-4.5-air:free"

CONFIG_FILENAME = ".env"
CONFIG_PATH_VAR = "CBA_CONFIG"

# Short names accepted by `cba config`
ALIASES = {
    "api_key": API_KEY_VAR,
    "key": API_KEY_VAR,
    "model": MODEL_ID_VAR,
    "id": MODEL_ID_VAR,
}

CANONICAL_KEYS = (API_KEY_VAR, MODEL_ID_VAR)


class ConfigError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass(frozen=True)
class ProviderConfig:
    """Resolved credentials for one LLM call."""
    api_key: str
    model_id: str = DEFAULT_MODEL_ID


def resolve_key(key: str) -> str:
    """Translate a short alias to its canonical key. Unknown keys pass through."""
    return ALIASES.get(key, key)


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_PATH_VAR)
    if override:
        return Path(override)
    return Path(__file__).resolve().parent.parent / CONFIG_FILENAME


class ConfigStore:
    """
    Reads and writes KEY=VALUE entries using python-dotenv's format.

    The file is read lazily, at most once per instance. Reading is
    permissive: undecodable bytes are replaced, and lines dotenv cannot
    parse or that carry no value are dropped.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_config_path()
        self._values: Optional[dict[str, str]] = None

    def load(self) -> dict[str, str]:
        if self._values is not None:
            return self._values

        self._values = {}
        if not self.path.exists():
            return self._values

        try:
            text = self.path.read_text(encoding='utf-8', errors='replace')
        except OSError as e:
            raise ConfigError(f"Could not read {self.path}: {e}")

        parsed = dotenv_values(stream=io.StringIO(text), interpolate=False)
        self._values = {k: v for k, v in parsed.items() if v}
        return self._values

    def get(self, key: Optional[str] = None):
        """
        Look up configuration.

        Args:
            key: Alias or canonical key. If omitted, every known entry is
                returned, canonical keys first (None when unset).

        Returns:
            The stored value (None when unset) or a dict of all entries.
        """
        values = self.load()
        if key is None:
            entries = {k: values.get(k) for k in CANONICAL_KEYS}
            entries.update(values)
            return entries
        return values.get(resolve_key(key))

    def set(self, key: Optional[str], value: Optional[str]) -> str:
        """Store a value and rewrite the file. Returns the canonical key."""
        if not key or not value:
            raise ConfigError("Both key and value are required for set action")

        full_key = resolve_key(key)
        values = self.load()
        values[full_key] = value
        self.save()
        return full_key

    def save(self) -> Path:
        """Rewrite the file from scratch, one quoted entry per key."""
        try:
            self.path.write_text('', encoding='utf-8')
            for key, value in self.load().items():
                set_key(self.path, key, value, quote_mode='always')
        except OSError as e:
            raise ConfigError(f"Could not write {self.path}: {e}")
        return self.path

    def export_to(self, environ: MutableMapping[str, str]) -> None:
        """Fill in entries the environment does not already define."""
        for key, value in self.load().items():
            environ.setdefault(key, value)


__all__ = [
    "ConfigStore",
    "ConfigError",
    "ProviderConfig",
    "resolve_key",
    "default_config_path",
    "ALIASES",
    "API_KEY_VAR",
    "MODEL_ID_VAR",
    "DEFAULT_MODEL_ID",
    "CANONICAL_KEYS",
    "CONFIG_PATH_VAR",
]
