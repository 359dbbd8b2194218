"""Configuration loading and defaults."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


DEFAULT_CONFIG = {
    "session": {
        "show_welcome": True,
        "search_types": ["dog", "cat"],
    },
    "shelter": {
        "adopt_all_matches": True,
    },
    "logging": {
        "level": "WARNING",
    },
}

CONFIG_DIR_NAME = ".petfinder"


class Config:
    def __init__(self, data: dict, config_dir: Path):
        self._data = data
        self.config_dir = config_dir

    @classmethod
    def load(cls, project_root: Path) -> "Config":
        config_dir = project_root / CONFIG_DIR_NAME
        config_file = config_dir / "config.toml"

        data = _deep_merge(DEFAULT_CONFIG, {})

        if config_file.exists():
            with open(config_file, "rb") as f:
                user_data = tomllib.load(f)
            data = _deep_merge(DEFAULT_CONFIG, user_data)

        return cls(data, config_dir)

    @classmethod
    def load_from_cwd(cls) -> "Config":
        root = _find_project_root(Path.cwd())
        return cls.load(root)

    # --- session ---
    @property
    def show_welcome(self) -> bool:
        return self._data["session"]["show_welcome"]

    @property
    def search_types(self) -> list[str]:
        types = self._data["session"]["search_types"]
        if isinstance(types, str):
            return [types]
        return list(types)

    # --- shelter ---
    @property
    def adopt_all_matches(self) -> bool:
        return self._data["shelter"]["adopt_all_matches"]

    # --- logging ---
    @property
    def log_level(self) -> str:
        return str(self._data["logging"]["level"]).upper()


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _find_project_root(start: Path) -> Path:
    """Project root used when no --path is given.

    The nearest ancestor of *start* holding .petfinder/ or .git/, falling
    back to *start* itself so a missing config just means defaults.
    """
    current = start.resolve()
    while True:
        if (current / CONFIG_DIR_NAME).exists() or (current / ".git").exists():
            return current
        parent = current.parent
        if parent == current:
            return start.resolve()
        current = parent


DEFAULT_CONFIG_TOML = """\
[session]
show_welcome = true
search_types = ["dog", "cat"]

[shelter]
# Adopt every available pet sharing the requested name in one go.
adopt_all_matches = true

[logging]
level = "WARNING"
"""
