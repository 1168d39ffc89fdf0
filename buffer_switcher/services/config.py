"""Configuration management for Buffer Switcher.

Single JSON file at ~/.config/buffer-switcher/config.json with three sections:
- labels: how absolute paths are shortened into display labels
- picker: how many rows the interactive picker renders
- discovery: which files the standalone picker offers

A missing file means defaults. A corrupt or invalid file is logged and
replaced by defaults; it is only rewritten on an explicit save.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from ..models.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE_DIRS = [".git", "__pycache__", "node_modules", ".venv"]


def _write_json(path: Path, data: dict) -> None:
    """Write JSON to path via a temp file and rename."""
    content = json.dumps(data, indent=2)
    temp_path = path.with_suffix(".tmp")
    temp_path.write_text(content)
    os.replace(temp_path, path)


def _get_bool(data: dict, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ConfigValidationError(f"{key} must be true or false, got {value!r}")
    return value


def _get_positive_int(data: dict, key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigValidationError(
            f"{key} must be a positive integer, got {value!r}",
            f"default is {default}",
        )
    return value


@dataclass
class LabelSettings:
    """Display label derivation from absolute paths."""

    shorten_cwd: bool = True  # /work/dir/src/a.py -> ./src/a.py
    shorten_home: bool = True  # /home/me/notes.md -> ~/notes.md

    def to_dict(self) -> dict:
        return {"shorten_cwd": self.shorten_cwd, "shorten_home": self.shorten_home}

    @classmethod
    def from_dict(cls, data: dict) -> "LabelSettings":
        return cls(
            shorten_cwd=_get_bool(data, "shorten_cwd", True),
            shorten_home=_get_bool(data, "shorten_home", True),
        )


@dataclass
class PickerSettings:
    """Interactive picker settings."""

    max_results: int = 200  # Rows rendered per section
    show_other_tabs: bool = True

    def to_dict(self) -> dict:
        return {"max_results": self.max_results, "show_other_tabs": self.show_other_tabs}

    @classmethod
    def from_dict(cls, data: dict) -> "PickerSettings":
        return cls(
            max_results=_get_positive_int(data, "max_results", 200),
            show_other_tabs=_get_bool(data, "show_other_tabs", True),
        )


@dataclass
class DiscoverySettings:
    """File discovery for the standalone picker."""

    exclude_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    include_hidden: bool = False
    max_candidates: int = 20_000

    def to_dict(self) -> dict:
        return {
            "exclude_dirs": self.exclude_dirs,
            "include_hidden": self.include_hidden,
            "max_candidates": self.max_candidates,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DiscoverySettings":
        exclude_dirs = data.get("exclude_dirs", DEFAULT_EXCLUDE_DIRS)
        if not isinstance(exclude_dirs, list) or not all(isinstance(d, str) for d in exclude_dirs):
            raise ConfigValidationError(f"exclude_dirs must be a list of names, got {exclude_dirs!r}")
        return cls(
            exclude_dirs=list(exclude_dirs),
            include_hidden=_get_bool(data, "include_hidden", False),
            max_candidates=_get_positive_int(data, "max_candidates", 20_000),
        )


@dataclass
class Config:
    """Unified Buffer Switcher configuration."""

    labels: LabelSettings = field(default_factory=LabelSettings)
    picker: PickerSettings = field(default_factory=PickerSettings)
    discovery: DiscoverySettings = field(default_factory=DiscoverySettings)

    def to_dict(self) -> dict:
        return {
            "labels": self.labels.to_dict(),
            "picker": self.picker.to_dict(),
            "discovery": self.discovery.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build config from parsed JSON.

        Raises:
            ConfigValidationError: If a section or value is invalid
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Config root must be an object")
        sections = {}
        for name in ("labels", "picker", "discovery"):
            section = data.get(name, {})
            if not isinstance(section, dict):
                raise ConfigValidationError(f"Config section {name!r} must be an object")
            sections[name] = section
        return cls(
            labels=LabelSettings.from_dict(sections["labels"]),
            picker=PickerSettings.from_dict(sections["picker"]),
            discovery=DiscoverySettings.from_dict(sections["discovery"]),
        )


class ConfigManager:
    """Loads and saves the configuration file."""

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".config" / "buffer-switcher"
        self._config_dir = config_dir
        self._config_file = config_dir / "config.json"
        self._config: Config | None = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> Config:
        """Load config from disk."""
        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                return Config.from_dict(data)
            except (json.JSONDecodeError, ConfigValidationError) as e:
                logger.warning(f"Invalid config {self._config_file}, using defaults: {e}")
        return Config()

    def save_config(self, config: Config) -> None:
        """Save config to disk."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        _write_json(self._config_file, config.to_dict())
        self._config = config

    def reload(self) -> Config:
        """Drop the cached config and read it again."""
        self._config = None
        return self.config
