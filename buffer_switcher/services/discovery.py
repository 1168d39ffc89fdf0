"""CandidateDiscovery: collect file paths for the standalone picker."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, TextIO

from .config import DiscoverySettings

logger = logging.getLogger(__name__)


class CandidateDiscovery:
    """Finds files to offer in the picker."""

    def __init__(self, root: Path | None = None, settings: DiscoverySettings | None = None):
        """Initialize discovery.

        Args:
            root: Directory to walk (defaults to cwd)
            settings: Exclusions and limits
        """
        self._root = root or Path.cwd()
        self._settings = settings or DiscoverySettings()

    @property
    def root(self) -> Path:
        return self._root

    def _skip_dir(self, name: str) -> bool:
        if name in self._settings.exclude_dirs:
            return True
        return name.startswith(".") and not self._settings.include_hidden

    def walk(self) -> list[str]:
        """Absolute paths of files under root, sorted per directory.

        Stops after max_candidates files.
        """
        limit = self._settings.max_candidates
        found: list[str] = []
        for dirpath, dirnames, filenames in os.walk(self._root):
            dirnames[:] = sorted(d for d in dirnames if not self._skip_dir(d))
            for filename in sorted(filenames):
                if filename.startswith(".") and not self._settings.include_hidden:
                    continue
                found.append(os.path.join(dirpath, filename))
                if len(found) >= limit:
                    logger.debug(f"Stopped discovery at {limit} files under {self._root}")
                    return found
        return found

    def read_lines(self, stream: TextIO) -> list[str]:
        """Paths from a text stream, one per line, blank lines dropped."""
        return self._take(line.rstrip("\r\n") for line in stream)

    def _take(self, paths: Iterable[str]) -> list[str]:
        found: list[str] = []
        for path in paths:
            if not path.strip():
                continue
            found.append(path)
            if len(found) >= self._settings.max_candidates:
                break
        return found

    def as_entries(self, paths: Iterable[str]) -> list[list]:
        """Turn paths into ``[id, path, metadata]`` entries, ids from 1."""
        return [[i, path, {"path": path}] for i, path in enumerate(paths, start=1)]
