"""Buffer snapshots and display label derivation."""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Iterator

from ..models.buffer import Buffer
from ..models.exceptions import SnapshotError
from .config import LabelSettings

logger = logging.getLogger(__name__)


def _strip_dir(path: str, directory: str) -> str | None:
    """Return the part of path after directory, or None if path is not under it.

    Only matches on a separator boundary, so /a/bc is not under /a/b.
    """
    directory = directory.rstrip("/\\")
    if not directory:
        # Empty or filesystem root: nothing to shorten
        return None
    if path == directory:
        return ""
    if path.startswith(directory) and path[len(directory)] in "/\\":
        return path[len(directory):]
    return None


def display_label(
    path: str,
    cwd: str,
    home: str | None = None,
    settings: LabelSettings | None = None,
) -> str:
    """Shorten an absolute path for display.

    Paths under cwd become "." + rest, otherwise paths under home become
    "~" + rest, anything else is returned unchanged.
    """
    settings = settings or LabelSettings()
    if home is None:
        home = os.path.expanduser("~")

    if settings.shorten_cwd:
        rest = _strip_dir(path, cwd)
        if rest is not None:
            return "." + rest
    if settings.shorten_home:
        rest = _strip_dir(path, home)
        if rest is not None:
            return "~" + rest
    return path


class BufferList:
    """Immutable snapshot of buffers, in editor order."""

    __slots__ = ("_buffers",)

    def __init__(self, buffers: Iterable[Buffer] = ()) -> None:
        self._buffers = tuple(buffers)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Any],
        cwd: str,
        home: str | None = None,
        settings: LabelSettings | None = None,
    ) -> "BufferList":
        """Build a snapshot from raw ``[id, path, metadata]`` entries.

        Malformed entries are skipped.
        """
        if home is None:
            home = os.path.expanduser("~")

        def to_label(path: str) -> str:
            return display_label(path, cwd, home, settings)

        buffers: list[Buffer] = []
        for entry in entries:
            try:
                buffers.append(Buffer.from_entry(entry, to_label))
            except SnapshotError as e:
                logger.debug(f"Skipping buffer entry: {e}")
        return cls(buffers)

    def __iter__(self) -> Iterator[Buffer]:
        return iter(self._buffers)

    def __len__(self) -> int:
        return len(self._buffers)

    def __getitem__(self, index: int) -> Buffer:
        return self._buffers[index]

    def __repr__(self) -> str:
        return f"BufferList({len(self._buffers)} buffers)"
