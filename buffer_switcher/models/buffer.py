"""Buffer models: the items being switched between."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Callable, Sequence

from ..services.pattern import Target
from .exceptions import SnapshotError


@total_ordering
class BufferId:
    """Opaque buffer identity with a total order.

    Ids arrive from the editor as numbers or strings. Numbers sort before
    strings and compare by value, then by type, so 1 and 1.0 differ.
    Anything else sorts last, by its repr, so two ids are always comparable.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def _sort_key(self) -> tuple:
        value = self.value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if isinstance(value, float) and math.isnan(value):
                return (2, repr(value))
            # 1 and 1.0 are distinct ids
            return (0, value, type(value).__name__)
        if isinstance(value, str):
            return (1, value)
        return (2, repr(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BufferId):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: "BufferId") -> bool:
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __repr__(self) -> str:
        return f"BufferId({self.value!r})"


@dataclass(frozen=True)
class Buffer:
    """One entry of a buffer snapshot."""

    id: BufferId
    file: Target  # Normalized display label
    metadata: Any = field(default=None, compare=False)

    @property
    def label(self) -> str:
        return self.file.label

    @classmethod
    def from_entry(
        cls,
        entry: Any,
        to_label: Callable[[str], str] | None = None,
    ) -> "Buffer":
        """Build a buffer from an editor entry ``[id, path, metadata]``.

        Args:
            entry: Sequence of at least three values
            to_label: Optional path -> display label transform

        Raises:
            SnapshotError: If the entry is malformed
        """
        if isinstance(entry, (str, bytes)) or not isinstance(entry, Sequence):
            raise SnapshotError(f"Buffer entry is not a list: {entry!r}")
        if len(entry) < 3:
            raise SnapshotError(
                f"Buffer entry has {len(entry)} fields",
                "expected [id, path, metadata]",
            )
        buf_id, path, metadata = entry[0], entry[1], entry[2]
        if not isinstance(path, str):
            raise SnapshotError(f"Buffer path is not a string: {path!r}")

        label = to_label(path) if to_label else path
        return cls(id=BufferId(buf_id), file=Target(label), metadata=metadata)
