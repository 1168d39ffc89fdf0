"""Switcher state and editor request handling.

The editor pushes buffer snapshots with an ``update_buffers`` notification
and asks for rankings with a ``rank`` request. Snapshots are replaced whole;
a lock keeps a ranking pass from seeing a half-updated state.

Response format for ``rank``::

    {
        "current_tab": [[id, label, metadata, [{"start_idx": s, "end_idx": e}, ...]], ...],
        "other_tabs": [...],
    }
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Any, Iterable, Sequence

from .buffer_list import BufferList
from .config import LabelSettings
from .pattern import Pattern
from .rank import Item, RankedItems, rank

logger = logging.getLogger(__name__)


def item_to_entry(item: Item) -> list:
    """Serialize one ranked item for the editor."""
    return [
        item.buffer_id.value,
        item.label,
        item.metadata,
        [{"start_idx": start, "end_idx": end} for start, end in item.matched],
    ]


def ranking_to_entries(ranking: RankedItems) -> list[list]:
    return [item_to_entry(item) for item in ranking]


class SwitcherState:
    """Buffer snapshots for the current tab and all other tabs."""

    def __init__(self, label_settings: LabelSettings | None = None) -> None:
        self._lock = threading.RLock()
        self._label_settings = label_settings or LabelSettings()
        self._current_tab = BufferList()
        self._other_tabs = BufferList()

    @property
    def current_tab(self) -> BufferList:
        with self._lock:
            return self._current_tab

    @property
    def other_tabs(self) -> BufferList:
        with self._lock:
            return self._other_tabs

    def update(
        self,
        current_tab: Iterable[Any],
        other_tabs: Iterable[Any],
        cwd: str,
        home: str | None = None,
    ) -> None:
        """Replace both snapshots from raw editor entries."""
        if home is None:
            home = os.path.expanduser("~")
        current = BufferList.from_entries(current_tab, cwd, home, self._label_settings)
        other = BufferList.from_entries(other_tabs, cwd, home, self._label_settings)
        with self._lock:
            self._current_tab = current
            self._other_tabs = other
        logger.debug(f"Snapshot updated: {len(current)} current, {len(other)} other")

    def rank(self, query: str) -> tuple[RankedItems, RankedItems]:
        """Rank both snapshots against query."""
        pattern = Pattern(query)
        with self._lock:
            return rank(self._current_tab, pattern), rank(self._other_tabs, pattern)

    def ranking(self, query: str) -> dict[str, list]:
        """Rank both snapshots and serialize for the editor."""
        current, other = self.rank(query)
        return {
            "current_tab": ranking_to_entries(current),
            "other_tabs": ranking_to_entries(other),
        }


class SwitcherHandler:
    """Dispatches editor requests and notifications to a SwitcherState."""

    def __init__(self, state: SwitcherState | None = None) -> None:
        self.state = state or SwitcherState()

    def handle_request(self, name: str, args: Sequence[Any]) -> Any:
        """Answer a request; unknown names and bad arguments give None."""
        if name != "rank":
            logger.debug(f"Ignoring unknown request {name!r}")
            return None
        if not args or not isinstance(args[0], str):
            return None
        return self.state.ranking(args[0])

    def handle_notify(self, name: str, args: Sequence[Any]) -> None:
        """Apply a notification; unknown names and bad arguments are ignored."""
        if name != "update_buffers":
            logger.debug(f"Ignoring unknown notification {name!r}")
            return
        if len(args) < 3:
            return
        current, other, cwd = args[0], args[1], args[2]
        if not isinstance(current, list) or not isinstance(other, list) or not isinstance(cwd, str):
            return
        self.state.update(current, other, cwd)
