"""Buffer picker: jump to a buffer by typing part of its path.

A modal overlay that re-ranks the snapshot on every keystroke. Results
from the current tab come first, then results from other tabs.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.reactive import reactive
from textual.widgets import Input, Static

from .base import SwitcherModalScreen
from ..services.config import PickerSettings
from ..services.rank import Item
from ..services.switcher import SwitcherState
from ..widgets.buffer_item import BufferItem


class BufferPicker(SwitcherModalScreen[Item | None]):
    """Searchable buffer list modal."""

    BINDINGS = [
        Binding("escape", "dismiss_modal", "Cancel"),
        Binding("enter", "select", "Open"),
        Binding("up", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("ctrl+p", "move_up", "Up", show=False),
        Binding("ctrl+n", "move_down", "Down", show=False),
    ]

    DEFAULT_CSS = """
    BufferPicker #dialog {
        border: round $primary;
    }

    BufferPicker #picker-input {
        width: 100%;
        margin-bottom: 1;
    }

    BufferPicker #picker-input:focus {
        border: tall $primary;
    }

    BufferPicker #results {
        height: auto;
        max-height: 60vh;
        min-height: 5;
        overflow-y: auto;
    }
    """

    selected_index: reactive[int] = reactive(0)

    def __init__(
        self,
        state: SwitcherState,
        settings: PickerSettings | None = None,
        query: str = "",
    ) -> None:
        super().__init__()
        self._state = state
        self._settings = settings or PickerSettings()
        self._initial_query = query
        self._current: list[Item] = []
        self._other: list[Item] = []
        self._updating = False  # Guard flag for DOM updates

    @property
    def items(self) -> list[Item]:
        """Visible items in display order."""
        return self._current + self._other

    def compose(self) -> ComposeResult:
        self.add_class("modal-base", "modal-lg")

        with Vertical(id="dialog"):
            yield Static("buffers", classes="dialog-title")
            yield Input(value=self._initial_query, placeholder="type to jump...", id="picker-input")
            yield Vertical(id="results")
            yield Static("↑↓ navigate  enter open  esc cancel", classes="dialog-hint")

    def on_mount(self) -> None:
        super().on_mount()
        self._rerank(self._initial_query)
        self.query_one("#picker-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-rank as the user types."""
        self.selected_index = 0
        self._rerank(event.value)

    def _rerank(self, query: str) -> None:
        limit = self._settings.max_results
        current, other = self._state.rank(query)
        self._current = list(current)[:limit]
        self._other = list(other)[:limit] if self._settings.show_other_tabs else []
        self._update_results()

    def _update_results(self) -> None:
        """Rebuild the results list."""
        self._updating = True
        try:
            results = self.query_one("#results", Vertical)
            results.remove_children()

            if not self._current and not self._other:
                results.mount(Static("no buffers", classes="empty-list"))
                return

            rows: list[Static] = []
            index = 0
            for title, items in (("current tab", self._current), ("other tabs", self._other)):
                if not items:
                    continue
                if self._other:
                    rows.append(Static(title, classes="section-title"))
                for item in items:
                    row = BufferItem(item)
                    if index == self.selected_index:
                        row.add_class("selected")
                    rows.append(row)
                    index += 1
            results.mount(*rows)
        finally:
            self._updating = False

    def watch_selected_index(self, new_index: int) -> None:
        """Update visual selection."""
        if self._updating:
            return
        rows = self.query(BufferItem)
        for i, row in enumerate(rows):
            row.set_class(i == new_index, "selected")
            if i == new_index:
                row.scroll_visible()

    def action_move_down(self) -> None:
        """Move selection down."""
        if self.items:
            self.selected_index = min(self.selected_index + 1, len(self.items) - 1)

    def action_move_up(self) -> None:
        """Move selection up."""
        if self.items:
            self.selected_index = max(self.selected_index - 1, 0)

    def action_select(self) -> None:
        """Dismiss with the selected item."""
        items = self.items
        if items and 0 <= self.selected_index < len(items):
            self.dismiss(items[self.selected_index])
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_select()

    def on_buffer_item_selected(self, event: BufferItem.Selected) -> None:
        self.dismiss(event.item)
