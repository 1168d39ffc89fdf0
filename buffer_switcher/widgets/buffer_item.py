"""Result row for the buffer picker, with matched ranges highlighted."""

from __future__ import annotations

from rich.text import Text
from textual.message import Message
from textual.widgets import Static

from ..services.rank import Item

MATCH_STYLE = "bold underline"


def byte_to_char_ranges(label: str, ranges: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Convert UTF-8 byte ranges into character ranges of label.

    Ranges that don't fall on character boundaries are dropped.
    """
    char_at: dict[int, int] = {}
    offset = 0
    for i, ch in enumerate(label):
        char_at[offset] = i
        offset += len(ch.encode("utf-8"))
    char_at[offset] = len(label)

    return [
        (char_at[start], char_at[end])
        for start, end in ranges
        if start in char_at and end in char_at and start < end
    ]


def highlight_label(label: str, ranges: list[tuple[int, int]], style: str = MATCH_STYLE) -> Text:
    """Rich Text for label with each matched byte range styled."""
    text = Text(label, no_wrap=True, overflow="ellipsis")
    for start, end in byte_to_char_ranges(label, ranges):
        text.stylize(style, start, end)
    return text


class BufferItem(Static):
    """A single ranked buffer in the picker list."""

    DEFAULT_CSS = """
    BufferItem {
        width: 100%;
        height: 1;
        padding: 0 1;
    }

    BufferItem:hover {
        background: $surface-lighten-1;
    }

    BufferItem.selected {
        background: $surface-lighten-1;
    }
    """

    def __init__(self, item: Item, **kwargs) -> None:
        super().__init__(highlight_label(item.label, item.matched), **kwargs)
        self.item = item

    class Selected(Message):
        """Posted when the row is clicked."""

        def __init__(self, item: Item) -> None:
            super().__init__()
            self.item = item

    def on_click(self) -> None:
        self.post_message(self.Selected(self.item))
