"""Widgets for Buffer Switcher."""

from buffer_switcher.widgets.buffer_item import BufferItem, highlight_label

__all__ = ["BufferItem", "highlight_label"]
