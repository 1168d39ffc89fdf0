"""Screens for Buffer Switcher."""

from buffer_switcher.screens.picker import BufferPicker

__all__ = ["BufferPicker"]
