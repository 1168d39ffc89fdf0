"""Data models for Buffer Switcher."""

from .buffer import Buffer, BufferId
from .exceptions import (
    SwitcherError,
    ConfigError,
    ConfigValidationError,
    SnapshotError,
)

__all__ = [
    "Buffer",
    "BufferId",
    # Exceptions
    "SwitcherError",
    "ConfigError",
    "ConfigValidationError",
    "SnapshotError",
]
