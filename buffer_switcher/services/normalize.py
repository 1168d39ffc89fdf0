"""Text normalization for labels and queries.

Every run of Unicode whitespace collapses to a single ASCII space and every
other control character is dropped. The information separators U+001C to
U+001F are control characters, not whitespace, even though str.isspace()
accepts them. Case is preserved and nothing is trimmed.

Two forms share one character filter:
- normalize(): builds the normalized string (once per buffer label)
- NormalizedView: filters lazily over the raw text (once per keystroke)
"""

from __future__ import annotations

import unicodedata
from typing import Iterator


def _filter_char(ch: str) -> str | None:
    """Map one raw character to its normalized form, or None to drop it."""
    if ch.isspace() and not ("\x1c" <= ch <= "\x1f"):
        return " "
    if unicodedata.category(ch) == "Cc":
        return None
    return ch


def _filtered(chars) -> Iterator[str]:
    """Yield normalized characters, collapsing adjacent spaces."""
    last_was_space = False
    for ch in chars:
        out = _filter_char(ch)
        if out is None:
            # Dropped characters don't break a whitespace run
            continue
        if out == " ":
            if last_was_space:
                continue
            last_was_space = True
        else:
            last_was_space = False
        yield out


def normalize(text: str) -> str:
    """Return the normalized form of text."""
    return "".join(_filtered(text))


def is_empty(text: str) -> bool:
    """True when text normalizes to zero characters."""
    return all(_filter_char(ch) is None for ch in text)


class NormalizedView:
    """Non-allocating, normalized view over a raw string.

    Iterating (forwards or with reversed()) yields exactly the characters
    normalize() would produce, in the same order.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: str) -> None:
        self._raw = raw

    @property
    def raw(self) -> str:
        return self._raw

    def is_empty(self) -> bool:
        return is_empty(self._raw)

    def __iter__(self) -> Iterator[str]:
        return _filtered(self._raw)

    def __reversed__(self) -> Iterator[str]:
        # A collapsed run yields one space whichever end it is read from
        return _filtered(reversed(self._raw))

    def __str__(self) -> str:
        return normalize(self._raw)

    def __repr__(self) -> str:
        return f"NormalizedView({self._raw!r})"
