"""Pattern and target model, plus the right-to-left matcher.

A Pattern is tested against a Target and yields a finite sequence of
outcomes, read from the end of the label backwards:

- Partial: a contiguous run matched the tail of the remaining pattern,
  then a mismatch left pattern characters over
- Decisive: the rest of the pattern matched in one contiguous run;
  always the last outcome

All ranges are UTF-8 byte offsets into the target label.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator, Union

from .normalize import NormalizedView, normalize


def chars_match(pattern_char: str, target_char: str) -> bool:
    """Compare one pattern character against one target character.

    Uppercase in the pattern asks for an exact match; anything else is
    compared case-insensitively.
    """
    if pattern_char.isupper():
        return target_char == pattern_char
    return target_char == pattern_char or target_char.casefold() == pattern_char.casefold()


@total_ordering
class Target:
    """A normalized display label, ready to be matched.

    Built once when a buffer enters the snapshot and never changed.
    """

    __slots__ = ("_label", "_byte_len", "_chars")

    def __init__(self, text: str) -> None:
        label = normalize(text)
        chars: list[tuple[int, int, str]] = []
        offset = 0
        for ch in label:
            width = len(ch.encode("utf-8"))
            chars.append((offset, offset + width, ch))
            offset += width
        self._label = label
        self._byte_len = offset
        self._chars = tuple(chars)

    @property
    def label(self) -> str:
        return self._label

    @property
    def byte_len(self) -> int:
        return self._byte_len

    @property
    def chars(self) -> tuple[tuple[int, int, str], ...]:
        """(start, end, char) for every character of the label."""
        return self._chars

    def __len__(self) -> int:
        return self._byte_len

    def __str__(self) -> str:
        return self._label

    def __repr__(self) -> str:
        return f"Target({self._label!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Target):
            return NotImplemented
        return self._label == other._label

    def __lt__(self, other: "Target") -> bool:
        return self._label < other._label

    def __hash__(self) -> int:
        return hash(self._label)


@dataclass(frozen=True)
class MatchRange:
    """Half-open byte range [start, end) plus its distance to the label end."""

    start: int
    end: int
    roffset: int

    def __len__(self) -> int:
        return self.end - self.start

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True)
class Decisive:
    """The remaining pattern was consumed in one contiguous run."""

    range: MatchRange


@dataclass(frozen=True)
class Partial:
    """Only a trailing sub-run matched; pattern characters remain."""

    range: MatchRange


MatchOutcome = Union[Decisive, Partial]


class Matcher:
    """Step-by-step matcher for one (pattern, target) pair.

    State is three cursors: the unread pattern characters (consumed right
    to left), the unscanned part of the target (everything left of
    _cursor), and the pattern character still waiting to be found.
    Call next_outcome() until it returns None. Not restartable.
    """

    def __init__(self, pattern: NormalizedView, target: Target) -> None:
        self._pattern = reversed(pattern)
        self._pending: str | None = next(self._pattern, None)
        self._chars = target.chars
        self._cursor = len(target.chars)
        self._target_len = target.byte_len

    def _finish(self) -> None:
        self._pending = None
        self._cursor = 0

    def _rfind(self, pattern_char: str) -> int | None:
        """Index of the rightmost unscanned target char matching pattern_char."""
        cursor = self._cursor
        while cursor > 0:
            cursor -= 1
            if chars_match(pattern_char, self._chars[cursor][2]):
                self._cursor = cursor
                return cursor
        self._cursor = 0
        return None

    def next_outcome(self) -> MatchOutcome | None:
        """Produce the next outcome, or None once the sequence has ended."""
        if self._pending is None:
            return None

        found = self._rfind(self._pending)
        if found is None:
            self._finish()
            return None

        start, end, _ = self._chars[found]
        roffset = self._target_len - end
        cursor = found

        for pattern_char in self._pattern:
            if cursor == 0:
                # Target exhausted with pattern left over
                self._finish()
                return None
            cursor -= 1
            target_start, _, target_char = self._chars[cursor]
            if chars_match(pattern_char, target_char):
                start = target_start
                continue
            self._cursor = cursor
            self._pending = pattern_char
            return Partial(MatchRange(start, end, roffset))

        self._finish()
        return Decisive(MatchRange(start, end, roffset))

    def __iter__(self) -> Iterator[MatchOutcome]:
        return self

    def __next__(self) -> MatchOutcome:
        outcome = self.next_outcome()
        if outcome is None:
            raise StopIteration
        return outcome


class Pattern:
    """The user's query, normalized lazily.

    Rebuilt for every ranking request and never stored.
    """

    __slots__ = ("_view",)

    def __init__(self, raw: str) -> None:
        self._view = NormalizedView(raw)

    @property
    def raw(self) -> str:
        return self._view.raw

    def is_empty(self) -> bool:
        return self._view.is_empty()

    def chars(self) -> Iterator[str]:
        return iter(self._view)

    def __len__(self) -> int:
        """Number of characters after normalization."""
        return sum(1 for _ in self._view)

    def __str__(self) -> str:
        return str(self._view)

    def __repr__(self) -> str:
        return f"Pattern({self.raw!r})"

    def test(self, target: Target) -> Matcher:
        """Start matching this pattern against target."""
        return Matcher(self._view, target)
