"""Rank a buffer snapshot against a query.

Every buffer is scored once, dropped into one of four buckets, and each
bucket is sorted by:

    score (desc) > label byte length (asc) > label (asc) > buffer id (asc)

Buckets are then read in priority order: suffix exact, substring exact,
fuzzy, no match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import chain
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from .pattern import Pattern
from .scoring import NO_MATCH, Bucket, score_target

if TYPE_CHECKING:
    from ..models.buffer import Buffer, BufferId

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Item:
    """One ranked result.

    Two items are equal when they refer to the same buffer; ordering
    goes through sort_key.
    """

    buffer_id: "BufferId"
    index: int  # Position of the buffer in the snapshot
    label: str
    label_len: int  # UTF-8 byte length of label
    score: int
    bucket: Bucket
    metadata: Any = None
    matched: list[tuple[int, int]] = field(default_factory=list)

    @property
    def sort_key(self) -> tuple:
        return (-self.score, self.label_len, self.label, self.buffer_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self.buffer_id == other.buffer_id

    def __hash__(self) -> int:
        return hash(self.buffer_id)


@dataclass
class RankedItems:
    """Ranking result: four sorted buckets, iterated in priority order."""

    suffix: list[Item] = field(default_factory=list)
    substring: list[Item] = field(default_factory=list)
    fuzzy: list[Item] = field(default_factory=list)
    nonmatch: list[Item] = field(default_factory=list)

    def bucket(self, bucket: Bucket) -> list[Item]:
        """Items of one bucket, sorted."""
        return {
            Bucket.SUFFIX_EXACT: self.suffix,
            Bucket.SUBSTRING_EXACT: self.substring,
            Bucket.FUZZY_SUBSEQUENCE: self.fuzzy,
            Bucket.NO_MATCH: self.nonmatch,
        }[bucket]

    def add(self, item: Item) -> None:
        self.bucket(item.bucket).append(item)

    def sort(self) -> None:
        for items in (self.suffix, self.substring, self.fuzzy, self.nonmatch):
            items.sort(key=lambda item: item.sort_key)

    def __iter__(self) -> Iterator[Item]:
        return chain(self.suffix, self.substring, self.fuzzy, self.nonmatch)

    def __len__(self) -> int:
        return len(self.suffix) + len(self.substring) + len(self.fuzzy) + len(self.nonmatch)


def rank(buffers: Iterable["Buffer"], query: Pattern | str) -> RankedItems:
    """Rank buffers against query.

    Args:
        buffers: Snapshot to rank; read once, not modified
        query: Raw query string or an already built Pattern

    Returns:
        RankedItems holding every buffer exactly once. An empty query puts
        everything in the no-match bucket without ranges (browse mode).
    """
    pattern = query if isinstance(query, Pattern) else Pattern(query)
    browse = pattern.is_empty()

    ranking = RankedItems()
    for index, buffer in enumerate(buffers):
        scored = NO_MATCH if browse else score_target(pattern, buffer.file)
        ranking.add(Item(
            buffer_id=buffer.id,
            index=index,
            label=buffer.file.label,
            label_len=buffer.file.byte_len,
            score=scored.score,
            bucket=scored.bucket,
            metadata=buffer.metadata,
            matched=list(scored.ranges),
        ))

    ranking.sort()
    logger.debug(
        f"Ranked {len(ranking)} buffers for {pattern.raw!r}: "
        f"{len(ranking.suffix)} suffix, {len(ranking.substring)} substring, "
        f"{len(ranking.fuzzy)} fuzzy"
    )
    return ranking
