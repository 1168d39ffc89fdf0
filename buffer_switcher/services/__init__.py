"""Matching and ranking services for Buffer Switcher."""

from buffer_switcher.services.normalize import NormalizedView, normalize
from buffer_switcher.services.pattern import (
    Decisive,
    Matcher,
    MatchRange,
    Partial,
    Pattern,
    Target,
)
from buffer_switcher.services.scoring import MAX_SCORE, Bucket, ScoredMatch, score_target
from buffer_switcher.services.rank import Item, RankedItems, rank

__all__ = [
    "NormalizedView",
    "normalize",
    "Decisive",
    "Matcher",
    "MatchRange",
    "Partial",
    "Pattern",
    "Target",
    "MAX_SCORE",
    "Bucket",
    "ScoredMatch",
    "score_target",
    "Item",
    "RankedItems",
    "rank",
]
