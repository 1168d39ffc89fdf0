"""Reduce a matcher's outcomes to a bucket, a score and highlight ranges.

Scores are bounded unsigned integers, higher is better:

- Suffix exact:    pattern is a contiguous tail of the label -> MAX_SCORE
- Substring exact: contiguous elsewhere -> MAX_SCORE - roffset
- Fuzzy:           several runs -> MAX_SCORE - (roffset + length of last run)
- No match:        0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .pattern import Decisive, Pattern, Target

# Scores fit in an unsigned 16-bit integer
MAX_SCORE = 0xFFFF


class Bucket(IntEnum):
    """Result classes, in output priority order."""

    SUFFIX_EXACT = 0
    SUBSTRING_EXACT = 1
    FUZZY_SUBSEQUENCE = 2
    NO_MATCH = 3


@dataclass(frozen=True)
class ScoredMatch:
    """Classification of one target against one pattern."""

    bucket: Bucket
    score: int
    ranges: tuple[tuple[int, int], ...] = field(default=())


NO_MATCH = ScoredMatch(Bucket.NO_MATCH, 0)


def saturating_score(penalty: int) -> int:
    """MAX_SCORE minus penalty, never below zero."""
    return MAX_SCORE - min(penalty, MAX_SCORE)


def score_target(pattern: Pattern, target: Target) -> ScoredMatch:
    """Run the matcher for (pattern, target) and classify the result."""
    if pattern.is_empty():
        return NO_MATCH

    matcher = pattern.test(target)
    first = matcher.next_outcome()
    if first is None:
        return NO_MATCH

    if isinstance(first, Decisive):
        found = first.range
        if found.roffset == 0:
            return ScoredMatch(Bucket.SUFFIX_EXACT, MAX_SCORE, (found.as_tuple(),))
        return ScoredMatch(
            Bucket.SUBSTRING_EXACT,
            saturating_score(found.roffset),
            (found.as_tuple(),),
        )

    ranges = [first.range.as_tuple()]
    for outcome in matcher:
        ranges.append(outcome.range.as_tuple())
        if isinstance(outcome, Decisive):
            last = outcome.range
            return ScoredMatch(
                Bucket.FUZZY_SUBSEQUENCE,
                saturating_score(last.roffset + len(last)),
                tuple(ranges),
            )

    # Ran out of target before the pattern was used up
    return NO_MATCH
