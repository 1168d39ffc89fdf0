"""Tests for match classification and scoring."""

from buffer_switcher.services.pattern import Pattern, Target
from buffer_switcher.services.scoring import (
    MAX_SCORE,
    Bucket,
    saturating_score,
    score_target,
)


def score(target: str, pattern: str):
    return score_target(Pattern(pattern), Target(target))


class TestSaturatingScore:
    """Penalty never pushes the score below zero."""

    def test_no_penalty(self):
        assert saturating_score(0) == MAX_SCORE

    def test_penalty(self):
        assert saturating_score(8) == MAX_SCORE - 8

    def test_saturates(self):
        assert saturating_score(MAX_SCORE) == 0
        assert saturating_score(MAX_SCORE * 3) == 0


class TestScoreTarget:
    """Bucket, score and ranges for each outcome shape."""

    def test_no_outcome(self):
        result = score("README.doc", "ext")
        assert result.bucket == Bucket.NO_MATCH
        assert result.score == 0
        assert result.ranges == ()

    def test_suffix_exact(self):
        result = score("src/main.ext", "ext")
        assert result.bucket == Bucket.SUFFIX_EXACT
        assert result.score == MAX_SCORE
        assert result.ranges == ((9, 12),)

    def test_substring_exact(self):
        result = score("src/main.ext", "main")
        assert result.bucket == Bucket.SUBSTRING_EXACT
        assert result.score == MAX_SCORE - 4
        assert result.ranges == ((4, 8),)

    def test_fuzzy(self):
        result = score("abcdefgh", "ac")
        assert result.bucket == Bucket.FUZZY_SUBSEQUENCE
        assert result.score == MAX_SCORE - 8
        assert result.ranges == ((2, 3), (0, 1))

    def test_fuzzy_penalty_uses_last_run(self):
        # Last run is 0..3 with roffset 5
        result = score("abcdefgh", "abch")
        assert result.bucket == Bucket.FUZZY_SUBSEQUENCE
        assert result.score == MAX_SCORE - (5 + 3)
        assert result.ranges == ((7, 8), (0, 3))

    def test_partial_without_decisive_discards_ranges(self):
        result = score("aBH", "Abh")
        assert result.bucket == Bucket.NO_MATCH
        assert result.score == 0
        assert result.ranges == ()

    def test_case_insensitive_suffix(self):
        result = score("ABCD", "abcd")
        assert result.bucket == Bucket.SUFFIX_EXACT
        assert result.ranges == ((0, 4),)

    def test_empty_pattern(self):
        result = score("anything", "\x00\x01")
        assert result.bucket == Bucket.NO_MATCH
        assert result.score == 0
        assert result.ranges == ()

    def test_empty_target(self):
        assert score("", "a").bucket == Bucket.NO_MATCH

    def test_long_label_saturates(self):
        label = "x" + "y" * (MAX_SCORE + 10)
        result = score(label, "x")
        assert result.bucket == Bucket.SUBSTRING_EXACT
        assert result.score == 0

    def test_suffix_contiguous_tail_always_max(self):
        label = "some/deep/path/to/file.py"
        for size in range(1, len(label) + 1):
            result = score(label, label[-size:])
            assert result.bucket == Bucket.SUFFIX_EXACT
            assert result.score == MAX_SCORE
