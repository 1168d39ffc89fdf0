"""Tests for match highlighting in the picker rows."""

from buffer_switcher.services.rank import rank
from buffer_switcher.widgets.buffer_item import (
    MATCH_STYLE,
    byte_to_char_ranges,
    highlight_label,
)

from .conftest import make_buffers


class TestByteToCharRanges:
    """Byte ranges from the ranker map onto characters."""

    def test_ascii(self):
        assert byte_to_char_ranges("abcd", [(1, 3)]) == [(1, 3)]

    def test_multibyte(self):
        # é occupies bytes 3..5
        assert byte_to_char_ranges("café.txt", [(3, 5), (6, 9)]) == [(3, 4), (5, 8)]

    def test_misaligned_dropped(self):
        assert byte_to_char_ranges("é", [(1, 2)]) == []

    def test_empty(self):
        assert byte_to_char_ranges("", []) == []


class TestHighlightLabel:
    """Rich text output."""

    def test_plain_text_kept(self):
        text = highlight_label("src/main.ext", [(9, 12)])
        assert text.plain == "src/main.ext"

    def test_spans_styled(self):
        text = highlight_label("abcdefgh", [(2, 3), (0, 1)])
        spans = sorted((span.start, span.end, str(span.style)) for span in text.spans)
        assert spans == [(0, 1, MATCH_STYLE), (2, 3, MATCH_STYLE)]

    def test_no_ranges(self):
        assert highlight_label("README.doc", []).spans == []

    def test_ranked_multibyte_item(self):
        [item] = rank(make_buffers("ΑΒΗ/αβη"), "αη")
        text = highlight_label(item.label, item.matched)
        styled = sorted(text.plain[span.start:span.end] for span in text.spans)
        assert styled == ["α", "η"]
