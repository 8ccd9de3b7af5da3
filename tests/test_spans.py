"""Tests for span rewriting over immutable text."""

import pytest
from hypothesis import given, strategies as st

from sortlint.text.spans import (
    OverlappingReplacementError,
    Replacement,
    Span,
    apply_replacements,
)


class TestSpan:
    def test_from_bounds(self):
        """Test building a span from start/end offsets."""
        span = Span.from_bounds(4, 9)
        assert span.offset == 4
        assert span.length == 5
        assert span.end == 9

    def test_text_in(self):
        """Test that a span selects exactly its characters."""
        assert Span(7, 3).text_in("import Foo\n") == "Foo"

    def test_span_immutable(self):
        """Test that Span is immutable."""
        span = Span(0, 1)
        with pytest.raises(AttributeError):
            span.offset = 2  # type: ignore

    def test_overlaps(self):
        """Test half-open overlap semantics."""
        assert Span(0, 5).overlaps(Span(4, 2))
        assert not Span(0, 5).overlaps(Span(5, 2))
        assert not Span(10, 2).overlaps(Span(0, 10))


class TestApplyReplacements:
    def test_no_replacements_returns_same_text(self):
        """Test that nothing to apply leaves the text object untouched."""
        text = "import Foo"
        assert apply_replacements(text, []) is text

    def test_single_replacement(self):
        """Test replacing one span."""
        assert apply_replacements("import Foo", [Replacement(Span(7, 3), "Bar")]) == "import Bar"

    def test_length_changing_replacements_in_any_order(self):
        """Test that longer and shorter replacements keep later spans valid."""
        text = "import A\nimport BB\nimport CCC"
        replacements = [
            Replacement(Span(7, 1), "CCC"),
            Replacement(Span(26, 3), "A"),
            Replacement(Span(16, 2), "BBBB"),
        ]
        result = apply_replacements(text, replacements)
        assert result == "import CCC\nimport BBBB\nimport A"

    def test_adjacent_spans_allowed(self):
        """Test that touching spans are not treated as overlapping."""
        result = apply_replacements("abcd", [Replacement(Span(0, 2), "X"), Replacement(Span(2, 2), "Y")])
        assert result == "XY"

    def test_overlapping_spans_rejected(self):
        """Test that overlapping spans raise."""
        with pytest.raises(OverlappingReplacementError):
            apply_replacements("abcdef", [Replacement(Span(0, 3), "X"), Replacement(Span(2, 2), "Y")])

    def test_overlap_error_is_value_error(self):
        """Test that the overlap error can be caught as ValueError."""
        with pytest.raises(ValueError):
            apply_replacements("abcdef", [Replacement(Span(1, 3), "X"), Replacement(Span(1, 1), "Y")])

    def test_span_outside_text_rejected(self):
        """Test that spans past the end of the text raise IndexError."""
        with pytest.raises(IndexError):
            apply_replacements("abc", [Replacement(Span(2, 5), "X")])

    @given(
        text=st.text(alphabet="abc \n", min_size=1, max_size=40),
        data=st.data(),
    )
    def test_matches_left_to_right_rebuild(self, text, data):
        """For any set of disjoint spans, the result equals a left-to-right rebuild."""
        cuts = sorted(data.draw(st.sets(st.integers(min_value=0, max_value=len(text)), max_size=6)))
        spans = [Span.from_bounds(a, b) for a, b in zip(cuts[::2], cuts[1::2])]
        replacements = [Replacement(span, f"<{i}>") for i, span in enumerate(spans)]

        expected = []
        position = 0
        for replacement in replacements:
            expected.append(text[position:replacement.span.offset])
            expected.append(replacement.text)
            position = replacement.span.end
        expected.append(text[position:])

        shuffled = data.draw(st.permutations(replacements))
        assert apply_replacements(text, shuffled) == "".join(expected)
