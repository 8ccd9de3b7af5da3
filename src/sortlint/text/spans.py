"""
Character spans over an immutable text snapshot and span rewriting.

Spans are only meaningful against the exact text they were taken from. Any
edit to that text invalidates every span that lies after the edit, so
replacements are applied from the rightmost span to the leftmost one.
"""

from dataclasses import dataclass
from typing import Iterable, List

from ..logging import get_logger

logger = get_logger(__name__)


class OverlappingReplacementError(ValueError):
    """Raised when two replacements target overlapping spans."""


@dataclass(frozen=True)
class Span:
    """Half-open character range [offset, offset + length)."""
    offset: int
    length: int

    @classmethod
    def from_bounds(cls, start: int, end: int) -> "Span":
        """Build a span from start/end offsets, e.g. a regex match's bounds."""
        return cls(offset=start, length=end - start)

    @property
    def end(self) -> int:
        return self.offset + self.length

    def text_in(self, text: str) -> str:
        """Return the characters of ``text`` covered by this span."""
        return text[self.offset:self.end]

    def overlaps(self, other: "Span") -> bool:
        return self.offset < other.end and other.offset < self.end


@dataclass(frozen=True)
class Replacement:
    """Replace the text covered by ``span`` with ``text``."""
    span: Span
    text: str


def apply_replacements(text: str, replacements: Iterable[Replacement]) -> str:
    """
    Apply non-overlapping span replacements to ``text``.

    Replacements are applied in descending offset order. A replacement that
    changes length only shifts the text to its right, which has already been
    rewritten, so every span still waiting to be applied stays valid.

    Args:
        text: Original text the spans were computed against
        replacements: Replacements in any order

    Returns:
        The rewritten text (``text`` itself when there is nothing to apply)

    Raises:
        IndexError: If a span falls outside ``text``
        OverlappingReplacementError: If two spans overlap
    """
    ordered: List[Replacement] = sorted(
        replacements, key=lambda r: r.span.offset, reverse=True
    )
    if not ordered:
        return text

    for replacement in ordered:
        span = replacement.span
        if span.offset < 0 or span.length < 0 or span.end > len(text):
            raise IndexError(
                f"Span ({span.offset}, {span.length}) is outside text of length {len(text)}"
            )

    # Neighbours in descending order: the left one must end before the right one starts
    for right, left in zip(ordered, ordered[1:]):
        if left.span.end > right.span.offset:
            raise OverlappingReplacementError(
                f"Spans ({left.span.offset}, {left.span.length}) and "
                f"({right.span.offset}, {right.span.length}) overlap"
            )

    result = text
    for replacement in ordered:
        span = replacement.span
        result = result[:span.offset] + replacement.text + result[span.end:]

    logger.debug(f"Applied {len(ordered)} span replacements")
    return result
