"""Positional comparison of document order against canonical order."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .extraction import Declaration, extract_declarations
from .ordering import canonical_order
from ..source.syntax import SyntaxMap
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Violation:
    """Start offset of a module name that is not the one canonical order expects there."""
    offset: int


def find_mismatches(
    declarations: Sequence[Declaration],
    ordered: Sequence[Declaration],
) -> List[Tuple[Declaration, Declaration]]:
    """
    Pair up declarations by index and keep the pairs whose modules differ.

    Args:
        declarations: Declarations in document order
        ordered: The same declarations in canonical order

    Returns:
        (actual, expected) pairs in document order
    """
    return [
        (actual, expected)
        for actual, expected in zip(declarations, ordered)
        if actual.module != expected.module
    ]


def validate_imports(text: str, syntax_map: Optional[SyntaxMap] = None) -> List[Violation]:
    """
    Report every position whose import is out of canonical order.

    A single misplaced import usually produces violations at every following
    position until the tail lines up again.
    """
    declarations = extract_declarations(text, syntax_map)
    mismatches = find_mismatches(declarations, canonical_order(declarations))
    if mismatches:
        logger.debug(f"{len(mismatches)} of {len(declarations)} imports out of order")
    return [Violation(offset=actual.span.offset) for actual, _ in mismatches]
