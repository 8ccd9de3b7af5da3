"""Rewriting out-of-order imports into canonical order."""

from dataclasses import dataclass, field
from typing import List, Optional

from .extraction import extract_declarations
from .ordering import canonical_order
from .violations import find_mismatches
from ..source.syntax import SyntaxMap
from ..text.spans import Replacement, apply_replacements
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Correction:
    """A module-name span of the original text that was rewritten."""
    offset: int             # Offset in the original, unmodified text
    replaced_module: str    # Module that stood at this position
    replacement: str        # Module written in its place


@dataclass(frozen=True)
class CorrectionResult:
    text: str
    corrections: List[Correction] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.corrections)


def correct_imports(text: str, syntax_map: Optional[SyntaxMap] = None) -> CorrectionResult:
    """
    Put every import in canonical order by rewriting module names in place.

    Each mismatched span receives the module canonical order expects at that
    position. Spans are rewritten right to left internally; the returned
    corrections carry original offsets in ascending order.

    Args:
        text: Full document text
        syntax_map: Token classification of ``text``

    Returns:
        CorrectionResult with the new text; ``text`` is returned unchanged,
        with no corrections, when the imports are already sorted
    """
    declarations = extract_declarations(text, syntax_map)
    mismatches = find_mismatches(declarations, canonical_order(declarations))
    if not mismatches:
        return CorrectionResult(text=text, corrections=[])

    replacements = [
        Replacement(span=actual.span, text=expected.module)
        for actual, expected in mismatches
    ]
    corrected = apply_replacements(text, replacements)

    corrections = [
        Correction(
            offset=actual.span.offset,
            replaced_module=actual.module,
            replacement=expected.module,
        )
        for actual, expected in mismatches
    ]

    logger.info(f"Reordered {len(corrections)} of {len(declarations)} imports")
    return CorrectionResult(text=corrected, corrections=corrections)
