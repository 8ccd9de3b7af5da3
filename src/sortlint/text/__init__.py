"""Character spans and span rewriting over immutable source text."""

from .spans import Span, Replacement, OverlappingReplacementError, apply_replacements

__all__ = [
    "Span",
    "Replacement",
    "OverlappingReplacementError",
    "apply_replacements",
]
