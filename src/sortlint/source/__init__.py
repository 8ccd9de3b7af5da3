"""
Source text snapshots, locations and syntax classification.
"""

from .document import (
    Location,
    SourceError,
    SourceFile,
    SourceReadError,
    SourceWriteError,
)
from .syntax import SyntaxKind, SyntaxMap, SyntaxToken, classify_token, swift_lexer

__all__ = [
    "Location",
    "SourceError",
    "SourceFile",
    "SourceReadError",
    "SourceWriteError",
    "SyntaxKind",
    "SyntaxMap",
    "SyntaxToken",
    "classify_token",
    "swift_lexer",
]
