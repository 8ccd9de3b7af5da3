"""
Token classification of Swift source text.

Wraps a pygments lexer and keeps each non-whitespace token with its character
offset and a coarse kind, so callers can reject pattern matches that fall
inside comments or string literals.
"""

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from pygments.lexer import Lexer
from pygments.lexers import SwiftLexer
from pygments.token import Comment, Keyword, Name, String

from ..logging import get_logger

logger = get_logger(__name__)


class SyntaxKind(Enum):
    """Coarse syntactic classes of source tokens."""
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    COMMENT = "comment"
    STRING = "string"
    OTHER = "other"


@dataclass(frozen=True)
class SyntaxToken:
    offset: int
    length: int
    kind: SyntaxKind

    @property
    def end(self) -> int:
        return self.offset + self.length


def classify_token(token_type) -> SyntaxKind:
    """Map a pygments token type onto a SyntaxKind."""
    if token_type in Comment:
        return SyntaxKind.COMMENT
    if token_type in String:
        return SyntaxKind.STRING
    if token_type in Keyword:
        return SyntaxKind.KEYWORD
    if token_type in Name:
        return SyntaxKind.IDENTIFIER
    return SyntaxKind.OTHER


def swift_lexer() -> Lexer:
    # Offsets must match the raw text, so no newline stripping or appending
    return SwiftLexer(stripnl=False, ensurenl=False)


class SyntaxMap:
    """
    Classified tokens of one text snapshot, ordered by offset.

    Whitespace is not recorded. Token offsets are only valid for the text
    the map was built from.
    """

    def __init__(self, tokens: Iterable[SyntaxToken]):
        self._tokens: List[SyntaxToken] = sorted(tokens, key=lambda t: t.offset)
        self._offsets = [token.offset for token in self._tokens]

    @classmethod
    def from_text(cls, text: str, lexer: Optional[Lexer] = None) -> "SyntaxMap":
        """
        Tokenize ``text`` and build its syntax map.

        Args:
            text: Source text
            lexer: pygments lexer to use (defaults to the Swift lexer)

        Returns:
            SyntaxMap over ``text``
        """
        lexer = lexer or swift_lexer()
        tokens = []
        for offset, token_type, value in lexer.get_tokens_unprocessed(text):
            if not value or value.isspace():
                continue
            tokens.append(SyntaxToken(offset, len(value), classify_token(token_type)))

        logger.debug(f"Syntax map built: {len(tokens)} tokens from {len(text)} characters")
        return cls(tokens)

    @classmethod
    def empty(cls) -> "SyntaxMap":
        """A map with no tokens; nothing is ever excluded."""
        return cls([])

    @property
    def tokens(self) -> List[SyntaxToken]:
        return list(self._tokens)

    def tokens_in(self, start: int, end: int) -> List[SyntaxToken]:
        """Return tokens overlapping the half-open range [start, end)."""
        # A token starting before ``start`` can still reach into the range
        index = max(bisect_right(self._offsets, start) - 1, 0)
        found = []
        for token in self._tokens[index:]:
            if token.offset >= end:
                break
            if token.end > start:
                found.append(token)
        return found

    def kinds_in(self, start: int, end: int) -> List[SyntaxKind]:
        return [token.kind for token in self.tokens_in(start, end)]

    def overlaps(self, start: int, end: int, kinds: Iterable[SyntaxKind]) -> bool:
        """Return True if any token of one of ``kinds`` overlaps [start, end)."""
        wanted = set(kinds)
        return any(token.kind in wanted for token in self.tokens_in(start, end))
