"""
Import declaration extraction.

Finds ``import <identifier>`` statements in raw source text and records the
module name together with the exact span of its text.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ..source.syntax import SyntaxKind, SyntaxMap
from ..text.spans import Span
from ..logging import get_logger

logger = get_logger(__name__)

# Bare identifiers only; dotted paths such as ``import Foo.Bar`` do not match
IMPORT_PATTERN = re.compile(r"\bimport\s+\w+(?![\w.])")

# Kind-qualified imports such as ``import struct Foundation.Date`` are not
# module imports; their first word is the import kind
IMPORT_KINDS = frozenset({"typealias", "struct", "class", "enum", "protocol", "let", "var", "func"})

# Length of "import" plus one whitespace character
IMPORT_PREFIX_LENGTH = 7

EXCLUDED_KINDS = (SyntaxKind.COMMENT, SyntaxKind.STRING)


@dataclass(frozen=True)
class Declaration:
    """An import's module name and the span of the name in the original text."""
    module: str
    span: Span


def extract_declarations(text: str, syntax_map: Optional[SyntaxMap] = None) -> List[Declaration]:
    """
    Extract import declarations in document order.

    The span starts right after the fixed ``"import "`` prefix. When more than
    one whitespace character follows the keyword, the extra whitespace stays
    inside the span while the module name is stripped.

    Args:
        text: Full document text
        syntax_map: Token classification of ``text``; built with the Swift
            lexer when omitted

    Returns:
        Declarations ordered by offset (empty when there are no imports)
    """
    if syntax_map is None:
        syntax_map = SyntaxMap.from_text(text)

    declarations = []
    for match in IMPORT_PATTERN.finditer(text):
        if syntax_map.overlaps(match.start(), match.end(), EXCLUDED_KINDS):
            logger.debug(f"Skipping import inside comment or string at offset {match.start()}")
            continue

        span = Span.from_bounds(match.start() + IMPORT_PREFIX_LENGTH, match.end())
        module = span.text_in(text).strip()
        if module in IMPORT_KINDS:
            logger.debug(f"Skipping kind-qualified import at offset {match.start()}")
            continue
        declarations.append(Declaration(module=module, span=span))

    logger.debug(f"Extracted {len(declarations)} import declarations")
    return declarations
