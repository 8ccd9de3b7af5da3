"""
Canonical ordering of import declarations.

Module names are compared with the Unicode Collation Algorithm using the
default DUCET table (``pyuca``), not by code point. Letters compare by base
letter first, accents sort next to their base letter, and lowercase sorts
before uppercase only when the names are otherwise equal.
"""

from functools import lru_cache
from typing import List, Sequence, Tuple

from pyuca import Collator

from .extraction import Declaration


@lru_cache(maxsize=1)
def get_collator() -> Collator:
    """Shared collator; loading the DUCET table is expensive."""
    return Collator()


def collation_key(module: str) -> Tuple[int, ...]:
    """Sort key of a module name under the DUCET collation."""
    return get_collator().sort_key(module)


def canonical_order(declarations: Sequence[Declaration]) -> List[Declaration]:
    """
    Sort declarations into canonical order.

    The sort is stable: names that collate equal keep their document order.
    """
    return sorted(declarations, key=lambda d: collation_key(d.module))
