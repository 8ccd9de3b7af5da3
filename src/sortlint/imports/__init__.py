"""
Import ordering core: extraction, canonical ordering, violations and correction.
"""

from .extraction import Declaration, extract_declarations
from .ordering import canonical_order, collation_key
from .violations import Violation, find_mismatches, validate_imports
from .correction import Correction, CorrectionResult, correct_imports

__all__ = [
    "Declaration",
    "extract_declarations",
    "canonical_order",
    "collation_key",
    "Violation",
    "find_mismatches",
    "validate_imports",
    "Correction",
    "CorrectionResult",
    "correct_imports",
]
