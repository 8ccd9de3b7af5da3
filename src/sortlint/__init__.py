"""
sortlint – detects and corrects out-of-order import declarations.
"""

from .imports import Correction, CorrectionResult, Violation, correct_imports, validate_imports
from .rules import SortedImportsRule, default_registry

__version__ = "0.1.0"

__all__ = [
    "Correction",
    "CorrectionResult",
    "Violation",
    "correct_imports",
    "validate_imports",
    "SortedImportsRule",
    "default_registry",
]
