"""Lint rules, their result types and the rule registry."""

from .base import Rule
from .model import AppliedCorrection, FileCorrection, RuleDescription, StyleViolation
from .registry import (
    DuplicateRuleError,
    RuleRegistry,
    RuleRegistryError,
    UnknownRuleError,
    default_registry,
)
from .sorted_imports import SortedImportsRule

__all__ = [
    "Rule",
    "AppliedCorrection",
    "FileCorrection",
    "RuleDescription",
    "StyleViolation",
    "DuplicateRuleError",
    "RuleRegistry",
    "RuleRegistryError",
    "UnknownRuleError",
    "default_registry",
    "SortedImportsRule",
]
