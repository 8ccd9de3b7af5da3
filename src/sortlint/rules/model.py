"""Host-facing results and metadata shared by all rules."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..config import Severity
from ..source.document import Location


@dataclass(frozen=True)
class RuleDescription:
    """
    Static metadata of a rule.

    Triggering examples mark every expected violation with ``↓`` placed right
    before the offending text.
    """
    identifier: str
    name: str
    description: str
    non_triggering_examples: Tuple[str, ...] = ()
    triggering_examples: Tuple[str, ...] = ()
    corrections: Tuple[Tuple[str, str], ...] = ()   # (before, after) pairs
    opt_in: bool = False
    correctable: bool = False

    def console_description(self) -> str:
        return f"{self.name} ({self.identifier}): {self.description}"


@dataclass(frozen=True)
class StyleViolation:
    rule_id: str
    rule_name: str
    reason: str
    severity: Severity
    location: Location

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "file": self.location.file,
            "line": self.location.line,
            "character": self.location.character,
            "severity": self.severity.value.capitalize(),
            "type": self.rule_name,
            "rule_id": self.rule_id,
            "reason": self.reason,
        }

    def __str__(self) -> str:
        return (
            f"{self.location}: {self.severity.value}: "
            f"{self.rule_name} Violation: {self.reason} ({self.rule_id})"
        )


@dataclass(frozen=True)
class AppliedCorrection:
    rule_id: str
    rule_name: str
    location: Location
    replaced_module: str
    replacement: str

    def __str__(self) -> str:
        return f"{self.location} Corrected {self.rule_name}"


@dataclass(frozen=True)
class FileCorrection:
    """Corrected contents of one file; persisting them is the caller's job."""
    contents: str
    corrections: List[AppliedCorrection] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.corrections)
