"""Registry of the rule implementations available to the runner."""

from typing import Dict, Iterator, List, Type

from ..config import Severity
from ..logging import get_logger
from .base import Rule
from .model import RuleDescription
from .sorted_imports import SortedImportsRule

logger = get_logger(__name__)


class RuleRegistryError(Exception):
    """Base class for registry lookups and registrations that fail."""


class DuplicateRuleError(RuleRegistryError):
    """Raised when two rule types share an identifier."""


class UnknownRuleError(RuleRegistryError, KeyError):
    """Raised when no rule is registered under an identifier."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class RuleRegistry:
    """
    Rule types keyed by their description identifier.

    Types are stored rather than instances; ``create`` builds an immutable,
    configured instance per run.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, Type[Rule]] = {}

    def register(self, rule_type: Type[Rule]) -> Type[Rule]:
        identifier = rule_type.description.identifier
        if identifier in self._rules:
            raise DuplicateRuleError(f"Rule '{identifier}' is already registered")
        self._rules[identifier] = rule_type
        logger.debug(f"Registered rule {identifier}")
        return rule_type

    def get(self, identifier: str) -> Type[Rule]:
        try:
            return self._rules[identifier]
        except KeyError:
            known = ", ".join(sorted(self._rules)) or "none"
            raise UnknownRuleError(f"Unknown rule '{identifier}'. Known rules: {known}") from None

    def create(self, identifier: str, severity: Severity = Severity.WARNING) -> Rule:
        """Instantiate the rule registered under ``identifier`` with ``severity``."""
        return self.get(identifier)(severity=severity)

    def identifiers(self) -> List[str]:
        return sorted(self._rules)

    def descriptions(self) -> List[RuleDescription]:
        return [self._rules[identifier].description for identifier in self.identifiers()]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self.identifiers())


def default_registry() -> RuleRegistry:
    """A fresh registry holding every built-in rule."""
    registry = RuleRegistry()
    registry.register(SortedImportsRule)
    return registry
