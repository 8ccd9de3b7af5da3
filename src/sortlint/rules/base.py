from typing import ClassVar, List, Protocol, runtime_checkable

from ..config import Severity
from ..source.document import SourceFile
from .model import FileCorrection, RuleDescription, StyleViolation


@runtime_checkable
class Rule(Protocol):
    """
    A lint rule the runner can invoke on any source file.

    Implementations are immutable so one instance can serve many files at
    once; configuration such as severity is fixed at construction. The
    registry reads ``description`` from the rule type and builds instances
    with the ``severity`` keyword.
    """

    description: ClassVar[RuleDescription]

    def __init__(self, severity: Severity = Severity.WARNING) -> None:
        ...

    def describe(self) -> RuleDescription:
        ...

    def validate(self, file: SourceFile) -> List[StyleViolation]:
        ...

    def correct(self, file: SourceFile) -> FileCorrection:
        ...
