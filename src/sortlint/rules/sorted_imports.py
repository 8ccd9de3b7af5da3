from dataclasses import dataclass
from typing import ClassVar, List

from ..config import Severity
from ..imports.correction import correct_imports
from ..imports.violations import validate_imports
from ..source.document import SourceFile
from ..logging import get_logger
from .model import AppliedCorrection, FileCorrection, RuleDescription, StyleViolation

logger = get_logger(__name__)


@dataclass(frozen=True)
class SortedImportsRule:
    """Imports must appear in canonical (collated) order."""

    severity: Severity = Severity.WARNING

    description: ClassVar[RuleDescription] = RuleDescription(
        identifier="sorted_imports",
        name="Sorted Imports",
        description="Imports should be sorted.",
        non_triggering_examples=(
            "import AAA\nimport BBB\nimport CCC\nimport DDD",
            "import apple\nimport Banana\nimport cherry",
            "import AAA\n// import ZZZ\nimport BBB",
        ),
        triggering_examples=(
            "import AAA\nimport ↓ZZZ\nimport ↓BBB\nimport ↓CCC",
            "import ↓Banana\nimport ↓apple",
        ),
        corrections=(
            (
                "import AAA\nimport ZZZ\nimport BBB\nimport CCC",
                "import AAA\nimport BBB\nimport CCC\nimport ZZZ",
            ),
        ),
        opt_in=True,
        correctable=True,
    )

    def describe(self) -> RuleDescription:
        return self.description

    def validate(self, file: SourceFile) -> List[StyleViolation]:
        violations = validate_imports(file.contents, file.syntax_map)
        return [
            StyleViolation(
                rule_id=self.description.identifier,
                rule_name=self.description.name,
                reason=self.description.description,
                severity=self.severity,
                location=file.location(violation.offset),
            )
            for violation in violations
        ]

    def correct(self, file: SourceFile) -> FileCorrection:
        result = correct_imports(file.contents, file.syntax_map)
        if not result.changed:
            return FileCorrection(contents=file.contents, corrections=[])

        corrections = [
            AppliedCorrection(
                rule_id=self.description.identifier,
                rule_name=self.description.name,
                location=file.location(correction.offset),
                replaced_module=correction.replaced_module,
                replacement=correction.replacement,
            )
            for correction in result.corrections
        ]
        logger.debug(f"{file.path}: {len(corrections)} import corrections")
        return FileCorrection(contents=result.text, corrections=corrections)
