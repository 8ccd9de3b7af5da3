"""
Runs rules over source files and commits corrections.

Each file is handled on its own: it is read once into a snapshot, checked or
corrected against that snapshot, and written back at most once. Rules are
immutable, so several files can be processed at the same time.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from ..config import Settings
from ..rules.base import Rule
from ..rules.model import AppliedCorrection, StyleViolation
from ..source.document import SourceError, SourceFile
from ..logging import get_logger
from .discovery import find_source_files

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FileReport:
    """Outcome of linting or correcting a single file."""
    path: Path
    violations: List[StyleViolation] = field(default_factory=list)
    corrections: List[AppliedCorrection] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Linter:
    def __init__(self, rules: Sequence[Rule], settings: Optional[Settings] = None) -> None:
        self._rules = list(rules)
        self._settings = settings or Settings()
        identifiers = ", ".join(rule.describe().identifier for rule in self._rules)
        logger.debug(f"Linter configured with rules: {identifiers or 'none'}")

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    @property
    def settings(self) -> Settings:
        return self._settings

    def lint_file(self, path: Path) -> FileReport:
        """Run every rule's validation on one file."""
        try:
            source = SourceFile.from_path(path)
        except SourceError as exc:
            logger.warning(f"Skipping {path}: {exc}")
            return FileReport(path=path, error=str(exc))

        violations: List[StyleViolation] = []
        for rule in self._rules:
            violations.extend(rule.validate(source))

        violations.sort(key=lambda v: (v.location.line, v.location.character))
        return FileReport(path=path, violations=violations)

    def correct_file(self, path: Path, dry_run: bool = False) -> FileReport:
        """
        Apply every rule's corrections to one file.

        Rules run one after another, each on the contents the previous rule
        produced. The file is written once, and only when something changed.
        """
        try:
            original = SourceFile.from_path(path)
        except SourceError as exc:
            logger.warning(f"Skipping {path}: {exc}")
            return FileReport(path=path, error=str(exc))

        current = original
        corrections: List[AppliedCorrection] = []
        for rule in self._rules:
            result = rule.correct(current)
            if result.changed:
                corrections.extend(result.corrections)
                current = SourceFile(result.contents, path)

        if not corrections:
            return FileReport(path=path)

        if dry_run:
            logger.info(f"Dry run: {len(corrections)} corrections pending in {path}")
            return FileReport(path=path, corrections=corrections)

        try:
            original.write(current.contents)
        except SourceError as exc:
            logger.warning(f"Failed to commit corrections to {path}: {exc}")
            return FileReport(path=path, corrections=corrections, error=str(exc))

        logger.info(f"Corrected {path} ({len(corrections)} corrections)")
        return FileReport(path=path, corrections=corrections)

    def lint(self, paths: Iterable[Path]) -> List[FileReport]:
        files = find_source_files(paths, self._settings.extensions)
        logger.info(f"Linting {len(files)} files")
        return self._map(self.lint_file, files)

    def correct(self, paths: Iterable[Path], dry_run: bool = False) -> List[FileReport]:
        files = find_source_files(paths, self._settings.extensions)
        logger.info(f"Correcting {len(files)} files")
        return self._map(lambda path: self.correct_file(path, dry_run=dry_run), files)

    def _map(self, func: Callable[[Path], T], files: List[Path]) -> List[T]:
        if self._settings.jobs <= 1 or len(files) <= 1:
            return [func(path) for path in files]

        with ThreadPoolExecutor(max_workers=self._settings.jobs) as executor:
            return list(executor.map(func, files))
