from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .syntax import SyntaxMap
from ..logging import get_logger

logger = get_logger(__name__)


class SourceError(Exception):
    """Base class for source file I/O failures."""


class SourceReadError(SourceError):
    """Raised when a source file cannot be read or decoded."""


class SourceWriteError(SourceError):
    """Raised when corrected contents cannot be persisted."""


@dataclass(frozen=True)
class Location:
    """1-based line/character position inside a file."""
    file: Optional[str]
    line: int
    character: int

    def __str__(self) -> str:
        prefix = f"{self.file}:" if self.file else ""
        return f"{prefix}{self.line}:{self.character}"


class SourceFile:
    """
    Immutable snapshot of one source file's contents.

    Offsets handed out by anything built on a snapshot (syntax maps,
    declaration spans) are only valid against that snapshot. Writing returns
    a new snapshot instead of mutating this one.
    """

    def __init__(self, contents: str, path: Optional[Path | str] = None) -> None:
        self._contents = contents
        self._path = Path(path) if path is not None else None
        self._line_starts: Optional[List[int]] = None
        self._syntax_map: Optional[SyntaxMap] = None

    @classmethod
    def from_path(cls, path: Path | str) -> SourceFile:
        path = Path(path)
        if not path.is_file():
            raise SourceReadError(f"Source file does not exist: {path}")

        try:
            # newline="" keeps CRLF intact so offsets and rewrites match the disk
            with open(path, "r", encoding="utf-8", newline="") as handle:
                contents = handle.read()
        except UnicodeDecodeError as exc:
            raise SourceReadError(f"Source file is not valid UTF-8: {path}") from exc
        except OSError as exc:
            raise SourceReadError(f"Failed to read source file: {path}") from exc

        return cls(contents, path)

    @property
    def contents(self) -> str:
        return self._contents

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def syntax_map(self) -> SyntaxMap:
        """Token classification of the contents, built on first use."""
        if self._syntax_map is None:
            self._syntax_map = SyntaxMap.from_text(self._contents)
        return self._syntax_map

    def location(self, offset: int) -> Location:
        """Resolve a character offset to a 1-based line and character."""
        if offset < 0 or offset > len(self._contents):
            raise IndexError(
                f"Offset {offset} is outside contents of length {len(self._contents)}"
            )
        line_starts = self._get_line_starts()
        line = bisect_right(line_starts, offset)
        character = offset - line_starts[line - 1] + 1
        file_name = str(self._path) if self._path is not None else None
        return Location(file=file_name, line=line, character=character)

    def write(self, contents: str) -> SourceFile:
        """
        Persist ``contents`` to this file's path.

        Returns:
            A new snapshot holding ``contents``
        """
        if self._path is None:
            raise SourceWriteError("Cannot write a source snapshot that has no path")

        try:
            with open(self._path, "w", encoding="utf-8", newline="") as handle:
                handle.write(contents)
        except OSError as exc:
            raise SourceWriteError(f"Failed to write source file: {self._path}") from exc

        logger.debug(f"Wrote {len(contents)} characters to {self._path}")
        return SourceFile(contents, self._path)

    def _get_line_starts(self) -> List[int]:
        if self._line_starts is None:
            starts = [0]
            for index, char in enumerate(self._contents):
                if char == "\n":
                    starts.append(index + 1)
            self._line_starts = starts
        return self._line_starts
