"""File discovery and the rule runner."""

from .discovery import find_source_files
from .runner import FileReport, Linter

__all__ = [
    "find_source_files",
    "FileReport",
    "Linter",
]
