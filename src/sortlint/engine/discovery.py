from pathlib import Path
from typing import Iterable, List, Sequence

from ..logging import get_logger

logger = get_logger(__name__)


def find_source_files(paths: Iterable[Path], extensions: Sequence[str]) -> List[Path]:
    """
    Expand directories into the source files they contain.

    Directories are searched recursively for files with one of
    ``extensions``. Files named explicitly are kept whatever their suffix.

    Args:
        paths: Files and directories given by the user
        extensions: Suffixes to collect from directories, e.g. ``(".swift",)``

    Returns:
        Sorted, de-duplicated list of files
    """
    suffixes = {ext.lower() for ext in extensions}
    found = set()

    for path in paths:
        path = Path(path)
        if path.is_dir():
            matches = [
                candidate for candidate in path.rglob("*")
                if candidate.is_file() and candidate.suffix.lower() in suffixes
            ]
            logger.debug(f"Found {len(matches)} source files under {path}")
            found.update(matches)
        elif path.exists():
            found.add(path)
        else:
            logger.warning(f"Path does not exist, skipping: {path}")

    return sorted(found)
