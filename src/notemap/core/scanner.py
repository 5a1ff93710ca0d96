"""Markdown note discovery.

Walks a notes directory and collects every ``.md`` file as a
forward-slash relative path. Scanning feeds static generation, so a
missing or unreadable directory yields no notes instead of an error.

Directory symlinks are followed, but each real directory is listed only
once. When several paths alias the same directory, its notes appear
under whichever alias the walk reaches first and the others are skipped.
"""

import logging
from pathlib import Path

from notemap.core.codec import MD_SUFFIX
from notemap.core.types import RelativeFilePath

logger = logging.getLogger(__name__)


def scan_notes(base_dir: str | Path) -> list[RelativeFilePath]:
    """Find all markdown notes under a base directory.

    Args:
        base_dir: Directory to scan

    Returns:
        Sorted list of note paths relative to base_dir, empty if the
        directory doesn't exist or can't be read
    """
    base = Path(base_dir)
    try:
        is_dir = base.is_dir()
    except OSError:
        is_dir = False
    if not is_dir:
        logger.debug(f"Notes directory not found: {base}")
        return []

    results: list[RelativeFilePath] = []
    visited: set[Path] = set()
    stack = [base]

    while stack:
        directory = stack.pop()
        try:
            real = directory.resolve()
            if real in visited:
                continue
            visited.add(real)
            entries = list(directory.iterdir())
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            continue

        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry}: {e}")
                continue

            if is_dir:
                stack.append(entry)
            elif entry.name.endswith(MD_SUFFIX):
                relative = entry.relative_to(base).as_posix()
                results.append(RelativeFilePath(relative))

    return sorted(results)
