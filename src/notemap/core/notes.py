"""Guarded note reading.

Resolves route segments to a note file through PathGuard and reads its
content for page rendering.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from notemap.core.codec import MD_SUFFIX
from notemap.core.errors import NoteNotFoundError
from notemap.core.guard import PathGuard
from notemap.core.routes import segments_to_path
from notemap.core.types import RelativeFilePath

logger = logging.getLogger(__name__)

_H1_PATTERN = re.compile(r"^# (.+)$", re.MULTILINE)


@dataclass(frozen=True)
class Note:
    """Note content with routing metadata."""

    slug: tuple[str, ...]
    path: RelativeFilePath
    source_path: Path
    title: str
    content: str


def extract_title(content: str, fallback: str) -> str:
    """Extract title from the first H1 heading.

    Args:
        content: Markdown text
        fallback: Title to use when there is no H1 heading

    Returns:
        Heading text or fallback
    """
    match = _H1_PATTERN.search(content)
    if match is None:
        return fallback
    return match.group(1).strip()


class NoteReader:
    """Reads notes beneath a base directory through a PathGuard."""

    def __init__(self, guard: PathGuard, base_dir: str | Path) -> None:
        self._guard = guard
        self._base_dir = base_dir

    @property
    def base_dir(self) -> str | Path:
        return self._base_dir

    def read(self, segments: Sequence[str]) -> Note:
        """Read the note addressed by route segments.

        Args:
            segments: Route segments, raw or percent-encoded

        Returns:
            Note with its content and title

        Raises:
            InvalidRouteParamsError: If segments are empty or blank
            InvalidBaseDirectoryError: If the base directory is not allowed
            PathTraversalError: If the segments escape the base directory
            NoteNotFoundError: If no note file exists at the path
        """
        path = segments_to_path(segments)
        source_path = self._guard.resolve_and_guard(self._base_dir, path)

        try:
            content = source_path.read_text(encoding="utf-8", errors="replace")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            logger.debug(f"No note at {source_path}: {e}")
            raise NoteNotFoundError(path) from e

        slug = tuple(path.removesuffix(MD_SUFFIX).split("/"))
        return Note(
            slug=slug,
            path=path,
            source_path=source_path,
            title=extract_title(content, fallback=slug[-1]),
            content=content,
        )
