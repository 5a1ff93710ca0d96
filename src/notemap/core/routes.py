"""Conversion between note file paths and route segments.

Segments are the decoded, human-readable path components used in note
URLs. Decoding here is lenient: a segment that is not valid percent
encoding is taken as-is, so route resolution never aborts on a literal
"%" in a note name.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypedDict

from notemap.core.codec import MD_SUFFIX, decode_segment
from notemap.core.errors import (
    InvalidPathError,
    InvalidRouteParamsError,
    MalformedEncodingError,
)
from notemap.core.scanner import scan_notes
from notemap.core.types import RelativeFilePath, RouteSegments

logger = logging.getLogger(__name__)


class RouteDict(TypedDict):
    """Dictionary representation of a route."""

    slug: list[str]


@dataclass(frozen=True)
class Route:
    """Static route for a single note."""

    slug: tuple[str, ...]

    def to_dict(self) -> RouteDict:
        """Convert to dictionary for JSON serialization."""
        return {"slug": list(self.slug)}


def path_to_segments(path: str) -> RouteSegments:
    """Convert a relative file path to route segments.

    Segments are returned raw; the scanner already yields human-readable
    names, so nothing is decoded in this direction.

    Args:
        path: Note path (e.g., "00-journal/2025-08.md")

    Returns:
        Route segments (e.g., ["00-journal", "2025-08"])

    Raises:
        InvalidPathError: If the path is empty, lacks the ".md" suffix, or
            contains an empty component
    """
    if not isinstance(path, str) or not path:
        raise InvalidPathError(path, "path must be a non-empty string")
    if not path.endswith(MD_SUFFIX):
        raise InvalidPathError(path, f"path must end with {MD_SUFFIX}")
    if path == MD_SUFFIX:
        raise InvalidPathError(path, "filename cannot be empty")

    stem = path.removesuffix(MD_SUFFIX).replace("\\", "/")
    segments = stem.split("/")
    if any(not segment for segment in segments):
        raise InvalidPathError(path, "empty path components are not allowed")

    return segments


def segments_to_path(segments: Sequence[str]) -> RelativeFilePath:
    """Convert route segments back to a relative file path.

    Each segment may arrive raw or percent-encoded.

    Args:
        segments: Route segments (e.g., ["20-area", "Arlo%20The%20Deer"])

    Returns:
        Note path (e.g., "20-area/Arlo The Deer.md")

    Raises:
        InvalidRouteParamsError: If there are no segments or any is blank
    """
    if isinstance(segments, str) or not isinstance(segments, Sequence):
        raise InvalidRouteParamsError(segments, "segments must be a sequence")
    if not segments:
        raise InvalidRouteParamsError(segments, "at least one segment is required")

    decoded: list[str] = []
    for segment in segments:
        if not isinstance(segment, str) or not segment.strip():
            raise InvalidRouteParamsError(segments, "empty segments not allowed")
        try:
            decoded.append(decode_segment(segment))
        except MalformedEncodingError:
            logger.debug(f"Using raw route segment {segment!r}")
            decoded.append(segment)

    return RelativeFilePath("/".join(decoded) + MD_SUFFIX)


def list_all_routes(base_dir: str | Path) -> list[Route]:
    """Generate one route per note for static generation.

    Args:
        base_dir: Notes directory to scan

    Returns:
        Routes in scanner order, empty if the directory is missing

    Raises:
        InvalidPathError: If a scanned file cannot be segmented
    """
    return [Route(slug=tuple(path_to_segments(path))) for path in scan_notes(base_dir)]
