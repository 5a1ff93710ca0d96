"""Base directory allow-list and path traversal protection.

Every read of a note must go through PathGuard. Base directories are
supplied by callers per request, so nothing is cached: each call
canonicalizes and validates again.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from notemap.core.errors import InvalidBaseDirectoryError, PathTraversalError

logger = logging.getLogger(__name__)


class PathGuard:
    """Validates base directories and resolves paths beneath them.

    Paths are compared after ``Path.resolve()``, which eliminates ``.``
    and ``..`` and follows symlinks, using whole path components.
    """

    __slots__ = ("_allowed_dirs",)

    def __init__(self, allowed_dirs: Iterable[str | Path]) -> None:
        """Initialize guard with allowed base directories.

        Args:
            allowed_dirs: Base directories (and everything beneath them)
                that may be read
        """
        self._allowed_dirs = tuple(Path(d).resolve() for d in allowed_dirs)

    @property
    def allowed_dirs(self) -> tuple[Path, ...]:
        """Canonical allow-listed directories."""
        return self._allowed_dirs

    def validate_base_dir(self, candidate: str | Path) -> Path:
        """Validate a base directory against the allow-list.

        Args:
            candidate: Caller-supplied base directory

        Returns:
            Canonical base directory

        Raises:
            InvalidBaseDirectoryError: If the canonical path is neither an
                allowed directory nor nested beneath one
        """
        if "\x00" in str(candidate):
            raise InvalidBaseDirectoryError(candidate)

        canonical = Path(candidate).resolve()
        for allowed in self._allowed_dirs:
            if canonical.is_relative_to(allowed):
                return canonical

        logger.warning(f"Rejected base directory: {candidate}")
        raise InvalidBaseDirectoryError(candidate)

    def resolve_and_guard(self, base_dir: str | Path, relative_path: str) -> Path:
        """Resolve a relative path beneath a validated base directory.

        The joined result is checked again after validating the base, since
        ``..`` components could otherwise escape an allowed base.

        Args:
            base_dir: Caller-supplied base directory
            relative_path: Path relative to base_dir

        Returns:
            Canonical path inside the base directory

        Raises:
            InvalidBaseDirectoryError: If base_dir is not allowed
            PathTraversalError: If the resolved path escapes base_dir
        """
        base = self.validate_base_dir(base_dir)

        if "\x00" in relative_path or Path(relative_path).is_absolute():
            logger.warning(f"Rejected path {relative_path!r} under {base}")
            raise PathTraversalError(relative_path, base)

        target = (base / relative_path).resolve()
        if not target.is_relative_to(base):
            logger.warning(f"Rejected path {relative_path!r} under {base}")
            raise PathTraversalError(relative_path, base)

        return target
