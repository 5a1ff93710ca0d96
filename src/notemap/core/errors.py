"""Error taxonomy for note path handling.

Only the scanner recovers from filesystem errors locally. Every other
component raises one of these so that malformed input or an escape attempt
is never silently swallowed.
"""


class NotemapError(Exception):
    """Base class for all notemap errors."""


class InvalidPathError(NotemapError, ValueError):
    """Relative file path is malformed."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid file path {path!r}: {reason}")


class InvalidRouteParamsError(NotemapError, ValueError):
    """Route segments are empty or blank."""

    def __init__(self, segments: object, reason: str) -> None:
        self.segments = segments
        self.reason = reason
        super().__init__(f"Invalid route parameters {segments!r}: {reason}")


class MalformedEncodingError(NotemapError, ValueError):
    """Percent-encoded segment cannot be decoded (or raw text cannot be encoded)."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Malformed encoding in {value!r}: {reason}")


class InvalidBaseDirectoryError(NotemapError):
    """Base directory is not on the allow-list."""

    def __init__(self, base_dir: object) -> None:
        self.base_dir = base_dir
        super().__init__(f"Base directory is not allowed: {base_dir}")


class PathTraversalError(NotemapError):
    """Resolved path escapes the validated base directory."""

    def __init__(self, relative_path: object, base_dir: object) -> None:
        self.relative_path = relative_path
        self.base_dir = base_dir
        super().__init__(
            f"Path escapes base directory: {relative_path!r} (base: {base_dir})"
        )


class NoteNotFoundError(NotemapError, LookupError):
    """No note exists at the guarded path."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Note not found: {path}")
