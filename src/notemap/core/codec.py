"""URL encoding for note path segments.

Encoding follows URI component rules: unreserved characters and
``!*'()`` are kept, everything else is percent-encoded as UTF-8.
Decoding is strict; use the route mapper for lenient decoding.
"""

import re
from urllib.parse import quote, unquote_to_bytes

from notemap.core.errors import MalformedEncodingError

MD_SUFFIX = ".md"

# quote() always keeps "_.-~" and alphanumerics
_SAFE_CHARS = "!*'()"

_BROKEN_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_segment(raw: str) -> str:
    """Percent-encode a single path segment.

    Args:
        raw: Segment text (e.g., "Arlo The Deer 角色設定")

    Returns:
        Encoded segment (e.g., "Arlo%20The%20Deer%20%E8%A7%92...")

    Raises:
        MalformedEncodingError: If the text contains lone surrogates
    """
    try:
        return quote(raw, safe=_SAFE_CHARS, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        raise MalformedEncodingError(raw, "text is not encodable as UTF-8") from e


def decode_segment(encoded: str) -> str:
    """Percent-decode a single path segment.

    Args:
        encoded: Encoded segment

    Returns:
        Decoded segment text

    Raises:
        MalformedEncodingError: If a "%" is not followed by two hex digits,
            or the escaped bytes are not valid UTF-8
    """
    if _BROKEN_ESCAPE.search(encoded):
        raise MalformedEncodingError(encoded, "incomplete percent escape")
    try:
        return unquote_to_bytes(encoded).decode("utf-8")
    except UnicodeError as e:
        raise MalformedEncodingError(encoded, "escaped bytes are not UTF-8") from e


def file_path_to_url(path: str) -> str:
    """Convert a relative file path to an encoded URL path.

    Args:
        path: File path relative to the notes directory
            (e.g., "20-area/Arlo The Deer 角色設定.md")

    Returns:
        Encoded URL path without route prefix or ".md" suffix
    """
    stem = path.removesuffix(MD_SUFFIX)
    return "/".join(encode_segment(segment) for segment in stem.split("/"))


def url_to_file_path(url: str) -> str:
    """Convert an encoded URL path back to a relative file path.

    Raises:
        MalformedEncodingError: If any segment cannot be decoded
    """
    return "/".join(decode_segment(segment) for segment in url.split("/")) + MD_SUFFIX
