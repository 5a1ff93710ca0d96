"""Core type definitions."""

from typing import NewType

# Note path relative to a base directory (e.g., "00-journal/2025-08.md")
# Always forward-slash separated, distinct from filesystem Path
RelativeFilePath = NewType("RelativeFilePath", str)

# Route segments for a note (e.g., ["00-journal", "2025-08"])
RouteSegments = list[str]
