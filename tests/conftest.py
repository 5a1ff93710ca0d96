"""Shared test fixtures."""

from pathlib import Path

import pytest
from notemap.core.guard import PathGuard

NOTE_FILES = {
    "00-journal/2025-08.md": "# August 2025\n\n- shipped notes site\n",
    "00-journal/2025-09.md": "# September 2025\n\nQuiet month.\n",
    "20-area/Arlo The Deer 角色設定.md": "# Arlo The Deer\n\n## Traits\n",
    "20-area/subdir/深層檔案.md": "Deep note without heading.\n",
    "File with spaces.md": "# File with spaces\n",
    "simple-file.md": "# Simple File\n\nBody.\n",
}


@pytest.fixture
def note_files() -> dict[str, str]:
    """Relative paths and contents of the notes fixture directory."""
    return dict(NOTE_FILES)


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Create a notes directory with nested, spaced and CJK file names."""
    source_dir = tmp_path / "notes"
    for relative, content in NOTE_FILES.items():
        path = source_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return source_dir


@pytest.fixture
def guard(notes_dir: Path) -> PathGuard:
    """Guard that allows only the notes fixture directory."""
    return PathGuard([notes_dir])
