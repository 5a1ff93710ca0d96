"""Configuration management for Notemap.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "notemap.toml"


@dataclass
class NotesConfig:
    """Notes directory configuration."""

    source_dir: Path = field(default_factory=lambda: Path("public/notes-src"))
    fixtures_dir: Path | None = None
    production: bool = True


@dataclass
class SiteConfig:
    """Static site configuration."""

    route_prefix: str = "/notes"


@dataclass
class Config:
    """Application configuration."""

    notes: NotesConfig
    site: SiteConfig
    config_path: Path | None = None

    @property
    def allowed_dirs(self) -> list[Path]:
        """Base directories notes may be read from.

        The notes source directory, plus the fixtures directory when one
        is configured and production is off.
        """
        dirs = [self.notes.source_dir]
        if self.notes.fixtures_dir is not None and not self.notes.production:
            dirs.append(self.notes.fixtures_dir)
        return dirs

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for notemap.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(notes=NotesConfig(), site=SiteConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        config_dir = path.parent

        notes = cls._parse_notes(data.get("notes"), config_dir)
        site = cls._parse_site(data.get("site"))

        return cls(notes=notes, site=site, config_path=path)

    @classmethod
    def _parse_notes(cls, data: object, config_dir: Path) -> NotesConfig:
        """Parse notes configuration section.

        Args:
            data: Raw notes section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            NotesConfig instance
        """
        if data is None:
            return NotesConfig(source_dir=config_dir / "public/notes-src")

        if not isinstance(data, dict):
            raise ValueError("notes section must be a dictionary")

        source_dir = data.get("source_dir", "public/notes-src")
        if not isinstance(source_dir, str):
            raise ValueError("notes.source_dir must be a string")

        fixtures_dir = data.get("fixtures_dir")
        if fixtures_dir is not None and not isinstance(fixtures_dir, str):
            raise ValueError("notes.fixtures_dir must be a string")

        production = data.get("production", True)
        if not isinstance(production, bool):
            raise ValueError("notes.production must be a boolean")

        return NotesConfig(
            source_dir=config_dir / source_dir,
            fixtures_dir=config_dir / fixtures_dir if fixtures_dir is not None else None,
            production=production,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        route_prefix = data.get("route_prefix", "/notes")
        if not isinstance(route_prefix, str):
            raise ValueError("site.route_prefix must be a string")

        return SiteConfig(route_prefix=route_prefix)

    def with_overrides(
        self,
        *,
        source_dir: Path | None = None,
        route_prefix: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            source_dir: Override notes.source_dir
            route_prefix: Override site.route_prefix

        Returns:
            New Config instance with overrides applied
        """
        notes = self.notes
        if source_dir is not None:
            notes = replace(self.notes, source_dir=source_dir)

        site = self.site
        if route_prefix is not None:
            site = replace(self.site, route_prefix=route_prefix)

        return replace(self, notes=notes, site=site)
