"""CLI interface for Notemap.

Command-line tool for listing note routes, printing the navigation tree
and reading notes through the path guard.
"""

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from notemap.config import Config
from notemap.core.codec import MD_SUFFIX, file_path_to_url
from notemap.core.errors import NotemapError, NoteNotFoundError
from notemap.core.guard import PathGuard
from notemap.core.notes import NoteReader
from notemap.core.routes import list_all_routes
from notemap.core.scanner import scan_notes
from notemap.core.tree import build_tree


@click.group()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover notemap.toml)",
)
@click.option(
    "--source-dir",
    "-s",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Notes source directory (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    source_dir: Path | None,
    verbose: bool,
) -> None:
    """Notemap - map Markdown note vaults onto static site routes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        config = Config.load(config_path).with_overrides(source_dir=source_dir)
    except (OSError, ValueError) as e:
        _fail(f"Failed to load configuration: {e}")

    ctx.obj = config


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print routes as JSON slugs")
@click.pass_obj
def routes(config: Config, as_json: bool) -> None:
    """List the route of every note."""
    try:
        all_routes = list_all_routes(config.notes.source_dir)
    except NotemapError as e:
        _fail(str(e))

    if as_json:
        click.echo(_dumps([route.to_dict() for route in all_routes]))
        return

    prefix = config.site.route_prefix.rstrip("/")
    for route in all_routes:
        path = "/".join(route.slug) + MD_SUFFIX
        click.echo(f"{prefix}/{file_path_to_url(path)}")


@cli.command()
@click.pass_obj
def tree(config: Config) -> None:
    """Print the navigation tree as JSON."""
    try:
        nodes = build_tree(scan_notes(config.notes.source_dir))
    except NotemapError as e:
        _fail(str(e))

    click.echo(_dumps([node.to_dict() for node in nodes]))


@cli.command()
@click.argument("segments", nargs=-1, required=True)
@click.pass_obj
def show(config: Config, segments: tuple[str, ...]) -> None:
    """Print the note addressed by route SEGMENTS."""
    reader = NoteReader(PathGuard(config.allowed_dirs), config.notes.source_dir)
    try:
        note = reader.read(list(segments))
    except NoteNotFoundError:
        _fail("Note not found: the requested note could not be found.")
    except NotemapError as e:
        _fail(str(e))

    click.echo(note.content)


@cli.command()
@click.argument("path")
@click.pass_obj
def url(config: Config, path: str) -> None:
    """Print the URL of a note PATH relative to the notes directory."""
    try:
        encoded = file_path_to_url(path)
    except NotemapError as e:
        _fail(str(e))

    click.echo(f"{config.site.route_prefix.rstrip('/')}/{encoded}")


def _dumps(data: object) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
