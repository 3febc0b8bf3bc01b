"""
Command line interface for the cherry_changelog tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``cherry-changelog`` command. It orchestrates
configuration loading, reading the commit history, the interactive
commit selection, merging the selection into the persisted changelog,
and exporting it to the requested formats.
"""

from __future__ import annotations

import logging
import time
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional

import click

from cherry_changelog import __version__
from cherry_changelog.changelog.model import ChangelogEntry, ChangelogVersion
from cherry_changelog.changelog.store import find_version_index, load, merge, save
from cherry_changelog.changelog.type_mapper import canonicalize
from cherry_changelog.commits.commit_parser import COMMIT_TYPES
from cherry_changelog.commits.harvester import filter_by_types, harvest
from cherry_changelog.config.loader import ConfigError, load_config, resolve_options, validate_formats
from cherry_changelog.render.exporter import export_changelog
from cherry_changelog.selection import choice_label, prompt_selection
from cherry_changelog.vcs.git_client import GitClient, GitError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_NO_REPO = 3
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_WRITE_FAILURE = 7


# ---------------------------------------------------------------------------
# Progress and status display utilities
# ---------------------------------------------------------------------------

class ProgressIndicator:
    """Announce a unit of work and report how long it took."""

    def __init__(self, message: str):
        self.message = message
        self.start_time = 0.0

    def __enter__(self):
        self.start_time = time.time()
        click.echo(f"→ {self.message}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            elapsed = time.time() - self.start_time
            click.echo(f"  ✓ Done ({elapsed:.1f}s)")
        return False


def print_step(step_num: int, total_steps: int, message: str):
    """Print a step indicator."""
    click.echo(f"\n{'='*60}")
    click.echo(f"Step {step_num}/{total_steps}: {message}")
    click.echo(f"{'='*60}")


def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}")


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}")


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def today_iso() -> str:
    """Return today's UTC date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()


@click.command()
@click.option("--export", "-e", "export", default=None, metavar="FORMATS",
              help="Comma-separated export formats: json, markdown, html. [default: json]")
@click.option("--output", "-o", "output", default=None, metavar="DIR",
              help="Directory the exported files are written to. [default: .]")
@click.option("--release-version", "-r", "release_version", default=None,
              help="Version to record instead of the latest Git tag.")
@click.option("--types", "-t", "types", default=None,
              help="Comma-separated commit types to offer. [default: feat,fix,perf]")
@click.option("--yes", "-y", "yes", is_flag=True, help="Select all matching commits without prompting.")
@click.option("--input", "-i", "input_path", default=None, metavar="PATH",
              help="Changelog document to update. [default: changelog.json]")
@click.option("--date", "release_date", default=None, metavar="YYYY-MM-DD",
              help="Release date to record. [default: today]")
@click.option("--escape-html/--no-escape-html", "escape_html", default=None,
              help="HTML-escape entry text in the HTML export. [default: off]")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="cherry-changelog")
def main(
    export: Optional[str],
    output: Optional[str],
    release_version: Optional[str],
    types: Optional[str],
    yes: bool,
    input_path: Optional[str],
    release_date: Optional[str],
    escape_html: Optional[bool],
    verbose: bool,
) -> None:
    """🍒 Interactive changelog generator with a commit picker.

    Scans the commits since the latest tag, lets you choose which ones
    belong in the release notes, and writes the changelog as JSON,
    Markdown or HTML.
    """
    # Use force=True so handlers are reconfigured on repeated invocations
    # (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )

    click.echo("\n" + "="*60)
    click.echo("🍒 Cherry Changelog".center(60))
    click.echo("="*60)

    ctx = click.get_current_context(silent=True)

    total_steps = 5
    current_step = 0

    try:
        # Step 1: Configuration
        current_step += 1
        print_step(current_step, total_steps, "Loading Configuration")

        repo_root = GitClient.find_repo_root(Path.cwd())
        try:
            config = load_config(repo_root)
            options = resolve_options(
                config,
                export=export,
                output=output,
                release_version=release_version,
                types=types,
                auto_select=yes,
                input_path=input_path,
                escape_html=escape_html,
            )
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        try:
            formats, unknown_formats = validate_formats(options.formats)
        except ConfigError as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_INVALID_USAGE)
        for fmt in unknown_formats:
            print_warning(f"Ignoring unknown export format: {fmt}")

        if release_date is not None:
            try:
                release_date = date.fromisoformat(release_date).isoformat()
            except ValueError:
                print_error(f"Invalid date '{release_date}', expected YYYY-MM-DD")
                raise click.exceptions.Exit(EXIT_INVALID_USAGE)

        unknown_types = [t for t in options.types if t not in COMMIT_TYPES]
        if unknown_types:
            print_warning(f"Unknown commit types will never match: {', '.join(unknown_types)}")

        print_success("Configuration loaded")
        print_info(f"Formats: {', '.join(formats)}", indent=1)
        print_info(f"Commit types: {', '.join(options.types)}", indent=1)
        print_info(f"Changelog: {options.input_path}", indent=1)

        # Step 2: Repository and commit history
        current_step += 1
        print_step(current_step, total_steps, "Scanning Git Commits")

        if repo_root is None:
            print_error("No Git repository found in current directory or parent directories.")
            raise click.exceptions.Exit(EXIT_NO_REPO)
        print_success(f"Found Git repository at: {repo_root}")

        client = GitClient(repo_root)
        tag = client.latest_tag()
        if tag.ok:
            print_info(f"Latest tag: {tag.value}", indent=1)
        else:
            print_info(f"No tags found; using {options.default_version}", indent=1)
        version = options.version or tag.unwrap_or(options.default_version)

        try:
            with ProgressIndicator("Reading commit log"):
                raw_log = client.get_commit_log(since=tag.unwrap_or(None))
        except GitError as exc:
            logger.error("Reading the commit log failed: %s", exc)
            print_error(f"Error reading git commits: {exc}")
            raise click.exceptions.Exit(EXIT_VCS_FAILURE)

        commits = harvest(raw_log)
        candidates = filter_by_types(commits, options.types)
        print_success(f"Found {plural(len(commits), 'commit')}, {len(candidates)} matching")

        if not candidates:
            print_warning(f"No conventional commits found for types: {', '.join(options.types)}")
            print_info("Make sure your commits follow the format: type: description", indent=1)
            raise click.exceptions.Exit(EXIT_SUCCESS)

        # Step 3: Selection
        current_step += 1
        print_step(current_step, total_steps, "Selecting Commits")

        if options.auto_select:
            print_info("Auto-select mode enabled - including all matching commits")
            selected = list(range(len(candidates)))
        else:
            selected = prompt_selection([choice_label(commit) for commit in candidates])

        if not selected:
            print_warning("No commits selected, changelog not updated")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        entries = [
            ChangelogEntry(type=canonicalize(candidates[index].type or ""), text=candidates[index].subject)
            for index in selected
        ]
        print_success(f"Selected {plural(len(entries), 'commit')}")

        # Step 4: Merge into the persisted changelog
        current_step += 1
        print_step(current_step, total_steps, "Updating Changelog")

        document = load(options.input_path)
        new_version = ChangelogVersion(version=version, date=release_date or today_iso(), entries=entries)
        existed = find_version_index(document, version) >= 0
        document = merge(document, new_version)

        try:
            save(options.input_path, document)
        except OSError as exc:
            print_error(f"Failed to write {options.input_path}: {exc}")
            raise click.exceptions.Exit(EXIT_WRITE_FAILURE)

        if existed:
            print_success(f"Updated existing version {version} in {options.input_path}")
        else:
            print_success(f"Added new version {version} to {options.input_path}")
        for entry in entries:
            click.echo(f"  • {entry.type.value}: {entry.text}")

        # Step 5: Export
        current_step += 1
        print_step(current_step, total_steps, "Exporting")

        try:
            written = export_changelog(
                document,
                formats,
                output_dir=options.output_dir,
                escape_html=options.escape_html,
            )
        except OSError as exc:
            print_error(f"Failed to export changelog: {exc}")
            raise click.exceptions.Exit(EXIT_WRITE_FAILURE)

        click.echo(f"\n📝 Added {plural(len(entries), 'selected commit')} to {version}, "
                   f"wrote {plural(len(written), 'file')}.\n")

        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        raise
    except click.exceptions.Abort:
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)
