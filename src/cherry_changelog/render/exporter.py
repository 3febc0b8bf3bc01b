"""
Write the changelog document in the requested output formats.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List

import click

from cherry_changelog.changelog.model import ChangelogVersion

from .html_renderer import render_html
from .json_renderer import render_json
from .markdown_renderer import render_markdown


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# Format identifier -> output file name
EXPORT_FORMATS: Dict[str, str] = {
    "json": "changelog.json",
    "markdown": "CHANGELOG.md",
    "html": "changelog.html",
}


def write_text(path: str, content: str) -> None:
    """Store ``content`` at ``path`` as UTF-8, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding="utf-8")


def export_changelog(
    document: List[ChangelogVersion],
    formats: Iterable[str],
    output_dir: str = ".",
    escape_html: bool = False,
) -> List[str]:
    """Render ``document`` once per requested format and write the results.

    Formats are processed in the given order; duplicates are written
    again. Unknown format identifiers are skipped.

    Returns
    -------
    List[str]
        The paths that were written, in order.
    """
    renderers: Dict[str, Callable[[List[ChangelogVersion]], str]] = {
        "json": render_json,
        "markdown": render_markdown,
        "html": lambda doc: render_html(doc, escape=escape_html),
    }

    written: List[str] = []
    for fmt in formats:
        if fmt not in EXPORT_FORMATS:
            logger.debug("Skipping unknown export format %r", fmt)
            continue
        path = f"{output_dir}/{EXPORT_FORMATS[fmt]}"
        write_text(path, renderers[fmt](document))
        click.echo(f"✅ Exported to {path}")
        written.append(path)
    return written
