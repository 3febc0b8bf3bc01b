"""
Persistence and merging of the changelog document.

The document is stored as the JSON renderer's output. A missing or
corrupt file is not an error: :func:`load` treats it as an empty
document so a first run in a fresh repository just works.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Union

from cherry_changelog.render.json_renderer import render_json
from cherry_changelog.result import Result

from .model import ChangelogVersion, document_from_data


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


PathLike = Union[str, Path]


def read_document(path: PathLike) -> Result[List[ChangelogVersion]]:
    """Read and decode the changelog stored at ``path``.

    Returns a failed :class:`Result` when the file is missing,
    unreadable, not valid JSON, or not shaped like a changelog document.
    """
    file_path = Path(path)
    if not file_path.exists():
        return Result.failure(FileNotFoundError(f"{file_path} does not exist"))
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
        return Result.success(document_from_data(data))
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        return Result.failure(exc)


def load(path: PathLike) -> List[ChangelogVersion]:
    """Load the changelog at ``path``, or an empty document if there is none."""

    def _empty(error: Exception) -> List[ChangelogVersion]:
        if isinstance(error, FileNotFoundError):
            logger.debug("No changelog at %s; starting a new one", path)
        else:
            logger.warning("Ignoring unreadable changelog %s: %s", path, error)
        return []

    return read_document(path).recover(_empty)


def save(path: PathLike, document: List[ChangelogVersion]) -> None:
    """Write ``document`` to ``path`` in the JSON format read by :func:`load`."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(render_json(document), encoding="utf-8")
    logger.debug("Saved %d version(s) to %s", len(document), file_path)


def find_version_index(document: List[ChangelogVersion], version: str) -> int:
    """Return the index of ``version`` in ``document`` or ``-1``."""
    for index, entry in enumerate(document):
        if entry.version == version:
            return index
    return -1


def merge(document: List[ChangelogVersion], new_version: ChangelogVersion) -> List[ChangelogVersion]:
    """Merge ``new_version`` into ``document`` and return the new document.

    An existing version with the same identifier is replaced in place;
    otherwise the new version is prepended. The input list is left
    untouched.
    """
    merged = list(document)
    index = find_version_index(merged, new_version.version)
    if index >= 0:
        merged[index] = new_version
    else:
        merged.insert(0, new_version)
    return merged
