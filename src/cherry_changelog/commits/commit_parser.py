"""
Parser for conventional commit subjects.

Only the first line of a commit message is handed to the parser; the
caller is responsible for splitting off the body. The grammar is the
fixed Angular-style vocabulary::

    type(scope): subject

where ``(scope)`` is optional and the whole input must be a single line.
Anything that does not match is kept as a non-conventional commit with
its full text as the subject.
"""

from __future__ import annotations

import re
from typing import Tuple

from .commit_model import ParsedCommit


COMMIT_TYPES: Tuple[str, ...] = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "chore",
    "build",
    "ci",
)

_CONVENTIONAL_PATTERN = re.compile(
    r"(?P<type>" + "|".join(COMMIT_TYPES) + r")"
    r"(?:\((?P<scope>[^)]+)\))?"
    r": (?P<subject>[^\r\n]+)"
)


def parse_commit_subject(subject: str) -> ParsedCommit:
    """Parse one commit subject line.

    Parameters
    ----------
    subject : str
        The first line of a commit message.

    Returns
    -------
    ParsedCommit
        The structured commit. ``hash`` and ``raw`` are left empty; the
        harvester fills them in.

    Examples
    --------
    >>> parse_commit_subject("fix(auth): resolve login issue").scope
    'auth'
    >>> parse_commit_subject("random commit message").is_conventional
    False
    """
    match = _CONVENTIONAL_PATTERN.fullmatch(subject)
    if match:
        return ParsedCommit(
            type=match.group("type"),
            scope=match.group("scope"),
            subject=match.group("subject"),
            is_conventional=True,
        )
    return ParsedCommit(type=None, scope=None, subject=subject, is_conventional=False)
