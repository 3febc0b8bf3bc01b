"""
Split raw ``git log`` output into parsed commits.

The Git client formats each commit as ``<hash>\\n<subject>\\n<body>``
followed by a sentinel line (:data:`COMMIT_SENTINEL`). The harvester
cuts the text on the sentinel and runs the commit parser on each
subject.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List

from .commit_model import ParsedCommit
from .commit_parser import parse_commit_subject


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


COMMIT_SENTINEL = "==END=="


def harvest(raw_log: str) -> List[ParsedCommit]:
    """Parse every commit block contained in ``raw_log``.

    Empty pieces (for example after a trailing sentinel) are discarded.
    Output order matches input order.
    """
    commits: List[ParsedCommit] = []
    for piece in raw_log.split(COMMIT_SENTINEL):
        block = piece.strip()
        if not block:
            continue
        lines = block.split("\n")
        commit_hash = lines[0]
        subject = lines[1] if len(lines) > 1 else ""
        parsed = parse_commit_subject(subject)
        commits.append(replace(parsed, hash=commit_hash, raw=block))
    logger.debug("Harvested %d commit(s)", len(commits))
    return commits


def filter_by_types(commits: Iterable[ParsedCommit], allowed_types: Iterable[str]) -> List[ParsedCommit]:
    """Keep only commits whose type is one of ``allowed_types``.

    Non-conventional commits never pass the filter.
    """
    allowed = set(allowed_types)
    return [commit for commit in commits if (commit.type or "") in allowed]
