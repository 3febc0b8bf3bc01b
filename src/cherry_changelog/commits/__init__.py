"""
Commit parsing for cherry_changelog.

This package turns raw ``git log`` output into structured commit
records. See :mod:`cherry_changelog.commits.commit_parser` for the
conventional-commit grammar and :mod:`cherry_changelog.commits.harvester`
for splitting the log into individual commits.
"""

from .commit_model import ParsedCommit  # noqa: F401
from .commit_parser import COMMIT_TYPES, parse_commit_subject  # noqa: F401
from .harvester import COMMIT_SENTINEL, filter_by_types, harvest  # noqa: F401
