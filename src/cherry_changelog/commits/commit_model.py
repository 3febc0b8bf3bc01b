"""
Data model for parsed commits.

A :class:`ParsedCommit` is the intermediate representation of one commit
between reading the log and the operator's selection. It is never
persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedCommit:
    """Representation of a single commit subject reduced to structure.

    Attributes
    ----------
    type : Optional[str]
        The conventional-commit tag (``feat``, ``fix``, ...) or ``None``
        when the subject does not follow the grammar.
    scope : Optional[str]
        The parenthesized qualifier, ``None`` when absent.
    subject : str
        The descriptive remainder of the subject line. For
        non-conventional commits this is the whole line.
    hash : str
        The commit identifier, empty when parsing a bare message.
    raw : str
        The full commit block (hash, subject and body), empty when
        parsing a bare message.
    is_conventional : bool
        True iff ``type`` was extracted.
    """

    type: Optional[str]
    scope: Optional[str]
    subject: str
    hash: str = ""
    raw: str = ""
    is_conventional: bool = False
