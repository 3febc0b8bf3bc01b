"""
Mapping from conventional-commit tags to changelog categories.
"""

from __future__ import annotations

from typing import Dict

from .model import Category


_TAG_CATEGORIES: Dict[str, Category] = {
    "feat": Category.FEATURE,
    "fix": Category.FIX,
    "perf": Category.PERFORMANCE,
    "chore": Category.CHORE,
    "docs": Category.DOCS,
    "style": Category.STYLE,
    "refactor": Category.REFACTOR,
    "test": Category.TEST,
    "build": Category.BUILD,
    "ci": Category.CI,
}


def canonicalize(tag: str) -> Category:
    """Return the changelog category for a commit tag.

    Unrecognized tags fall back to :attr:`Category.FEATURE` so that no
    selected entry is ever dropped.
    """
    return _TAG_CATEGORIES.get(tag, Category.FEATURE)
