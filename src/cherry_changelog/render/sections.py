"""
Grouping and labelling rules shared by the Markdown and HTML renderers.

Entries of a version are grouped by category. The three primary
categories always come first in a fixed order; any other category
follows in the order it first appears in the version.
"""

from __future__ import annotations

import html
from typing import Dict, List, Tuple

from cherry_changelog.changelog.model import Category, ChangelogVersion, EntryCategory


PRIMARY_CATEGORIES: Tuple[Category, ...] = (
    Category.FEATURE,
    Category.FIX,
    Category.PERFORMANCE,
)

CATEGORY_LABELS: Dict[Category, str] = {
    Category.FEATURE: "✨ New Features",
    Category.FIX: "🐛 Fixes",
    Category.PERFORMANCE: "⚡ Performance",
}

OTHER_LABEL = "📦 Other"
OTHER_CSS_CLASS = "other"


def group_entries(version: ChangelogVersion) -> List[Tuple[EntryCategory, List[str]]]:
    """Group the entry texts of ``version`` by category in display order."""
    groups: Dict[EntryCategory, List[str]] = {}
    for entry in version.entries:
        groups.setdefault(entry.type, []).append(entry.text)

    ordered = [(category, groups[category]) for category in PRIMARY_CATEGORIES if category in groups]
    ordered.extend(
        (category, texts) for category, texts in groups.items() if category not in PRIMARY_CATEGORIES
    )
    return ordered


def category_label(category: EntryCategory) -> str:
    return CATEGORY_LABELS.get(category, OTHER_LABEL)  # type: ignore[arg-type]


def category_css_class(category: EntryCategory) -> str:
    if category in PRIMARY_CATEGORIES:
        return category.value
    return OTHER_CSS_CLASS


def escape_text(text: str) -> str:
    """Escape ``text`` for safe inclusion in HTML element content."""
    return html.escape(text, quote=True)
