"""
Markdown rendering of the changelog document.
"""

from __future__ import annotations

from typing import List

from cherry_changelog.changelog.model import ChangelogVersion

from .sections import category_label, group_entries


def render_markdown(document: List[ChangelogVersion]) -> str:
    """Render ``document`` as a Markdown changelog.

    The result always ends with exactly one newline. An empty document
    renders as the top-level heading only.
    """
    lines: List[str] = ["# Changelog", ""]
    for version in document:
        lines.append(f"## {version.version} - {version.date}")
        lines.append("")
        for category, texts in group_entries(version):
            lines.append(f"### {category_label(category)}")
            lines.append("")
            lines.extend(f"- {text}" for text in texts)
            lines.append("")
    return "\n".join(lines).rstrip() + "\n"
