"""
Interactive commit selection.

The operator is shown a numbered list of candidate commits and answers
with the numbers to include, e.g. ``1,3-5``. ``all`` (or ``*``) selects
everything and an empty answer selects nothing.
"""

from __future__ import annotations

from typing import List, Sequence

import click

from cherry_changelog.changelog.type_mapper import canonicalize
from cherry_changelog.commits.commit_model import ParsedCommit


def choice_label(commit: ParsedCommit) -> str:
    """Return the label shown for ``commit`` in the selection list."""
    category = canonicalize(commit.type or "")
    return f"[{category.value}] {commit.subject} ({commit.hash[:8]})"


def parse_selection(answer: str, count: int) -> List[int]:
    """Translate the operator's answer into 0-based indices.

    Parameters
    ----------
    answer : str
        Comma- or space-separated 1-based numbers and ranges.
    count : int
        Number of available choices.

    Returns
    -------
    List[int]
        Selected indices in the order they were first mentioned.

    Raises
    ------
    ValueError
        If a token is malformed or out of range.
    """
    text = answer.strip().lower()
    if not text:
        return []
    if text in {"all", "*"}:
        return list(range(count))

    selected: List[int] = []
    for token in text.replace(",", " ").split():
        if "-" in token:
            start_text, _, end_text = token.partition("-")
            if not start_text.isdigit() or not end_text.isdigit():
                raise ValueError(f"Invalid range: {token}")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"Invalid range: {token}")
            numbers = range(start, end + 1)
        elif token.isdigit():
            numbers = range(int(token), int(token) + 1)
        else:
            raise ValueError(f"Not a number: {token}")

        for number in numbers:
            if number < 1 or number > count:
                raise ValueError(f"Choice {number} is out of range (1-{count})")
            if number - 1 not in selected:
                selected.append(number - 1)
    return selected


def prompt_selection(labels: Sequence[str]) -> List[int]:
    """Ask the operator which of ``labels`` to include.

    Keeps asking until the answer can be parsed. Returns 0-based indices,
    possibly empty.
    """
    click.echo("\n📋 Select commits to include in changelog:")
    for number, label in enumerate(labels, start=1):
        click.echo(f"   {number:>3}. {label}")
    click.echo("\n   Enter numbers or ranges (e.g. 1,3-5), 'all', or leave empty for none.")

    while True:
        answer = click.prompt("   Selection", default="", show_default=False)
        try:
            return parse_selection(answer, len(labels))
        except ValueError as exc:
            click.echo(f"   ⚠ {exc}", err=True)
