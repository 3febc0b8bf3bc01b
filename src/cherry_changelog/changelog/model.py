"""
Data models for the changelog document.

A changelog document is a plain ``List[ChangelogVersion]`` ordered
most-recent-first. Each version holds the entries the operator selected,
in selection order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


class Category(str, Enum):
    """Canonical changelog categories.

    The values double as the serialized form in ``changelog.json``.
    """

    FEATURE = "feature"
    FIX = "fix"
    PERFORMANCE = "performance"
    CHORE = "chore"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    BUILD = "build"
    CI = "ci"


@dataclass(frozen=True)
class OtherCategory:
    """A category string found in a loaded document that is not a :class:`Category`.

    Keeping the original tag lets hand-edited documents survive a
    load/save cycle unchanged.
    """

    tag: str

    @property
    def value(self) -> str:
        return self.tag


EntryCategory = Union[Category, OtherCategory]


def category_from_value(value: str) -> EntryCategory:
    """Return the :class:`Category` for ``value`` or wrap it in :class:`OtherCategory`."""
    try:
        return Category(value)
    except ValueError:
        return OtherCategory(value)


@dataclass
class ChangelogEntry:
    """One accepted item of a release.

    Attributes
    ----------
    type : EntryCategory
        The canonical category of the entry.
    text : str
        The commit subject chosen by the operator.
    """

    type: EntryCategory
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "text": self.text}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChangelogEntry":
        if not isinstance(data, dict):
            raise ValueError(f"changelog entry must be an object, got {type(data).__name__}")
        entry_type = data.get("type")
        text = data.get("text")
        if not isinstance(entry_type, str) or not isinstance(text, str):
            raise ValueError("changelog entry requires string 'type' and 'text'")
        return cls(type=category_from_value(entry_type), text=text)


@dataclass
class ChangelogVersion:
    """All entries of a single release.

    Attributes
    ----------
    version : str
        The release identifier, normally a tag name. Unique within a
        document.
    date : str
        The release date as ``YYYY-MM-DD``.
    entries : List[ChangelogEntry]
        Entries in selection order.
    """

    version: str
    date: str
    entries: List[ChangelogEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "date": self.date,
            "entries": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChangelogVersion":
        if not isinstance(data, dict):
            raise ValueError(f"changelog version must be an object, got {type(data).__name__}")
        version = data.get("version")
        date = data.get("date")
        entries = data.get("entries")
        if not isinstance(version, str) or not isinstance(date, str):
            raise ValueError("changelog version requires string 'version' and 'date'")
        if not isinstance(entries, list):
            raise ValueError(f"'entries' of version {version} must be a list")
        return cls(
            version=version,
            date=date,
            entries=[ChangelogEntry.from_dict(item) for item in entries],
        )


def document_to_data(document: List[ChangelogVersion]) -> List[Dict[str, Any]]:
    """Convert a document into JSON-serializable data."""
    return [version.to_dict() for version in document]


def document_from_data(data: Any) -> List[ChangelogVersion]:
    """Build a document from decoded JSON data.

    Raises
    ------
    ValueError
        If ``data`` does not have the shape of a changelog document.
    """
    if not isinstance(data, list):
        raise ValueError(f"changelog document must be a list, got {type(data).__name__}")
    return [ChangelogVersion.from_dict(item) for item in data]
