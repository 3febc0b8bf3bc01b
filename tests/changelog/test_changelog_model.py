import pytest

from cherry_changelog.changelog.model import (
    Category,
    ChangelogEntry,
    ChangelogVersion,
    OtherCategory,
    category_from_value,
    document_from_data,
    document_to_data,
)


def test_category_from_value_known_and_unknown():
    assert category_from_value("fix") is Category.FIX
    other = category_from_value("security")
    assert other == OtherCategory("security")
    assert other.value == "security"


def test_entry_to_dict_key_order():
    entry = ChangelogEntry(type=Category.PERFORMANCE, text="Faster startup")
    data = entry.to_dict()
    assert list(data) == ["type", "text"]
    assert data == {"type": "performance", "text": "Faster startup"}


def test_version_to_dict_key_order():
    version = ChangelogVersion(version="v1.0.0", date="2023-01-01", entries=[])
    assert list(version.to_dict()) == ["version", "date", "entries"]


def test_document_round_trip_keeps_unknown_categories():
    data = [
        {
            "version": "v2.0.0",
            "date": "2024-05-06",
            "entries": [
                {"type": "security", "text": "Patch CVE"},
                {"type": "feature", "text": "New thing"},
            ],
        }
    ]
    document = document_from_data(data)
    assert document[0].entries[0].type == OtherCategory("security")
    assert document[0].entries[1].type is Category.FEATURE
    assert document_to_data(document) == data


@pytest.mark.parametrize(
    "data",
    [
        {"version": "v1"},
        [{"version": "v1", "date": "2023-01-01"}],
        [{"version": 1, "date": "2023-01-01", "entries": []}],
        [{"version": "v1", "date": "2023-01-01", "entries": [{"type": "fix"}]}],
        [{"version": "v1", "date": "2023-01-01", "entries": ["fix"]}],
        ["v1"],
    ],
)
def test_document_from_data_rejects_bad_shapes(data):
    with pytest.raises(ValueError):
        document_from_data(data)
