from cherry_changelog.changelog.model import Category, ChangelogEntry, ChangelogVersion, OtherCategory
from cherry_changelog.render.sections import (
    OTHER_LABEL,
    category_css_class,
    category_label,
    escape_text,
    group_entries,
)


def test_group_entries_orders_primary_then_first_seen(sample_document):
    groups = group_entries(sample_document[0])
    assert [category for category, _ in groups] == [Category.FEATURE, Category.FIX, Category.CHORE]
    assert groups[1][1] == ["Fix crash on start", "Fix typo in help"]


def test_group_entries_empty_version():
    assert group_entries(ChangelogVersion(version="v1", date="2023-01-01")) == []


def test_group_entries_performance_after_fix():
    version = ChangelogVersion(
        version="v1",
        date="2023-01-01",
        entries=[
            ChangelogEntry(type=Category.PERFORMANCE, text="p"),
            ChangelogEntry(type=Category.TEST, text="t"),
            ChangelogEntry(type=Category.FIX, text="f"),
        ],
    )
    assert [c for c, _ in group_entries(version)] == [Category.FIX, Category.PERFORMANCE, Category.TEST]


def test_labels_and_classes():
    assert category_label(Category.FEATURE) == "✨ New Features"
    assert category_label(Category.FIX) == "🐛 Fixes"
    assert category_label(Category.PERFORMANCE) == "⚡ Performance"
    assert category_label(Category.DOCS) == OTHER_LABEL
    assert category_label(OtherCategory("security")) == OTHER_LABEL
    assert category_css_class(Category.PERFORMANCE) == "performance"
    assert category_css_class(Category.CI) == "other"
    assert category_css_class(OtherCategory("security")) == "other"


def test_escape_text():
    assert escape_text('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
    assert escape_text("plain") == "plain"
