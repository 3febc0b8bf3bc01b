import pytest

from cherry_changelog.changelog.model import Category, ChangelogEntry, ChangelogVersion


@pytest.fixture
def sample_document():
    """A two-version changelog, newest first."""
    return [
        ChangelogVersion(
            version="v1.1.0",
            date="2023-02-01",
            entries=[
                ChangelogEntry(type=Category.CHORE, text="Bump dependencies"),
                ChangelogEntry(type=Category.FIX, text="Fix crash on start"),
                ChangelogEntry(type=Category.FEATURE, text="Add dark mode"),
                ChangelogEntry(type=Category.FIX, text="Fix typo in help"),
            ],
        ),
        ChangelogVersion(
            version="v1.0.0",
            date="2023-01-01",
            entries=[ChangelogEntry(type=Category.FEATURE, text="Initial release")],
        ),
    ]
