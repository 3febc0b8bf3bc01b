from cherry_changelog.changelog.model import Category, ChangelogEntry, ChangelogVersion
from cherry_changelog.render.html_renderer import render_html


def _document(text: str = "Add feature"):
    return [
        ChangelogVersion(
            version="v1.0.0",
            date="2023-01-01",
            entries=[
                ChangelogEntry(type=Category.REFACTOR, text="Simplify parser"),
                ChangelogEntry(type=Category.FEATURE, text=text),
            ],
        )
    ]


def test_html_is_standalone_document():
    output = render_html(_document())
    assert output.startswith("<!DOCTYPE html>")
    assert "<title>Changelog</title>" in output
    assert "<style>" in output
    assert output.rstrip().endswith("</html>")


def test_html_contains_version_heading_and_entries():
    output = render_html(_document())
    assert '<div class="version">' in output
    assert "<h2>v1.0.0 - 2023-01-01</h2>" in output
    assert "<li>Add feature</li>" in output
    assert "<li>Simplify parser</li>" in output


def test_html_category_classes_and_order():
    output = render_html(_document())
    feature = output.index('<h3 class="feature">✨ New Features</h3>')
    other = output.index('<h3 class="other">📦 Other</h3>')
    assert feature < other


def test_html_empty_document():
    output = render_html([])
    assert "<h1>Changelog</h1>" in output
    assert '<div class="version">' not in output


def test_html_does_not_escape_by_default():
    output = render_html(_document("Support <b>bold</b> & more"))
    assert "<li>Support <b>bold</b> & more</li>" in output


def test_html_escapes_when_requested():
    output = render_html(_document("Support <b>bold</b> & more"), escape=True)
    assert "<li>Support &lt;b&gt;bold&lt;/b&gt; &amp; more</li>" in output


def test_html_is_deterministic():
    assert render_html(_document()) == render_html(_document())
