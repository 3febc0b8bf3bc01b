import unittest
from pathlib import Path
from unittest.mock import patch

from cherry_changelog.changelog.model import Category, ChangelogEntry, ChangelogVersion
from cherry_changelog.changelog.store import load
from cherry_changelog.render import exporter
from cherry_changelog.render.exporter import export_changelog
from cherry_changelog.render.markdown_renderer import render_markdown


DOCUMENT = [
    ChangelogVersion(
        version="v1.0.0",
        date="2023-01-01",
        entries=[ChangelogEntry(type=Category.FEATURE, text="Test <feature>")],
    )
]


class TestExportChangelog(unittest.TestCase):
    def setUp(self) -> None:
        self.calls = []
        patcher = patch.object(exporter, "write_text", side_effect=lambda path, content: self.calls.append((path, content)))
        patcher.start()
        self.addCleanup(patcher.stop)
        echo_patcher = patch.object(exporter.click, "echo")
        self.mock_echo = echo_patcher.start()
        self.addCleanup(echo_patcher.stop)

    def test_default_output_directory(self) -> None:
        written = export_changelog(DOCUMENT, ["json", "markdown"])
        self.assertEqual(written, ["./changelog.json", "./CHANGELOG.md"])
        self.assertEqual([path for path, _ in self.calls], ["./changelog.json", "./CHANGELOG.md"])

    def test_custom_output_directory(self) -> None:
        export_changelog(DOCUMENT, ["json"], "build")
        self.assertEqual(self.calls[0][0], "build/changelog.json")

    def test_all_formats_with_correct_filenames(self) -> None:
        export_changelog([], ["json", "markdown", "html"], "dist")
        self.assertEqual(
            [path for path, _ in self.calls],
            ["dist/changelog.json", "dist/CHANGELOG.md", "dist/changelog.html"],
        )

    def test_success_message_per_format(self) -> None:
        export_changelog([], ["json", "html"], "output")
        self.mock_echo.assert_any_call("✅ Exported to output/changelog.json")
        self.mock_echo.assert_any_call("✅ Exported to output/changelog.html")
        self.assertEqual(self.mock_echo.call_count, 2)

    def test_unknown_formats_are_skipped(self) -> None:
        written = export_changelog(DOCUMENT, ["pdf", "markdown"], "out")
        self.assertEqual(written, ["out/CHANGELOG.md"])
        self.assertEqual(self.calls, [("out/CHANGELOG.md", render_markdown(DOCUMENT))])

    def test_duplicates_are_written_again(self) -> None:
        export_changelog(DOCUMENT, ["json", "json"], "out")
        self.assertEqual([path for path, _ in self.calls], ["out/changelog.json", "out/changelog.json"])

    def test_html_escaping_is_forwarded(self) -> None:
        export_changelog(DOCUMENT, ["html"], "out")
        export_changelog(DOCUMENT, ["html"], "out", escape_html=True)
        self.assertIn("<li>Test <feature></li>", self.calls[0][1])
        self.assertIn("<li>Test &lt;feature&gt;</li>", self.calls[1][1])


def test_export_writes_files(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    export_changelog(DOCUMENT, ["json", "markdown", "html"], "docs")
    assert load("docs/changelog.json") == DOCUMENT
    assert Path("docs/CHANGELOG.md").read_text(encoding="utf-8") == render_markdown(DOCUMENT)
    assert Path("docs/changelog.html").read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
