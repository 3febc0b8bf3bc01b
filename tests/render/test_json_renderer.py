import json
import unittest

from cherry_changelog.changelog.model import Category, ChangelogEntry, ChangelogVersion
from cherry_changelog.render.json_renderer import render_json


class TestJsonRenderer(unittest.TestCase):
    def test_two_space_indentation_and_order(self) -> None:
        document = [
            ChangelogVersion(
                version="v1.0.0",
                date="2023-01-01",
                entries=[ChangelogEntry(type=Category.FEATURE, text="Add feature")],
            )
        ]
        expected = (
            "[\n"
            "  {\n"
            '    "version": "v1.0.0",\n'
            '    "date": "2023-01-01",\n'
            '    "entries": [\n'
            "      {\n"
            '        "type": "feature",\n'
            '        "text": "Add feature"\n'
            "      }\n"
            "    ]\n"
            "  }\n"
            "]"
        )
        self.assertEqual(render_json(document), expected)

    def test_empty_document(self) -> None:
        self.assertEqual(render_json([]), "[]")

    def test_output_is_valid_json(self) -> None:
        document = [ChangelogVersion(version="v1", date="2023-01-01", entries=[])]
        self.assertEqual(json.loads(render_json(document)), [{"version": "v1", "date": "2023-01-01", "entries": []}])


if __name__ == "__main__":
    unittest.main()
