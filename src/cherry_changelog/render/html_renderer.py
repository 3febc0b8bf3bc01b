"""
HTML rendering of the changelog document.

The page is standalone: styles are embedded in the head so the file can
be opened or published without any assets. Entry text is inserted
verbatim unless ``escape=True`` is passed.
"""

from __future__ import annotations

from typing import Callable, List

from cherry_changelog.changelog.model import ChangelogVersion

from .sections import category_css_class, category_label, escape_text, group_entries


_STYLE = """\
    body {
      font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
      max-width: 800px;
      margin: 0 auto;
      padding: 2rem;
      line-height: 1.6;
      color: #24292f;
    }
    h1 { border-bottom: 2px solid #d0d7de; padding-bottom: 0.5rem; }
    .version { margin-bottom: 2rem; }
    .version h2 { margin-bottom: 0.5rem; }
    h3 { font-size: 1.1rem; margin: 1rem 0 0.25rem; }
    h3.feature { color: #1a7f37; }
    h3.fix { color: #cf222e; }
    h3.performance { color: #9a6700; }
    h3.other { color: #57606a; }
    ul { margin-top: 0.25rem; }"""


def _identity(text: str) -> str:
    return text


def render_html(document: List[ChangelogVersion], escape: bool = False) -> str:
    """Render ``document`` as a complete HTML page.

    Parameters
    ----------
    document : List[ChangelogVersion]
        The changelog to render.
    escape : bool, optional
        If True, version, date and entry text are HTML-escaped.
    """
    clean: Callable[[str], str] = escape_text if escape else _identity

    parts: List[str] = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        "  <title>Changelog</title>",
        "  <style>",
        _STYLE,
        "  </style>",
        "</head>",
        "<body>",
        "  <h1>Changelog</h1>",
    ]
    for version in document:
        parts.append('  <div class="version">')
        parts.append(f"    <h2>{clean(version.version)} - {clean(version.date)}</h2>")
        for category, texts in group_entries(version):
            parts.append(f'    <h3 class="{category_css_class(category)}">{category_label(category)}</h3>')
            parts.append("    <ul>")
            parts.extend(f"      <li>{clean(text)}</li>" for text in texts)
            parts.append("    </ul>")
        parts.append("  </div>")
    parts.extend(["</body>", "</html>"])
    return "\n".join(parts) + "\n"
