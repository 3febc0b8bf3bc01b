"""
Output formats for the changelog document.

Every renderer is a pure function from a changelog document to text.
:func:`export_changelog` picks the renderers for the requested formats
and writes their output to disk.
"""

from .exporter import EXPORT_FORMATS, export_changelog  # noqa: F401
from .html_renderer import render_html  # noqa: F401
from .json_renderer import render_json  # noqa: F401
from .markdown_renderer import render_markdown  # noqa: F401
