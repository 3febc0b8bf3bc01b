"""
JSON rendering of the changelog document.

The output is also the persisted format read back by
:func:`cherry_changelog.changelog.store.load`.
"""

from __future__ import annotations

import json
from typing import List

from cherry_changelog.changelog.model import ChangelogVersion, document_to_data


def render_json(document: List[ChangelogVersion]) -> str:
    return json.dumps(document_to_data(document), indent=2, ensure_ascii=False)
