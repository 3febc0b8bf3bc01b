"""
Changelog document model and persistence.

See :mod:`cherry_changelog.changelog.model` for the document types,
:mod:`cherry_changelog.changelog.type_mapper` for mapping commit tags to
categories, and :mod:`cherry_changelog.changelog.store` for loading,
saving and merging documents. The store is not re-exported here because
it depends on the renderers, which in turn depend on the model.
"""

from .model import (  # noqa: F401
    Category,
    ChangelogEntry,
    ChangelogVersion,
    OtherCategory,
    category_from_value,
)
from .type_mapper import canonicalize  # noqa: F401
