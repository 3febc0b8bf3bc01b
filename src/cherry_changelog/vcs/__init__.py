"""
Version control integration.

Only Git is supported. :class:`GitClient` provides the two queries the
changelog pipeline needs: the latest tag and the formatted commit log.
"""

from .git_client import GitClient, GitError  # noqa: F401
