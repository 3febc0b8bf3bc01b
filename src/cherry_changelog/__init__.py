"""
Top-level package for cherry_changelog.

This package exposes the main CLI entry point via the
``cherry_changelog.cli`` module. The core pipeline (commit parsing,
changelog merging and rendering) lives in the ``commits``,
``changelog`` and ``render`` subpackages.
"""

__all__ = ["__version__"]

__base_version__ = "0.1.0"

# Prefer the installed distribution metadata; fall back to the base
# version when running from a source checkout.
try:
    from importlib.metadata import PackageNotFoundError, version as _dist_version

    __version__ = _dist_version("cherry-changelog")
except PackageNotFoundError:
    __version__ = __base_version__
