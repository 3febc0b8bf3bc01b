"""
Configuration loading for cherry_changelog.

Provides a loader for the optional project configuration file located
in the repository root, and the resolution of command line options
against it. See :mod:`cherry_changelog.config.loader` for
implementation details.
"""

from .loader import ChangelogOptions, ConfigError, load_config, resolve_options  # noqa: F401
