#!/usr/bin/env python
"""
Thin wrapper script to invoke the cherry_changelog CLI.

Running ``python cherry.py`` is equivalent to running the
``cherry-changelog`` console script installed via ``pyproject.toml``.
"""

from cherry_changelog.cli import main


if __name__ == "__main__":
    main(prog_name="cherry-changelog")
