"""
Git client implementation for cherry_changelog.

This module wraps the Git queries required to build a changelog: the
most recent tag and the commit log since that tag. All subprocess calls
go through :meth:`GitClient._run` so that unit tests can mock them
easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

from cherry_changelog.commits.harvester import COMMIT_SENTINEL
from cherry_changelog.result import Result


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings when the CLI has
# not configured logging. Messages still propagate once it has.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# hash, subject and body of each commit followed by the sentinel line
LOG_FORMAT = f"%H%n%s%n%b%n{COMMIT_SENTINEL}"


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for querying a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if (current / ".git").exists():
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If Git cannot be executed, or the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.error("Failed to execute git: %s", exc)
            raise GitError(f"Failed to execute git: {exc}") from exc

        if check and result.returncode != 0:
            logger.debug(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip() or f"git {args[0]} failed")
        return result

    # ------------------------------------------------------------------
    # Changelog queries
    # ------------------------------------------------------------------
    def latest_tag(self) -> Result[str]:
        """Return the most recent tag reachable from HEAD.

        A repository without tags is a normal situation, so the outcome
        is returned as a :class:`Result` instead of raising.
        """
        try:
            result = self._run(["describe", "--tags", "--abbrev=0"], check=True)
        except GitError as exc:
            logger.debug("No tag found: %s", exc)
            return Result.failure(exc)
        tag = result.stdout.strip()
        if not tag:
            return Result.failure(GitError("git describe returned no tag"))
        return Result.success(tag)

    def get_commit_log(self, since: Optional[str] = None) -> str:
        """Return the formatted commit log, newest first.

        Parameters
        ----------
        since : Optional[str]
            A tag or revision. When given, only commits after it are
            listed; otherwise the whole history is returned.

        Raises
        ------
        GitError
            If the log cannot be read.
        """
        args = ["log", f"--pretty=format:{LOG_FORMAT}"]
        if since:
            args.append(f"{since}..HEAD")
        result = self._run(args, check=True)
        return result.stdout
