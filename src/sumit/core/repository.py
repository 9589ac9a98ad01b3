"""Read-only access to the git repository a changelog is built from."""

import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple

import git
from git import Repo

from sumit.core.errors import (
    HeadResolutionError,
    LogTraversalError,
    RemoteNotConfiguredError,
    RepositoryNotFoundError,
)

logger = logging.getLogger(__name__)


class ChangelogRepository:
    """Wraps a git repository and walks its history for changelog entries."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Repo:
        """Get the git repository, opening it on first use."""
        if self._repo is None:
            return self.open()
        return self._repo

    def open(self) -> Repo:
        """Open the repository at ``path`` without searching parent directories."""
        try:
            self._repo = Repo(self.path)
        except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
            raise RepositoryNotFoundError(
                f"failed to open git repository: {self.path}: "
                f"{type(e).__name__}: {e}"
            ) from e
        logger.debug("Opened git repository at %s", self.path.resolve())
        return self._repo

    def remote_url(self, name: str = "origin") -> str:
        """Get the first configured URL of a remote."""
        try:
            remote = self.repo.remote(name)
        except ValueError as e:
            raise RemoteNotConfiguredError(f"remote '{name}' does not exist") from e

        try:
            url = next(iter(remote.urls), None)
        except git.GitCommandError as e:
            raise RemoteNotConfiguredError(
                f"remote '{name}' has no url configured"
            ) from e
        if not url:
            raise RemoteNotConfiguredError(f"remote '{name}' has no url configured")

        logger.debug("Remote %s points to %s", name, url)
        return url

    def head_hexsha(self) -> str:
        """Get the hash of the commit HEAD points to."""
        try:
            hexsha = self.repo.head.commit.hexsha
        except ValueError as e:
            # Unborn branch: HEAD names a ref that has no commits yet
            raise HeadResolutionError(f"failed to get head ref: {e}") from e
        logger.debug("HEAD is at %s", hexsha)
        return hexsha

    def iter_commits(self, rev: Optional[str] = None) -> Iterator[Tuple[str, str]]:
        """Yield ``(hexsha, message)`` for every commit reachable from ``rev``.

        Defaults to HEAD. Commits come in git's default log order (newest
        first) and are read lazily, one at a time.
        """
        if rev is None:
            rev = self.head_hexsha()

        try:
            for commit in self.repo.iter_commits(rev):
                message = commit.message
                if isinstance(message, bytes):
                    # GitPython hands back raw bytes when the declared encoding fails
                    message = message.decode("utf-8", errors="replace")
                yield commit.hexsha, message
        except (git.GitCommandError, ValueError) as e:
            raise LogTraversalError(f"failed to get commit log: {e}") from e
