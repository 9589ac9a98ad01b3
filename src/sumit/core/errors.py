"""Exceptions raised while building a changelog."""


class ChangelogError(Exception):
    """Base class for every failure the CLI reports."""


class RepositoryNotFoundError(ChangelogError):
    """The directory is missing or is not a git repository."""


class RemoteNotConfiguredError(ChangelogError):
    """The requested remote does not exist or has no URL."""


class RemoteURLError(ChangelogError):
    """The remote URL could not be turned into a web URL."""


class InvalidRemoteURLError(RemoteURLError):
    """The remote URL has a known scheme but too few path segments."""


class UnsupportedRemoteURLError(RemoteURLError):
    """The remote URL is neither HTTPS nor SSH (git@)."""


class HeadResolutionError(ChangelogError):
    """HEAD does not point at a commit."""


class LogTraversalError(ChangelogError):
    """The commit history could not be walked."""
