"""Assemble releases from commit history."""

import logging
from datetime import date
from typing import Callable, Iterable, Optional, Tuple

from sumit.core.errors import RemoteNotConfiguredError
from sumit.core.remote import normalize_remote_url
from sumit.core.render import render_release
from sumit.core.repository import ChangelogRepository
from sumit.models import Change, ChangelogConfig, Release

logger = logging.getLogger(__name__)

SHORT_SHA_LENGTH = 7
DATE_FORMAT = "%Y-%m-%d"

Clock = Callable[[], date]


def assemble_release(
    version: str,
    commits: Iterable[Tuple[str, str]],
    remote_base_url: Optional[str] = None,
    clock: Clock = date.today,
) -> Release:
    """Build a release from ``(hexsha, message)`` pairs, keeping their order.

    Each change links to ``<remote_base_url>/commits/<hexsha>`` when a base
    URL is given. The version is used as-is.
    """
    changes = []
    for hexsha, message in commits:
        url = f"{remote_base_url}/commits/{hexsha}" if remote_base_url else ""
        changes.append(
            Change(
                sha=hexsha[:SHORT_SHA_LENGTH],
                title=message.split("\n", 1)[0],
                url=url,
            )
        )

    return Release(
        version=version,
        date=clock().strftime(DATE_FORMAT),
        changes=changes,
    )


def resolve_remote_base_url(
    repository: ChangelogRepository, remote_name: str = "origin"
) -> Optional[str]:
    """Get the web URL of a remote, or None when the remote is not configured.

    A remote whose URL cannot be parsed is an error, not a missing remote.
    """
    try:
        url = repository.remote_url(remote_name)
    except RemoteNotConfiguredError as e:
        logger.debug("Commit links disabled: %s", e)
        return None
    return normalize_remote_url(url)


def generate_changelog(config: ChangelogConfig, clock: Clock = date.today) -> str:
    """Run the whole pipeline for one version and return the rendered entry."""
    repository = ChangelogRepository(config.directory)
    repository.open()

    remote_base_url = resolve_remote_base_url(repository, config.remote_name)
    release = assemble_release(
        config.version,
        repository.iter_commits(repository.head_hexsha()),
        remote_base_url=remote_base_url,
        clock=clock,
    )
    logger.debug(
        "Assembled release %s with %d changes (links: %s)",
        release.version,
        len(release.changes),
        "yes" if release.has_links else "no",
    )
    return render_release(release)
