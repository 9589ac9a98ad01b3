"""Turn git remote URLs into web URLs for commit links."""

from sumit.core.errors import InvalidRemoteURLError, UnsupportedRemoteURLError

HTTPS_PREFIX = "https://"
SSH_PREFIX = "git@"


def _strip_git_suffix(name: str) -> str:
    if name.endswith(".git"):
        return name[: -len(".git")]
    return name


def normalize_remote_url(url: str) -> str:
    """Return the ``https://host/workspace/repo`` base URL for a remote.

    Accepts ``https://host/workspace/repo[.git]`` and
    ``git@host:workspace/repo[.git]``. Path segments after the repository
    name are ignored. Purely syntactic, no network access.

    Raises:
        InvalidRemoteURLError: a supported scheme with missing segments.
        UnsupportedRemoteURLError: any other URL form.
    """
    if url.startswith(HTTPS_PREFIX):
        parts = url[len(HTTPS_PREFIX) :].split("/")
        if len(parts) < 3:
            raise InvalidRemoteURLError(f"invalid remote url structure: {url}")
        host, workspace, repo_name = parts[0], parts[1], parts[2]

    elif url.startswith(SSH_PREFIX):
        # git@bitbucket.org:username/repo.git
        host, sep, path = url[len(SSH_PREFIX) :].partition(":")
        if not sep:
            raise InvalidRemoteURLError(f"invalid remote url structure: {url}")
        path_parts = path.split("/")
        if len(path_parts) < 2:
            raise InvalidRemoteURLError(f"invalid remote url structure: {url}")
        workspace, repo_name = path_parts[0], path_parts[1]

    else:
        raise UnsupportedRemoteURLError(f"unsupported remote url structure: {url}")

    return f"https://{host}/{workspace}/{_strip_git_suffix(repo_name)}"
