"""Remote repository URL lookup."""

import re
from typing import Optional

from commitgen.git.exceptions import GitError
from commitgen.git.runner import _run_git_command

# git@github.com:user/repo.git
_SCP_LIKE_RE = re.compile(r"^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?!//)(?P<path>.+)$")
# ssh://git@github.com:22/user/repo.git, git://host/path
_SSH_URL_RE = re.compile(r"^(?:ssh|git|git\+ssh)://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/(?P<path>.+)$")


def normalize_remote_url(url: str) -> str:
    """Turn a git remote URL into a browsable https URL.

    Examples:
        git@github.com:user/repo.git -> https://github.com/user/repo
        https://github.com/user/repo.git -> https://github.com/user/repo

    Args:
        url: The remote URL as configured in git.

    Returns:
        The normalized web URL.
    """
    url = url.strip()

    match = _SSH_URL_RE.match(url) or _SCP_LIKE_RE.match(url)
    if match and not url.startswith(("http://", "https://")):
        url = f"https://{match.group('host')}/{match.group('path')}"

    # Drop credentials embedded in https remotes
    url = re.sub(r"^(https?://)[^@/]+@", r"\1", url)

    url = url.rstrip("/")
    if url.endswith(".git"):
        url = url[: -len(".git")]
    return url


def get_repo_url(remote: str = "origin") -> Optional[str]:
    """Get the web URL of a remote.

    Args:
        remote: Remote name.

    Returns:
        The normalized URL, or None when the remote is not configured or
        is not reachable over the web (e.g. a local path).
    """
    try:
        url = _run_git_command(["remote", "get-url", remote])
    except GitError:
        return None

    url = normalize_remote_url(url) if url else ""
    if not url.startswith(("http://", "https://")):
        return None
    return url
