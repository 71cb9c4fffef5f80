"""Git collaborator for commitgen.

This package wraps the git binary:
- exceptions: GitError
- runner: _run_git_command
- diff: get_diff, get_diff_between
- history: get_commit_history, get_changelog_commits, get_latest_tag
- remote: get_repo_url, normalize_remote_url
- commit: commit_all
"""

from commitgen.git.exceptions import GitError

from commitgen.git.runner import (
    _run_git_command,
)

from commitgen.git.diff import (
    get_diff,
    get_diff_between,
)

from commitgen.git.history import (
    COMMIT_SEPARATOR,
    ChangelogCommits,
    DateRange,
    get_changelog_commits,
    get_commit_history,
    get_latest_tag,
)

from commitgen.git.remote import (
    get_repo_url,
    normalize_remote_url,
)

from commitgen.git.commit import commit_all


__all__ = [
    "GitError",
    "_run_git_command",
    "get_diff",
    "get_diff_between",
    "COMMIT_SEPARATOR",
    "ChangelogCommits",
    "DateRange",
    "get_changelog_commits",
    "get_commit_history",
    "get_latest_tag",
    "get_repo_url",
    "normalize_remote_url",
    "commit_all",
]
