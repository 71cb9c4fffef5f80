"""Commit history collection.

Contains:
- get_commit_history: Per-commit messages and diffs between two refs
- get_changelog_commits: Commit log plus contributors and date range for changelogs
- get_latest_tag: Most recent tag reachable from HEAD
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from commitgen.git.exceptions import GitError
from commitgen.git.runner import _run_git_command

COMMIT_SEPARATOR = "=" * 60

# NUL and SOH never occur in commit text and survive str.strip()
_FIELD_SEP = "\x00"
_RECORD_SEP = "\x01"
_CHANGELOG_FORMAT = "%x00".join(["%H", "%h", "%an", "%ae", "%aI", "%s", "%b"]) + "%x01"


@dataclass(frozen=True)
class DateRange:
    """Calendar dates of the oldest and newest commit."""

    start: date
    end: date


@dataclass
class ChangelogCommits:
    """Commit log and derived metadata for a changelog."""

    commits: str
    contributors: list[str] = field(default_factory=list)
    date_range: Optional[DateRange] = None


@dataclass
class _LogEntry:
    full_hash: str
    short_hash: str
    author_name: str
    author_email: str
    authored_at: datetime
    subject: str
    body: str

    @property
    def author(self) -> str:
        return f"{self.author_name} <{self.author_email}>"


def get_commit_history(base: str, head: str = "HEAD") -> str:
    """Get every commit between base and head with its message and diff.

    Commits are listed oldest first, each preceded by a separator line and
    a header with hash, author and date.

    Args:
        base: The base ref (e.g. "main").
        head: The head ref.

    Returns:
        The formatted history, empty when head has no new commits.

    Raises:
        GitError: If either ref is unknown.
    """
    fmt = f"{COMMIT_SEPARATOR}%nCommit: %H%nAuthor: %an <%ae>%nDate: %ad%n%n%B"
    return _run_git_command([
        "log",
        "--reverse",
        "--patch",
        "--date=iso",
        f"--pretty=format:{fmt}",
        f"{base}..{head}",
    ])


def _log_range(since: Optional[str], until: Optional[str]) -> str:
    if since:
        return f"{since}..{until or 'HEAD'}"
    return until or "HEAD"


def _parse_log(output: str) -> list[_LogEntry]:
    entries = []
    for record in output.split(_RECORD_SEP):
        record = record.lstrip("\n")
        if not record.strip():
            continue

        fields = record.split(_FIELD_SEP)
        if len(fields) < 7:
            raise GitError(f"Unexpected git log output: {record[:200]!r}")

        full_hash, short_hash, name, email, authored, subject, body = fields[:7]
        entries.append(_LogEntry(
            full_hash=full_hash,
            short_hash=short_hash,
            author_name=name,
            author_email=email,
            authored_at=datetime.fromisoformat(authored),
            subject=subject,
            body=body.strip(),
        ))
    return entries


def _format_entry(entry: _LogEntry, link_commits: bool, show_contributors: bool) -> str:
    ref = f"[{entry.full_hash}]" if link_commits else f"({entry.short_hash})"
    line = f"- {entry.subject} {ref}"
    if show_contributors:
        line += f" by {entry.author_name}"

    body_lines = [f"  {body_line}" for body_line in entry.body.splitlines() if body_line.strip()]
    return "\n".join([line] + body_lines)


def get_changelog_commits(
    since: Optional[str] = None,
    until: Optional[str] = None,
    link_commits: bool = False,
    show_contributors: bool = False,
) -> ChangelogCommits:
    """Collect commits for a changelog.

    Merge commits are skipped. The date range covers the author dates of all
    included commits, taken as UTC calendar dates so commits made in
    different time zones compare on one clock.

    Args:
        since: Exclusive start ref (tag, branch or hash). None means from the root.
        until: Inclusive end ref. None means HEAD.
        link_commits: Include full hashes so entries can link to commits.
        show_contributors: Attribute entries and collect contributors.

    Returns:
        ChangelogCommits with the formatted log, the distinct contributors
        ("name <email>", in log order) and the date range.

    Raises:
        GitError: If a ref is unknown.
    """
    output = _run_git_command([
        "log",
        "--no-merges",
        f"--pretty=format:{_CHANGELOG_FORMAT}",
        _log_range(since, until),
    ])
    entries = _parse_log(output)

    if not entries:
        return ChangelogCommits(commits="")

    commits = "\n".join(_format_entry(e, link_commits, show_contributors) for e in entries)

    contributors = []
    if show_contributors:
        for entry in entries:
            if entry.author not in contributors:
                contributors.append(entry.author)

    dates = [entry.authored_at.astimezone(timezone.utc).date() for entry in entries]

    return ChangelogCommits(
        commits=commits,
        contributors=contributors,
        date_range=DateRange(start=min(dates), end=max(dates)),
    )


def get_latest_tag() -> Optional[str]:
    """Get the most recent tag reachable from HEAD.

    Returns:
        The tag name, or None if the repository has no tags.
    """
    try:
        return _run_git_command(["describe", "--tags", "--abbrev=0"]) or None
    except GitError:
        return None
