"""Diff collection.

Contains:
- get_diff: Uncommitted changes in the working tree (staged and unstaged)
- get_diff_between: Combined diff between two refs
"""

from commitgen.git.runner import _run_git_command


def get_diff() -> str:
    """Get the diff of all uncommitted changes.

    Staged changes come first, followed by unstaged changes to tracked files.

    Returns:
        The combined diff text, empty when the working tree is clean.
    """
    staged = _run_git_command(["diff", "--cached"])
    unstaged = _run_git_command(["diff"])
    return "\n".join(part for part in (staged, unstaged) if part)


def get_diff_between(base: str, head: str = "HEAD") -> str:
    """Get the combined diff of everything on head since it forked from base.

    Args:
        base: The base ref (e.g. "main").
        head: The head ref.

    Returns:
        The diff text.

    Raises:
        GitError: If either ref is unknown.
    """
    return _run_git_command(["diff", f"{base}...{head}"])
