"""Committing generated messages."""

from commitgen.git.runner import _run_git_command


def commit_all(message: str) -> str:
    """Stage all changes and commit them with the given message.

    Args:
        message: The commit message.

    Returns:
        git's output for the commit.

    Raises:
        GitError: If staging or committing fails.
    """
    _run_git_command(["add", "--all"])
    return _run_git_command(["commit", "-m", message])
