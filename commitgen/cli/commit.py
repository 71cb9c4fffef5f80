"""CLI command for generating (and optionally committing) a commit message."""

from typing import Optional

import typer

from commitgen.generate import generate_commit_message
from commitgen.git import GitError, commit_all
from commitgen.cli.utils import load_provider_or_exit, log, run_generation


def commit_command(
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="Extra context for the LLM (e.g. why the change was made)",
    ),
    auto_commit: bool = typer.Option(
        False,
        "--auto-commit",
        "-a",
        help="Stage all changes and commit with the generated message",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show the prompt sent to the LLM and token usage",
    ),
) -> None:
    """Generate a commit message from uncommitted changes."""
    provider = load_provider_or_exit()

    result = run_generation(
        lambda: generate_commit_message(provider, context=context),
        "Commit Message",
        debug=debug,
    )
    if result is None or not auto_commit:
        return

    try:
        output = commit_all(result.text)
    except GitError as e:
        log(f"Commit failed: {e}", "error")
        raise typer.Exit(1)

    log("Commit successful!", "success")
    if output:
        typer.echo(output, err=True)
