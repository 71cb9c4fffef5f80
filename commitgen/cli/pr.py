"""CLI command for generating a pull request description."""

from typing import Optional

import typer

from commitgen.generate import DEFAULT_BASE_REF, generate_pr_description
from commitgen.cli.utils import load_provider_or_exit, run_generation


def pr_command(
    base: str = typer.Option(
        DEFAULT_BASE_REF,
        "--base",
        "-b",
        help="Branch the pull request targets",
    ),
    head: str = typer.Option(
        "HEAD",
        "--head",
        help="Ref being merged",
    ),
    include_commits: bool = typer.Option(
        False,
        "--include-commits",
        help="Send every commit with its diff instead of one combined diff",
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="Extra context for the LLM",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show the prompt sent to the LLM and token usage",
    ),
) -> None:
    """Generate a pull request description from the current branch."""
    provider = load_provider_or_exit()

    run_generation(
        lambda: generate_pr_description(
            provider,
            base=base,
            head=head,
            include_commits=include_commits,
            context=context,
        ),
        "Pull Request description",
        debug=debug,
    )
