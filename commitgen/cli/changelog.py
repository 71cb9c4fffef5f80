"""CLI command for generating a changelog."""

from typing import Optional

import typer

from commitgen.generate import Audience, ChangelogOptions, generate_changelog
from commitgen.version import BumpMode
from commitgen.cli.utils import load_provider_or_exit, log, run_generation


def changelog_command(
    since: Optional[str] = typer.Option(
        None,
        "--since",
        help="Start after this ref (tag, branch or commit)",
    ),
    until: Optional[str] = typer.Option(
        None,
        "--until",
        help="End at this ref (default: HEAD)",
    ),
    version: Optional[str] = typer.Option(
        None,
        "--version",
        help="Current (or release) version, X.Y.Z",
    ),
    version_bump: Optional[BumpMode] = typer.Option(
        None,
        "--version-bump",
        case_sensitive=False,
        help="Bump --version: auto (from Conventional Commits), major, minor or patch",
    ),
    audience: Optional[Audience] = typer.Option(
        None,
        "--audience",
        case_sensitive=False,
        help="Who the changelog is for",
    ),
    show_contributors: bool = typer.Option(
        False,
        "--show-contributors",
        help="Credit commit authors",
    ),
    link_commits: bool = typer.Option(
        False,
        "--link-commits",
        help="Link entries to commits on the remote repository",
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
    """Generate a changelog from commit history."""
    options = ChangelogOptions(
        since=since,
        until=until,
        version=version,
        version_bump=version_bump,
        audience=audience,
        show_contributors=show_contributors,
        link_commits=link_commits,
        context=context,
    )

    try:
        options.validate()
    except ValueError as e:
        log(str(e), "error")
        raise typer.Exit(2)

    provider = load_provider_or_exit()

    run_generation(
        lambda: generate_changelog(provider, options),
        "Changelog",
        debug=debug,
    )
