"""CLI entry point for commitgen.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitgen.cli.changelog import changelog_command
from commitgen.cli.commit import commit_command
from commitgen.cli.config import config_app
from commitgen.cli.pr import pr_command

# Main application
app = typer.Typer(
    name="commitgen",
    help="Generate commit messages, changelogs and PR descriptions with LLMs.",
    add_completion=False,
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("commit")(commit_command)
app.command("changelog")(changelog_command)
app.command("pr")(pr_command)


__all__ = [
    "app",
    "config_app",
    "commit_command",
    "changelog_command",
    "pr_command",
]
