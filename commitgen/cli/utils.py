"""Shared utility functions for CLI commands."""

from typing import Callable, Optional

import typer

from commitgen.config import ConfigError, load_provider_config
from commitgen.generate import GenerationResult
from commitgen.git import GitError
from commitgen.global_config import GlobalConfigError
from commitgen.llm import BaseLLMProvider, LLMError, MissingAPIKeyError, get_provider
from commitgen.prompts import TemplateNotFoundError

_LEVEL_COLORS = {
    "info": typer.colors.CYAN,
    "success": typer.colors.GREEN,
    "warn": typer.colors.YELLOW,
    "error": typer.colors.RED,
}


def log(message: str, level: str = "info") -> None:
    """Print a status line to stderr, coloured by level."""
    typer.secho(message, fg=_LEVEL_COLORS[level], err=True)


def load_provider_or_exit() -> BaseLLMProvider:
    """Build the configured provider, exiting if configuration is unusable."""
    try:
        return get_provider(load_provider_config())
    except (MissingAPIKeyError, ConfigError, GlobalConfigError) as e:
        log(f"Configuration error: {e}", "error")
        raise typer.Exit(1)


def display_debug_info(result: GenerationResult) -> None:
    """Show the model, token usage and the full prompt that was sent."""
    typer.echo("=" * 60, err=True)
    typer.echo("                  COMMITGEN DEBUG INFO", err=True)
    typer.echo("=" * 60, err=True)
    typer.echo(f"LLM Model: {result.model}", err=True)
    typer.echo(f"Tokens:    {result.input_tokens:,} input / {result.output_tokens:,} output", err=True)
    if result.version:
        typer.echo(f"Version:   {result.version}", err=True)
    typer.echo("", err=True)
    typer.echo("[SYSTEM PROMPT]", err=True)
    typer.echo(result.request.system_prompt, err=True)
    typer.echo("", err=True)
    typer.echo("[USER PROMPT]", err=True)
    typer.echo(result.request.user_content, err=True)
    typer.echo("=" * 60, err=True)


def run_generation(
    flow: Callable[[], Optional[GenerationResult]],
    label: str,
    debug: bool = False,
) -> Optional[GenerationResult]:
    """Run a generation flow and print its output.

    Expected failures are reported on stderr and end the command with exit
    status 1. An empty input is reported as a notice and returns None.

    Args:
        flow: Zero-argument callable running one generation flow.
        label: What is being generated, for display.
        debug: Also print the prompt and usage details.

    Returns:
        The generation result, or None if there was nothing to describe.
    """
    try:
        result = flow()
    except GitError as e:
        log(f"Git error: {e}", "error")
        raise typer.Exit(1)
    except TemplateNotFoundError as e:
        log(f"Template error: {e}", "error")
        raise typer.Exit(1)
    except LLMError as e:
        log(str(e), "error")
        raise typer.Exit(1)

    if result is None:
        log("No changes detected.", "warn")
        return None

    if debug:
        display_debug_info(result)

    log(f"\nGenerated {label}:\n", "info")
    typer.echo(result.text)
    return result
