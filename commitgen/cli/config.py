"""CLI commands for global configuration management."""

from typing import Optional

import typer

from commitgen import global_config
from commitgen.config import (
    AVAILABLE_MODELS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODELS,
    DEFAULT_TEMPERATURE,
    ConfigError,
    LLMProvider,
    get_api_key_env_var,
    parse_provider,
)

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitgen configuration in ~/.commitgen/",
    add_completion=False,
)


def _mask(api_key: str) -> str:
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


def _parse_provider_or_exit(provider: str) -> LLMProvider:
    try:
        return parse_provider(provider)
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if not global_config.is_configured():
        typer.echo("No configuration file found; using defaults.")

    provider_str = config.get("provider", LLMProvider.GEMINI.value)
    typer.echo("Current commitgen configuration (~/.commitgen/config.yaml):")
    typer.echo()
    typer.echo(f"  Provider: {provider_str}")
    typer.echo(f"  Model: {config.get('model', 'default')}")
    typer.echo(f"  Max Tokens: {config.get('max_tokens', DEFAULT_MAX_TOKENS)}")
    typer.echo(f"  Temperature: {config.get('temperature', DEFAULT_TEMPERATURE)}")
    typer.echo()

    try:
        env_var = get_api_key_env_var(LLMProvider(provider_str))
    except ValueError:
        typer.echo(f"  Unknown provider in config: {provider_str}", err=True)
        raise typer.Exit(1)

    api_key = global_config.get_credential(env_var)
    if api_key:
        typer.echo(f"  API Key ({env_var}): {_mask(api_key)}")
    else:
        typer.echo(f"  API Key ({env_var}): not set in credentials file")


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(
        ...,
        help="Provider name (gemini, openai, anthropic)"
    )
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = _parse_provider_or_exit(provider)
    env_var = get_api_key_env_var(llm_provider)

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)

    try:
        global_config.save_credential(env_var, api_key.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(
        ...,
        help="Provider name (gemini, openai, anthropic)"
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (defaults to the provider's default model)"
    )
) -> None:
    """Set the active LLM provider and model."""
    llm_provider = _parse_provider_or_exit(provider)
    model = model or DEFAULT_MODELS[llm_provider]

    if model not in AVAILABLE_MODELS[llm_provider]:
        typer.echo(f"Note: {model} is not in the list of known {llm_provider.value} models.", err=True)

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to {llm_provider.value} ({model})")
