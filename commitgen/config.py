"""Provider configuration for commitgen.

Settings are resolved in this order:
1. COMMITGEN_PROVIDER / COMMITGEN_MODEL environment variables
2. ~/.commitgen/config.yaml (see commitgen.global_config)
3. The defaults below

API keys come from the provider's environment variable (a repo-level .env
file is honoured) or from ~/.commitgen/credentials.
"""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ConfigError(Exception):
    """Raised when the provider configuration is invalid."""

    pass


class LLMProvider(Enum):
    """Supported LLM providers."""

    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.GEMINI
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.3

DEFAULT_MODELS = {
    LLMProvider.GEMINI: "gemini-flash-latest",
    LLMProvider.OPENAI: "gpt-4",
    LLMProvider.ANTHROPIC: "claude-sonnet-4-20250514",
}

AVAILABLE_MODELS = {
    LLMProvider.GEMINI: [
        "gemini-flash-latest",
        "gemini-2.5-pro",
        "gemini-2.5-flash",
        "gemini-2.0-flash",
    ],
    LLMProvider.OPENAI: [
        "gpt-4",
        "gpt-4.1",
        "gpt-4.1-mini",
        "gpt-4o",
        "gpt-4o-mini",
    ],
    LLMProvider.ANTHROPIC: [
        "claude-sonnet-4-20250514",
        "claude-3-5-sonnet-latest",
        "claude-3-5-haiku-latest",
    ],
}

API_KEY_ENV_VARS = {
    LLMProvider.GEMINI: "GOOGLE_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
}

PROVIDER_ENV_VAR = "COMMITGEN_PROVIDER"
MODEL_ENV_VAR = "COMMITGEN_MODEL"


class ProviderConfig(BaseModel):
    """Immutable provider settings for a single invocation.

    Attributes:
        provider: Which LLM backend to call.
        api_key: Credential for that backend. Never empty.
        model: Model identifier passed to the backend.
        max_tokens: Upper bound on generated tokens.
        temperature: Sampling temperature.
    """

    model_config = ConfigDict(frozen=True)

    provider: LLMProvider
    api_key: str = Field(repr=False)
    model: str
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    @field_validator("api_key")
    @classmethod
    def api_key_must_not_be_empty(cls, v: str) -> str:
        """Ensure the API key is present."""
        if not v or not v.strip():
            raise ValueError("api_key cannot be empty")
        return v.strip()


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.
    """
    return API_KEY_ENV_VARS[provider]


def parse_provider(value) -> LLMProvider:
    """Parse a provider name.

    Args:
        value: Provider name such as "gemini" or "OpenAI". Non-string
            values (e.g. a number read from config.yaml) are rejected.

    Returns:
        The matching LLMProvider.

    Raises:
        ConfigError: If the name is not a supported provider.
    """
    try:
        return LLMProvider(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in LLMProvider)
        raise ConfigError(f"Unsupported provider: {value!r}. Valid providers: {valid}")


def resolve_api_key(provider: LLMProvider) -> str:
    """Find the API key for a provider.

    Checks the environment variable first, then ~/.commitgen/credentials.

    Args:
        provider: The LLM provider.

    Returns:
        The API key string.

    Raises:
        MissingAPIKeyError: If the key is not found anywhere.
    """
    from commitgen import global_config
    from commitgen.llm.exceptions import MissingAPIKeyError

    env_var_name = get_api_key_env_var(provider)

    api_key = os.getenv(env_var_name)
    if api_key and api_key.strip():
        return api_key

    api_key = global_config.get_credential(env_var_name)
    if api_key and api_key.strip():
        return api_key

    raise MissingAPIKeyError(
        f"{provider.value} API key not found. Set it using:\n"
        f"  1. Environment variable: export {env_var_name}=your_key_here\n"
        f"  2. Run: commitgen config set-key {provider.value}\n"
        f"  3. Manually add to ~/.commitgen/credentials"
    )


def load_provider_config(
    provider: Optional[LLMProvider] = None,
    model: Optional[str] = None,
) -> ProviderConfig:
    """Build the ProviderConfig for this invocation.

    Args:
        provider: Explicit provider override.
        model: Explicit model override.

    Returns:
        A validated, frozen ProviderConfig.

    Raises:
        ConfigError: If the configured provider name or a setting is invalid.
        MissingAPIKeyError: If no API key is available for the provider.
    """
    from commitgen import global_config

    settings = global_config.load_global_config()

    if provider is None:
        provider_name = os.getenv(PROVIDER_ENV_VAR) or settings.get("provider")
        provider = parse_provider(provider_name) if provider_name else DEFAULT_PROVIDER

    if model is None:
        model = os.getenv(MODEL_ENV_VAR)
    if model is None and settings.get("provider") in (None, provider.value):
        model = settings.get("model")
    if not model:
        model = DEFAULT_MODELS[provider]

    max_tokens = settings.get("max_tokens")
    temperature = settings.get("temperature")
    api_key = resolve_api_key(provider)

    try:
        return ProviderConfig(
            provider=provider,
            api_key=api_key,
            model=model,
            max_tokens=max_tokens if max_tokens is not None else DEFAULT_MAX_TOKENS,
            temperature=temperature if temperature is not None else DEFAULT_TEMPERATURE,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid settings in {global_config.get_config_file_path()}: {problems}")
