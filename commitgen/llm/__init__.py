"""LLM provider module for commitgen.

This module provides a unified interface to the supported LLM providers.
The active provider is described by a ProviderConfig (see commitgen.config).
"""

from dotenv import load_dotenv

from commitgen.config import LLMProvider, ProviderConfig
from commitgen.llm.base import (
    BaseLLMProvider,
    LLMResult,
    PromptRequest,
)
from commitgen.llm.exceptions import (
    EmptyResponseError,
    LLMError,
    MissingAPIKeyError,
    ProviderHTTPError,
)

# Load environment variables from .env file
load_dotenv()


def get_provider(config: ProviderConfig) -> BaseLLMProvider:
    """Get an LLM provider instance for a configuration.

    Args:
        config: The provider configuration.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if config.provider == LLMProvider.GEMINI:
        from commitgen.llm.google_provider import GoogleProvider

        return GoogleProvider(config)

    elif config.provider == LLMProvider.OPENAI:
        from commitgen.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(config)

    elif config.provider == LLMProvider.ANTHROPIC:
        from commitgen.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(config)

    raise ValueError(f"Unsupported provider: {config.provider}")


def call(config: ProviderConfig, request: PromptRequest) -> str:
    """Send one request to the configured provider and return the text.

    Args:
        config: The provider configuration.
        request: The system + user prompt pair.

    Returns:
        The generated text.
    """
    return get_provider(config).generate(request).text


__all__ = [
    "BaseLLMProvider",
    "EmptyResponseError",
    "LLMError",
    "LLMResult",
    "MissingAPIKeyError",
    "PromptRequest",
    "ProviderHTTPError",
    "call",
    "get_provider",
]
