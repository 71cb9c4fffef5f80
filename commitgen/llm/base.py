"""Base classes and shared utilities for LLM providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from commitgen.config import ProviderConfig
from commitgen.llm.exceptions import EmptyResponseError


@dataclass(frozen=True)
class PromptRequest:
    """A single system + user prompt pair sent to a provider."""

    system_prompt: str
    user_content: str


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


def dump_response(response) -> str:
    """Serialize an SDK response object for error messages.

    Args:
        response: A pydantic response model from a provider SDK.

    Returns:
        The response as indented JSON, or its repr if it cannot be dumped.
    """
    dump = getattr(response, "model_dump_json", None)
    if callable(dump):
        return str(dump(indent=2, exclude_none=True))
    return repr(response)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    Subclasses translate a PromptRequest into one provider API call and pull
    the generated text out of the provider's response.
    """

    #: Human-readable name used in error messages.
    name: str = "LLM"

    def __init__(self, config: ProviderConfig):
        self.config = config

    @property
    def model(self) -> str:
        return self.config.model

    @abstractmethod
    def generate(self, request: PromptRequest) -> LLMResult:
        """Generate text from a system + user prompt pair.

        Args:
            request: The prompt pair to send.

        Returns:
            An LLMResult with the generated text and usage metadata.

        Raises:
            ProviderHTTPError: If the provider returns a non-success status.
            EmptyResponseError: If no text could be found in the response.
            LLMError: For other LLM-related errors.
        """
        pass

    def _require_text(self, text: str | None, response) -> str:
        """Return stripped text, or raise EmptyResponseError with the raw response."""
        if not text or not text.strip():
            raise EmptyResponseError(self.name, dump_response(response))
        return text.strip()
