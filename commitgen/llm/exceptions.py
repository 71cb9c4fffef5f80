"""LLM-related exception classes.

Contains all exception classes for LLM operations:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when API key is not set
- ProviderHTTPError: Raised when the provider answers with a non-success status
- EmptyResponseError: Raised when no generated text can be found in a response
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class ProviderHTTPError(LLMError):
    """Raised when the provider returns a non-success HTTP status."""

    def __init__(self, provider_name: str, status_code: int, body: str):
        self.provider_name = provider_name
        self.status_code = status_code
        self.body = body
        super().__init__(f"{provider_name} HTTP {status_code}: {body}")


class EmptyResponseError(LLMError):
    """Raised when the request succeeded but the response held no text."""

    def __init__(self, provider_name: str, raw_response: str):
        self.provider_name = provider_name
        self.raw_response = raw_response
        super().__init__(
            f"{provider_name} returned no text. Full response:\n{raw_response}"
        )
