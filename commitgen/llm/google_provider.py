"""Google Gemini provider implementation."""

import json

from google import genai
from google.genai import errors, types

from commitgen.llm.base import BaseLLMProvider, LLMResult, PromptRequest
from commitgen.llm.exceptions import LLMError, ProviderHTTPError


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider.

    Gemini receives the system prompt and user content joined into a single
    user part; the API key travels as a query parameter handled by the SDK.
    """

    name = "Gemini"

    def generate(self, request: PromptRequest) -> LLMResult:
        client = genai.Client(api_key=self.config.api_key)
        full_prompt = f"{request.system_prompt}\n\n{request.user_content}"

        try:
            response = client.models.generate_content(
                model=self.model,
                contents=full_prompt,
                config=types.GenerateContentConfig(
                    max_output_tokens=self.config.max_tokens,
                    temperature=self.config.temperature,
                ),
            )
        except errors.APIError as e:
            raise ProviderHTTPError(self.name, e.code, json.dumps(e.details))
        except Exception as e:
            raise LLMError(f"{self.name} API call failed: {e}")

        text = self._require_text(_extract_text(response), response)

        input_tokens = 0
        output_tokens = 0
        usage = getattr(response, "usage_metadata", None)
        if usage:
            input_tokens = usage.prompt_token_count or 0
            output_tokens = usage.candidates_token_count or 0

        return LLMResult(
            text=text,
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )


def _extract_text(response) -> str | None:
    """Join the text parts of the first candidate, in order."""
    if not response.candidates:
        return None

    content = response.candidates[0].content
    if content is None or not content.parts:
        return None

    return "".join(part.text for part in content.parts if part.text)
