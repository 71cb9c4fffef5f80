"""Anthropic Claude provider implementation."""

from anthropic import Anthropic, APIStatusError

from commitgen.llm.base import BaseLLMProvider, LLMResult, PromptRequest
from commitgen.llm.exceptions import LLMError, ProviderHTTPError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider (messages API, x-api-key auth)."""

    name = "Anthropic"

    def generate(self, request: PromptRequest) -> LLMResult:
        client = Anthropic(api_key=self.config.api_key)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                system=request.system_prompt,
                messages=[{"role": "user", "content": request.user_content}],
            )
        except APIStatusError as e:
            raise ProviderHTTPError(self.name, e.status_code, e.response.text)
        except Exception as e:
            raise LLMError(f"{self.name} API call failed: {e}")

        # Claude may split its answer across several text blocks
        text = "".join(
            block.text for block in message.content or [] if getattr(block, "type", None) == "text"
        )
        text = self._require_text(text, message)

        return LLMResult(
            text=text,
            model=self.model,
            input_tokens=message.usage.input_tokens if message.usage else 0,
            output_tokens=message.usage.output_tokens if message.usage else 0,
        )
