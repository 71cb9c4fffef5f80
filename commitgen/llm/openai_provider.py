"""OpenAI GPT provider implementation."""

from openai import APIStatusError, OpenAI

from commitgen.llm.base import BaseLLMProvider, LLMResult, PromptRequest
from commitgen.llm.exceptions import LLMError, ProviderHTTPError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider (chat completions, bearer auth)."""

    name = "OpenAI"

    def generate(self, request: PromptRequest) -> LLMResult:
        client = OpenAI(api_key=self.config.api_key)

        try:
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                messages=[
                    {"role": "system", "content": request.system_prompt},
                    {"role": "user", "content": request.user_content},
                ],
            )
        except APIStatusError as e:
            raise ProviderHTTPError(self.name, e.status_code, e.response.text)
        except Exception as e:
            raise LLMError(f"{self.name} API call failed: {e}")

        text = None
        if response.choices:
            text = response.choices[0].message.content
        text = self._require_text(text, response)

        usage = response.usage
        return LLMResult(
            text=text,
            model=self.model,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
