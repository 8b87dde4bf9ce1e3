"""OpenRouter LLM Client (OpenAI-compatible API)"""

from openai import APIError, AuthenticationError, OpenAI

from cba.llm.base import LLMClient, LLMResponse, LLMError
from cba.prompts import PromptPair


class OpenRouterClient(LLMClient):
    """OpenRouter chat completions client. One request, no retries."""

    BASE_URL = "https://openrouter.ai/api/v1"

    def __init__(self, api_key: str, model: str):
        if not api_key:
            raise LLMError("No API key given for OpenRouter.")
        self.api_key = api_key
        self.model = model
        self._client = OpenAI(base_url=self.BASE_URL, api_key=api_key, max_retries=0)

    @property
    def name(self) -> str:
        return f"OpenRouter ({self.model})"

    def generate(self, prompt: PromptPair) -> LLMResponse:
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": prompt.system},
                    {"role": "user", "content": prompt.user},
                ],
            )
        except AuthenticationError:
            raise LLMError("Invalid API key. Check your OPENROUTER_API_KEY.")
        except APIError as e:
            raise LLMError(f"OpenRouter API error: {e.message}")

        if not response.choices:
            raise LLMError(f"Empty response from {self.name}")

        content = response.choices[0].message.content or ""
        tokens_used = response.usage.total_tokens if response.usage else 0
        return LLMResponse(content=content, model=response.model or self.model, tokens_used=tokens_used)
