"""Message Generator - Turn a staged diff into a suggested commit message."""

from collections.abc import Mapping
from typing import Callable, Optional

from cba.config import API_KEY_VAR, MODEL_ID_VAR, DEFAULT_MODEL_ID, ConfigError, ProviderConfig
from cba.llm import LLMClient, LLMResponse, get_client
from cba.prompts import PromptBuilder


class MessageGenerator:
    """
    Resolves credentials, calls the model once and returns its trimmed answer.

    Args:
        config: Mapping holding the canonical keys, usually os.environ after
            the config file has been merged into it.
        client_factory: Called as factory(api_key=..., model=...) to build
            the LLM client. Defaults to cba.llm.get_client.
        builder: PromptBuilder to use.
        model: Model override that wins over the configured one.
    """

    def __init__(
        self,
        config: Mapping[str, str],
        client_factory: Optional[Callable[..., LLMClient]] = None,
        builder: Optional[PromptBuilder] = None,
        model: Optional[str] = None,
    ):
        self.config = config
        self._client_factory = client_factory or get_client
        self._builder = builder or PromptBuilder()
        self._model = model
        self.last_response: Optional[LLMResponse] = None

    def resolve(self) -> ProviderConfig:
        """Read key and model. Fails before anything touches the network."""
        api_key = self.config.get(API_KEY_VAR)
        if not api_key:
            raise ConfigError(
                f"{API_KEY_VAR} is not set. Configure it with:\n"
                "  cba config set api_key <your-openrouter-key>"
            )
        model_id = self._model or self.config.get(MODEL_ID_VAR) or DEFAULT_MODEL_ID
        return ProviderConfig(api_key=api_key, model_id=model_id)

    def generate(self, diff: str) -> str:
        provider = self.resolve()
        client = self._client_factory(api_key=provider.api_key, model=provider.model_id)
        prompt = self._builder.build(diff)
        self.last_response = client.generate(prompt)
        return self.last_response.content.strip()
