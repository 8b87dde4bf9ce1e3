"""LLM Client Package"""

from cba.llm.base import LLMClient, LLMResponse, LLMError
from cba.llm.openrouter import OpenRouterClient

PROVIDERS = {
    "openrouter": OpenRouterClient,
}


def get_client(api_key: str, model: str, provider: str = "openrouter") -> LLMClient:
    """Build a client bound to the given key and model."""
    if provider not in PROVIDERS:
        raise LLMError(f"Unknown provider: {provider}. Available: {', '.join(PROVIDERS)}.")
    return PROVIDERS[provider](api_key=api_key, model=model)


__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "OpenRouterClient",
    "get_client",
    "PROVIDERS",
]
