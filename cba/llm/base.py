"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cba.prompts import PromptPair


@dataclass
class LLMResponse:
    """Structured response from any LLM provider."""
    content: str
    model: str = ""
    tokens_used: int = 0


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class LLMClient(ABC):
    """Abstract base for LLM clients. A client is bound to one key and model."""

    @abstractmethod
    def generate(self, prompt: PromptPair) -> LLMResponse:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
