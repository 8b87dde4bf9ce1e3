"""Prompt Construction Package"""

from cba.prompts.builder import PromptBuilder, PromptPair, SYSTEM_PROMPT

__all__ = [
    "PromptBuilder",
    "PromptPair",
    "SYSTEM_PROMPT",
]
