"""Prompt Builder - Construct LLM prompts for commit message generation."""

from dataclasses import dataclass

from cba import COMMIT_TYPES

SYSTEM_PROMPT = (
    "You are a helpful Git assistant. "
    "Always respond with just the commit message, no explanations."
)

MAX_SUBJECT_LENGTH = 72


@dataclass(frozen=True)
class PromptPair:
    """System and user messages for a single request."""
    system: str
    user: str


class PromptBuilder:
    """Constructs the two messages sent to the model. No I/O, no state."""

    def build(self, diff: str) -> PromptPair:
        return PromptPair(system=SYSTEM_PROMPT, user=self._build_user_prompt(diff))

    def _build_user_prompt(self, diff: str) -> str:
        prefixes = ', '.join(f"{name}:" for name in COMMIT_TYPES)
        instructions = (
            "Generate a concise, imperative-style Git commit message "
            f"(under {MAX_SUBJECT_LENGTH} characters for the subject) "
            "based on the following staged changes diff. "
            f"Start the subject with a conventional commit prefix ({prefixes}). "
            "Do not include any additional information, such as file names or file paths. "
            'If the diff is empty, return "No changes". '
            "Focus on what changed and why, without unnecessary details:"
        )
        return f"{instructions}\n\n{diff}"
