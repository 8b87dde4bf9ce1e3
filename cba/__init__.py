"""
cba - Commit By AI

Suggests a commit message for the staged git changes using an LLM.
"""

__version__ = "1.0.0"

# Conventional commit prefixes the model is asked to choose from
# Used by: prompts/builder.py (instructions), output (type colouring)
COMMIT_TYPES = ('feat', 'fix', 'docs', 'refactor', 'chore', 'test', 'style', 'perf')
