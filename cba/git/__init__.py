"""Git Operations Package"""

from cba.git.analyzer import DiffSource, GitDiffSource, GitError

__all__ = [
    "DiffSource",
    "GitDiffSource",
    "GitError",
]
