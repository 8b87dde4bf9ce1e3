"""Git Diff Source - Read (and if needed, stage) changes for the next commit."""

import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

# git exits with 128 outside a repository or before the first commit
NO_REPOSITORY_EXIT = 128


class GitError(Exception):
    """Raised when git operations fail."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


class DiffSource(ABC):
    """Where the staged diff comes from."""

    @abstractmethod
    def get_staged_diff(self) -> str:
        pass

    @abstractmethod
    def stage_all(self) -> None:
        pass


class GitDiffSource(DiffSource):
    """Reads the staged diff by running git in a subprocess."""

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = cwd

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"Git command failed: git {' '.join(args)}\n{e.stderr}",
                returncode=e.returncode,
            )
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def get_staged_diff(self) -> str:
        """Return the trimmed `git diff --staged` output, or '' when there is no repository."""
        try:
            return self._run_git('diff', '--staged').strip()
        except GitError as e:
            if e.returncode == NO_REPOSITORY_EXIT:
                return ""
            raise

    def stage_all(self) -> None:
        self._run_git('add', '.')
