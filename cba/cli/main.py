# PYTHON_ARGCOMPLETE_OK
"""CLI Main Entry Point"""

import os
import sys
import time

from cba.config import ConfigError, ConfigStore
from cba.generator import MessageGenerator
from cba.git import DiffSource, GitDiffSource, GitError
from cba.llm import LLMError
from cba.output import print_clean_tree, print_error, print_notice, print_stat, print_suggestion, Spinner

from cba.cli.args import parse_args
from cba.cli.commands import run_config


def _collect_staged_diff(source: DiffSource) -> tuple[str, bool]:
    """Get the staged diff, staging everything once if nothing is staged.

    Returns:
        tuple: (diff, auto_staged)
    """
    diff = source.get_staged_diff()
    if diff:
        return diff, False

    print_notice("No staged changes. Automatically staging all files with `git add .`...")
    source.stage_all()
    return source.get_staged_diff(), True


def shell_quote_message(message: str) -> str:
    """Escape double quotes so the message can go inside git commit -m "..."."""
    return message.replace('"', '\\"')


def _print_verbose_stats(generator: MessageGenerator, diff: str, elapsed: float) -> None:
    response = generator.last_response
    print_stat("Diff", f"{len(diff)} chars")
    if response is not None:
        print_stat("Model", response.model)
        print_stat("Response", f"{response.tokens_used} tokens")
    print_stat("Generate", f"{elapsed:.2f}s")


def _generate_commit_flow(source: DiffSource, generator: MessageGenerator, verbose: bool = False) -> int:
    """Main commit message generation flow.

    Returns:
        int: Exit code
    """
    diff, auto_staged = _collect_staged_diff(source)
    if not diff:
        print_clean_tree()
        return 0

    t0 = time.time()
    with Spinner("Generating commit message..."):
        message = generator.generate(diff)
    elapsed = time.time() - t0

    print_suggestion(message, f'git commit -m "{shell_quote_message(message)}"', auto_staged)
    if verbose:
        _print_verbose_stats(generator, diff, elapsed)
    return 0


def run_commit(model: str | None = None, verbose: bool = False) -> int:
    """Generate a suggestion for the current repository."""
    store = ConfigStore()
    # File values fill in whatever the environment does not already define
    store.export_to(os.environ)
    generator = MessageGenerator(os.environ, model=model)
    if verbose:
        print_stat("Config", store.path)
    return _generate_commit_flow(GitDiffSource(), generator, verbose=verbose)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        if args.command == 'config':
            return run_config(args.action, args.key, args.value)
        return run_commit(model=args.model, verbose=args.verbose)
    except (ConfigError, GitError, LLMError) as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print_notice("\nCancelled.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
