"""
Terminal Output

Everything cba shows the user: the suggestion block, staging notices, the
config listing, verbose stats and errors. Colours are used on terminals
unless NO_COLOR is set; FORCE_COLOR turns them on everywhere.
"""

import itertools
import os
import re
import sys
import threading

from cba import COMMIT_TYPES

RESET = '\033[0m'

STYLES = {
    'bold': '1',
    'red': '31',
    'green': '32',
    'yellow': '33',
    'blue': '34',
    'magenta': '35',
    'cyan': '36',
    'gray': '90',
}

# chore and style fall back to gray
TYPE_STYLES = {
    'feat': 'green',
    'fix': 'red',
    'docs': 'cyan',
    'refactor': 'yellow',
    'test': 'magenta',
    'perf': 'green',
}

COMMIT_PREFIX = re.compile(r'^(\w+)(\([^)]*\))?!?:')


def _colors_enabled() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    return hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()


COLORS_ENABLED = _colors_enabled()


def paint(text: str, *styles: str) -> str:
    """Wrap text in the ANSI codes for the named styles."""
    if not COLORS_ENABLED:
        return text
    codes = ';'.join(STYLES[style] for style in styles)
    return f"\033[{codes}m{text}{RESET}"


def colorize_commit_type(message: str) -> str:
    """Highlight a conventional prefix such as `feat(cli):` on the first line."""
    match = COMMIT_PREFIX.match(message)
    if not COLORS_ENABLED or not match or match.group(1) not in COMMIT_TYPES:
        return message
    prefix = match.group(0)
    return paint(prefix, 'bold', TYPE_STYLES.get(match.group(1), 'gray')) + message[len(prefix):]


def print_error(message: str) -> None:
    print(paint(f"Error: {message}", 'red'), file=sys.stderr)


def print_success(message: str) -> None:
    print(paint(message, 'green'))


def print_notice(message: str) -> None:
    print(paint(message, 'yellow'))


def print_clean_tree() -> None:
    print(paint("No changes to commit. Working tree is clean.", 'blue'))


def print_suggestion(message: str, command: str, auto_staged: bool = False) -> None:
    """The suggested message, a ready-to-run commit command and the staging note."""
    print(paint("\nSuggested commit message:\n", 'cyan'))
    print(colorize_commit_type(message))
    print(paint(f"\nUse it with: {command}", 'gray'))
    if auto_staged:
        print_notice("\nNote: All files were automatically staged for this commit.")


def print_config(entries: dict[str, str], path) -> None:
    print(paint("Current configuration:", 'cyan'))
    for key, value in entries.items():
        print_success(f"{key}: {value}")
    print(paint(f"  (from {path})", 'gray'))


def print_stat(label: str, value) -> None:
    print(paint(f"  {label}: {value}", 'gray'))


class Spinner:
    """Spins next to a label while the block runs. Silent when stdout is not a terminal."""

    FRAMES = '⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏'

    def __init__(self, label: str = "", interval: float = 0.08):
        self.label = label
        self.interval = interval
        self._stop = threading.Event()
        self._thread = None

    def _spin(self):
        for frame in itertools.cycle(self.FRAMES):
            if self._stop.is_set():
                break
            sys.stdout.write(f'\r\033[K{frame} {self.label}')
            sys.stdout.flush()
            self._stop.wait(self.interval)

    def __enter__(self):
        if sys.stdout.isatty():
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc):
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        sys.stdout.write('\r\033[K')
        sys.stdout.flush()
