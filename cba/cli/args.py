"""CLI Argument Parsing"""

import argparse
import sys
import argcomplete
from argcomplete.completers import ChoicesCompleter

from cba import __version__
from cba.config import ALIASES


class CliParser(argparse.ArgumentParser):
    """Usage errors exit 1, like every other failure of the tool."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = CliParser(
        prog='cba',
        description='AI-powered commit message generator',
        epilog='Example: cba (stages everything if nothing is staged, then suggests a message)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Model id for this run only')
    parser.add_argument('--verbose', action='store_true', help='Show debug info (model, diff size, tokens used)')

    subparsers = parser.add_subparsers(dest='command', metavar='{commit,config}')

    subparsers.add_parser('commit', help='Generate commit message for staged changes (default)')

    config_parser = subparsers.add_parser('config', help='Manage configuration')
    # action is validated by the command so a bad value exits 1 with our own message
    config_parser.add_argument('action', nargs='?', metavar='action', help='Action to perform (get|set)')
    key_arg = config_parser.add_argument('key', nargs='?', help=f"Configuration key ({'|'.join(ALIASES)})")
    key_arg.completer = ChoicesCompleter(list(ALIASES))
    config_parser.add_argument('value', nargs='?', help='Configuration value')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
