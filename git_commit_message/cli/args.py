"""CLI Argument Parsing"""

import argparse
import argcomplete

from git_commit_message import __version__

PROG = 'gcm'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Suggest a one-line commit message for the current git diff using a local Ollama model',
        epilog='Example: git commit -m "$(gcm | tail -n 1)"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Generation options
    parser.add_argument('--staged', action='store_true', help='Describe staged changes (git diff --staged) instead of the working tree')
    parser.add_argument('--verbose', action='store_true', help='Show debug info on stderr (prompt size, timings)')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Write the config file interactively')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
