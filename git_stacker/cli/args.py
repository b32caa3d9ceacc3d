"""Command-line argument parsing for git-stacker."""

import argparse
from typing import Optional, Sequence

from git_stacker.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-stacker",
        description="Stacked branches on top of git and GitHub",
        epilog="Submitting requires a GitHub token: set GITHUB_TOKEN or enter one when asked. "
        "Get a token at https://github.com/settings/tokens (scope: repo)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-stacker {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    subparsers.add_parser(
        "create",
        aliases=["c"],
        help="Commit the current changes onto a new stacked branch",
    )
    subparsers.add_parser(
        "submit",
        help="Push the current branch and open a pull request against trunk",
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    args = build_parser().parse_args(argv)
    # Normalize the alias
    if args.command == "c":
        args.command = "create"
    return args
