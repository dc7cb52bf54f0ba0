"""Command-line argument parsing for gitsy."""

import argparse
from typing import Optional, Sequence

from gitsy.__version__ import __version__


def parse_args(argv: Optional[Sequence[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="gitsy",
        description="Interactive manager for git worktrees, one per branch",
        epilog="Run inside a git repository. On first use gitsy asks where to store "
        "worktrees and saves the answer to .gitsy.toml in the repository root.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log INFO messages to ~/.gitsy/gitsy.log"
    )
    parser.add_argument("--version", action="version", version=f"gitsy {__version__}")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug information (including git commands) to ~/.gitsy/gitsy.log",
    )

    return parser.parse_args(argv)
