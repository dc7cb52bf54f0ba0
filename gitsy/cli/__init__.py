"""Command-line interface for gitsy.

This package provides the CLI entry point and argument parsing.
"""

from .entrypoint import main
from .args import parse_args

__all__ = ["main", "parse_args"]
