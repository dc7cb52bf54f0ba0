"""Entry point for gitsy."""

import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from gitsy.cli.args import parse_args
from gitsy.config import load_or_create_config
from gitsy.core.worktree_manager import WorktreeManager
from gitsy.exceptions import GitsyError
from gitsy.logging_config import LOG_FILE, get_logger, setup_logging
from gitsy.services.git import GitWorktreeGateway, find_repo_root
from gitsy.tui import GitsyApp, run_setup

console = Console()
logger = get_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        repo_root = find_repo_root()
        config = load_or_create_config(repo_root, run_setup)
        workspace_root = config.resolve_workspace_root(repo_root)
        logger.info(f"Managing worktrees of {repo_root} under {workspace_root}")

        gateway = GitWorktreeGateway(repo_root, workspace_root)
        app = GitsyApp(WorktreeManager(gateway))
        app.run()

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except GitsyError as e:
        logger.error(str(e))
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if parsed_args.debug:
            console.print_exception()
        else:
            console.print(f"[dim]See {LOG_FILE} for details[/dim]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
