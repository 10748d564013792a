"""Entry point for git-branch-explorer."""

import os
import sys

from rich.console import Console
from rich.markup import escape

from git_branch_explorer.cli.args import parse_args
from git_branch_explorer.config import Config
from git_branch_explorer.core.session import BranchSessionController
from git_branch_explorer.exceptions import RepositoryOpenError
from git_branch_explorer.logging_config import get_log_file, get_logger, setup_logging
from git_branch_explorer.services.git import GitOperations

console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    config = Config(
        repo_path=os.getcwd(),
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
    )

    # Log to stderr until the TUI owns the terminal
    setup_logging(verbose=config.verbose, debug=config.debug)

    try:
        backend = GitOperations(config.repo_path, config.remote_name)
    except RepositoryOpenError as e:
        logger.debug(f"Repository open failed: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        return 1

    try:
        setup_logging(verbose=config.verbose, debug=config.debug, tui_mode=True)
        if config.debug:
            logger.debug(f"Configuration: {config.to_dict()}")

        from git_branch_explorer.tui import BranchExplorerApp

        controller = BranchSessionController(backend, config)
        app = BranchExplorerApp(controller, render_interval=config.render_interval)
        app.run()
        return app.return_code or 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        if config.debug:
            console.print(f"[dim]See {escape(str(get_log_file()))} for details[/dim]", soft_wrap=True)
        return 1
    finally:
        backend.close()


if __name__ == "__main__":
    sys.exit(main())
