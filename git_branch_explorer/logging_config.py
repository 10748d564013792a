"""Logging configuration for git-branch-explorer"""
import logging
import sys
from pathlib import Path
from typing import Optional

LOG_DIR_NAME = '.git-branch-explorer'
LOG_FILE_NAME = 'git-branch-explorer.log'

CONSOLE_FORMAT = '%(levelname)s [%(name)s] %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """Colors the level name when stderr is a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None or not sys.stderr.isatty():
            return super().format(record)
        # Other handlers share the record, so restore the plain name afterwards
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def get_log_file(log_dir: Optional[Path] = None) -> Path:
    """Return the path of the session log file."""
    if log_dir is None:
        log_dir = Path.home() / LOG_DIR_NAME
    return log_dir / LOG_FILE_NAME


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    tui_mode: bool = False,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages
        tui_mode: If True, log everything to the session file and nothing to
            the terminal, which belongs to the UI
        log_dir: Directory for the log file (defaults to ~/.git-branch-explorer)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if tui_mode:
        log_file = get_log_file(log_dir)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode='w')  # Overwrite each run
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        root_logger.setLevel(logging.DEBUG)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT))
        if debug:
            root_logger.setLevel(logging.DEBUG)
        elif verbose:
            root_logger.setLevel(logging.INFO)
        else:
            root_logger.setLevel(logging.WARNING)

    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger named after the module, without the package prefix."""
    for prefix in ('git_branch_explorer.', 'services.'):
        if name.startswith(prefix):
            name = name[len(prefix):]
    return logging.getLogger(name)
