"""Logging configuration for gitsy"""
import logging
from pathlib import Path

LOG_DIR = Path.home() / '.gitsy'
LOG_FILE = LOG_DIR / 'gitsy.log'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

PACKAGE_PREFIX = 'gitsy.'


def _log_level(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    The TUI owns the terminal, so records only go to LOG_FILE, which is
    truncated at every start.

    Args:
        verbose: If True, log INFO messages
        debug: If True, log DEBUG messages, including git commands
    """
    level = _log_level(verbose, debug)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(LOG_FILE, mode='w')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(file_handler)

    # GitPython logs every spawned command at DEBUG
    logging.getLogger('git').setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger named after ``name`` without the package prefix.

    Only the package prefix is dropped: ``services.git.worktrees`` must not
    become a child of GitPython's ``git`` logger.
    """
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX):]
    return logging.getLogger(name)
