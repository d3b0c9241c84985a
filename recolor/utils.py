"""
Utility functions for recolor.

  - Version lookup (for --version)
  - Logging setup (log records rendered by Rich on stderr)
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from rich.logging import RichHandler

from .console import err_console


def get_version() -> str:
    """Get the installed package version from Python package metadata.

    Returns "dev" when running from source without installing.
    """
    try:
        return version("recolor")
    except PackageNotFoundError:
        return "dev"


def setup_logging(level: int = logging.WARNING) -> None:
    """Route the recolor loggers through a RichHandler on stderr.

    Only the "recolor" logger hierarchy is configured, so libraries and the
    host application keep their own logging setup. Calling this again replaces
    the previous handler instead of stacking a second one.
    """
    logger = logging.getLogger("recolor")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
