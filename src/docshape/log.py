"""
Logging setup for the command-line interface.
"""

import logging
from logging import Formatter

from rich.console import Console
from rich.logging import RichHandler

LOGFORMAT_RICH = "%(message)s"

error_console = Console(stderr=True)


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """
    Routes the ``docshape`` loggers to a RichHandler on stderr.

    Calling it again only changes the level.
    """
    log = logging.getLogger("docshape")
    log.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(console=error_console, show_path=False)
        handler.setFormatter(Formatter(LOGFORMAT_RICH))
        log.addHandler(handler)
    log.propagate = False
    return log
