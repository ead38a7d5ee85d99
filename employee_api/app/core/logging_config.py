"""
Logging setup for the Employee API.

``setup_logging`` installs the application's own handlers on the root
logger: one writing to the console and, when a log file is
configured, one appending to that file.  The handlers are named so a
repeated call (several ``create_app`` invocations in one process) can
recognise them and leave the configuration alone.  Handlers installed
by other parties, such as a test runner, are neither inspected nor
touched.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "employee_api.console"
FILE_HANDLER_NAME = "employee_api.file"
HANDLER_NAMES = (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME)


def app_handlers(logger: Optional[logging.Logger] = None) -> List[logging.Handler]:
    """Return the handlers ``setup_logging`` installed on ``logger`` (root by default)."""
    logger = logger or logging.getLogger()
    return [h for h in logger.handlers if h.get_name() in HANDLER_NAMES]


def _named_handler(handler: logging.Handler, name: str) -> logging.Handler:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Install the console (and optional file) handler on the root logger.

    ``level`` is a level name such as ``"DEBUG"``; unknown names mean
    ``INFO``.  Does nothing if the application's handlers are already
    present.
    """
    root = logging.getLogger()
    if app_handlers(root):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(_named_handler(logging.StreamHandler(), CONSOLE_HANDLER_NAME))
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        root.addHandler(_named_handler(file_handler, FILE_HANDLER_NAME))
