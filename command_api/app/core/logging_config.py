"""
Logging configuration for the Command API.

``setup_logging`` attaches a console handler to the root logger and,
when ``LOG_FILE`` is set, a file handler as well.  Both use the format
``timestamp [LEVEL] logger: message``.  Calling it again does not
duplicate handlers: the console handler is recognised by name and file
handlers by their resolved path.
"""

import logging
from pathlib import Path
from typing import Optional

CONSOLE_HANDLER_NAME = "command_api.console"

_FORMATTER = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == str(path)
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to append log records to, resolved against the current
        working directory.  No file handler is attached when omitted.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(_FORMATTER)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(logger, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(_FORMATTER)
            logger.addHandler(file_handler)
