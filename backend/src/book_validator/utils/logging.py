"""Colored stderr logging shared by the library and the CLI.

Records look like ``[14:02:11] WARNING page expression too long``; colors are
only emitted when stderr is a terminal.
"""

import logging
import sys

GREEN = "\x1b[32m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
DIM = "\x1b[2m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class ValidatorFormatter(logging.Formatter):
    LEVEL_STYLES = {
        logging.DEBUG: (DIM, ""),
        logging.INFO: ("", ""),
        logging.WARNING: (YELLOW, "WARNING "),
        logging.ERROR: (RED, "ERROR "),
        logging.CRITICAL: (RED + BOLD, "CRITICAL "),
    }

    def __init__(self, use_color: bool = True) -> None:
        super().__init__(datefmt="%H:%M:%S")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color, tag = self.LEVEL_STYLES.get(record.levelno, ("", ""))
        ts = self.formatTime(record, self.datefmt)
        message = f"{tag}{record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return f"[{ts}] {message}"
        return f"{DIM}[{ts}]{RESET} {color}{message}{RESET}"


def get_logger(name: str = "book_validator", level: str | None = None) -> logging.Logger:
    """Return the package logger, attaching the stderr handler on first use.

    ``level`` defaults to the configured ``log_level``.
    """
    if level is None:
        from book_validator.config import settings

        level = settings.log_level

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ValidatorFormatter(use_color=sys.stderr.isatty()))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
