"""Process setup for the ef80escape CLI: logging and standard streams."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure the ef80escape namespace logger.

    Console output goes to stderr, since stdout carries converted data.
    With log_file set, a rotating file handler (5MB, 3 backups) is added.

    Args:
        level: Minimum level for all handlers.
        log_file: Optional path of a log file. Parent directories are created.
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    app_logger = logging.getLogger("ef80escape")
    app_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates on reconfigure
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()

    app_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        app_logger.addHandler(file_handler)

    # Don't propagate to root logger
    app_logger.propagate = False

    logger.debug("Logging configured: level=%s file=%s", logging.getLevelName(level), log_file)


def configure_stdio() -> None:
    """Switch the standard streams to UTF-8 regardless of the locale.

    stdin and stdout carry encoded text, which is always valid UTF-8, so any
    other byte sequence is an error there. stderr only carries messages and
    writes unencodable characters (file names from surrogateescape, say) as
    backslash escapes instead of failing.
    """
    for stream, errors in (
        (sys.stdin, "strict"),
        (sys.stdout, "strict"),
        (sys.stderr, "backslashreplace"),
    ):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors=errors)
