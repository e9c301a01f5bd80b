"""
Logging for archivetype.

Every module logs under the "archivetype" namespace. Nothing is printed
unless the application configures logging or calls archivetype.verbose().

Usage:
    from archivetype._logging import get_logger

    logger = get_logger(__name__)
    logger.debug("backup.tar.gz matched .tar.gz")
"""

import logging
from typing import IO, Optional

ROOT_LOGGER_NAME = "archivetype"

DEFAULT_FORMAT = "%(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "archivetype.console"


def get_logger(name: str) -> logging.Logger:
    """Logger for name, moved under the archivetype namespace if outside it."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    if name == "__main__":
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_basic_logging(
    level: int = logging.INFO,
    format: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Send archivetype records to a console handler at the given level.

    The handler is installed once and reconfigured on later calls. Handlers
    added by the application are left untouched.

    Args:
        level: Minimum level for the archivetype logger and its handler
        format: Record format (default: DEFAULT_FORMAT)
        stream: Target stream (default: sys.stderr)
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None or (stream is not None and handler.stream is not stream):
        if handler is not None:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))

    # records would otherwise print twice under a configured root logger
    logger.propagate = False


def disable_logging() -> None:
    """Silence archivetype completely, whatever handlers are attached."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.CRITICAL + 1)
