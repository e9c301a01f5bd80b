import importlib.metadata as _metadata
import logging
import os

from archivetype._constants import BUFFER_SIZE_ENV_VAR, DEFAULT_BUFFER_SIZE
from archivetype._exceptions import (
    ArchiveIOError,
    ArchivePathError,
    ArchiveTypeError,
    InvalidDestinationError,
    UnknownFormatError,
)
from archivetype._logging import disable_logging, setup_basic_logging
from archivetype.archive_format import ArchiveFormat
from archivetype.compression import CompressionType
from archivetype.filetype import UNKNOWN, FileType, get_file_type, registered_suffixes
from archivetype.io import (
    close_quietly,
    copy,
    copy_stream,
    files_contained_in,
    relative_path,
    require_directory,
)

__version__ = _metadata.version("archivetype")

# Global copy buffer size; None until first resolved from env/default
_BUFFER_SIZE: int | None = None


def set_buffer_size(size: int) -> None:
    """
    Set the default chunk size used by copy() and copy_stream().

    Warning - Thread/Fork Safety:
        This function modifies a global variable and is NOT thread-safe.
        Set it once at startup, or pass buffer_size explicitly per call.

    Raises:
        ValueError: If size is not a positive integer

    Example:
        >>> import archivetype
        >>> archivetype.set_buffer_size(64 * 1024)
        >>> archivetype.get_buffer_size()
        65536
    """
    global _BUFFER_SIZE

    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"Buffer size must be a positive integer, got {size!r}")

    _BUFFER_SIZE = size


def get_buffer_size() -> int:
    """
    Get the current default chunk size for copy operations.

    Resolution:
        1. Value given to set_buffer_size()
        2. ARCHIVETYPE_BUFFER_SIZE env var (if set)
        3. DEFAULT_BUFFER_SIZE (8024)
    """
    if _BUFFER_SIZE is not None:
        return _BUFFER_SIZE

    env_override = os.environ.get(BUFFER_SIZE_ENV_VAR)
    if not env_override:
        return DEFAULT_BUFFER_SIZE

    try:
        size = int(env_override)
    except ValueError:
        raise ValueError(
            f"{BUFFER_SIZE_ENV_VAR} must be an integer, got {env_override!r}"
        ) from None
    set_buffer_size(size)
    return size


def verbose(level=True):
    """
    Enable/disable verbose logging for archivetype operations.

    Args:
        level: Logging level to enable:
            - True or "info": Show INFO and above (default)
            - "debug": Show DEBUG and above (every suffix lookup)
            - False: Disable all logging

    Example:
        >>> import archivetype
        >>> archivetype.verbose("debug")
        >>> archivetype.verbose(False)
    """
    if level is False:
        disable_logging()
    elif level is True or level == "info":
        setup_basic_logging(level=logging.INFO)
    elif level == "debug":
        setup_basic_logging(level=logging.DEBUG)
    else:
        raise ValueError(
            f"Invalid verbose level: {level}. " "Use True, 'info', 'debug', or False."
        )


__all__ = [
    "UNKNOWN",
    "ArchiveFormat",
    "ArchiveIOError",
    "ArchivePathError",
    "ArchiveTypeError",
    "CompressionType",
    "FileType",
    "InvalidDestinationError",
    "UnknownFormatError",
    "close_quietly",
    "copy",
    "copy_stream",
    "files_contained_in",
    "get_buffer_size",
    "get_file_type",
    "registered_suffixes",
    "relative_path",
    "require_directory",
    "set_buffer_size",
    "verbose",
]
