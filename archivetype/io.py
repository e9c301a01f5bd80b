"""
Stream and filesystem helpers for archive tooling.

Main functions:
    copy: Copy a binary stream into a file path or another stream
    copy_stream: Buffered stream-to-stream copy with byte accounting
    relative_path: Path of a node relative to a root directory
    require_directory: Ensure an extraction target is a writable directory
    close_quietly: Best-effort close for cleanup paths
    files_contained_in: Direct children of a directory, or the file itself
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, BinaryIO

from archivetype._exceptions import (
    ArchiveIOError,
    ArchivePathError,
    InvalidDestinationError,
)
from archivetype._logging import get_logger

logger = get_logger(__name__)

PathType = str | os.PathLike


def copy(
    source: BinaryIO,
    destination: PathType | BinaryIO,
    buffer_size: int | None = None,
) -> int:
    """
    Copy the content of a binary stream into a file or another stream.

    A path destination is created (or truncated) and always closed before
    returning, including when the copy fails. A partially written file may
    remain after a failure.

    Args:
        source: Readable binary stream
        destination: Target file path, or writable binary stream
        buffer_size: Chunk size in bytes (default: get_buffer_size())

    Returns:
        Number of bytes written

    Raises:
        ArchiveIOError: If the destination cannot be opened or the copy fails
    """
    if not isinstance(destination, (str, os.PathLike)):
        return copy_stream(source, destination, buffer_size)

    # Validate before "wb" truncates an existing file
    buffer_size = _resolve_buffer_size(buffer_size)

    try:
        output = open(destination, "wb")
    except OSError as e:
        raise ArchiveIOError(f"Cannot open {destination} for writing: {e}") from e

    try:
        with output:
            count = copy_stream(source, output, buffer_size)
    except OSError as e:
        # flush on close
        raise ArchiveIOError(f"Failed to write {destination}: {e}") from e

    logger.debug(f"Wrote {count} bytes to {destination}")
    return count


def copy_stream(
    source: BinaryIO, destination: BinaryIO, buffer_size: int | None = None
) -> int:
    """
    Copy the entire content of source into destination.

    A single buffer is allocated per call and reused for every chunk when
    the source supports readinto(); other sources are read with read().
    Short writes (raw streams, pipes, sockets) are retried until the whole
    chunk is accepted, so the returned count is what reached destination.

    Returns:
        Number of bytes written

    Raises:
        ArchiveIOError: On any read or write error. Some prefix of the
            source may already have been written.
        ValueError: If buffer_size is not positive
    """
    buffer_size = _resolve_buffer_size(buffer_size)

    count = 0
    try:
        readinto = getattr(source, "readinto", None)
        if readinto is not None:
            buffer = bytearray(buffer_size)
            with memoryview(buffer) as view:
                while True:
                    n = readinto(view)
                    if n is None:
                        # non-blocking source with nothing available yet
                        continue
                    if n == 0:
                        break
                    count += _write_fully(destination, view[:n])
        else:
            while True:
                chunk = source.read(buffer_size)
                if chunk is None:
                    continue
                if not chunk:
                    break
                count += _write_fully(destination, memoryview(chunk))
    except OSError as e:
        raise ArchiveIOError(f"Failed to copy stream after {count} bytes: {e}") from e

    return count


def _resolve_buffer_size(buffer_size: int | None) -> int:
    if buffer_size is None:
        from archivetype import get_buffer_size

        buffer_size = get_buffer_size()
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    return buffer_size


def _write_fully(destination: BinaryIO, data: memoryview) -> int:
    """Write all of data, following short writes. Returns len(data)."""
    total = len(data)
    while data:
        written = destination.write(data)
        # Legacy file-likes return None after writing everything
        if written is None:
            break
        if written <= 0:
            raise OSError(f"destination accepted no bytes ({len(data)} pending)")
        data = data[written:]
    return total


def relative_path(root: PathType, node: PathType) -> str:
    """
    Compute the path of node relative to root.

    Both paths are made absolute and symlink-free first. If root is
    ``/home/user/project`` and node is ``/home/user/project/assembly/pom.xml``,
    the result is ``assembly/pom.xml``.

    Raises:
        ArchiveIOError: If either path cannot be resolved
        ArchivePathError: If node is not located strictly under root
    """
    try:
        root_path = Path(root).resolve()
        node_path = Path(node).resolve()
    except (OSError, RuntimeError) as e:
        raise ArchiveIOError(f"Cannot resolve {root} or {node}: {e}") from e

    if node_path == root_path or root_path not in node_path.parents:
        raise ArchivePathError(f"{node_path} is not located under {root_path}")

    return str(node_path.relative_to(root_path))


def require_directory(destination: PathType) -> None:
    """
    Ensure destination is a writable directory, creating it if missing.

    Missing parent directories are created too. Calling this again on the
    same path is a no-op.

    Raises:
        InvalidDestinationError: If destination is an existing file, cannot
            be created, or is not writable
    """
    path = Path(destination)
    if path.is_file():
        raise InvalidDestinationError(
            f"{path} exists and is a file, directory or path expected."
        )

    if not path.exists():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise InvalidDestinationError(f"Cannot create destination {path}: {e}") from e
        logger.debug(f"Created destination directory {path}")

    if not path.is_dir() or not os.access(path, os.W_OK):
        raise InvalidDestinationError(f"Can not write to destination {path}")


def close_quietly(closeable: Any) -> None:
    """Close closeable if not None, discarding any error raised while closing."""
    if closeable is None:
        return
    try:
        closeable.close()
    except Exception as e:
        logger.debug(f"Ignored error while closing {closeable!r}: {e}")


def files_contained_in(source: PathType) -> list[Path]:
    """
    Direct children of source if it is a directory, else source itself.

    The listing is taken once; order follows the filesystem.

    Raises:
        ArchiveIOError: If the directory cannot be listed
    """
    path = Path(source)
    if not path.is_dir():
        return [path]

    try:
        return list(path.iterdir())
    except OSError as e:
        raise ArchiveIOError(f"Cannot list {path}: {e}") from e
