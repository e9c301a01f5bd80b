"""
File type detection from names.

Maps file name suffixes to the archive format and/or compression type
they denote. Detection is purely name based: files are never opened.

Rules:
- Name is lowercased, then each registered suffix is tested in order
- First suffix the name ends with wins
- Combined suffixes (.tar.gz) are registered before their components (.gz)
- No match → UNKNOWN

Examples:
    get_file_type("backup.tar.gz") → .tar.gz (TAR, GZIP)
    get_file_type("backup.TGZ")    → .tgz (TAR, GZIP)
    get_file_type("notes.txt")     → UNKNOWN
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from archivetype._logging import get_logger
from archivetype.archive_format import ArchiveFormat
from archivetype.compression import CompressionType

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileType:
    """
    A file extension and the archive format and/or compression it denotes.

    At least one of archive_format/compression_type is set, except for the
    UNKNOWN sentinel which has neither and an empty suffix.
    """

    suffix: str
    archive_format: ArchiveFormat | None = None
    compression_type: CompressionType | None = None

    def __post_init__(self):
        detected = self.archive_format is not None or self.compression_type is not None
        if self.suffix and not detected:
            raise ValueError(
                f"Suffix {self.suffix!r} must denote an archive format, "
                f"a compression type, or both"
            )
        if not self.suffix and detected:
            raise ValueError("Only registered suffixes may carry a format")

    @property
    def is_archive(self) -> bool:
        """True if the file extension denotes an archive."""
        return self.archive_format is not None

    @property
    def is_compressed(self) -> bool:
        """True if the file extension denotes a compressed file."""
        return self.compression_type is not None

    def __str__(self) -> str:
        return self.suffix


UNKNOWN = FileType("")
"""Special case for names that are neither archives nor compressed files."""


def build_registry(*entries: FileType) -> tuple[FileType, ...]:
    """
    Freeze entries into an ordered lookup table.

    Raises:
        ValueError: If a suffix is registered twice, is not lower-case, or
            can never match because an earlier suffix always catches it
            first (e.g. ".gz" registered before ".tar.gz").
    """
    seen: list[str] = []
    for entry in entries:
        suffix = entry.suffix
        if not suffix or suffix != suffix.lower():
            raise ValueError(f"Registered suffix must be non-empty lower-case: {suffix!r}")
        if suffix in seen:
            raise ValueError(f"Suffix {suffix!r} registered twice")
        for earlier in seen:
            if suffix.endswith(earlier):
                raise ValueError(
                    f"Suffix {suffix!r} is shadowed by earlier suffix {earlier!r}; "
                    f"register the longer suffix first"
                )
        seen.append(suffix)
    return tuple(entries)


_REGISTRY = build_registry(
    # compressed archives
    FileType(".tar.gz", ArchiveFormat.TAR, CompressionType.GZIP),
    FileType(".tgz", ArchiveFormat.TAR, CompressionType.GZIP),
    FileType(".tar.bz2", ArchiveFormat.TAR, CompressionType.BZIP2),
    FileType(".tbz2", ArchiveFormat.TAR, CompressionType.BZIP2),
    FileType(".tar.xz", ArchiveFormat.TAR, CompressionType.XZ),
    FileType(".txz", ArchiveFormat.TAR, CompressionType.XZ),
    # archive formats
    FileType(".7z", ArchiveFormat.SEVEN_Z),
    FileType(".a", ArchiveFormat.AR),
    FileType(".ar", ArchiveFormat.AR),
    FileType(".deb", ArchiveFormat.AR),
    FileType(".rpm", ArchiveFormat.CPIO),
    FileType(".cpio", ArchiveFormat.CPIO),
    FileType(".dump", ArchiveFormat.DUMP),
    FileType(".jar", ArchiveFormat.JAR),
    FileType(".tar", ArchiveFormat.TAR),
    FileType(".zip", ArchiveFormat.ZIP),
    FileType(".zipx", ArchiveFormat.ZIP),
    # compression formats
    FileType(".bz2", compression_type=CompressionType.BZIP2),
    FileType(".xz", compression_type=CompressionType.XZ),
    FileType(".gzip", compression_type=CompressionType.GZIP),
    FileType(".gz", compression_type=CompressionType.GZIP),
    FileType(".pack", compression_type=CompressionType.PACK200),
)


def registered_suffixes() -> tuple[str, ...]:
    """All known suffixes in matching order."""
    return tuple(entry.suffix for entry in _REGISTRY)


def get_file_type(file: str | os.PathLike | Any) -> FileType:
    """
    Detect the file type of a name, path or file handle.

    Strings are matched as a whole, query strings and all.
    Path-like objects and handles with a ``name`` attribute are matched
    by their final component. Nothing is ever opened or read.

    Args:
        file: File name, os.PathLike, or object with a ``name``

    Returns:
        Matching registry entry, or UNKNOWN
    """
    filename = _name_of(file)
    if filename is None:
        logger.debug(f"No usable name on {type(file).__name__}, treating as unknown")
        return UNKNOWN

    lowered = filename.lower()
    for entry in _REGISTRY:
        if lowered.endswith(entry.suffix):
            logger.debug(f"{filename} matched {entry.suffix}")
            return entry

    logger.debug(f"{filename} matched no known suffix")
    return UNKNOWN


def _name_of(file: Any) -> str | None:
    if isinstance(file, str):
        return file

    if isinstance(file, os.PathLike):
        name = os.fspath(file)
        return Path(name).name if isinstance(name, str) else None

    # Open file objects; fd-backed handles report an int name
    name = getattr(file, "name", None)
    if isinstance(name, str):
        return os.path.basename(name)
    return None
