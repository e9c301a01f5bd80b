"""
Exception hierarchy for archivetype.

All archivetype exceptions inherit from ArchiveTypeError.
Enables granular exception handling for different failure modes.

Usage:
    from archivetype._exceptions import ArchiveTypeError, UnknownFormatError

    try:
        compression = CompressionType.from_string(name)
    except UnknownFormatError:
        # Fall back to plain copy
        compression = None
    except ArchiveTypeError:
        # Catch-all for other archivetype errors
        raise
"""


class ArchiveTypeError(Exception):
    """Base exception for all archivetype errors."""

    pass


class UnknownFormatError(ArchiveTypeError):
    """
    Name not recognized as a compression algorithm or archive format.

    Raised when:
    - CompressionType.from_string() receives an unknown name
    - ArchiveFormat.from_string() receives an unknown name

    Recoverable: callers usually pick a fallback.

    Examples:
        - "Unknown compression type: 'lz4'. Known: bzip2, gzip, xz, pack200"
        - "Unknown archive format: 'rar'. Known: ar, cpio, dump, ..."
    """

    pass


class InvalidDestinationError(ArchiveTypeError):
    """
    Extraction target cannot be used as an output directory.

    Raised when:
    - Destination exists and is a regular file
    - Destination could not be created
    - Destination is not a writable directory

    Examples:
        - "/tmp/out exists and is a file, directory or path expected"
        - "Can not write to destination /readonly/out"
    """

    pass


class ArchiveIOError(ArchiveTypeError):
    """
    I/O operation failed.

    Wraps the underlying OSError (available as __cause__).

    Raised when:
    - Reading the source or writing the destination stream fails
    - Destination file cannot be opened for writing
    - Path canonicalization fails (symlink loop, permission denied)
    - Remote object cannot be opened (unsupported scheme, 403/404, timeout)

    Examples:
        - "Failed to copy stream after 16048 bytes: [Errno 28] No space left on device"
        - "Unsupported URL scheme: ftp://host/data.zip"
    """

    pass


class ArchivePathError(ArchiveTypeError):
    """
    Path is not located where it is required to be.

    Raised when:
    - relative_path() node is not nested under root
    - relative_path() node and root are the same path

    Examples:
        - "/srv/other/file.txt is not located under /srv/data"
    """

    pass
