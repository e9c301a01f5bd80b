"""
Compression algorithms known to archivetype.

Each member carries its canonical name (``value``) and the default file
extension used when producing a compressed file of that kind.

Examples:
    >>> from archivetype.compression import CompressionType
    >>> CompressionType.from_string("GZIP") is CompressionType.GZIP
    True
    >>> CompressionType.XZ.default_extension
    '.xz'
"""

from enum import unique

from archivetype._catalog import NamedFormat


@unique
class CompressionType(NamedFormat):
    """Denotes a compression algorithm such as gzip or bzip2."""

    BZIP2 = ("bzip2", ".bz2")
    GZIP = ("gzip", ".gz")
    XZ = ("xz", ".xz")
    PACK200 = ("pack200", ".pack")

    @classmethod
    def _label(cls) -> str:
        return "compression type"
