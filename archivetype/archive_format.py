"""Archive container formats known to archivetype."""

from enum import unique

from archivetype._catalog import NamedFormat


@unique
class ArchiveFormat(NamedFormat):
    """Denotes an archive container format such as tar or zip."""

    AR = ("ar", ".ar")
    CPIO = ("cpio", ".cpio")
    DUMP = ("dump", ".dump")
    JAR = ("jar", ".jar")
    TAR = ("tar", ".tar")
    ZIP = ("zip", ".zip")
    SEVEN_Z = ("7z", ".7z")

    @classmethod
    def _label(cls) -> str:
        return "archive format"
