"""Shared base for closed, name-addressable format enumerations."""

from enum import Enum

from archivetype._exceptions import UnknownFormatError


class NamedFormat(Enum):
    """
    Enum member carrying a canonical name and a default file extension.

    The member value is the lower-case canonical name, so plain value
    lookup (``CompressionType("gzip")``) keeps working. Subclasses add
    case-insensitive lookup through ``is_valid`` and ``from_string``.
    """

    def __new__(cls, identifier: str, default_extension: str):
        member = object.__new__(cls)
        member._value_ = identifier.lower()
        member.default_extension = default_extension
        return member

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Canonical names in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def is_valid(cls, name: str) -> bool:
        """Check whether name case-insensitively matches a known member."""
        if not isinstance(name, str):
            return False
        wanted = name.lower()
        return any(member.value == wanted for member in cls)

    @classmethod
    def from_string(cls, name: str):
        """
        Resolve a member from its name, ignoring case.

        Raises:
            UnknownFormatError: If no member has that name
        """
        if isinstance(name, str):
            wanted = name.lower()
            for member in cls:
                if member.value == wanted:
                    return member

        raise UnknownFormatError(
            f"Unknown {cls._label()}: {name!r}. Known: {', '.join(cls.names())}"
        )

    @classmethod
    def _label(cls) -> str:
        return cls.__name__

    def __str__(self) -> str:
        return self.value
