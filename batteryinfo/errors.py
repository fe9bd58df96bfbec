"""Errors raised while reading battery information."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Broad category of a battery error."""

    NOT_FOUND = "entity not found"
    INVALID_DATA = "invalid data"
    OTHER = "other error"


class BatteryError(Exception):
    """Failure to read or interpret battery information.

    Every battery operation is some kind of I/O, so the error may carry the
    underlying ``OSError`` as its source, together with an optional
    human-readable description.
    """

    def __init__(
        self,
        description: str | None = None,
        *,
        kind: ErrorKind | None = None,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(description)
        if kind is None:
            kind = ErrorKind.NOT_FOUND if isinstance(source, FileNotFoundError) else ErrorKind.OTHER
        self.kind = kind
        self.description = description
        self.source = source
        self.__cause__ = source

    def __str__(self) -> str:
        if self.description is not None:
            return self.description
        if self.source is not None:
            return str(self.source)
        return self.kind.value

    @classmethod
    def not_found(cls, description: str) -> BatteryError:
        """Error for a value or device that could not be found."""
        return cls(description, kind=ErrorKind.NOT_FOUND)

    @classmethod
    def invalid_data(cls, description: str) -> BatteryError:
        """Error for data that was read but makes no sense."""
        return cls(description, kind=ErrorKind.INVALID_DATA)