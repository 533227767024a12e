"""Fatal parse errors.

Every error raised by the parser derives from DXFParseError, which in turn
derives from ezdxf's DXFStructureError, so code that already handles ezdxf
read failures also handles ours.
"""

from ezdxf.lldxf.const import DXFStructureError


class DXFParseError(DXFStructureError):
    """Base class for all fatal errors raised while parsing a DXF document."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class EmptyInputError(DXFParseError):
    """The input does not contain a single group."""


class ScannerError(DXFParseError):
    """The group scanner was used outside of its valid range."""


class PrematureEndError(ScannerError):
    """The input ended before the EOF group was read."""


class AlreadyAtEOFError(ScannerError):
    """A group was requested after the EOF group has been read."""


class GroupValueError(DXFParseError, ValueError):
    """A raw group value cannot be coerced to the type of its group code."""

    def __init__(self, message: str, code: int | None = None, value: str | None = None, line: int | None = None):
        self.code = code
        self.value = value
        super().__init__(message, line=line)


class InvalidBooleanError(GroupValueError):
    """A boolean group holds something other than "0" or "1"."""


class MalformedNumberError(GroupValueError):
    """A numeric group (or a group code line) holds no parseable number."""


class PointCodeError(DXFParseError):
    """The y coordinate of a point does not follow its x coordinate."""


class InvalidInputError(DXFParseError, TypeError):
    """A record passed to the handle allocator is missing."""
