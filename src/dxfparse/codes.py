"""Group code value types.

Every DXF group code implies the type of the value that follows it. The
ranges below are taken from the AutoCAD 2012 DXF reference (group code value
types, pages 3-10). Codes outside all known ranges keep their raw text and
produce an UNDEFINED_GROUP_CODE diagnostic.
"""

import logging
import re
from enum import Enum

from .diagnostics import Diagnostic, DiagnosticKind
from .errors import InvalidBooleanError, MalformedNumberError
from .protocols import IDiagnosticSink

log = logging.getLogger(__name__)

GroupValue = str | int | float | bool


class GroupValueType(Enum):
    STRING = "STRING"
    FLOAT = "FLOAT"
    INT = "INT"
    BOOLEAN = "BOOLEAN"


# Inclusive ranges, lowest first. Codes up to 9 (including the negative
# application codes) are handled separately.
GROUP_CODE_RANGES: tuple[tuple[int, int, GroupValueType], ...] = (
    (10, 59, GroupValueType.FLOAT),
    (60, 99, GroupValueType.INT),
    (100, 109, GroupValueType.STRING),
    (110, 149, GroupValueType.FLOAT),
    (160, 179, GroupValueType.INT),
    (210, 239, GroupValueType.FLOAT),
    (270, 289, GroupValueType.INT),
    (290, 299, GroupValueType.BOOLEAN),
    (300, 369, GroupValueType.STRING),
    (370, 389, GroupValueType.INT),
    (390, 399, GroupValueType.STRING),
    (400, 409, GroupValueType.INT),
    (410, 419, GroupValueType.STRING),
    (420, 429, GroupValueType.INT),
    (430, 439, GroupValueType.STRING),
    (440, 459, GroupValueType.INT),
    (460, 469, GroupValueType.FLOAT),
    (470, 481, GroupValueType.STRING),
    (999, 999, GroupValueType.STRING),
    (1000, 1009, GroupValueType.STRING),
    (1010, 1059, GroupValueType.FLOAT),
    (1060, 1071, GroupValueType.INT),
)

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def value_type_of(code: int) -> GroupValueType | None:
    """Get the value type of a group code.

    Parameters
    ----------
    code : int
        DXF group code

    Returns
    -------
    GroupValueType | None
        Type of the values of this code, None if the code is not defined
    """
    if code <= 9:
        return GroupValueType.STRING
    for lowest, highest, value_type in GROUP_CODE_RANGES:
        if code < lowest:
            return None
        if code <= highest:
            return value_type
    return None


def parse_int(raw: str, code: int | None = None, line: int | None = None) -> int:
    """Parse the leading integer of a text, e.g. "12" or "12.5" -> 12."""
    match = _INT_PREFIX.match(raw)
    if match is None:
        raise MalformedNumberError(
            f"Cannot read integer from '{raw}' (group code {code})", code=code, value=raw, line=line
        )
    return int(match.group(1))


def parse_float(raw: str, code: int | None = None, line: int | None = None) -> float:
    """Parse the leading decimal number of a text, e.g. "3.5" or "3.5abc" -> 3.5."""
    match = _FLOAT_PREFIX.match(raw)
    if match is None:
        raise MalformedNumberError(
            f"Cannot read float from '{raw}' (group code {code})", code=code, value=raw, line=line
        )
    return float(match.group(1))


def parse_boolean(raw: str, code: int | None = None, line: int | None = None) -> bool:
    if raw == "0":
        return False
    if raw == "1":
        return True
    raise InvalidBooleanError(
        f"String '{raw}' cannot be cast to boolean (group code {code})", code=code, value=raw, line=line
    )


def coerce(code: int, raw: str, sink: IDiagnosticSink | None = None, line: int | None = None) -> GroupValue:
    """Convert the raw text of a group value to the type of its group code.

    Parameters
    ----------
    code : int
        Group code read from the preceding line
    raw : str
        Value line, already trimmed
    sink : IDiagnosticSink | None
        Receives an UNDEFINED_GROUP_CODE diagnostic for unknown codes,
        without a sink the module logger is used
    line : int | None
        Line number of the group code, only used for messages

    Returns
    -------
    GroupValue
        The typed value

    Raises
    ------
    InvalidBooleanError
        If a boolean code holds something other than "0" or "1"
    MalformedNumberError
        If a numeric code holds text without a leading number
    """
    value_type = value_type_of(code)
    if value_type == GroupValueType.STRING:
        return raw
    if value_type == GroupValueType.FLOAT:
        return parse_float(raw, code=code, line=line)
    if value_type == GroupValueType.INT:
        return parse_int(raw, code=code, line=line)
    if value_type == GroupValueType.BOOLEAN:
        return parse_boolean(raw, code=code, line=line)

    message = f"Group code does not have a defined type: {code}:{raw}"
    if sink is None:
        log.warning(message)
    else:
        sink.report(Diagnostic(DiagnosticKind.UNDEFINED_GROUP_CODE, message, code=code, value=raw, line=line))
    return raw
