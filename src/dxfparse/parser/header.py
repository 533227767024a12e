import logging

from ..diagnostics import DiagnosticKind
from ..models import HeaderValue, Point
from .cursor import GroupCursor

log = logging.getLogger(__name__)

POINT_CODES = (10, 20, 30)


def _to_point(coordinates: dict[int, float]) -> Point:
    return Point(x=coordinates.get(10, 0.0), y=coordinates.get(20, 0.0), z=coordinates.get(30))


def parse_header(cursor: GroupCursor, header: dict[str, HeaderValue] | None = None) -> dict[str, HeaderValue]:
    """Parse the HEADER section up to and including its ENDSEC.

    Every variable starts with its name in a code 9 group. The codes 10, 20
    and 30 that follow are combined into a point, any other code sets the
    value directly and the last one wins.

    Parameters
    ----------
    cursor : GroupCursor
        Cursor on the first group after the section name
    header : dict[str, HeaderValue] | None
        Variables of an earlier HEADER section to update

    Returns
    -------
    dict[str, HeaderValue]
        Variable names mapped to their values
    """
    if header is None:
        header = {}
    name: str | None = None
    coordinates: dict[int, float] = {}

    while not cursor.is_group(0, "ENDSEC"):
        if cursor.stops_at_eof("HEADER section"):
            break
        code = cursor.code
        if code == 9:
            if name is not None and coordinates:
                header[name] = _to_point(coordinates)
            name = cursor.value
            coordinates = {}
        elif name is None:
            cursor.report(DiagnosticKind.UNHANDLED_GROUP, f"Header value {cursor.current} without variable name")
        elif code in POINT_CODES:
            coordinates[code] = cursor.value
        else:
            header[name] = cursor.value
        cursor.advance()

    if name is not None and coordinates:
        header[name] = _to_point(coordinates)
    if not cursor.at_eof:
        cursor.advance()
    return header
