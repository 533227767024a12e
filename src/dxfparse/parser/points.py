from ..errors import PointCodeError
from ..models import Point
from .cursor import GroupCursor


def parse_point(cursor: GroupCursor) -> Point:
    """Parse a 2D or 3D point starting at its x group.

    The y value must follow with the x code + 10. A z value is only read if
    the next group has the x code + 20, otherwise the point is 2D and that
    group stays current.

    Raises
    ------
    PointCodeError
        If the group after x is not the matching y group
    """
    code = cursor.code
    x = cursor.value

    group = cursor.advance()
    if group.code != code + 10:
        raise PointCodeError(
            f"Expected code for point value to be {code + 10} but got {group.code}", line=group.line
        )
    y = group.value

    group = cursor.advance()
    if group.code != code + 20:
        return Point(x=x, y=y)

    z = group.value
    cursor.advance()
    return Point(x=x, y=y, z=z)
