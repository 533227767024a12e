"""Grammar of the properties every entity shares.

Each entity grammar claims its own group codes and falls through to
``parse_common_property`` for everything else. That function always moves
the cursor one group forward, unknown codes are reported and skipped.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from .. import colors
from ..models import Entity
from .cursor import GroupCursor
from .points import parse_point

log = logging.getLogger(__name__)

TEntity = TypeVar("TEntity", bound=Entity)
GroupHandler = Callable[[GroupCursor, TEntity], bool]


def parse_common_property(cursor: GroupCursor, entity: Entity) -> None:
    """Read one group of the shared entity properties and advance."""
    code = cursor.code
    value = cursor.value
    if code == 0:
        entity.type = value
    elif code == 5:
        entity.handle = value
    elif code == 6:
        entity.line_type = value
    elif code == 8:
        entity.layer = value
    elif code == 48:
        entity.line_type_scale = value
    elif code == 60:
        entity.visible = value == 0
    elif code == 62:
        # 0 inherits BYBLOCK, 256 inherits BYLAYER
        entity.color_index = value
        entity.color = colors.lookup(abs(value))
    elif code == 67:
        entity.in_paper_space = value != 0
    elif code == 330:
        entity.owner_handle = value
    elif code == 347:
        entity.material_object_handle = value
    elif code == 370:
        # Hundredths of a millimeter, negative values are BYLAYER/BYBLOCK/DEFAULT.
        entity.lineweight = value
    elif code == 420:
        entity.color = value
    elif code == 100:
        pass
    else:
        cursor.skip_unhandled()
        return
    cursor.advance()


def read_entity(
    cursor: GroupCursor,
    entity: TEntity,
    scalars: dict[int, str] | None = None,
    points: dict[int, str] | None = None,
    handler: GroupHandler | None = None,
) -> TEntity:
    """Read the groups of one entity until the next code 0.

    The cursor must be on the (0, TYPE) group of the entity.

    Parameters
    ----------
    cursor : GroupCursor
        Cursor positioned on the entity type group
    entity : TEntity
        Empty entity to fill
    scalars : dict[int, str] | None
        Group codes copied as they are into the named attribute
    points : dict[int, str] | None
        Group codes starting a point that is stored in the named attribute
    handler : GroupHandler | None
        Called first for every group, returns True if it consumed the group

    Returns
    -------
    TEntity
        The filled entity, the cursor is on the next code 0 group
    """
    scalars = scalars or {}
    points = points or {}
    entity.type = cursor.value
    cursor.advance()
    while cursor.code != 0:
        code = cursor.code
        if handler is not None and handler(cursor, entity):
            continue
        if code in scalars:
            setattr(entity, scalars[code], cursor.value)
            cursor.advance()
        elif code in points:
            setattr(entity, points[code], parse_point(cursor))
        else:
            parse_common_property(cursor, entity)
    return entity
