import logging

from ..diagnostics import DiagnosticKind
from ..flags import BlockFlag, apply_flags
from ..models import Block
from .cursor import GroupCursor
from .entities import parse_entities
from .points import parse_point

log = logging.getLogger(__name__)


def parse_block(cursor: GroupCursor) -> Block:
    """Parse one BLOCK starting at its (0, BLOCK) group.

    Entities inside the block are parsed up to ENDBLK. The ENDBLK record
    belongs to the block, its groups are consumed as well.

    Parameters
    ----------
    cursor : GroupCursor
        Cursor on the (0, BLOCK) group

    Returns
    -------
    Block
        The parsed block, the cursor is on the first code 0 after ENDBLK
    """
    block = Block()
    cursor.advance()
    while not cursor.is_group(0, "ENDBLK"):
        if cursor.stops_at_eof("BLOCK"):
            return block
        code = cursor.code
        value = cursor.value
        if code == 0:
            block.entities.extend(parse_entities(cursor, for_block=True))
            if not cursor.is_group(0, "ENDBLK"):
                return block
            continue
        if code == 10:
            block.position = parse_point(cursor)
            continue

        if code == 1:
            block.xref_path = value
        elif code == 2:
            block.name = value
        elif code == 3:
            block.name2 = value
        elif code == 5:
            block.handle = value
        elif code == 8:
            block.layer = value
        elif code == 67:
            block.paper_space = value == 1
        elif code == 70:
            block.type = value
            apply_flags(block, value, BlockFlag)
        elif code == 100:
            pass
        elif code == 330:
            block.owner_handle = value
        else:
            cursor.skip_unhandled()
            continue
        cursor.advance()

    cursor.advance()
    while cursor.code != 0:
        cursor.advance()
    return block


def parse_blocks(cursor: GroupCursor, blocks: dict[str, Block] | None = None) -> dict[str, Block]:
    """Parse the BLOCKS section up to and including its ENDSEC.

    Blocks without a name are reported and dropped, a block found again
    under the same name replaces the earlier one.
    """
    if blocks is None:
        blocks = {}
    while not cursor.is_group(0, "ENDSEC"):
        if cursor.stops_at_eof("BLOCKS section"):
            return blocks
        if not cursor.is_group(0, "BLOCK"):
            cursor.advance()
            continue

        log.debug("Block {")
        block = parse_block(cursor)
        log.debug("}")
        cursor.handles.ensure_handle(block)
        if not block.name:
            cursor.report(DiagnosticKind.MISSING_BLOCK_NAME, f"Block {block.handle} is missing a name")
            continue
        blocks[block.name] = block
    cursor.advance()
    return blocks
