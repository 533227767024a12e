"""AutoCAD color index (ACI) to true color lookup.

AutoCAD files often use an indexed color between 1 and 255. Index 1 is red,
that is 16711680 or 0xFF0000. The indices 0 (BYBLOCK) and 256 (BYLAYER) are
inheritance sentinels and never resolve to a real color here, the caller
decides what they inherit from.
"""

from ezdxf.colors import RGB, int2rgb

BY_BLOCK = 0
BY_LAYER = 256

# Position 0 is a placeholder for the BYBLOCK sentinel.
AUTOCAD_COLOR_INDEX: tuple[int, ...] = (
    0x000000, 0xFF0000, 0xFFFF00, 0x00FF00, 0x00FFFF, 0x0000FF, 0xFF00FF, 0xFFFFFF,
    0x808080, 0xC0C0C0, 0xFF0000, 0xFF7F7F, 0xCC0000, 0xCC6666, 0x990000, 0x994C4C,
    0x7F0000, 0x7F3F3F, 0x4C0000, 0x4C2626, 0xFF3F00, 0xFF9F7F, 0xCC3300, 0xCC7F66,
    0x992600, 0x995F4C, 0x7F1F00, 0x7F4F3F, 0x4C1300, 0x4C2F26, 0xFF7F00, 0xFFBF7F,
    0xCC6600, 0xCC9966, 0x994C00, 0x99724C, 0x7F3F00, 0x7F5F3F, 0x4C2600, 0x4C3926,
    0xFFBF00, 0xFFDF7F, 0xCC9900, 0xCCB266, 0x997200, 0x99854C, 0x7F5F00, 0x7F6F3F,
    0x4C3900, 0x4C4226, 0xFFFF00, 0xFFFF7F, 0xCCCC00, 0xCCCC66, 0x989800, 0x98984C,
    0x7F7F00, 0x7F7F3F, 0x4C4C00, 0x4C4C26, 0xBFFF00, 0xDFFF7F, 0x99CC00, 0xB2CC66,
    0x729800, 0x85984C, 0x5F7F00, 0x6F7F3F, 0x394C00, 0x424C26, 0x7FFF00, 0xBFFF7F,
    0x66CC00, 0x99CC66, 0x4C9800, 0x72984C, 0x3F7F00, 0x5F7F3F, 0x264C00, 0x394C26,
    0x3FFF00, 0x9FFF7F, 0x33CC00, 0x7FCC66, 0x269800, 0x5F984C, 0x1F7F00, 0x4F7F3F,
    0x134C00, 0x2F4C26, 0x00FF00, 0x7FFF7F, 0x00CC00, 0x66CC66, 0x009800, 0x4C984C,
    0x007F00, 0x3F7F3F, 0x004C00, 0x264C26, 0x00FF3F, 0x7FFF9F, 0x00CC33, 0x66CC7F,
    0x009826, 0x4C985F, 0x007F1F, 0x3F7F4F, 0x004C13, 0x264C2F, 0x00FF7F, 0x7FFFBF,
    0x00CC66, 0x66CC99, 0x00984C, 0x4C9872, 0x007F3F, 0x3F7F5F, 0x004C26, 0x264C39,
    0x00FFBF, 0x7FFFDF, 0x00CC99, 0x66CCB2, 0x009872, 0x4C9885, 0x007F5F, 0x3F7F6F,
    0x004C39, 0x264C42, 0x00FFFF, 0x7FFFFF, 0x00CCCC, 0x66CCCC, 0x009898, 0x4C9898,
    0x007F7F, 0x3F7F7F, 0x004C4C, 0x264C4C, 0x00BFFF, 0x7FDFFF, 0x0099CC, 0x66B2CC,
    0x007298, 0x4C8598, 0x005F7F, 0x3F6F7F, 0x00394C, 0x26424C, 0x007FFF, 0x7FBFFF,
    0x0066CC, 0x6699CC, 0x004C98, 0x4C7298, 0x003F7F, 0x3F5F7F, 0x00264C, 0x26394C,
    0x003FFF, 0x7F9FFF, 0x0033CC, 0x667FCC, 0x002698, 0x4C5F98, 0x001F7F, 0x3F4F7F,
    0x00134C, 0x262F4C, 0x0000FF, 0x7F7FFF, 0x0000CC, 0x6666CC, 0x000098, 0x4C4C98,
    0x00007F, 0x3F3F7F, 0x00004C, 0x26264C, 0x3F00FF, 0x9F7FFF, 0x3300CC, 0x7F66CC,
    0x260098, 0x5F4C98, 0x1F007F, 0x4F3F7F, 0x13004C, 0x2F264C, 0x7F00FF, 0xBF7FFF,
    0x6600CC, 0x9966CC, 0x4C0098, 0x724C98, 0x3F007F, 0x5F3F7F, 0x26004C, 0x39264C,
    0xBF00FF, 0xDF7FFF, 0x9900CC, 0xB266CC, 0x720098, 0x854C98, 0x5F007F, 0x6F3F7F,
    0x39004C, 0x42264C, 0xFF00FF, 0xFF7FFF, 0xCC00CC, 0xCC66CC, 0x980098, 0x984C98,
    0x7F007F, 0x7F3F7F, 0x4C004C, 0x4C264C, 0xFF00BF, 0xFF7FDF, 0xCC0099, 0xCC66B2,
    0x980072, 0x984C85, 0x7F005F, 0x7F3F6F, 0x4C0039, 0x4C2642, 0xFF007F, 0xFF7FBF,
    0xCC0066, 0xCC6699, 0x98004C, 0x984C72, 0x7F003F, 0x7F3F5F, 0x4C0026, 0x4C2639,
    0xFF003F, 0xFF7F9F, 0xCC0033, 0xCC667F, 0x980026, 0x984C5F, 0x7F001F, 0x7F3F4F,
    0x4C0013, 0x4C262F, 0x333333, 0x5B5B5B, 0x848484, 0xADADAD, 0xD6D6D6, 0xFFFFFF,
)


def is_inherited(index: int) -> bool:
    """Check if a color index is one of the BYBLOCK / BYLAYER sentinels."""
    return abs(index) in (BY_BLOCK, BY_LAYER)


def lookup(index: int) -> int | None:
    """Get the 24-bit RGB value of an AutoCAD color index.

    Parameters
    ----------
    index : int
        Color index, real colors are 1..255

    Returns
    -------
    int | None
        RGB value as integer, None for the inheritance sentinels and for
        indices outside the table
    """
    if is_inherited(index) or not 0 < index < len(AUTOCAD_COLOR_INDEX):
        return None
    return AUTOCAD_COLOR_INDEX[index]


def to_rgb(color: int) -> RGB:
    """Split a 24-bit color value into its red, green and blue parts."""
    return int2rgb(color)
