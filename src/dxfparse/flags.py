"""Bit-flag groups decoded into named booleans.

Several group codes (mostly 70 and 71) pack independent switches into one
integer. Each flag set is described once as an IntFlag whose lower-cased
member names are the attribute names of the decoded booleans.
"""

from enum import IntFlag


class BlockFlag(IntFlag):
    ANONYMOUS = 1
    NON_CONSTANT_ATTRIBUTES = 2
    XREF = 4
    XREF_OVERLAY = 8
    EXTERNALLY_DEPENDENT = 16
    RESOLVED_XREF = 32
    REFERENCED_XREF = 64


class LayerFlag(IntFlag):
    FROZEN = 1
    FROZEN_IN_NEW_VIEWPORTS = 2
    LOCKED = 4


class LwPolylineFlag(IntFlag):
    SHAPE = 1  # closed
    PLINEGEN = 128


class PolylineFlag(IntFlag):
    SHAPE = 1  # closed, or mesh closed in M direction
    INCLUDES_CURVE_FIT_VERTICES = 2
    INCLUDES_SPLINE_FIT_VERTICES = 4
    IS_3D_POLYLINE = 8
    IS_3D_POLYGON_MESH = 16
    IS_3D_POLYGON_MESH_CLOSED = 32  # closed in N direction
    IS_POLYFACE_MESH = 64
    HAS_CONTINUOUS_LINETYPE_PATTERN = 128


class VertexFlag(IntFlag):
    CURVE_FITTING_VERTEX = 1
    CURVE_FIT_TANGENT = 2
    SPLINE_VERTEX = 8
    SPLINE_CONTROL_POINT = 16
    THREE_D_POLYLINE_VERTEX = 32
    THREE_D_POLYLINE_MESH = 64
    POLYFACE_MESH_VERTEX = 128


class AttdefFlag(IntFlag):
    INVISIBLE = 0x01
    CONSTANT = 0x02
    VERIFICATION_REQUIRED = 0x04
    PRESET = 0x08


class TextGenerationFlag(IntFlag):
    BACKWARDS = 0x02
    MIRRORED = 0x04


def decode_flags(value: int, flag_type: type[IntFlag]) -> dict[str, bool]:
    """Decode an integer into one boolean per flag member.

    Parameters
    ----------
    value : int
        Raw group value
    flag_type : type[IntFlag]
        Flag set describing the bit masks

    Returns
    -------
    dict[str, bool]
        Lower-cased member name to state of its bit
    """
    return {member.name.lower(): bool(value & member.value) for member in flag_type}


def apply_flags(target: object, value: int, flag_type: type[IntFlag]) -> None:
    """Set the decoded booleans of ``value`` as attributes of ``target``."""
    for name, state in decode_flags(value, flag_type).items():
        setattr(target, name, state)
