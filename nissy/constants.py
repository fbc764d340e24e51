"""Move, transformation and orientation tables for the 3x3x3 cube."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Move(IntEnum):
    """Face turns, wide turns, slice turns and rotations.

    A suffix of 2 is a half turn and a suffix of 3 a counter-clockwise turn.
    """

    U = 0
    U2 = 1
    U3 = 2
    D = 3
    D2 = 4
    D3 = 5
    R = 6
    R2 = 7
    R3 = 8
    L = 9
    L2 = 10
    L3 = 11
    F = 12
    F2 = 13
    F3 = 14
    B = 15
    B2 = 16
    B3 = 17

    Uw = 18
    Uw2 = 19
    Uw3 = 20
    Dw = 21
    Dw2 = 22
    Dw3 = 23
    Rw = 24
    Rw2 = 25
    Rw3 = 26
    Lw = 27
    Lw2 = 28
    Lw3 = 29
    Fw = 30
    Fw2 = 31
    Fw3 = 32
    Bw = 33
    Bw2 = 34
    Bw3 = 35

    M = 36
    M2 = 37
    M3 = 38
    S = 39
    S2 = 40
    S3 = 41
    E = 42
    E2 = 43
    E3 = 44

    x = 45
    x2 = 46
    x3 = 47
    y = 48
    y2 = 49
    y3 = 50
    z = 51
    z2 = 52
    z3 = 53


class Trans(IntEnum):
    """The 48 cube transformations: 24 rotations and 24 mirrored ones."""

    UFr = 0
    ULr = 1
    UBr = 2
    URr = 3
    DFr = 4
    DLr = 5
    DBr = 6
    DRr = 7
    RUr = 8
    RFr = 9
    RDr = 10
    RBr = 11
    LUr = 12
    LFr = 13
    LDr = 14
    LBr = 15
    FUr = 16
    FRr = 17
    FDr = 18
    FLr = 19
    BUr = 20
    BRr = 21
    BDr = 22
    BLr = 23

    UFm = 24
    ULm = 25
    UBm = 26
    URm = 27
    DFm = 28
    DLm = 29
    DBm = 30
    DRm = 31
    RUm = 32
    RFm = 33
    RDm = 34
    RBm = 35
    LUm = 36
    LFm = 37
    LDm = 38
    LBm = 39
    FUm = 40
    FRm = 41
    FDm = 42
    FLm = 43
    BUm = 44
    BRm = 45
    BDm = 46
    BLm = 47


class Orientation(IntEnum):
    """Whole-cube orientations, named by the top and front faces."""

    UF = 0
    UR = 1
    UB = 2
    UL = 3
    DF = 4
    DR = 5
    DB = 6
    DL = 7
    RF = 8
    RD = 9
    RB = 10
    RU = 11
    LF = 12
    LD = 13
    LB = 14
    LU = 15
    FD = 16
    FR = 17
    FU = 18
    FL = 19
    BD = 20
    BR = 21
    BU = 22
    BL = 23


class Axis(IntEnum):
    """The three axes of the cube."""

    UD = 0
    RL = 1
    FB = 2


@dataclass(frozen=True)
class EquivalentMoves:
    """Face moves followed by rotations that together equal one move.

    Each rotation is 0 for x, 1 for y and 2 for z.
    """

    moves: tuple[Move, ...]
    rotations: tuple[int, ...]


NMOVES = Move.B3 + 1
NMOVES_EXTENDED = Move.z3 + 1
NTRANS = Trans.BLm + 1

CORNER_NAMES = ("UFR", "UBL", "DFL", "DBR", "UFL", "UBR", "DFR", "DBL")
CORNER_NAMES_ALT = ("URF", "ULB", "DLF", "DRB", "ULF", "URB", "DRF", "DLB")
EDGE_NAMES = ("UF", "UB", "DB", "DF", "UR", "UL", "DL", "DR",
              "FR", "FL", "BL", "BR")


def single_move_mask(move: int) -> int:
    """Return the bit mask holding only the given move."""
    return 1 << Move(move)


def face_mask(move: int) -> int:
    """Return the mask of the move and the two moves after it."""
    return 7 << Move(move)


def single_trans_mask(trans: int) -> int:
    """Return the bit mask holding only the given transformation."""
    return 1 << Trans(trans)


MM18_ALLMOVES = 0x3FFFF
MM18_NOHALFTURNS = 0x2DB6D
MM18_EO = (face_mask(Move.U) | face_mask(Move.D) | face_mask(Move.R)
           | face_mask(Move.L) | single_move_mask(Move.F2)
           | single_move_mask(Move.B2))
MM18_DR = (face_mask(Move.U) | face_mask(Move.D) | single_move_mask(Move.R2)
           | single_move_mask(Move.L2) | single_move_mask(Move.F2)
           | single_move_mask(Move.B2))
MM18_HTR = MM18_ALLMOVES & ~MM18_NOHALFTURNS

TM_ALLTRANS = 0xFFFFFFFFFFFF


def _trans_mask(*names: str) -> int:
    mask = 0
    for name in names:
        mask |= single_trans_mask(Trans[name])
    return mask


TM_UDRLFIX = _trans_mask("UFr", "UBr", "UFm", "UBm", "DFr", "DBr", "DFm",
                         "DBm")
TM_UDFIX = _trans_mask("UFr", "UBr", "URr", "ULr", "UFm", "UBm", "URm",
                       "ULm", "DFr", "DBr", "DRr", "DLr", "DFm", "DBm",
                       "DRm", "DLm")

# Moves allowed after a move, indexed by the move's base (move // 3).
# Only the 18 face moves have non-empty masks.
_ALLOWED_MASKS = (0x3FFF8, 0x3FFC0, 0x3FE3F, 0x3F03F, 0x38FFF, 0x00FFF) \
    + (0,) * 12

_INVERSE_TRANS = {
    "UFr": "UFr", "UFm": "UFm", "ULr": "URr", "ULm": "ULm",
    "UBr": "UBr", "UBm": "UBm", "URr": "ULr", "URm": "URm",
    "DFr": "DFr", "DFm": "DFm", "DLr": "DLr", "DLm": "DRm",
    "DBr": "DBr", "DBm": "DBm", "DRr": "DRr", "DRm": "DLm",
    "RUr": "FRr", "RUm": "FLm", "RFr": "LFr", "RFm": "RFm",
    "RDr": "BLr", "RDm": "BRm", "RBr": "RBr", "RBm": "LBm",
    "LUr": "FLr", "LUm": "FRm", "LFr": "RFr", "LFm": "LFm",
    "LDr": "BRr", "LDm": "BLm", "LBr": "LBr", "LBm": "RBm",
    "FUr": "FUr", "FUm": "FUm", "FRr": "RUr", "FRm": "LUm",
    "FDr": "BUr", "FDm": "BUm", "FLr": "LUr", "FLm": "RUm",
    "BUr": "FDr", "BUm": "FDm", "BRr": "LDr", "BRm": "RDm",
    "BDr": "BDr", "BDm": "BDm", "BLr": "RDr", "BLm": "LDm",
}

_TRANS_MOVES = {
    "UFr": "URF", "UFm": "ULF", "ULr": "UFL", "ULm": "UFR",
    "UBr": "ULB", "UBm": "URB", "URr": "UBR", "URm": "UBL",
    "DFr": "DLF", "DFm": "DRF", "DLr": "DBL", "DLm": "DBR",
    "DBr": "DRB", "DBm": "DLB", "DRr": "DFR", "DRm": "DFL",
    "RUr": "RFU", "RUm": "LFU", "RFr": "RDF", "RFm": "LDF",
    "RDr": "RBD", "RDm": "LBD", "RBr": "RUB", "RBm": "LUB",
    "LUr": "LBU", "LUm": "RBU", "LFr": "LUF", "LFm": "RUF",
    "LDr": "LFD", "LDm": "RFD", "LBr": "LDB", "LBm": "RDB",
    "FUr": "FLU", "FUm": "FRU", "FRr": "FUR", "FRm": "FUL",
    "FDr": "FRD", "FDm": "FLD", "FLr": "FDL", "FLm": "FDR",
    "BUr": "BRU", "BUm": "BLU", "BRr": "BDR", "BRm": "BDL",
    "BDr": "BLD", "BDm": "BRD", "BLr": "BUL", "BLm": "BUR",
}

_ORIENTATION_MOVES = {
    "UF": (), "UR": ("y",), "UB": ("y2",), "UL": ("y3",),
    "DF": ("z2",), "DR": ("y", "z2"), "DB": ("y2", "z2"),
    "DL": ("y3", "z2"),
    "RF": ("z3",), "RD": ("z3", "y"), "RB": ("z3", "y2"),
    "RU": ("z3", "y3"),
    "LF": ("z",), "LD": ("z", "y3"), "LB": ("z", "y2"), "LU": ("z", "y"),
    "FD": ("x",), "FR": ("x", "y"), "FU": ("x", "y2"), "FL": ("x", "y3"),
    "BD": ("x3", "y2"), "BR": ("x3", "y"), "BU": ("x3",),
    "BL": ("x3", "y3"),
}

_ORIENTATION_TRANSITIONS = {
    "UF": ("FD", "UR", "LF"), "UR": ("RD", "UB", "FR"),
    "UB": ("BD", "UL", "RB"), "UL": ("LD", "UF", "BL"),
    "DF": ("FU", "DL", "RF"), "DR": ("RU", "DF", "BR"),
    "DB": ("BU", "DR", "LB"), "DL": ("LU", "DB", "FL"),
    "RF": ("FL", "RD", "UF"), "RD": ("DL", "RB", "FD"),
    "RB": ("BL", "RU", "DB"), "RU": ("UL", "RF", "BU"),
    "LF": ("FR", "LU", "DF"), "LD": ("DR", "LF", "BD"),
    "LB": ("BR", "LD", "UB"), "LU": ("UR", "LB", "FU"),
    "FD": ("DB", "FR", "LD"), "FR": ("RB", "FU", "DR"),
    "FU": ("UB", "FL", "RU"), "FL": ("LB", "FD", "UL"),
    "BD": ("DF", "BL", "RD"), "BR": ("RF", "BD", "UR"),
    "BU": ("UF", "BR", "LU"), "BL": ("LF", "BU", "DL"),
}

_EQUIVALENT_MOVES_EXTENDED = {
    "Uw": (("D",), (1,)), "Uw2": (("D2",), (1, 1)),
    "Uw3": (("D3",), (1, 1, 1)),
    "Dw": (("U",), (1, 1, 1)), "Dw2": (("U2",), (1, 1)),
    "Dw3": (("U3",), (1,)),
    "Rw": (("L",), (0,)), "Rw2": (("L2",), (0, 0)),
    "Rw3": (("L3",), (0, 0, 0)),
    "Lw": (("R",), (0, 0, 0)), "Lw2": (("R2",), (0, 0)),
    "Lw3": (("R3",), (0,)),
    "Fw": (("B",), (2,)), "Fw2": (("B2",), (2, 2)),
    "Fw3": (("B3",), (2, 2, 2)),
    "Bw": (("F",), (2, 2, 2)), "Bw2": (("F2",), (2, 2)),
    "Bw3": (("F3",), (2,)),
    "M": (("R", "L3"), (0, 0, 0)), "M2": (("R2", "L2"), (0, 0)),
    "M3": (("R3", "L"), (0,)),
    "S": (("F3", "B"), (2,)), "S2": (("F2", "B2"), (2, 2)),
    "S3": (("F", "B3"), (2, 2, 2)),
    "E": (("U", "D3"), (1, 1, 1)), "E2": (("U2", "D2"), (1, 1)),
    "E3": (("U3", "D"), (1,)),
    "x": ((), (0,)), "x2": ((), (0, 0)), "x3": ((), (0, 0, 0)),
    "y": ((), (1,)), "y2": ((), (1, 1)), "y3": ((), (1, 1, 1)),
    "z": ((), (2,)), "z2": ((), (2, 2)), "z3": ((), (2, 2, 2)),
}


def move_name(move: int) -> str:
    """Return the standard notation of a move, e.g. "R'" or "Uw2"."""
    name = Move(move).name
    return name[:-1] + "'" if name.endswith("3") else name


def trans_name(trans: int) -> str:
    """Return a transformation's name, e.g. "rotation UF"."""
    name = Trans(trans).name
    kind = "rotation" if name.endswith("r") else "mirrored"
    return f"{kind} {name[:2]}"


def inverse_trans(trans: int) -> Trans:
    """Return the transformation that undoes the given one."""
    return Trans[_INVERSE_TRANS[Trans(trans).name]]


def trans_moves(trans: int) -> tuple[Move, Move, Move]:
    """Return the faces that U, R and F are sent to by a transformation."""
    faces = _TRANS_MOVES[Trans(trans).name]
    return (Move[faces[0]], Move[faces[1]], Move[faces[2]])


def orientation_moves(orientation: int) -> tuple[Move, ...]:
    """Return the rotations that bring the cube into an orientation."""
    names = _ORIENTATION_MOVES[Orientation(orientation).name]
    return tuple(Move[name] for name in names)


def orientation_transition(orientation: int, axis: int) -> Orientation:
    """Return the orientation reached by a rotation (0 x, 1 y, 2 z)."""
    if not 0 <= axis <= 2:
        raise ValueError(f"invalid rotation axis {axis!r}")
    row = _ORIENTATION_TRANSITIONS[Orientation(orientation).name]
    return Orientation[row[axis]]


def orientation_trans(orientation: int) -> Trans:
    """Return the rotation transformation matching an orientation."""
    return Trans[Orientation(orientation).name + "r"]


def equivalent_moves(move: int) -> EquivalentMoves:
    """Express any move as face moves followed by whole-cube rotations."""
    move = Move(move)
    if move < NMOVES:
        return EquivalentMoves(moves=(move,), rotations=())
    faces, rotations = _EQUIVALENT_MOVES_EXTENDED[move.name]
    return EquivalentMoves(
        moves=tuple(Move[name] for name in faces), rotations=rotations)


def allowed_mask(move: int) -> int:
    """Return the mask of face moves allowed to follow the given move."""
    return _ALLOWED_MASKS[Move(move) // 3]