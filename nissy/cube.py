"""Cube representation and the static move and transformation cubes.

A cube is stored as 8 corner values followed by 12 edge values.  Each value
packs a piece index with its orientation: corners keep the permutation in the
low bits and the twist in bits 5-6, edges keep the permutation in the low
bits and the flip in bit 4.
"""

from __future__ import annotations

from dataclasses import dataclass

NCORNERS = 8
NEDGES = 12

PBITS = 0x0F
EOBIT = 0x10
EOSHIFT = 4
COBITS = 0x60
COSHIFT = 5
CTWIST_CW = 0x20
CTWIST_CCW = 0x40
EFLIP = EOBIT


@dataclass(frozen=True)
class Cube:
    """A cube given by its packed corner and edge values."""

    corners: tuple[int, ...] = (0,) * NCORNERS
    edges: tuple[int, ...] = (0,) * NEDGES

    def __post_init__(self) -> None:
        corners = tuple(self.corners)
        edges = tuple(self.edges)
        if len(corners) != NCORNERS:
            raise ValueError(
                f"a cube has {NCORNERS} corners, got {len(corners)}")
        if len(edges) != NEDGES:
            raise ValueError(f"a cube has {NEDGES} edges, got {len(edges)}")
        for value in corners + edges:
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"invalid piece value {value!r}")
        object.__setattr__(self, "corners", corners)
        object.__setattr__(self, "edges", edges)

    def is_zero(self) -> bool:
        """Return True for the all-zero cube used to signal errors."""
        return not any(self.corners) and not any(self.edges)


def static_cube(*args: int) -> Cube:
    """Build a cube from 8 corner values followed by 12 edge values."""
    if len(args) != NCORNERS + NEDGES:
        raise ValueError(
            f"expected {NCORNERS + NEDGES} piece values, got {len(args)}")
    return Cube(tuple(args[:NCORNERS]), tuple(args[NCORNERS:]))


def corner_permutation(value: int) -> int:
    """Return the corner index packed in a corner value."""
    return value & PBITS


def corner_orientation(value: int) -> int:
    """Return the twist (0, 1 or 2) packed in a corner value."""
    return (value & COBITS) >> COSHIFT


def edge_permutation(value: int) -> int:
    """Return the edge index packed in an edge value."""
    return value & PBITS


def edge_orientation(value: int) -> int:
    """Return the flip (0 or 1) packed in an edge value."""
    return (value & EOBIT) >> EOSHIFT


ZERO_CUBE = Cube()
SOLVED_CUBE = static_cube(*range(8), *range(12))


def _table(rows: dict[str, tuple[int, ...]]) -> dict[str, Cube]:
    return {name: static_cube(*values) for name, values in rows.items()}


MOVE_CUBES: dict[str, Cube] = _table({
    "U": (5, 4, 2, 3, 0, 1, 6, 7, 4, 5, 2, 3, 1, 0, 6, 7, 8, 9, 10, 11),
    "U2": (1, 0, 2, 3, 5, 4, 6, 7, 1, 0, 2, 3, 5, 4, 6, 7, 8, 9, 10, 11),
    "U3": (4, 5, 2, 3, 1, 0, 6, 7, 5, 4, 2, 3, 0, 1, 6, 7, 8, 9, 10, 11),
    "D": (0, 1, 7, 6, 4, 5, 2, 3, 0, 1, 7, 6, 4, 5, 2, 3, 8, 9, 10, 11),
    "D2": (0, 1, 3, 2, 4, 5, 7, 6, 0, 1, 3, 2, 4, 5, 7, 6, 8, 9, 10, 11),
    "D3": (0, 1, 6, 7, 4, 5, 3, 2, 0, 1, 6, 7, 4, 5, 3, 2, 8, 9, 10, 11),
    "R": (70, 1, 2, 69, 4, 32, 35, 7, 0, 1, 2, 3, 8, 5, 6, 11, 7, 9, 10, 4),
    "R2": (3, 1, 2, 0, 4, 6, 5, 7, 0, 1, 2, 3, 7, 5, 6, 4, 11, 9, 10, 8),
    "R3": (69, 1, 2, 70, 4, 35, 32, 7, 0, 1, 2, 3, 11, 5, 6, 8, 4, 9, 10, 7),
    "L": (0, 71, 68, 3, 33, 5, 6, 34, 0, 1, 2, 3, 4, 10, 9, 7, 8, 5, 6, 11),
    "L2": (0, 2, 1, 3, 7, 5, 6, 4, 0, 1, 2, 3, 4, 6, 5, 7, 8, 10, 9, 11),
    "L3": (0, 68, 71, 3, 34, 5, 6, 33, 0, 1, 2, 3, 4, 9, 10, 7, 8, 6, 5, 11),
    "F": (36, 1, 38, 3, 66, 5, 64, 7, 25, 1, 2, 24, 4, 5, 6, 7, 16, 19, 10,
          11),
    "F2": (2, 1, 0, 3, 6, 5, 4, 7, 3, 1, 2, 0, 4, 5, 6, 7, 9, 8, 10, 11),
    "F3": (38, 1, 36, 3, 64, 5, 66, 7, 24, 1, 2, 25, 4, 5, 6, 7, 19, 16, 10,
           11),
    "B": (0, 37, 2, 39, 4, 67, 6, 65, 0, 27, 26, 3, 4, 5, 6, 7, 8, 9, 17, 18),
    "B2": (0, 3, 2, 1, 4, 7, 6, 5, 0, 2, 1, 3, 4, 5, 6, 7, 8, 9, 11, 10),
    "B3": (0, 39, 2, 37, 4, 65, 6, 67, 0, 26, 27, 3, 4, 5, 6, 7, 8, 9, 18,
           17),
})

TRANS_CUBES: dict[str, Cube] = _table({
    "UFr": (0, 1, 2, 3, 4, 5, 6, 7, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11),
    "ULr": (4, 5, 7, 6, 1, 0, 2, 3, 5, 4, 7, 6, 0, 1, 2, 3, 25, 26, 27, 24),
    "UBr": (1, 0, 3, 2, 5, 4, 7, 6, 1, 0, 3, 2, 5, 4, 7, 6, 10, 11, 8, 9),
    "URr": (5, 4, 6, 7, 0, 1, 3, 2, 4, 5, 6, 7, 1, 0, 3, 2, 27, 24, 25, 26),
    "DFr": (2, 3, 0, 1, 6, 7, 4, 5, 3, 2, 1, 0, 6, 7, 4, 5, 9, 8, 11, 10),
    "DLr": (7, 6, 4, 5, 2, 3, 1, 0, 6, 7, 4, 5, 2, 3, 0, 1, 26, 25, 24, 27),
    "DBr": (3, 2, 1, 0, 7, 6, 5, 4, 2, 3, 0, 1, 7, 6, 5, 4, 11, 10, 9, 8),
    "DRr": (6, 7, 5, 4, 3, 2, 0, 1, 7, 6, 5, 4, 3, 2, 1, 0, 24, 27, 26, 25),
    "RUr": (64, 67, 65, 66, 37, 38, 36, 39, 20, 23, 22, 21, 24, 27, 26, 25,
            0, 1, 2, 3),
    "RFr": (38, 37, 36, 39, 64, 67, 66, 65, 24, 27, 26, 25, 23, 20, 21, 22,
            19, 16, 17, 18),
    "RDr": (67, 64, 66, 65, 38, 37, 39, 36, 23, 20, 21, 22, 27, 24, 25, 26,
            2, 3, 0, 1),
    "RBr": (37, 38, 39, 36, 67, 64, 65, 66, 27, 24, 25, 26, 20, 23, 22, 21,
            17, 18, 19, 16),
    "LUr": (65, 66, 64, 67, 36, 39, 37, 38, 21, 22, 23, 20, 26, 25, 24, 27,
            1, 0, 3, 2),
    "LFr": (36, 39, 38, 37, 66, 65, 64, 67, 25, 26, 27, 24, 21, 22, 23, 20,
            16, 19, 18, 17),
    "LDr": (66, 65, 67, 64, 39, 36, 38, 37, 22, 21, 20, 23, 25, 26, 27, 24,
            3, 2, 1, 0),
    "LBr": (39, 36, 37, 38, 65, 66, 67, 64, 26, 25, 24, 27, 22, 21, 20, 23,
            18, 17, 16, 19),
    "FUr": (68, 70, 69, 71, 32, 34, 33, 35, 16, 19, 18, 17, 9, 8, 11, 10,
            5, 4, 7, 6),
    "FRr": (32, 34, 35, 33, 70, 68, 69, 71, 8, 9, 10, 11, 16, 19, 18, 17,
            20, 23, 22, 21),
    "FDr": (70, 68, 71, 69, 34, 32, 35, 33, 19, 16, 17, 18, 8, 9, 10, 11,
            7, 6, 5, 4),
    "FLr": (34, 32, 33, 35, 68, 70, 71, 69, 9, 8, 11, 10, 19, 16, 17, 18,
            22, 21, 20, 23),
    "BUr": (69, 71, 68, 70, 33, 35, 32, 34, 17, 18, 19, 16, 11, 10, 9, 8,
            4, 5, 6, 7),
    "BRr": (35, 33, 32, 34, 69, 71, 70, 68, 11, 10, 9, 8, 18, 17, 16, 19,
            23, 20, 21, 22),
    "BDr": (71, 69, 70, 68, 35, 33, 34, 32, 18, 17, 16, 19, 10, 11, 8, 9,
            6, 7, 4, 5),
    "BLr": (33, 35, 34, 32, 71, 69, 68, 70, 10, 11, 8, 9, 17, 18, 19, 16,
            21, 22, 23, 20),
    "UFm": (4, 5, 6, 7, 0, 1, 2, 3, 0, 1, 2, 3, 5, 4, 7, 6, 9, 8, 11, 10),
    "ULm": (0, 1, 3, 2, 5, 4, 6, 7, 4, 5, 6, 7, 0, 1, 2, 3, 24, 27, 26, 25),
    "UBm": (5, 4, 7, 6, 1, 0, 3, 2, 1, 0, 3, 2, 4, 5, 6, 7, 11, 10, 9, 8),
    "URm": (1, 0, 2, 3, 4, 5, 7, 6, 5, 4, 7, 6, 1, 0, 3, 2, 26, 25, 24, 27),
    "DFm": (6, 7, 4, 5, 2, 3, 0, 1, 3, 2, 1, 0, 7, 6, 5, 4, 8, 9, 10, 11),
    "DLm": (3, 2, 0, 1, 6, 7, 5, 4, 7, 6, 5, 4, 2, 3, 0, 1, 27, 24, 25, 26),
    "DBm": (7, 6, 5, 4, 3, 2, 1, 0, 2, 3, 0, 1, 6, 7, 4, 5, 10, 11, 8, 9),
    "DRm": (2, 3, 1, 0, 7, 6, 4, 5, 6, 7, 4, 5, 3, 2, 1, 0, 25, 26, 27, 24),
    "RUm": (68, 71, 69, 70, 33, 34, 32, 35, 21, 22, 23, 20, 25, 26, 27, 24,
            0, 1, 2, 3),
    "RFm": (34, 33, 32, 35, 68, 71, 70, 69, 25, 26, 27, 24, 22, 21, 20, 23,
            19, 16, 17, 18),
    "RDm": (71, 68, 70, 69, 34, 33, 35, 32, 22, 21, 20, 23, 26, 25, 24, 27,
            2, 3, 0, 1),
    "RBm": (33, 34, 35, 32, 71, 68, 69, 70, 26, 25, 24, 27, 21, 22, 23, 20,
            17, 18, 19, 16),
    "LUm": (69, 70, 68, 71, 32, 35, 33, 34, 20, 23, 22, 21, 27, 24, 25, 26,
            1, 0, 3, 2),
    "LFm": (32, 35, 34, 33, 70, 69, 68, 71, 24, 27, 26, 25, 20, 23, 22, 21,
            16, 19, 18, 17),
    "LDm": (70, 69, 71, 68, 35, 32, 34, 33, 23, 20, 21, 22, 24, 27, 26, 25,
            3, 2, 1, 0),
    "LBm": (35, 32, 33, 34, 69, 70, 71, 68, 27, 24, 25, 26, 23, 20, 21, 22,
            18, 17, 16, 19),
    "FUm": (64, 66, 65, 67, 36, 38, 37, 39, 16, 19, 18, 17, 8, 9, 10, 11,
            4, 5, 6, 7),
    "FRm": (36, 38, 39, 37, 66, 64, 65, 67, 9, 8, 11, 10, 16, 19, 18, 17,
            21, 22, 23, 20),
    "FDm": (66, 64, 67, 65, 38, 36, 39, 37, 19, 16, 17, 18, 9, 8, 11, 10,
            6, 7, 4, 5),
    "FLm": (38, 36, 37, 39, 64, 66, 67, 65, 8, 9, 10, 11, 19, 16, 17, 18,
            23, 20, 21, 22),
    "BUm": (65, 67, 64, 66, 37, 39, 36, 38, 17, 18, 19, 16, 10, 11, 8, 9,
            5, 4, 7, 6),
    "BRm": (39, 37, 36, 38, 65, 67, 66, 64, 10, 11, 8, 9, 18, 17, 16, 19,
            22, 21, 20, 23),
    "BDm": (67, 65, 66, 64, 39, 37, 38, 36, 18, 17, 16, 19, 11, 10, 9, 8,
            7, 6, 5, 4),
    "BLm": (37, 39, 38, 36, 67, 65, 64, 66, 11, 10, 9, 8, 17, 18, 19, 16,
            20, 23, 22, 21),
})

TRANS_CUBES_INVERSE: dict[str, Cube] = _table({
    "UFr": (0, 1, 2, 3, 4, 5, 6, 7, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11),
    "ULr": (5, 4, 6, 7, 0, 1, 3, 2, 4, 5, 6, 7, 1, 0, 3, 2, 27, 24, 25, 26),
    "UBr": (1, 0, 3, 2, 5, 4, 7, 6, 1, 0, 3, 2, 5, 4, 7, 6, 10, 11, 8, 9),
    "URr": (4, 5, 7, 6, 1, 0, 2, 3, 5, 4, 7, 6, 0, 1, 2, 3, 25, 26, 27, 24),
    "DFr": (2, 3, 0, 1, 6, 7, 4, 5, 3, 2, 1, 0, 6, 7, 4, 5, 9, 8, 11, 10),
    "DLr": (7, 6, 4, 5, 2, 3, 1, 0, 6, 7, 4, 5, 2, 3, 0, 1, 26, 25, 24, 27),
    "DBr": (3, 2, 1, 0, 7, 6, 5, 4, 2, 3, 0, 1, 7, 6, 5, 4, 11, 10, 9, 8),
    "DRr": (6, 7, 5, 4, 3, 2, 0, 1, 7, 6, 5, 4, 3, 2, 1, 0, 24, 27, 26, 25),
    "RUr": (32, 34, 35, 33, 70, 68, 69, 71, 8, 9, 10, 11, 16, 19, 18, 17,
            20, 23, 22, 21),
    "RFr": (36, 39, 38, 37, 66, 65, 64, 67, 25, 26, 27, 24, 21, 22, 23, 20,
            16, 19, 18, 17),
    "RDr": (33, 35, 34, 32, 71, 69, 68, 70, 10, 11, 8, 9, 17, 18, 19, 16,
            21, 22, 23, 20),
    "RBr": (37, 38, 39, 36, 67, 64, 65, 66, 27, 24, 25, 26, 20, 23, 22, 21,
            17, 18, 19, 16),
    "LUr": (34, 32, 33, 35, 68, 70, 71, 69, 9, 8, 11, 10, 19, 16, 17, 18,
            22, 21, 20, 23),
    "LFr": (38, 37, 36, 39, 64, 67, 66, 65, 24, 27, 26, 25, 23, 20, 21, 22,
            19, 16, 17, 18),
    "LDr": (35, 33, 32, 34, 69, 71, 70, 68, 11, 10, 9, 8, 18, 17, 16, 19,
            23, 20, 21, 22),
    "LBr": (39, 36, 37, 38, 65, 66, 67, 64, 26, 25, 24, 27, 22, 21, 20, 23,
            18, 17, 16, 19),
    "FUr": (68, 70, 69, 71, 32, 34, 33, 35, 16, 19, 18, 17, 9, 8, 11, 10,
            5, 4, 7, 6),
    "FRr": (64, 67, 65, 66, 37, 38, 36, 39, 20, 23, 22, 21, 24, 27, 26, 25,
            0, 1, 2, 3),
    "FDr": (69, 71, 68, 70, 33, 35, 32, 34, 17, 18, 19, 16, 11, 10, 9, 8,
            4, 5, 6, 7),
    "FLr": (65, 66, 64, 67, 36, 39, 37, 38, 21, 22, 23, 20, 26, 25, 24, 27,
            1, 0, 3, 2),
    "BUr": (70, 68, 71, 69, 34, 32, 35, 33, 19, 16, 17, 18, 8, 9, 10, 11,
            7, 6, 5, 4),
    "BRr": (66, 65, 67, 64, 39, 36, 38, 37, 22, 21, 20, 23, 25, 26, 27, 24,
            3, 2, 1, 0),
    "BDr": (71, 69, 70, 68, 35, 33, 34, 32, 18, 17, 16, 19, 10, 11, 8, 9,
            6, 7, 4, 5),
    "BLr": (67, 64, 66, 65, 38, 37, 39, 36, 23, 20, 21, 22, 27, 24, 25, 26,
            2, 3, 0, 1),
    "UFm": (4, 5, 6, 7, 0, 1, 2, 3, 0, 1, 2, 3, 5, 4, 7, 6, 9, 8, 11, 10),
    "ULm": (0, 1, 3, 2, 5, 4, 6, 7, 4, 5, 6, 7, 0, 1, 2, 3, 24, 27, 26, 25),
    "UBm": (5, 4, 7, 6, 1, 0, 3, 2, 1, 0, 3, 2, 4, 5, 6, 7, 11, 10, 9, 8),
    "URm": (1, 0, 2, 3, 4, 5, 7, 6, 5, 4, 7, 6, 1, 0, 3, 2, 26, 25, 24, 27),
    "DFm": (6, 7, 4, 5, 2, 3, 0, 1, 3, 2, 1, 0, 7, 6, 5, 4, 8, 9, 10, 11),
    "DLm": (2, 3, 1, 0, 7, 6, 4, 5, 6, 7, 4, 5, 3, 2, 1, 0, 25, 26, 27, 24),
    "DBm": (7, 6, 5, 4, 3, 2, 1, 0, 2, 3, 0, 1, 6, 7, 4, 5, 10, 11, 8, 9),
    "DRm": (3, 2, 0, 1, 6, 7, 5, 4, 7, 6, 5, 4, 2, 3, 0, 1, 27, 24, 25, 26),
    "RUm": (70, 68, 69, 71, 32, 34, 35, 33, 8, 9, 10, 11, 19, 16, 17, 18,
            23, 20, 21, 22),
    "RFm": (66, 65, 64, 67, 36, 39, 38, 37, 25, 26, 27, 24, 22, 21, 20, 23,
            19, 16, 17, 18),
    "RDm": (71, 69, 68, 70, 33, 35, 34, 32, 10, 11, 8, 9, 18, 17, 16, 19,
            22, 21, 20, 23),
    "RBm": (67, 64, 65, 66, 37, 38, 39, 36, 27, 24, 25, 26, 23, 20, 21, 22,
            18, 17, 16, 19),
    "LUm": (68, 70, 71, 69, 34, 32, 33, 35, 9, 8, 11, 10, 16, 19, 18, 17,
            21, 22, 23, 20),
    "LFm": (64, 67, 66, 65, 38, 37, 36, 39, 24, 27, 26, 25, 20, 23, 22, 21,
            16, 19, 18, 17),
    "LDm": (69, 71, 70, 68, 35, 33, 32, 34, 11, 10, 9, 8, 17, 18, 19, 16,
            20, 23, 22, 21),
    "LBm": (65, 66, 67, 64, 39, 36, 37, 38, 26, 25, 24, 27, 21, 22, 23, 20,
            17, 18, 19, 16),
    "FUm": (32, 34, 33, 35, 68, 70, 69, 71, 16, 19, 18, 17, 8, 9, 10, 11,
            4, 5, 6, 7),
    "FRm": (37, 38, 36, 39, 64, 67, 65, 66, 20, 23, 22, 21, 27, 24, 25, 26,
            1, 0, 3, 2),
    "FDm": (33, 35, 32, 34, 69, 71, 68, 70, 17, 18, 19, 16, 10, 11, 8, 9,
            5, 4, 7, 6),
    "FLm": (36, 39, 37, 38, 65, 66, 64, 67, 21, 22, 23, 20, 25, 26, 27, 24,
            0, 1, 2, 3),
    "BUm": (34, 32, 35, 33, 70, 68, 71, 69, 19, 16, 17, 18, 9, 8, 11, 10,
            6, 7, 4, 5),
    "BRm": (39, 36, 38, 37, 66, 65, 67, 64, 22, 21, 20, 23, 26, 25, 24, 27,
            2, 3, 0, 1),
    "BDm": (35, 33, 34, 32, 71, 69, 70, 68, 18, 17, 16, 19, 11, 10, 9, 8,
            7, 6, 5, 4),
    "BLm": (38, 37, 39, 36, 67, 64, 66, 65, 23, 20, 21, 22, 24, 27, 26, 25,
            3, 2, 1, 0),
})