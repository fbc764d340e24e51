"""Reading and writing cubes in the B32, LST and H48 text formats."""

from __future__ import annotations

import re
from typing import Callable

from .constants import CORNER_NAMES, CORNER_NAMES_ALT, EDGE_NAMES
from .cube import (
    CTWIST_CCW,
    CTWIST_CW,
    EFLIP,
    NCORNERS,
    NEDGES,
    Cube,
    corner_orientation,
    corner_permutation,
    edge_orientation,
    edge_permutation,
)


class CubeFormatError(ValueError):
    """Raised when a cube cannot be read or written in a given format."""


_EDGE_INDEX = {name: index for index, name in enumerate(EDGE_NAMES)}
_CORNER_INDEX = {
    **{name: index for index, name in enumerate(CORNER_NAMES)},
    **{name: index for index, name in enumerate(CORNER_NAMES_ALT)},
}
_EO_VALUES = {"0": 0, "1": EFLIP}
_CO_VALUES = {"0": 0, "1": CTWIST_CW, "2": CTWIST_CCW}
_H48_SPACE = " \t\n"
_LST_PIECE = re.compile(r"[, \t\n]*([0-9]*)")


def _b32_value(char: str) -> int | None:
    if "A" <= char <= "Z":
        return ord(char) - ord("A")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 26
    return None


def _b32_char(value: int) -> str:
    return chr(ord("A") + value) if value < 26 else chr(ord("a") + value - 26)


def _decode_b32(chunk: str, count: int, what: str) -> list[int]:
    values = []
    for index, char in enumerate(chunk):
        value = _b32_value(char)
        if value is None:
            raise CubeFormatError(
                f"error reading B32 {what} {index} (char {char!r})")
        values.append(value)
    if len(values) < count:
        raise CubeFormatError(
            f"error reading B32 {what} {len(values)} "
            "(string terminated early)")
    return values


def _make_cube(corners: list[int], edges: list[int]) -> Cube:
    try:
        return Cube(tuple(corners), tuple(edges))
    except ValueError as exc:
        raise CubeFormatError(str(exc)) from exc


def read_b32(text: str) -> Cube:
    """Read a cube written as 8 corner letters, '=' and 12 edge letters."""
    corner_values = _decode_b32(text[:NCORNERS], NCORNERS, "corner")
    if text[NCORNERS:NCORNERS + 1] != "=":
        raise CubeFormatError(
            "error reading B32 separator: a single '=' must be used to "
            "separate edges and corners")
    start = NCORNERS + 1
    edges = _decode_b32(text[start:start + NEDGES], NEDGES, "edge")
    corners = [(v & 7) | ((v & 24) << 2) for v in corner_values]
    return _make_cube(corners, edges)


def write_b32(cube: Cube) -> str:
    """Write a cube in the B32 format."""
    corners = "".join(
        _b32_char((c & 7) | ((c & 96) >> 2)) for c in cube.corners)
    for edge in cube.edges:
        if edge >= 32:
            raise CubeFormatError(f"edge value {edge} cannot be written in B32")
    edges = "".join(_b32_char(e) for e in cube.edges)
    return f"{corners}={edges}"


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _H48_SPACE:
        pos += 1
    return pos


def read_h48(text: str) -> Cube:
    """Read a cube written as 12 edges then 8 corners, e.g. "UF0 ... DBL0"."""
    pos = 0
    edges = []
    for _ in range(NEDGES):
        pos = _skip_space(text, pos)
        piece = _EDGE_INDEX.get(text[pos:pos + 2])
        if piece is None:
            raise CubeFormatError("error reading EP")
        pos += 2
        orient = _EO_VALUES.get(text[pos:pos + 1])
        if orient is None:
            raise CubeFormatError("error reading EO")
        pos += 1
        edges.append(piece | orient)
    corners = []
    for _ in range(NCORNERS):
        pos = _skip_space(text, pos)
        piece = _CORNER_INDEX.get(text[pos:pos + 3])
        if piece is None:
            raise CubeFormatError("error reading CP")
        pos += 3
        orient = _CO_VALUES.get(text[pos:pos + 1])
        if orient is None:
            raise CubeFormatError("error reading CO")
        pos += 1
        corners.append(piece | orient)
    return _make_cube(corners, edges)


def write_h48(cube: Cube) -> str:
    """Write a cube in the H48 format."""
    parts = []
    for edge in cube.edges:
        perm = edge_permutation(edge)
        if perm >= NEDGES:
            raise CubeFormatError(f"invalid edge value {edge}")
        parts.append(f"{EDGE_NAMES[perm]}{edge_orientation(edge)}")
    for corner in cube.corners:
        perm = corner_permutation(corner)
        if perm >= NCORNERS:
            raise CubeFormatError(f"invalid corner value {corner}")
        parts.append(f"{CORNER_NAMES[perm]}{corner_orientation(corner)}")
    return " ".join(parts)


def read_lst(text: str) -> Cube:
    """Read a cube written as 20 comma-separated piece values."""
    pos = 0
    values = []
    for index in range(NCORNERS + NEDGES):
        match = _LST_PIECE.match(text, pos)
        digits = match.group(1)
        if not digits:
            raise CubeFormatError(f"error reading LST piece {index}")
        values.append(int(digits))
        pos = match.end()
    return _make_cube(values[:NCORNERS], values[NCORNERS:])


def write_lst(cube: Cube) -> str:
    """Write a cube as comma-separated piece values, corners first."""
    pieces = cube.corners + cube.edges
    for piece in pieces:
        if piece > 99:
            raise CubeFormatError(
                f"piece value {piece} cannot be written in LST")
    return ", ".join(str(piece) for piece in pieces)


_FORMATS: dict[str, tuple[Callable[[str], Cube], Callable[[Cube], str]]] = {
    "B32": (read_b32, write_b32),
    "LST": (read_lst, write_lst),
    "H48": (read_h48, write_h48),
}


def available_formats() -> tuple[str, ...]:
    """Return the names of the supported formats."""
    return tuple(_FORMATS)


def _unknown(action: str, fmt: str) -> CubeFormatError:
    names = " ".join(f"'{name}'" for name in _FORMATS)
    return CubeFormatError(
        f"cannot {action} cube: unknown format '{fmt}'. "
        f"Available formats: {names}")


def read_cube(fmt: str, text: str) -> Cube:
    """Read a cube in the named format."""
    try:
        reader, _ = _FORMATS[fmt]
    except KeyError:
        raise _unknown("read", fmt) from None
    return reader(text)


def write_cube(fmt: str, cube: Cube) -> str:
    """Write a cube in the named format."""
    try:
        _, writer = _FORMATS[fmt]
    except KeyError:
        raise _unknown("write", fmt) from None
    return writer(cube)