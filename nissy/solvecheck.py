"""Reference scrambles with their optimal solutions, and solution checks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SolveCase:
    """A scramble and all its optimal solutions, one per line."""

    scramble: str
    solutions: str


def _case(scramble: str, *solutions: str) -> SolveCase:
    return SolveCase(scramble, "".join(f"{line}\n" for line in solutions))


_REFERENCE = [
    ("R' D R U R' D' R U'",
     ["U R' D R U' R' D' R", "B' D2 B U' B' D2 B U"]),
    ("R' L U2 R L' B2",
     ["B2 R' L U2 R L'", "R L' B2 R' L U2",
      "R B2 R' L U2 L'", "L' B2 R' L U2 R"]),
    ("R2 U2 R2 U2 R2 U2",
     ["U2 R2 U2 R2 U2 R2", "D2 L2 U2 L2 D2 R2",
      "U2 L2 D2 R2 D2 L2", "D2 R2 D2 L2 U2 L2",
      "R2 U2 R2 U2 R2 U2", "L2 D2 R2 D2 L2 U2",
      "R2 D2 L2 U2 L2 D2", "L2 U2 L2 D2 R2 D2"]),
    # J-perm
    ("R U2 R' U' R U2 L' U R' U' L",
     ["R2 D' R' D R' B2 L U' L' B2", "B2 L U L' B2 R D' R D R2"]),
    # Two moves run together ("B2D'"), kept as the reference has them
    ("R' U' F D2 L2 F R2 U2 R2 B D2 L B2D' B2 L' R' B D2 B U2 L U2 R' U' F",
     ["D2 F' U2 D2 F' L2 D R2 D F B2 R' L2 F' U' D"]),
    ("L B' D2 R2 L2 B' U2 D2 R L' U F2",
     ["B2 R2 L2 D F2 B2 R' L F' U2 B L'",
      "F2 U' R' L U2 D2 B R2 L2 D2 B L'"]),
    # Two moves run together ("UR'"), kept as the reference has them
    ("R L' B R L' D R L' F R L' UR' L F R L' D R L' B R L' U",
     ["U' R L' B' D2 F R' L F2 B2 U' F2 R2 L2 U2",
      "U' R L' B' R2 L2 U2 B' U2 D2 R' L D B2 U2",
      "D2 R' L F R' B' R U B U L F' U' F' D",
      "D' R' L B' U2 F R L' F2 B2 D' R2 L2 B2 D2",
      "D' R' L B' D2 R2 L2 B' U2 D2 R L' U F2 D2"]),
]

SOLVE_CASES: tuple[SolveCase, ...] = tuple(
    _case(scramble, *solutions) for scramble, solutions in _REFERENCE
)


def _expected_lines(expected: str) -> list[str]:
    if not expected:
        return []
    lines = expected.split("\n")
    if expected.endswith("\n"):
        lines.pop()
    return lines


def check_one(actual: str, expected: str) -> bool:
    """Tell whether the first line of actual starts one of the expected lines."""
    first = actual.split("\n", 1)[0]
    if len(first) > len(expected):
        return False
    return any(line.startswith(first) for line in _expected_lines(expected))


def check_all(actual: str, expected: str) -> bool:
    """Tell whether actual lists as many valid lines as expected holds.

    Both texts must have the same length, and every line of actual that
    matches an expected line is counted.
    """
    if len(actual) != len(expected):
        return False
    n_expected = expected.count("\n")
    found = 0
    start = 0
    while start < len(actual):
        found += check_one(actual[start:], expected)
        newline = actual.find("\n", start)
        if newline < 0:
            break
        start = newline + 1
    return found == n_expected