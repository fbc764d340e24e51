"""Sizes and packed-entry access for the H48 pruning tables."""

from __future__ import annotations

POW_3_7 = 2187
COMB_12_4 = 495
COMB_8_4 = 70

COCSEP_CLASSES = 3393
COCSEP_TABLESIZE = POW_3_7 << 7
COCSEP_VISITEDSIZE = -(-COCSEP_TABLESIZE // 8)

ESEP_MAX = COMB_12_4 * COMB_8_4
ESEP_CLASSES = 782
EOESEP_TABLESIZE = ESEP_CLASSES << 11
EOESEP_BUF = -(-EOESEP_TABLESIZE // 2)

H48_COORDMAX_NOEO = COCSEP_CLASSES * ESEP_MAX

_VALID_BITS = (1, 2, 4, 8)


def _check_bits(k: int) -> None:
    if k not in _VALID_BITS:
        raise ValueError(f"entry size must be one of {_VALID_BITS}, got {k}")


def h48_coordmax(h: int) -> int:
    """Return the number of H48 coordinates using h edge-orientation bits."""
    if h < 0:
        raise ValueError("h must not be negative")
    return H48_COORDMAX_NOEO << h


def h48_tablesize(h: int, k: int) -> int:
    """Return the byte size of an H48 table with k-bit entries."""
    _check_bits(k)
    per_byte = 8 // k
    return -(-h48_coordmax(h) // per_byte)


def _h48_layout(i: int, k: int) -> tuple[int, int, int]:
    _check_bits(k)
    if i < 0:
        raise IndexError(f"negative table index {i}")
    per_byte = 8 // k
    shift = k * (i % per_byte)
    mask = ((1 << k) - 1) << shift
    return i // per_byte, shift, mask


def h48_get(table: bytes | bytearray, i: int, k: int) -> int:
    """Return the k-bit entry at index i of a packed table."""
    index, shift, mask = _h48_layout(i, k)
    return (table[index] & mask) >> shift


def h48_set(table: bytearray, i: int, k: int, value: int) -> None:
    """Store a k-bit value at index i of a packed table, in place."""
    index, shift, mask = _h48_layout(i, k)
    if not 0 <= value < (1 << k):
        raise ValueError(f"value {value} does not fit in {k} bits")
    table[index] = (table[index] & ~mask & 0xFF) | (value << shift)


def get_eoesep_pval(table: bytes | bytearray, i: int) -> int:
    """Return the 4-bit eoesep pruning value at index i."""
    return h48_get(table, i, 4)


def set_eoesep_pval(table: bytearray, i: int, value: int) -> None:
    """Store a 4-bit eoesep pruning value at index i, in place."""
    h48_set(table, i, 4, value)