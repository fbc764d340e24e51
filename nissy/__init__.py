"""Rubik's cube encoding, move tables, text formats and pruning-table helpers."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "cube",
    "formats",
    "hashmap",
    "solvecheck",
    "storage",
    "tables",
]