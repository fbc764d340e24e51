"""Open-addressing hash map packing a 40-bit key and a 24-bit value."""

from __future__ import annotations

from typing import Iterator

MAP_UNSET = 0xFFFFFFFFFFFFFFFF
MAP_KEYMASK = 0xFFFFFFFFFF
MAP_KEYSHIFT = 40
MAP_UNSET_VAL = MAP_UNSET >> MAP_KEYSHIFT


class H48Map:
    """Fixed-capacity map with linear probing, keeping minimum values."""

    def __init__(self, capacity: int, randomizer: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if randomizer < 0:
            raise ValueError("randomizer must not be negative")
        self.capacity = capacity
        self.randomizer = randomizer
        self._table = [MAP_UNSET] * capacity
        self._n = 0

    def clear(self) -> None:
        """Remove every entry."""
        self._table = [MAP_UNSET] * self.capacity
        self._n = 0

    def lookup(self, key: int) -> int:
        """Return the slot holding key, or the free slot where it belongs."""
        start = ((key % self.capacity) * self.randomizer) % self.capacity
        for offset in range(self.capacity):
            slot = (start + offset) % self.capacity
            entry = self._table[slot]
            if entry == MAP_UNSET or entry & MAP_KEYMASK == key:
                return slot
        raise ValueError("map is full")

    def insert_min(self, key: int, value: int) -> None:
        """Store value for key, keeping the smaller one if key is present."""
        if not 0 <= key <= MAP_KEYMASK:
            raise ValueError(f"key {key} out of range")
        if not 0 <= value <= MAP_UNSET_VAL:
            raise ValueError(f"value {value} out of range")
        slot = self.lookup(key)
        entry = self._table[slot]
        smallest = min(value, entry >> MAP_KEYSHIFT)
        if entry == MAP_UNSET:
            self._n += 1
        self._table[slot] = (key & MAP_KEYMASK) | (smallest << MAP_KEYSHIFT)

    def value(self, key: int) -> int:
        """Return the value for key, or MAP_UNSET_VAL if it is absent."""
        return self._table[self.lookup(key)] >> MAP_KEYSHIFT

    def items(self) -> Iterator[tuple[int, int]]:
        """Yield (key, value) pairs in slot order."""
        for entry in self._table:
            if entry != MAP_UNSET:
                yield entry & MAP_KEYMASK, entry >> MAP_KEYSHIFT

    def __len__(self) -> int:
        return self._n