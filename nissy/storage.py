"""Storage of generated solver tables on disk, and small tool helpers."""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Callable

DEFAULT_PREFIX = "./tables/"


class TableStorage:
    """Reads and writes table data kept as files under a directory."""

    def __init__(self, prefix: str | Path = DEFAULT_PREFIX) -> None:
        self.prefix = Path(prefix)

    def _path(self, key: str) -> Path:
        return self.prefix / key

    def read(self, key: str, size: int) -> bytes | None:
        """Return the first size bytes stored under key.

        Returns None when nothing is stored under key or when fewer than
        size bytes are available.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        path = self._path(key)
        if not path.exists():
            return None
        with path.open("rb") as handle:
            data = handle.read(size)
        if len(data) != size:
            return None
        return data

    def write(self, key: str, data: bytes) -> None:
        """Store data under key, replacing what was there.

        Raises OSError when the data cannot be written.
        """
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            handle.write(data)


def timerun(run: Callable[[], object] | None) -> float:
    """Call run, print the elapsed time and return it in seconds."""
    sys.stdout.flush()
    if run is None:
        raise ValueError("nothing to run!")

    start = time.monotonic()
    run()
    elapsed = time.monotonic() - start

    print("---------")
    print(f"\nTotal time: {elapsed:.4f}s")
    sys.stdout.flush()
    return elapsed


def write_table(data: bytes, filename: str | Path) -> bool:
    """Write table data to filename, reporting the outcome on stdout."""
    try:
        with open(filename, "wb") as handle:
            handle.write(data)
    except OSError:
        print(f"Could not write tables to file {filename}, "
              "will be regenerated next time.")
        return False
    print(f"Table written to {filename}.")
    return True