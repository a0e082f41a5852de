from __future__ import annotations

import numpy as np

INITIAL_CAPACITY = 64


class Tape:
    """A byte tape that grows by one zero cell whenever the cursor leaves it.

    Cells live in a ``uint8`` arena. ``_lo``/``_hi`` delimit the live window
    inside the arena, so growing at either end only moves a boundary; the
    arena is re-centred into a bigger buffer once a side runs out of room.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY):
        capacity = max(2, int(capacity))
        self._mem = np.zeros(capacity, dtype=np.uint8)
        self._lo = capacity // 2
        self._hi = self._lo + 1   # exclusive
        self._pos = self._lo      # absolute index into the arena

    def __len__(self) -> int:
        return self._hi - self._lo

    def __repr__(self) -> str:
        return f"Tape(cells={len(self)}, cursor={self.cursor}, value={self.read()})"

    @property
    def cursor(self) -> int:
        return self._pos - self._lo

    def cells(self) -> bytes:
        return self._mem[self._lo:self._hi].tobytes()

    def _grow(self) -> None:
        size = len(self)
        capacity = max(len(self._mem) * 2, size * 4)
        mem = np.zeros(capacity, dtype=np.uint8)
        lo = (capacity - size) // 2
        mem[lo:lo + size] = self._mem[self._lo:self._hi]
        self._pos = lo + (self._pos - self._lo)
        self._mem, self._lo, self._hi = mem, lo, lo + size

    def advance(self) -> None:
        self._pos += 1
        if self._pos == self._hi:
            if self._hi == len(self._mem):
                self._pos -= 1
                self._grow()
                self._pos += 1
            self._hi += 1

    def retreat(self) -> None:
        if self._pos == self._lo:
            if self._lo == 0:
                self._grow()
            self._lo -= 1
        self._pos -= 1

    def increment(self) -> None:
        self._mem[self._pos] = (int(self._mem[self._pos]) + 1) & 0xFF

    def decrement(self) -> None:
        self._mem[self._pos] = (int(self._mem[self._pos]) - 1) & 0xFF

    def read(self) -> int:
        return int(self._mem[self._pos])

    def write(self, value: int) -> None:
        self._mem[self._pos] = int(value) & 0xFF
