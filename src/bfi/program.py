from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

import numpy as np

ADVANCE = '>'
RETREAT = '<'
INCREMENT = '+'
DECREMENT = '-'
OUTPUT = '.'
INPUT = ','
LOOP_OPEN = '['
LOOP_CLOSE = ']'

ALPHABET = frozenset('><+-.,[]')


@dataclass(frozen=True)
class Program:
    """A validated instruction sequence.

    ``instructions`` holds only alphabet symbols. ``offsets`` maps each
    instruction back to its position in the source it was read from.
    """

    instructions: str
    offsets: Tuple[int, ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.offsets:
            object.__setattr__(self, 'offsets', tuple(range(len(self.instructions))))

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> str:
        return self.instructions[index]

    def __iter__(self):
        return iter(self.instructions)

    def __str__(self) -> str:
        return self.instructions

    def codes(self) -> np.ndarray:
        """Instruction symbols as an int32 array of code points."""
        return np.array([ord(c) for c in self.instructions], dtype=np.int32)
