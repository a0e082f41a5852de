from __future__ import annotations

from dataclasses import dataclass, field

from .tape import Tape


@dataclass
class ExecutionState:
    ip: int = 0
    tape: Tape = field(default_factory=Tape)
    steps: int = 0

    def finished(self, program_length: int) -> bool:
        return self.ip >= program_length
