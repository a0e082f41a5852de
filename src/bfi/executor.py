from __future__ import annotations

import logging
from typing import BinaryIO, Dict, Optional, Protocol

from .errors import ExecutionCancelled, StepLimitExceeded
from .jumps import build_jump_table, matching_close, matching_open
from .program import (
    ADVANCE,
    DECREMENT,
    INCREMENT,
    INPUT,
    LOOP_CLOSE,
    LOOP_OPEN,
    OUTPUT,
    RETREAT,
    Program,
)
from .state import ExecutionState

logger = logging.getLogger(__name__)


class CancelFlag(Protocol):
    def is_set(self) -> bool: ...


class Executor:
    """Runs one :class:`Program` against a fresh tape.

    Loop brackets are resolved on demand by scanning the program, unless
    ``precompute_jumps`` is set, in which case a jump table is built once up
    front. Both produce the same behaviour.

    Written bytes are kept in ``emitted`` only while ``capture_output`` is
    set; ``written`` always counts them.
    """

    def __init__(
        self,
        program: Program,
        *,
        output: Optional[BinaryIO] = None,
        input: Optional[BinaryIO] = None,
        max_steps: Optional[int] = None,
        cancel: Optional[CancelFlag] = None,
        precompute_jumps: bool = False,
        capture_output: bool = True,
    ):
        self.program = program
        self.output = output
        self.input = input
        self.max_steps = max_steps
        self.cancel = cancel
        self.state = ExecutionState()
        self.capture_output = capture_output
        self.emitted = bytearray()
        self.written = 0
        self._codes = program.codes()
        self._jumps: Optional[Dict[int, int]] = build_jump_table(program) if precompute_jumps else None

    def _read_byte(self) -> int:
        if self.input is None:
            return 0
        data = self.input.read(1)
        return data[0] if data else 0

    def _write_byte(self, value: int) -> None:
        b = bytes((value,))
        self.written += 1
        if self.capture_output:
            self.emitted += b
        if self.output is not None:
            self.output.write(b)

    def _close_of(self, i: int) -> int:
        if self._jumps is not None:
            return self._jumps[i]
        return matching_close(self._codes, i)

    def _open_of(self, i: int) -> int:
        if self._jumps is not None:
            return self._jumps[i]
        return matching_open(self._codes, i)

    def step(self) -> None:
        """Dispatch the instruction at ``ip``."""
        state = self.state
        tape = state.tape
        i = state.ip
        cmd = self.program[i]

        if cmd == ADVANCE:
            tape.advance()
        elif cmd == RETREAT:
            tape.retreat()
        elif cmd == INCREMENT:
            tape.increment()
        elif cmd == DECREMENT:
            tape.decrement()
        elif cmd == OUTPUT:
            self._write_byte(tape.read())
        elif cmd == INPUT:
            tape.write(self._read_byte())
        elif cmd == LOOP_OPEN:
            if tape.read() == 0:
                i = self._close_of(i)
        elif cmd == LOOP_CLOSE:
            if tape.read() != 0:
                i = self._open_of(i)

        state.ip = i + 1
        state.steps += 1

    def run(self) -> ExecutionState:
        state = self.state
        length = len(self.program)
        logger.debug("executing %d instructions", length)

        try:
            while not state.finished(length):
                if self.max_steps is not None and state.steps >= self.max_steps:
                    raise StepLimitExceeded(state.steps)
                if self.cancel is not None and self.cancel.is_set():
                    raise ExecutionCancelled(state.steps)
                self.step()
        finally:
            if self.output is not None:
                self.output.flush()

        logger.debug(
            "finished after %d steps, %d bytes written, tape has %d cells",
            state.steps, self.written, len(state.tape),
        )
        return state


def execute(
    program: Program,
    *,
    output: Optional[BinaryIO] = None,
    input: Optional[BinaryIO] = None,
    max_steps: Optional[int] = None,
    cancel: Optional[CancelFlag] = None,
    precompute_jumps: bool = False,
    capture_output: bool = True,
) -> bytes:
    """Run ``program`` to completion and return the bytes it wrote.

    When ``output`` is given each byte is also written to it as it is
    produced. With ``capture_output=False`` nothing is kept and the result
    is empty.
    """
    executor = Executor(
        program,
        output=output,
        input=input,
        max_steps=max_steps,
        cancel=cancel,
        precompute_jumps=precompute_jumps,
        capture_output=capture_output,
    )
    executor.run()
    return bytes(executor.emitted)
