from __future__ import annotations

from typing import Dict

import numpy as np
from numba import njit

from .errors import InternalError
from .program import LOOP_CLOSE, LOOP_OPEN, Program

OPEN_CODE = ord(LOOP_OPEN)    # 91
CLOSE_CODE = ord(LOOP_CLOSE)  # 93


@njit(cache=True)
def scan_forward(codes, start):
    """Index of the loop-close matching the loop-open at ``start``, or -1."""
    depth = 1
    j = start + 1
    n = len(codes)
    while j < n:
        c = codes[j]
        if c == OPEN_CODE:
            depth += 1
        elif c == CLOSE_CODE:
            depth -= 1
            if depth == 0:
                return j
        j += 1
    return -1


@njit(cache=True)
def scan_backward(codes, start):
    """Index of the loop-open matching the loop-close at ``start``, or -1."""
    depth = -1
    j = start - 1
    while j >= 0:
        c = codes[j]
        if c == CLOSE_CODE:
            depth -= 1
        elif c == OPEN_CODE:
            depth += 1
            if depth == 0:
                return j
        j -= 1
    return -1


def matching_close(codes: np.ndarray, i: int) -> int:
    j = int(scan_forward(codes, i))
    if j < 0:
        raise InternalError(f"no loop-close matches loop-open at instruction {i}")
    return j


def matching_open(codes: np.ndarray, i: int) -> int:
    k = int(scan_backward(codes, i))
    if k < 0:
        raise InternalError(f"no loop-open matches loop-close at instruction {i}")
    return k


def build_jump_table(program: Program) -> Dict[int, int]:
    """Map every bracket to its partner in one pass."""
    table: Dict[int, int] = {}
    stack = []
    for pos, cmd in enumerate(program):
        if cmd == LOOP_OPEN:
            stack.append(pos)
        elif cmd == LOOP_CLOSE:
            if not stack:
                raise InternalError(f"no loop-open matches loop-close at instruction {pos}")
            start = stack.pop()
            table[start] = pos
            table[pos] = start
    if stack:
        raise InternalError(f"no loop-close matches loop-open at instruction {stack[-1]}")
    return table
