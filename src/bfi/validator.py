"""Source validation: alphabet filtering and loop bracket balance."""
from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import EmptySource, InvalidSymbol, UnmatchedLoopClose, UnmatchedLoopOpen
from .program import ALPHABET, LOOP_CLOSE, LOOP_OPEN, Program

logger = logging.getLogger(__name__)


def _filter(text: str, *, strict: bool) -> Tuple[str, Tuple[int, ...]]:
    symbols: List[str] = []
    offsets: List[int] = []
    for pos, ch in enumerate(text):
        if ch in ALPHABET:
            symbols.append(ch)
            offsets.append(pos)
        elif ch.isspace() or not strict:
            continue
        else:
            raise InvalidSymbol(pos)
    return ''.join(symbols), tuple(offsets)


def check_brackets(instructions: str, offsets: Tuple[int, ...]) -> None:
    depth = 0
    for i, ch in enumerate(instructions):
        if ch == LOOP_OPEN:
            depth += 1
        elif ch == LOOP_CLOSE:
            depth -= 1
            if depth < 0:
                raise UnmatchedLoopClose(offsets[i])
    if depth > 0:
        raise UnmatchedLoopOpen(depth)


def validate(text: str, *, strict: bool = True) -> Program:
    """Validate ``text`` and return the filtered :class:`Program`.

    In strict mode whitespace is stripped and any other character outside the
    alphabet is rejected. With ``strict=False`` every non-alphabet character
    is dropped, so free text can be used as comments.

    Raises a :class:`~bfi.errors.ValidationError` subclass on rejection.
    """
    if not text:
        raise EmptySource()

    instructions, offsets = _filter(text, strict=strict)
    if not instructions:
        raise EmptySource()

    check_brackets(instructions, offsets)

    logger.debug("validated program: %d instructions from %d characters", len(instructions), len(text))
    return Program(instructions, offsets)
