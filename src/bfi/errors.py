from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


def _locate(source: str, position: int) -> Tuple[int, int]:
    # 1-based line, 0-based column
    position = max(0, min(position, len(source)))
    line_no = source.count('\n', 0, position) + 1
    line_start = source.rfind('\n', 0, position) + 1
    return line_no, position - line_start


def _build_context(source: str, position: int, *, context: int = 1) -> str:
    lines = source.split('\n')
    line_no, col = _locate(source, position)
    start = max(1, line_no - context)
    end = min(len(lines), line_no + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == line_no else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == line_no:
            out.append(f"  {'':4s} | {' ' * col}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'invalid-symbol':
        return 'Only > < + - . , [ ] and whitespace are allowed. Use --lenient to treat other text as comments.'
    if kind == 'invalid-encoding':
        return 'Save the program as UTF-8, or raise the source size if the cut fell inside a character.'
    if kind == 'unmatched-close':
        return 'Check for an extra "]" or a missing "[" earlier in the program.'
    if kind == 'unmatched-open':
        return 'Check for a missing "]" at the end of a loop.'
    return None


@dataclass
class BFIError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigError(BFIError):
    pass


@dataclass
class ValidationError(BFIError):
    kind: str = field(default='validation', init=False)
    # offset into the source text, when the error points somewhere
    position: Optional[int] = field(default=None, init=False)


@dataclass
class EmptySource(ValidationError):
    message: str = 'source must not be empty'
    kind: str = field(default='empty-source', init=False)


@dataclass(init=False)
class InvalidSymbol(ValidationError):
    def __init__(self, position: int) -> None:
        super().__init__(f'source contains invalid symbol at position {position}')
        self.kind = 'invalid-symbol'
        self.position = position


@dataclass(init=False)
class InvalidEncoding(ValidationError):
    encoding: str = 'utf-8'

    def __init__(self, position: int, encoding: str) -> None:
        super().__init__(f'source is not valid {encoding} at byte {position}')
        self.kind = 'invalid-encoding'
        self.position = position
        self.encoding = encoding


@dataclass(init=False)
class UnmatchedLoopClose(ValidationError):
    def __init__(self, position: int) -> None:
        super().__init__(f'unmatched loop-close at position {position}')
        self.kind = 'unmatched-close'
        self.position = position


@dataclass(init=False)
class UnmatchedLoopOpen(ValidationError):
    count: int = 0

    def __init__(self, count: int) -> None:
        super().__init__(f'{count} unmatched loop-open(s) in program')
        self.kind = 'unmatched-open'
        self.count = count


@dataclass
class InternalError(BFIError):
    """Raised when the executor breaks an invariant the validator guarantees."""


@dataclass(init=False)
class ExecutionStopped(BFIError):
    steps: int = 0

    def __init__(self, message: str, steps: int) -> None:
        super().__init__(message)
        self.steps = steps


@dataclass(init=False)
class StepLimitExceeded(ExecutionStopped):
    def __init__(self, steps: int) -> None:
        super().__init__(f'step limit of {steps} exceeded', steps)


@dataclass(init=False)
class ExecutionCancelled(ExecutionStopped):
    def __init__(self, steps: int) -> None:
        super().__init__(f'execution cancelled after {steps} steps', steps)


def format_error(err: BFIError, source: Optional[str] = None) -> str:
    if not isinstance(err, ValidationError) or source is None:
        return f"error: {err.message}"
    parts = [f"error: {err.message}"]
    if err.position is not None and source:
        line, col = _locate(source, err.position)
        parts[0] += f" (line {line}, column {col + 1})"
        parts.append(_build_context(source, err.position))
    hint = _hint_for(err.kind)
    if hint:
        parts.append(f"Hint: {hint}")
    return "\n".join(parts)
