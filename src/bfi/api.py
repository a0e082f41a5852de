from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .errors import ConfigError, InvalidEncoding
from .executor import CancelFlag, Executor
from .validator import validate

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_SIZE = 1024 * 1024


@dataclass(frozen=True)
class RunOptions:
    strict: bool = True
    max_steps: Optional[int] = None
    precompute_jumps: bool = False
    capture_output: bool = True


@dataclass(frozen=True)
class RunResult:
    output: bytes
    steps: int
    tape: bytes
    cursor: int


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    input: Optional[BinaryIO] = None,
    output: Optional[BinaryIO] = None,
    cancel: Optional[CancelFlag] = None,
) -> RunResult:
    opts = options or RunOptions()
    program = validate(source, strict=opts.strict)
    executor = Executor(
        program,
        output=output,
        input=input,
        max_steps=opts.max_steps,
        cancel=cancel,
        precompute_jumps=opts.precompute_jumps,
        capture_output=opts.capture_output,
    )
    state = executor.run()
    return RunResult(
        output=bytes(executor.emitted),
        steps=state.steps,
        tape=state.tape.cells(),
        cursor=state.tape.cursor,
    )


def read_source(path: str | Path, *, source_size: int = DEFAULT_SOURCE_SIZE, encoding: str = "utf-8") -> str:
    """Read at most ``source_size`` bytes of program text from ``path``.

    A cut that falls inside a multi-byte character drops the partial
    character. Bytes that do not decode raise :class:`InvalidEncoding`.
    """
    if source_size <= 0:
        raise ConfigError(f"source size should be more than zero, got {source_size}")
    p = Path(path)
    with p.open('rb') as f:
        data = f.read(source_size)
        truncated = bool(f.read(1))
    if truncated:
        logger.warning("%s is larger than %d bytes; only the first %d bytes are used", p, source_size, source_size)

    decoder = codecs.getincrementaldecoder(encoding)(errors='strict')
    try:
        return decoder.decode(data, final=not truncated)
    except UnicodeDecodeError as e:
        raise InvalidEncoding(e.start, encoding) from e


def run_file(
    path: str | Path,
    *,
    source_size: int = DEFAULT_SOURCE_SIZE,
    options: Optional[RunOptions] = None,
    input: Optional[BinaryIO] = None,
    output: Optional[BinaryIO] = None,
    cancel: Optional[CancelFlag] = None,
    encoding: str = "utf-8",
) -> RunResult:
    source = read_source(path, source_size=source_size, encoding=encoding)
    return run_string(source, options=options, input=input, output=output, cancel=cancel)
