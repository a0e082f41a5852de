from .errors import (
    BFIError,
    ConfigError,
    EmptySource,
    ExecutionCancelled,
    ExecutionStopped,
    InternalError,
    InvalidEncoding,
    InvalidSymbol,
    StepLimitExceeded,
    UnmatchedLoopClose,
    UnmatchedLoopOpen,
    ValidationError,
    format_error,
)
from .program import ALPHABET, Program
from .tape import Tape
from .state import ExecutionState
from .validator import validate
from .executor import Executor, execute
from .api import RunOptions, RunResult, read_source, run_file, run_string

__all__ = [
    'ALPHABET',
    'Program',
    'Tape',
    'ExecutionState',
    'validate',
    'Executor',
    'execute',
    'RunOptions',
    'RunResult',
    'read_source',
    'run_file',
    'run_string',
    'BFIError',
    'ConfigError',
    'ValidationError',
    'EmptySource',
    'InvalidSymbol',
    'InvalidEncoding',
    'UnmatchedLoopClose',
    'UnmatchedLoopOpen',
    'InternalError',
    'ExecutionStopped',
    'StepLimitExceeded',
    'ExecutionCancelled',
    'format_error',
]
