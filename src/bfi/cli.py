from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import DEFAULT_SOURCE_SIZE, RunOptions, read_source, run_string
from .errors import BFIError, format_error

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Run a tape program (> < + - . , [ ]) and write its output to stdout.",
    )
    parser.add_argument("file", help="program source file")
    parser.add_argument(
        "source_size", nargs="?", type=int, default=DEFAULT_SOURCE_SIZE,
        help=f"upper limit on the source size in bytes (default {DEFAULT_SOURCE_SIZE})",
    )
    parser.add_argument("--max-steps", type=int, default=None, help="stop after this many instructions")
    parser.add_argument("--lenient", action="store_true", help="ignore characters outside the instruction set")
    parser.add_argument("--jump-table", action="store_true", help="precompute loop jump targets")
    parser.add_argument("--input", metavar="FILE", default=None, help="read ',' input from FILE instead of stdin")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug information to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = RunOptions(
        strict=not args.lenient,
        max_steps=args.max_steps,
        precompute_jumps=args.jump_table,
        capture_output=False,
    )

    source: Optional[str] = None
    try:
        source = read_source(args.file, source_size=args.source_size)
        if args.input is not None:
            with open(args.input, 'rb') as stdin:
                result = run_string(source, options=options, input=stdin, output=sys.stdout.buffer)
        else:
            result = run_string(source, options=options, input=sys.stdin.buffer, output=sys.stdout.buffer)
    except BFIError as e:
        sys.stdout.flush()
        print(format_error(e, source), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: couldn't read {e.filename}: {e.strerror}", file=sys.stderr)
        return 1

    logger.debug("%d steps, cursor at %d of %d cells", result.steps, result.cursor, len(result.tape))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
