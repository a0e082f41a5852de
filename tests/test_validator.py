#!/usr/bin/env python3
"""
Tests for source validation: filtering, alphabet checks and bracket balance.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfi import (
    EmptySource,
    InvalidSymbol,
    Program,
    UnmatchedLoopClose,
    UnmatchedLoopOpen,
    ValidationError,
    validate,
)


def test_accepts_full_alphabet():
    program = validate("+-<>.,[]")
    assert isinstance(program, Program)
    assert program.instructions == "+-<>.,[]"


def test_strips_whitespace_only():
    program = validate("  ++\n>\t[-]\r\n")
    assert program.instructions == "++>[-]"
    assert program.offsets == (2, 3, 5, 7, 8, 9)


def test_empty_source():
    with pytest.raises(EmptySource) as exc:
        validate("")
    assert str(exc.value) == "source must not be empty"
    assert exc.value.kind == "empty-source"


def test_whitespace_only_source_is_empty():
    with pytest.raises(EmptySource):
        validate(" \n\t ")


def test_invalid_symbol_reports_first_position():
    with pytest.raises(InvalidSymbol) as exc:
        validate("++a+b")
    assert exc.value.position == 2
    assert str(exc.value) == "source contains invalid symbol at position 2"


def test_lenient_mode_drops_comments():
    program = validate("add two: ++ then print .", strict=False)
    assert program.instructions == "++."


def test_lenient_mode_comment_only_is_empty():
    with pytest.raises(EmptySource):
        validate("just words", strict=False)


def test_unmatched_close_alone():
    with pytest.raises(UnmatchedLoopClose) as exc:
        validate("]")
    assert exc.value.position == 0
    assert str(exc.value) == "unmatched loop-close at position 0"


def test_unmatched_open_alone():
    with pytest.raises(UnmatchedLoopOpen) as exc:
        validate("[")
    assert exc.value.count == 1
    assert str(exc.value) == "1 unmatched loop-open(s) in program"


def test_nested_unmatched_open():
    with pytest.raises(UnmatchedLoopOpen) as exc:
        validate("[[]")
    assert exc.value.count == 1


def test_trailing_unmatched_close():
    with pytest.raises(UnmatchedLoopClose) as exc:
        validate("[]]")
    assert exc.value.position == 2


def test_unmatched_close_wins_over_later_opens():
    with pytest.raises(UnmatchedLoopClose) as exc:
        validate("+][[[")
    assert exc.value.position == 1


def test_several_unmatched_opens_are_counted():
    with pytest.raises(UnmatchedLoopOpen) as exc:
        validate("[[[+]")
    assert exc.value.count == 2
    assert str(exc.value) == "2 unmatched loop-open(s) in program"


def test_close_position_is_source_offset():
    with pytest.raises(UnmatchedLoopClose) as exc:
        validate("+ +\n]")
    assert exc.value.position == 4


def test_all_errors_share_base_class():
    for src in ("", "x", "]", "["):
        with pytest.raises(ValidationError):
            validate(src)


def test_program_is_immutable():
    program = validate("+>")
    with pytest.raises(AttributeError):
        program.instructions = "-"
