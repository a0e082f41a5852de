#!/usr/bin/env python3
"""
Tests for the growable byte tape.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfi import Tape


def test_initial_tape():
    tape = Tape()
    assert len(tape) == 1
    assert tape.cursor == 0
    assert tape.read() == 0


def test_advance_appends_one_cell():
    tape = Tape()
    tape.advance()
    assert len(tape) == 2
    assert tape.cursor == 1
    tape.retreat()
    tape.advance()
    assert len(tape) == 2


def test_retreat_prepends_one_cell():
    tape = Tape()
    tape.increment()
    tape.retreat()
    assert len(tape) == 2
    assert tape.cursor == 0
    assert tape.read() == 0
    assert tape.cells() == bytes([0, 1])


def test_round_trip_keeps_cells_zero():
    tape = Tape(capacity=4)
    for _ in range(100):
        tape.advance()
    for _ in range(100):
        tape.retreat()
    assert tape.cursor == 0
    assert len(tape) == 101
    assert tape.cells() == bytes(101)


def test_retreat_far_past_start():
    tape = Tape(capacity=2)
    tape.increment()
    for _ in range(50):
        tape.retreat()
    assert tape.cursor == 0
    assert len(tape) == 51
    for _ in range(50):
        tape.advance()
    assert tape.read() == 1
    assert tape.cursor == 50


def test_increment_wraps_full_cycle():
    tape = Tape()
    tape.write(17)
    for _ in range(256):
        tape.increment()
    assert tape.read() == 17


def test_wrapping_both_directions():
    tape = Tape()
    tape.decrement()
    assert tape.read() == 255
    tape.increment()
    assert tape.read() == 0


def test_write_masks_to_byte():
    tape = Tape()
    tape.write(300)
    assert tape.read() == 300 & 0xFF


def test_cells_keep_values_across_growth():
    tape = Tape(capacity=2)
    for value in range(1, 20):
        tape.write(value)
        tape.advance()
    for _ in range(5):
        tape.retreat()
    assert tape.cells()[:19] == bytes(range(1, 20))
