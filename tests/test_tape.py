#!/usr/bin/env python3
"""
Tape growth and cell arithmetic.
"""

from tetanus import Tape


def test_fresh_tape():
    tape = Tape()
    assert len(tape) == 1
    assert tape.pointer == 0
    assert tape.value == 0


def test_wraparound():
    tape = Tape()
    tape.add(-1)
    assert tape.value == 255
    tape.add(1)
    assert tape.value == 0


def test_setter_masks_to_byte():
    tape = Tape()
    tape.value = 0x1FF
    assert tape.value == 0xFF


def test_move_right_appends():
    tape = Tape()
    tape.move_right(3)
    assert tape.pointer == 3
    assert len(tape) == 4


def test_move_right_inside_tape_does_not_grow():
    tape = Tape()
    tape.move_right(5)
    tape.move_left(5)
    tape.move_right(2)
    assert len(tape) == 6
    assert tape.pointer == 2


def test_move_left_past_start_prepends():
    tape = Tape()
    tape.add(9)
    tape.move_right(1)
    tape.move_left(4)
    assert tape.pointer == 0
    assert len(tape) == 5
    # the cell that was index 0 is now index 3
    assert tape.snapshot() == bytes([0, 0, 0, 9, 0])


def test_move_left_within_tape():
    tape = Tape()
    tape.move_right(4)
    tape.move_left(3)
    assert tape.pointer == 1
    assert len(tape) == 5
