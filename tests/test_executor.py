#!/usr/bin/env python3
"""
Executor tests: instruction semantics, loop jumps, I/O and EOF handling.
"""

import pytest

from tetanus import (
    BufferSink,
    BufferSource,
    EofPolicy,
    Executor,
    InputExhausted,
    StopReason,
    compile_source,
)

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def _run(source, data=b"", **kwargs):
    ex = Executor(compile_source(source), BufferSource(data), **kwargs)
    result = ex.run()
    return ex, result


def test_empty_program_terminates_immediately():
    ex, result = _run("nothing to see")
    assert result.reason is StopReason.FINISHED
    assert result.steps == 0
    assert ex.sink.getvalue() == b""


def test_step_reports_finished():
    ex = Executor(compile_source("+"))
    assert ex.step() is None
    assert ex.step() is StopReason.FINISHED
    assert ex.finished


def test_decrement_wraps_to_255():
    ex, _ = _run("-")
    assert ex.tape.value == 255


def test_increment_wraps_to_zero():
    ex, _ = _run("-+")
    assert ex.tape.value == 0


def test_add_via_loop():
    ex, result = _run("++>+++++[<+>-]<.")
    assert result.reason is StopReason.FINISHED
    assert result.tape[0] == 7
    assert result.pointer == 0
    assert ex.sink.getvalue() == bytes([7])


def test_echo_one_byte():
    ex, _ = _run(",.", b"A")
    assert ex.sink.getvalue() == b"A"


def test_hello_world():
    ex, _ = _run(HELLO_WORLD)
    assert ex.sink.getvalue() == b"Hello World!\n"


def test_leftward_growth():
    ex, result = _run("<<<+")
    assert len(result.tape) >= 4
    assert result.pointer == 0
    assert result.tape == bytes([1, 0, 0, 0])


def test_skipped_loop_lands_after_loop_end():
    """A loop entered on a zero cell runs one instruction: the LoopStart itself."""
    _, result = _run("[+]")
    assert result.steps == 1
    assert result.tape == b"\x00"


def test_loop_end_reenters_body_without_retest():
    # + + [ - ] : two passes through "- ]" after the first "["
    _, result = _run("++[-]")
    assert result.steps == 2 + 1 + 2 * 2


def test_infinite_loop_hits_step_limit():
    ex = Executor(compile_source("+[]"))
    result = ex.run(max_steps=10000)
    assert result.reason is StopReason.STEP_LIMIT
    assert result.steps == 10000
    assert not ex.finished


def test_run_can_resume_after_step_limit():
    ex = Executor(compile_source("+++[-]"))
    first = ex.run(max_steps=2)
    assert first.reason is StopReason.STEP_LIMIT
    second = ex.run()
    assert second.reason is StopReason.FINISHED
    assert second.tape == b"\x00"


def test_eof_abort_raises():
    ex = Executor(compile_source("+.,+"), BufferSource(b""))
    with pytest.raises(InputExhausted) as exc:
        ex.run()
    assert exc.value.pc == 2
    # effects before the ',' stay, nothing after it runs
    assert ex.tape.value == 1
    assert ex.sink.getvalue() == b"\x01"


def test_eof_abort_is_default():
    with pytest.raises(InputExhausted):
        _run(",")


def test_eof_unchanged():
    ex, _ = _run("+++,", eof=EofPolicy.UNCHANGED)
    assert ex.tape.value == 3


def test_eof_zero():
    ex, _ = _run("+++,", eof=EofPolicy.ZERO)
    assert ex.tape.value == 0


def test_input_reads_in_order():
    ex, _ = _run(",>,>,<<.>.>.", b"xyz")
    assert ex.sink.getvalue() == b"xyz"


def test_custom_sink():
    sink = BufferSink()
    Executor(compile_source("+.+."), sink=sink).run()
    assert sink.getvalue() == b"\x01\x02"
