"""
Executor for compiled programs.

Execution model:
  1. Fetch the instruction at pc
  2. Apply it to the tape (or the I/O boundary)
  3. Advance pc by one; LoopStart/LoopEnd may first redirect it onto their
     counterpart, and the +1 then steps past that counterpart
  4. Stop once pc runs off the end of the program

Termination reasons:
  - FINISHED:    pc >= len(program)
  - STEP_LIMIT:  run() was given max_steps and used them up

InputExhausted is raised, not returned: with EofPolicy.ABORT it ends the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .byteio import BufferSink, BufferSource, ByteSink, ByteSource, EofPolicy
from .errors import make_input_error
from .instructions import (
    Decrement,
    Increment,
    Input,
    LoopEnd,
    LoopStart,
    MoveLeft,
    MoveRight,
    Output,
    Program,
)
from .tape import Tape

log = logging.getLogger(__name__)


class StopReason(Enum):
    FINISHED = 'FINISHED'
    STEP_LIMIT = 'STEP_LIMIT'


@dataclass(frozen=True)
class ExecutionResult:
    reason: StopReason
    steps: int
    pc: int
    pointer: int
    tape: bytes


class Executor:
    """Runs one Program against one Tape.

    Usage:
        ex = Executor(compile_source(",."), BufferSource(b"A"))
        ex.run()
        ex.sink.getvalue()  # b"A"
    """

    def __init__(self, program: Program, source: Optional[ByteSource] = None,
                 sink: Optional[ByteSink] = None, *, eof: EofPolicy = EofPolicy.ABORT):
        self.program = program
        self.source = source if source is not None else BufferSource()
        self.sink = sink if sink is not None else BufferSink()
        self.eof = eof
        self.tape = Tape()
        self.pc = 0
        self.steps = 0

    @property
    def finished(self) -> bool:
        return self.pc >= len(self.program)

    def step(self) -> Optional[StopReason]:
        """Execute one instruction. Returns FINISHED once nothing is left to run."""
        if self.pc >= len(self.program):
            return StopReason.FINISHED

        op = self.program[self.pc]
        tape = self.tape
        kind = type(op)

        if kind is Increment:
            tape.add(1)
        elif kind is Decrement:
            tape.add(-1)
        elif kind is MoveLeft:
            tape.move_left(op.count)
        elif kind is MoveRight:
            tape.move_right(op.count)
        elif kind is Output:
            self.sink.write_byte(tape.value)
        elif kind is Input:
            self._read_input()
        elif kind is LoopStart:
            if tape.value == 0:
                self.pc = op.target
        elif kind is LoopEnd:
            if tape.value != 0:
                self.pc = op.target

        self.pc += 1
        self.steps += 1
        return None

    def _read_input(self):
        b = self.source.read_byte()
        if b is not None:
            self.tape.value = b
        elif self.eof is EofPolicy.ZERO:
            self.tape.value = 0
        elif self.eof is EofPolicy.ABORT:
            raise make_input_error(pc=self.pc, pointer=self.tape.pointer)

    def run(self, max_steps: Optional[int] = None) -> ExecutionResult:
        """Run until the program ends or max_steps more instructions have executed."""
        budget = None if max_steps is None else self.steps + max_steps
        reason = StopReason.FINISHED
        try:
            while self.pc < len(self.program):
                if budget is not None and self.steps >= budget:
                    reason = StopReason.STEP_LIMIT
                    break
                self.step()
        finally:
            self.sink.flush()

        log.debug("stopped: %s after %d steps, tape of %d cells", reason.value, self.steps, len(self.tape))
        return ExecutionResult(
            reason=reason,
            steps=self.steps,
            pc=self.pc,
            pointer=self.tape.pointer,
            tape=self.tape.snapshot(),
        )
