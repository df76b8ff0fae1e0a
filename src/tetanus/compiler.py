from __future__ import annotations

import logging
from typing import List, Tuple

from .errors import make_bracket_error
from .instructions import (
    DECREMENT,
    INCREMENT,
    INPUT,
    OUTPUT,
    Decrement,
    Increment,
    Input,
    Instruction,
    LoopEnd,
    LoopStart,
    MoveLeft,
    MoveRight,
    Output,
    Program,
)

log = logging.getLogger(__name__)

_SIMPLE = {
    '+': INCREMENT,
    '-': DECREMENT,
    '.': OUTPUT,
    ',': INPUT,
}


class Compiler:
    """
    Source text -> Program.

    One left-to-right pass over the source:
    - '+', '-', '.', ',' map straight to an instruction
    - runs of '<' or '>' fold into a single counted move (unless coalesce=False)
    - '[' and ']' are paired through a stack and get their jump targets patched in
    - any other character is a comment and leaves no trace

    Raises MismatchedBracket for a ']' with no open loop, or for a '[' still
    open at end of input.
    """

    def __init__(self, coalesce=True):
        self.coalesce = coalesce
        self.ops: List[Instruction] = []
        self.opens: List[Tuple[int, int]] = []  # (op index, source offset)

    def compile(self, source: str) -> Program:
        self.ops = []
        self.opens = []

        for pos, ch in enumerate(source):
            op = _SIMPLE.get(ch)
            if op is not None:
                self.ops.append(op)
            elif ch == '<':
                self._emit_move(MoveLeft)
            elif ch == '>':
                self._emit_move(MoveRight)
            elif ch == '[':
                self.opens.append((len(self.ops), pos))
                self.ops.append(LoopStart(-1))
            elif ch == ']':
                self._close_loop(source, pos)

        if self.opens:
            # innermost open loop
            _, pos = self.opens[-1]
            raise make_bracket_error(kind='unmatched_open', source=source, position=pos)

        program = tuple(self.ops)
        log.debug(
            "compiled %d source chars into %d instructions (%d loops, coalesce=%s)",
            len(source), len(program), sum(isinstance(op, LoopStart) for op in program), self.coalesce,
        )
        return program

    def _emit_move(self, kind):
        if self.coalesce and self.ops and type(self.ops[-1]) is kind:
            self.ops[-1] = kind(self.ops[-1].count + 1)
        else:
            self.ops.append(kind(1))

    def _close_loop(self, source, pos):
        if not self.opens:
            raise make_bracket_error(kind='unmatched_close', source=source, position=pos)
        start, _ = self.opens.pop()
        end = len(self.ops)
        self.ops[start] = LoopStart(end)
        self.ops.append(LoopEnd(start))


def compile_source(source: str, *, coalesce: bool = True) -> Program:
    return Compiler(coalesce=coalesce).compile(source)


def bracket_pairs(program: Program) -> List[Tuple[int, int]]:
    """(open, close) index pairs read back from the jump targets, ordered by open index."""
    pairs = []
    for i, op in enumerate(program):
        if isinstance(op, LoopStart):
            pairs.append((i, op.target))
    return pairs


def render(program: Program) -> str:
    """Canonical source text for a compiled program."""
    out: List[str] = []
    for op in program:
        if isinstance(op, Increment):
            out.append('+')
        elif isinstance(op, Decrement):
            out.append('-')
        elif isinstance(op, MoveLeft):
            out.append('<' * op.count)
        elif isinstance(op, MoveRight):
            out.append('>' * op.count)
        elif isinstance(op, Output):
            out.append('.')
        elif isinstance(op, Input):
            out.append(',')
        elif isinstance(op, LoopStart):
            out.append('[')
        elif isinstance(op, LoopEnd):
            out.append(']')
    return ''.join(out)
