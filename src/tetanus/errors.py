from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, column_1: int, *, context: int = 1) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"  {'':4s} | {' ' * (column_1 - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'unmatched_close':
        return 'Remove the extra "]" or add the "[" that should open this loop.'
    if kind == 'unmatched_open':
        return 'Every "[" needs a matching "]" before the end of the program.'
    return None


def _line_and_column(source: str, position: int) -> tuple:
    line = source.count('\n', 0, position) + 1
    column = position - (source.rfind('\n', 0, position) + 1) + 1
    return line, column


@dataclass
class TetanusError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class MismatchedBracket(TetanusError):
    kind: str
    position: int
    line: int
    column: int
    context: str


@dataclass
class InputExhausted(TetanusError):
    pc: int
    pointer: int


def make_bracket_error(*, kind: str, source: str, position: int) -> MismatchedBracket:
    line, column = _line_and_column(source, position)
    lines = source.split('\n')
    ctx = _build_context(lines, line, column)
    if kind == 'unmatched_close':
        what = '"]" with no preceding "["'
    else:
        what = '"[" is never closed'
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return MismatchedBracket(
        message=f"MismatchedBracket: {what} (line {line}, column {column})\n{ctx}{hint_block}",
        kind=kind,
        position=position,
        line=line,
        column=column,
        context=ctx,
    )


def make_input_error(*, pc: int, pointer: int) -> InputExhausted:
    return InputExhausted(
        message=f"InputExhausted: no input left for ',' at instruction {pc} (cell {pointer})",
        pc=pc,
        pointer=pointer,
    )
