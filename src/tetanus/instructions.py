from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

# ---------------- Instruction set ----------------
@dataclass(frozen=True)
class Increment:
    pass  # '+'

@dataclass(frozen=True)
class Decrement:
    pass  # '-'

@dataclass(frozen=True)
class MoveLeft:
    count: int = 1  # consecutive '<' folded together

@dataclass(frozen=True)
class MoveRight:
    count: int = 1  # consecutive '>' folded together

@dataclass(frozen=True)
class Output:
    pass  # '.'

@dataclass(frozen=True)
class Input:
    pass  # ','

@dataclass(frozen=True)
class LoopStart:
    target: int  # index of the matching LoopEnd

@dataclass(frozen=True)
class LoopEnd:
    target: int  # index of the matching LoopStart


Instruction = Union[Increment, Decrement, MoveLeft, MoveRight, Output, Input, LoopStart, LoopEnd]
Program = Tuple[Instruction, ...]

INCREMENT = Increment()
DECREMENT = Decrement()
OUTPUT = Output()
INPUT = Input()
