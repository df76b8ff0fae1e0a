from .api import RunOptions, RunResult, load_source, run_file, run_program, run_string
from .byteio import BufferSink, BufferSource, EofPolicy, StreamSink, StreamSource
from .compiler import Compiler, bracket_pairs, compile_source, render
from .errors import InputExhausted, MismatchedBracket, TetanusError
from .executor import ExecutionResult, Executor, StopReason
from .instructions import (
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
from .tape import Tape

__all__ = [
    'Compiler',
    'compile_source',
    'bracket_pairs',
    'render',
    'Executor',
    'ExecutionResult',
    'StopReason',
    'Tape',
    'EofPolicy',
    'BufferSource',
    'BufferSink',
    'StreamSource',
    'StreamSink',
    'TetanusError',
    'MismatchedBracket',
    'InputExhausted',
    'Instruction',
    'Program',
    'Increment',
    'Decrement',
    'MoveLeft',
    'MoveRight',
    'Output',
    'Input',
    'LoopStart',
    'LoopEnd',
    'RunOptions',
    'RunResult',
    'run_program',
    'run_string',
    'run_file',
    'load_source',
]
