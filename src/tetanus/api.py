from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .byteio import BufferSink, BufferSource, ByteSink, ByteSource, EofPolicy
from .compiler import compile_source
from .executor import ExecutionResult, Executor
from .instructions import Program


@dataclass(frozen=True)
class RunOptions:
    coalesce: bool = True
    eof: EofPolicy = EofPolicy.ABORT
    max_steps: Optional[int] = None


@dataclass(frozen=True)
class RunResult:
    output: bytes
    execution: ExecutionResult
    program: Program
    compile_seconds: float
    run_seconds: float


def load_source(path: Union[str, Path], *, encoding: str = "utf-8") -> str:
    # bytes that do not decode are comments anyway
    return Path(path).read_text(encoding=encoding, errors="replace")


def run_program(
    source: str,
    *,
    reader: ByteSource,
    writer: ByteSink,
    options: Optional[RunOptions] = None,
) -> RunResult:
    opts = options or RunOptions()

    start = time.perf_counter()
    program = compile_source(source, coalesce=opts.coalesce)
    compiled = time.perf_counter()

    executor = Executor(program, reader, writer, eof=opts.eof)
    execution = executor.run(max_steps=opts.max_steps)
    finished = time.perf_counter()

    output = writer.getvalue() if isinstance(writer, BufferSink) else b""
    return RunResult(
        output=output,
        execution=execution,
        program=program,
        compile_seconds=compiled - start,
        run_seconds=finished - compiled,
    )


def run_string(source: str, *, input: Union[bytes, str] = b"", options: Optional[RunOptions] = None) -> RunResult:
    return run_program(source, reader=BufferSource(input), writer=BufferSink(), options=options)


def run_file(
    path: Union[str, Path],
    *,
    input: Union[bytes, str] = b"",
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_string(load_source(path, encoding=encoding), input=input, options=options)
