from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from .api import RunOptions, load_source, run_program
from .byteio import EofPolicy, StreamSink, StreamSource
from .compiler import compile_source, render
from .errors import TetanusError
from .executor import StopReason

log = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tetanus",
        description="Compile and run a byte-tape program ('+-<>.,[]', everything else is a comment).",
    )
    parser.add_argument("file", help="program file, or '-' to read the program from stdin")
    parser.add_argument("--no-coalesce", action="store_true", help="Keep every '<' and '>' as its own instruction")
    parser.add_argument(
        "--eof",
        choices=[p.value for p in EofPolicy],
        default=EofPolicy.ABORT.value,
        help="What ',' does when input runs out (default: abort)",
    )
    parser.add_argument("--max-steps", type=_positive_int, default=None, help="Stop after this many instructions")
    parser.add_argument("--emit", action="store_true", help="Print the compiled program as canonical source and exit")
    parser.add_argument("--timing", action="store_true", help="Report compile and execution time on stderr")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="Increase verbosity (-v, -vv)")
    return parser


def setup_logging(verbose: int) -> None:
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logging.basicConfig(level=level, handlers=[console], force=True)


def main(argv: Optional[List[str]] = None, *, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer

    try:
        if args.file == "-":
            source = stdin.read().decode("utf-8", errors="replace")
        else:
            source = load_source(args.file)
    except OSError as e:
        print(f"error: couldn't read {args.file}: {e.strerror or e}", file=sys.stderr)
        return 1
    log.info("read %d characters from %s", len(source), args.file)

    options = RunOptions(
        coalesce=not args.no_coalesce,
        eof=EofPolicy(args.eof),
        max_steps=args.max_steps,
    )

    try:
        if args.emit:
            stdout.write(render(compile_source(source, coalesce=options.coalesce)).encode("ascii") + b"\n")
            stdout.flush()
            return 0
        result = run_program(
            source,
            reader=StreamSource(stdin),
            writer=StreamSink(stdout, flush_each=True),
            options=options,
        )
    except TetanusError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.timing:
        print(f"Compilation took {result.compile_seconds * 1000:.2f} ms", file=sys.stderr)
        print(f"Execution took {result.run_seconds * 1000:.2f} ms", file=sys.stderr)

    log.info("%d instructions, %d steps executed", len(result.program), result.execution.steps)
    if result.execution.reason is StopReason.STEP_LIMIT:
        print(f"error: step limit of {args.max_steps} reached at instruction {result.execution.pc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
