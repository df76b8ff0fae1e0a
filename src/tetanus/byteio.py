"""
Byte-level I/O for the executor.

The executor only ever asks for one byte in and one byte out, so anything with
`read_byte()` / `write_byte()` can stand in for the console.
"""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Optional, Protocol, Union


class EofPolicy(Enum):
    """What ',' does once the input source is exhausted."""
    ABORT = 'abort'          # raise InputExhausted
    UNCHANGED = 'unchanged'  # leave the current cell as it is
    ZERO = 'zero'            # store 0 in the current cell


class ByteSource(Protocol):
    def read_byte(self) -> Optional[int]:
        ...


class ByteSink(Protocol):
    def write_byte(self, value: int) -> None:
        ...

    def flush(self) -> None:
        ...


class BufferSource:
    def __init__(self, data: Union[bytes, bytearray, str] = b''):
        if isinstance(data, str):
            data = data.encode('utf-8')
        self._data = bytes(data)
        self._pos = 0

    def read_byte(self) -> Optional[int]:
        if self._pos >= len(self._data):
            return None
        b = self._data[self._pos]
        self._pos += 1
        return b


class BufferSink:
    def __init__(self):
        self._buf = bytearray()

    def write_byte(self, value: int) -> None:
        self._buf.append(value)

    def flush(self) -> None:
        pass

    def getvalue(self) -> bytes:
        return bytes(self._buf)


class StreamSource:
    """Reads from a binary stream such as sys.stdin.buffer, one byte per call."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_byte(self) -> Optional[int]:
        b = self.stream.read(1)
        if not b:
            return None
        return b[0]


class StreamSink:
    def __init__(self, stream: BinaryIO, flush_each: bool = False):
        self.stream = stream
        self.flush_each = flush_each

    def write_byte(self, value: int) -> None:
        self.stream.write(bytes((value,)))
        if self.flush_each:
            self.stream.flush()

    def flush(self) -> None:
        self.stream.flush()
