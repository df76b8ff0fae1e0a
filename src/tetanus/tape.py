from __future__ import annotations


class Tape:
    """Byte cells that grow on demand at either end.

    The pointer is always an index into the current bytearray. Growing on the
    left shifts every existing cell to the right, so indices are relative to
    wherever the tape starts now, never to where it started.
    """

    def __init__(self):
        self.cells = bytearray(1)
        self.pointer = 0

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def value(self) -> int:
        return self.cells[self.pointer]

    @value.setter
    def value(self, v: int) -> None:
        self.cells[self.pointer] = v & 0xFF

    def add(self, delta: int) -> None:
        self.cells[self.pointer] = (self.cells[self.pointer] + delta) & 0xFF

    def move_left(self, n: int) -> None:
        if self.pointer < n:
            self.cells[0:0] = bytes(n - self.pointer)
            self.pointer = 0
        else:
            self.pointer -= n

    def move_right(self, n: int) -> None:
        self.pointer += n
        if self.pointer >= len(self.cells):
            self.cells.extend(bytes(self.pointer + 1 - len(self.cells)))

    def snapshot(self) -> bytes:
        return bytes(self.cells)
