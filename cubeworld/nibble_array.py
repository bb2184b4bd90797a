"""An array that stores each element in four bits."""

from __future__ import annotations

from collections.abc import Iterator


class NibbleArray:
    """Array of 4-bit values packed two per byte.

    Even positions live in the high nibble of a byte, odd positions in the
    low nibble.
    """

    def __init__(self, size: int, val: int = 0xFF) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._arr = bytearray([val & 0xFF]) * (size // 2 + 1)

    def _index(self, pos: int) -> int:
        i = pos // 2
        if pos < 0 or i >= len(self._arr):
            raise IndexError("NibbleArray index out of range")
        return i

    def __getitem__(self, pos: int) -> int:
        byte = self._arr[self._index(pos)]
        if pos % 2:
            return byte & 0x0F
        return byte >> 4

    def __setitem__(self, pos: int, val: int) -> None:
        i = self._index(pos)
        cur = self._arr[i]
        if pos % 2:
            self._arr[i] = (cur & 0xF0) | (val & 0x0F)
        else:
            self._arr[i] = ((val << 4) & 0xF0) | (cur & 0x0F)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for pos in range(self._size):
            yield self[pos]

    def data(self) -> bytearray:
        """Return the underlying packed storage."""
        return self._arr

    def storage_size(self) -> int:
        """Return the number of bytes used for storage."""
        return len(self._arr)

    def inflate(self) -> list[int]:
        """Return every element unpacked into a list, one value per entry."""
        return list(self)

    def reset(self, val: int = 0xFF) -> None:
        """Fill the underlying storage with the byte val."""
        self._arr[:] = bytes([val & 0xFF]) * len(self._arr)