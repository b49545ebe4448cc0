"""Integer moving average over a fixed-size window."""

from __future__ import annotations


class MovingAverage:
    """Running average of the last ``size`` integer values."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("moving average window must hold at least one value")
        self._buffer = [0] * size
        self._size = size
        self._offset = 0
        self._sum = 0
        self._count = 0

    def add_value(self, x: int) -> None:
        """Add a value, evicting the oldest once the window is full."""
        self._sum += x - self._buffer[self._offset]
        if self._count < self._size:
            self._count += 1
        self._buffer[self._offset] = x
        self._offset = (self._offset + 1) % self._size

    def average(self) -> int:
        """Return the average truncated toward zero; 0 when empty."""
        if not self._count:
            return 0
        quotient = abs(self._sum) // self._count
        return -quotient if self._sum < 0 else quotient