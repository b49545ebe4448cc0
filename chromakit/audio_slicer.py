"""Cut a stream of samples into overlapping fixed-size frames."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

SliceConsumer = Callable[[Sequence[T], Sequence[T]], None]


class AudioSlicer(Generic[T]):
    """Emits frames of ``size`` samples, each starting ``increment`` after the last.

    Each frame is handed to the consumer as two parts whose concatenation is
    the frame: samples kept from earlier calls, then samples from this call.
    """

    def __init__(self, size: int, increment: int) -> None:
        if increment < 1 or size < increment:
            raise ValueError("slice size must be at least the increment, which must be positive")
        self._size = size
        self._increment = increment
        self._buffer: list[T] = []

    @property
    def size(self) -> int:
        return self._size

    @property
    def increment(self) -> int:
        return self._increment

    def reset(self) -> None:
        """Forget any buffered samples."""
        self._buffer.clear()

    def process(self, samples: Iterable[T], consumer: SliceConsumer) -> None:
        """Feed ``samples`` and call ``consumer`` for every complete frame."""
        data = list(samples)
        pos = 0
        remaining = len(data)
        buffer = self._buffer

        while buffer and len(buffer) + remaining >= self._size:
            need = self._size - len(buffer)
            consumer(list(buffer), data[pos:pos + need])
            if len(buffer) >= self._increment:
                del buffer[:self._increment]
            else:
                skip = self._increment - len(buffer)
                pos += skip
                remaining -= skip
                buffer.clear()

        if not buffer:
            while remaining >= self._size:
                consumer(data[pos:pos + self._size], [])
                pos += self._increment
                remaining -= self._increment

        buffer.extend(data[pos:])