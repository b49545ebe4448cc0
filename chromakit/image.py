"""A growable two-dimensional grid of feature values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class Image:
    """Rows of a fixed number of columns, appended one at a time."""

    def __init__(self, columns: int, rows: int = 0, data: Iterable[float] | None = None) -> None:
        if columns < 1:
            raise ValueError("an image needs at least one column")
        self.num_columns = columns
        self._rows: list[list[float]] = []
        if data is not None:
            values = list(data)
            full = len(values) - len(values) % columns
            self._rows = [values[i:i + columns] for i in range(0, full, columns)]
        else:
            self._rows = [[0.0] * columns for _ in range(rows)]

    @property
    def num_rows(self) -> int:
        return len(self._rows)

    def add_row(self, row: Sequence[float]) -> None:
        """Append a row; a short row is padded with zeros."""
        if len(row) > self.num_columns:
            raise ValueError(
                f"row has {len(row)} values but the image has {self.num_columns} columns"
            )
        padded = list(row)
        padded.extend([0.0] * (self.num_columns - len(padded)))
        self._rows.append(padded)

    def row(self, i: int) -> list[float]:
        """Return row ``i``; changes to it are kept in the image."""
        if not 0 <= i < len(self._rows):
            raise IndexError(f"row index out of range: {i}")
        return self._rows[i]

    def __getitem__(self, i: int) -> list[float]:
        return self.row(i)

    def __len__(self) -> int:
        return len(self._rows)