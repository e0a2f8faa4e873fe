"""Sparse matrices kept as sorted (row, column, value) triplets."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence

Entry = tuple[int, int, int]


class SparseMatrix:
    """A rows x cols matrix that stores only its listed entries, in row-major order.

    Entries built from a dense matrix leave out zeros. A sum keeps every
    position present in either operand, even where the values cancel out.
    """

    def __init__(self, rows: int, cols: int, entries: Iterable[Entry] = ()) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        cells: dict[tuple[int, int], int] = {}
        for row, col, value in entries:
            if not (0 <= row < rows and 0 <= col < cols):
                raise ValueError(f"entry ({row}, {col}) lies outside a {rows}x{cols} matrix")
            if (row, col) in cells:
                raise ValueError(f"entry ({row}, {col}) is given more than once")
            cells[(row, col)] = value
        self._entries: tuple[Entry, ...] = tuple(
            (row, col, cells[(row, col)]) for row, col in sorted(cells)
        )

    @classmethod
    def from_dense(cls, dense: Sequence[Sequence[int]]) -> SparseMatrix:
        """Build a sparse matrix from the non-zero elements of a list of rows."""
        rows = len(dense)
        cols = len(dense[0]) if rows else 0
        if any(len(row) != cols for row in dense):
            raise ValueError("all rows of a dense matrix must have the same length")
        return cls(
            rows,
            cols,
            (
                (i, j, value)
                for i, row in enumerate(dense)
                for j, value in enumerate(row)
                if value != 0
            ),
        )

    def to_dense(self) -> list[list[int]]:
        """Return the full matrix as a list of rows, with zeros where nothing is stored."""
        dense = [[0] * self.cols for _ in range(self.rows)]
        for row, col, value in self._entries:
            dense[row][col] = value
        return dense

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the sum of two matrices of the same size."""
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("invalid matrix size: both matrices must have the same dimensions")
        cells: dict[tuple[int, int], int] = {}
        for row, col, value in self._entries:
            cells[(row, col)] = value
        for row, col, value in other._entries:
            cells[(row, col)] = cells.get((row, col), 0) + value
        return SparseMatrix(
            self.rows, self.cols, ((row, col, value) for (row, col), value in cells.items())
        )

    def multiply(self, other: SparseMatrix) -> SparseMatrix:
        """Return the product; entries whose sum comes out as zero are left out."""
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply a {self.rows}x{self.cols} matrix "
                f"by a {other.rows}x{other.cols} matrix"
            )
        by_row: dict[int, list[tuple[int, int]]] = defaultdict(list)
        for row, col, value in self._entries:
            by_row[row].append((col, value))
        right = {(row, col): value for row, col, value in other._entries}
        product = []
        for i in sorted(by_row):
            for j in range(other.cols):
                total = sum(value * right.get((k, j), 0) for k, value in by_row[i])
                if total != 0:
                    product.append((i, j, total))
        return SparseMatrix(self.rows, other.cols, product)

    def triplet_table(self) -> list[list[int]]:
        """Header row [rows, cols, count] followed by one [row, col, value] row per entry."""
        return [[self.rows, self.cols, len(self._entries)]] + [
            list(entry) for entry in self._entries
        ]

    def column_table(self) -> list[list[int]]:
        """Three rows: row indices, column indices and values, each led by the header field."""
        return [
            [self.rows] + [row for row, _, _ in self._entries],
            [self.cols] + [col for _, col, _ in self._entries],
            [len(self._entries)] + [value for _, _, value in self._entries],
        ]

    def __iter__(self) -> Iterator[Entry]:
        """Stored entries as (row, col, value) in row-major order."""
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (self.rows, self.cols, self._entries) == (other.rows, other.cols, other._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rows}, {self.cols}, {list(self._entries)!r})"