"""A simple row-major matrix of arbitrary elements."""

from __future__ import annotations

import copy
from numbers import Real
from typing import Any, Iterator, List, Tuple

from . import fileutils
from .printer import Printable, Printer


def _format_element(value: Any) -> str:
    if isinstance(value, Real) and not isinstance(value, bool):
        return f"{float(value):g}"
    element_id = getattr(value, "id", None)
    if isinstance(element_id, str):
        return element_id
    return str(value)


class Matrix(Printable):
    """A rows x cols grid, indexed with ``matrix[i, j]``."""

    def __init__(self, rows: int = 0, cols: int = 0, init: Any = None) -> None:
        self._rows: List[List[Any]] = [
            [copy.copy(init) for _ in range(cols)] for _ in range(rows)
        ]

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        i, j = key
        return self._rows[i][j]

    def __setitem__(self, key: Tuple[int, int], value: Any) -> None:
        i, j = key
        self._rows[i][j] = value

    def __iter__(self) -> Iterator[List[Any]]:
        return iter(self._rows)

    def add(self, i: int, j: int, value: Any) -> None:
        """Add a value to the element at [i, j]."""
        self._rows[i][j] += value

    def row(self, i: int) -> List[Any]:
        """Return a copy of row i."""
        return list(self._rows[i])

    def col(self, j: int) -> List[Any]:
        """Return a copy of column j."""
        return [row[j] for row in self._rows]

    def row_count(self) -> int:
        return len(self._rows)

    def col_count(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    def element_count(self) -> int:
        return self.row_count() * self.col_count()

    def symmetrize(self) -> None:
        """Copy the upper-right triangle onto the lower-left one."""
        for i in range(1, self.row_count()):
            for j in range(i):
                self._rows[i][j] = self._rows[j][i]

    def print_to(self, printer: Printer) -> None:
        """Print one line per row, each element followed by a space."""
        for row in self._rows:
            printer.dump("".join(_format_element(value) + " " for value in row))

    def save(self, filename) -> None:
        """Write the printed matrix to a file."""
        fileutils.save(self, filename)