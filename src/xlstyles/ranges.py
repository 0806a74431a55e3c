from typing import Iterator, Tuple

from xlstyles.exceptions import InvalidAddress
from xlstyles.xrefs import range_to_rowcol, rowcol_to_cell, rowcol_to_range, to_rowcol

__all__ = ["CellRange"]


class CellRange:
    """
    A rectangular block of cell addresses.

    The two corners can be given in any order; the range is always stored
    as its top-left and bottom-right corners so that equivalent ranges
    compare equal and iterate the same addresses:

    .. code-block:: python

        CellRange("A3:D10")
        CellRange("D10", "A3")          # the same range
        CellRange((3, 1), (10, 4))      # the same range
        CellRange(10, 4, 3, 1)          # the same range

    Iteration yields one indexed ``(row, col)`` pairs row by row.

    Raises
    ------
    InvalidAddress:
        If either corner is not a valid cell reference.
    """

    def __init__(self, *args) -> None:
        if len(args) == 1 and isinstance(args[0], CellRange):
            corners = args[0].bounds
        elif len(args) == 1:
            corners = range_to_rowcol(args[0])
        elif len(args) == 2:
            corners = to_rowcol(args[0]) + to_rowcol(args[1])
        elif len(args) == 4:
            corners = to_rowcol(args[0], args[1]) + to_rowcol(args[2], args[3])
        else:
            msg = "invalid range reference " + str(args)
            raise InvalidAddress(msg)

        (row_a, col_a, row_b, col_b) = corners
        self._first_row = min(row_a, row_b)
        self._first_col = min(col_a, col_b)
        self._last_row = max(row_a, row_b)
        self._last_col = max(col_a, col_b)

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        """Tuple[int]: ``(first_row, first_col, last_row, last_col)``, one indexed."""
        return (self._first_row, self._first_col, self._last_row, self._last_col)

    @property
    def top_left(self) -> str:
        """str: The top-left cell in A1 notation."""
        return rowcol_to_cell(self._first_row, self._first_col)

    @property
    def bottom_right(self) -> str:
        """str: The bottom-right cell in A1 notation."""
        return rowcol_to_cell(self._last_row, self._last_col)

    @property
    def num_rows(self) -> int:
        return self._last_row - self._first_row + 1

    @property
    def num_cols(self) -> int:
        return self._last_col - self._first_col + 1

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for row in range(self._first_row, self._last_row + 1):
            for col in range(self._first_col, self._last_col + 1):
                yield (row, col)

    def __len__(self) -> int:
        return self.num_rows * self.num_cols

    def __contains__(self, address) -> bool:
        try:
            (row, col) = to_rowcol(address)
        except InvalidAddress:
            return False
        return (
            self._first_row <= row <= self._last_row and self._first_col <= col <= self._last_col
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellRange):
            return NotImplemented
        return self.bounds == other.bounds

    def __hash__(self) -> int:
        return hash(self.bounds)

    def __str__(self) -> str:
        return rowcol_to_range(*self.bounds)

    def __repr__(self) -> str:
        return f"CellRange('{self}')"
