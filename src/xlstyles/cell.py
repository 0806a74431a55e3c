import math
from datetime import datetime as builtin_datetime
from datetime import timedelta as builtin_timedelta
from typing import Optional, Union
from warnings import warn

import sigfig
from pendulum import DateTime, Duration, duration
from pendulum import instance as pendulum_instance

from xlstyles.constants import MAX_SIGNIFICANT_DIGITS
from xlstyles.table import StyleIndex
from xlstyles.xrefs import rowcol_to_cell

__all__ = ["Cell", "CellValue"]

CellValue = Union[str, int, float, bool, DateTime, Duration, None]


def cell_value(value) -> CellValue:
    """
    Check that a value can be stored in a cell and return its stored form.

    ``datetime`` and ``timedelta`` values are converted to their pendulum
    equivalents and floats are rounded to ``MAX_SIGNIFICANT_DIGITS``.

    Warns
    -----
    RuntimeWarning:
        If a float is rounded to the maximum number of supported digits.

    Raises
    ------
    ValueError:
        If the value's type cannot be stored in a cell, or it is a NaN or
        infinite float.
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    elif isinstance(value, float):
        if not math.isfinite(value):
            msg = f"cannot store non-finite number {value} in a cell"
            raise ValueError(msg)
        rounded_value = sigfig.round(value, sigfigs=MAX_SIGNIFICANT_DIGITS, warn=False)
        if rounded_value != value:
            warn(
                f"'{value}' rounded to {MAX_SIGNIFICANT_DIGITS} significant digits",
                RuntimeWarning,
                stacklevel=3,
            )
        return rounded_value
    elif isinstance(value, (DateTime, builtin_datetime)):
        return pendulum_instance(value)
    elif isinstance(value, Duration):
        return value
    elif isinstance(value, builtin_timedelta):
        return duration(days=value.days, seconds=value.seconds, microseconds=value.microseconds)
    raise ValueError("Can't determine cell type from type " + type(value).__name__)


class Cell:
    """
    .. NOTE::
       Do not instantiate directly. Cells are created by
       :py:meth:`~xlstyles.Worksheet.cell`.

    A cell holds a value and, optionally, an explicit cell format index.
    A cell with no explicit format takes its format from its row, then its
    column, then the worksheet default.
    """

    def __init__(self, worksheet: object, row: int, col: int) -> None:
        self._worksheet = worksheet
        self._row = row
        self._col = col
        self._value = None
        self._format = None

    @property
    def row(self) -> int:
        """int: The cell's row number (one indexed)."""
        return self._row

    @property
    def col(self) -> int:
        """int: The cell's column number (one indexed)."""
        return self._col

    @property
    def address(self) -> str:
        """str: The cell's reference in A1 notation."""
        return rowcol_to_cell(self.row, self.col)

    @property
    def value(self) -> CellValue:
        """The cell's value, or ``None`` if empty."""
        return self._value

    @value.setter
    def value(self, value) -> None:
        self._value = cell_value(value)

    @property
    def explicit_format(self) -> Optional[StyleIndex]:
        """int: The cell's own format index, or ``None`` if it has none."""
        return self._format

    @property
    def cell_format(self) -> StyleIndex:
        """int: The format index that applies to the cell after the cascade."""
        return self._worksheet.resolver.resolve(self.row, self.col)

    def set_cell_format(self, format_index: Optional[StyleIndex]) -> None:
        """
        Set the cell's own format index.

        Parameters
        ----------
        format_index: int | None
            Index into the document's cell formats, or ``None`` to remove the
            cell's own format.

        Raises
        ------
        InvalidIndex:
            If the index does not exist in the cell formats table.
        """
        if format_index is not None:
            self._worksheet.styles.cell_formats._check_index(format_index)
        self._format = format_index

    def clear_cell_format(self) -> None:
        self._format = None

    def __repr__(self) -> str:
        return f"<Cell {self.address} value={self._value!r} format={self._format}>"
