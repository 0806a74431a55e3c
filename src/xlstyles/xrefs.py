import re
from typing import Tuple, Union

from xlstyles.constants import MAX_COL_COUNT, MAX_ROW_COUNT
from xlstyles.exceptions import InvalidAddress

__all__ = [
    "cell_to_rowcol",
    "col_to_name",
    "column_as_number",
    "name_to_col",
    "range_to_rowcol",
    "row_as_number",
    "rowcol_to_cell",
    "rowcol_to_range",
    "to_rowcol",
]

# Cell reference conversion from  https://github.com/jmcnamara/XlsxWriter
# Copyright (c) 2013-2021, John McNamara <jmcnamara@cpan.org>
cell_parts = re.compile(r"\$?([A-Z]{1,3})\$?([0-9]+)")
col_parts = re.compile(r"\$?([A-Z]{1,3})")
row_parts = re.compile(r"\$?([0-9]+)")


def _check_row(row: int) -> int:
    if isinstance(row, bool) or not isinstance(row, int):
        msg = f"row reference {row!r} is not an integer"
        raise InvalidAddress(msg)
    if row < 1:
        msg = f"row reference {row} below one"
        raise InvalidAddress(msg)
    if row > MAX_ROW_COUNT:
        msg = f"row reference {row} exceeds maximum row {MAX_ROW_COUNT}"
        raise InvalidAddress(msg)
    return row


def _check_col(col: int) -> int:
    if isinstance(col, bool) or not isinstance(col, int):
        msg = f"column reference {col!r} is not an integer"
        raise InvalidAddress(msg)
    if col < 1:
        msg = f"column reference {col} below one"
        raise InvalidAddress(msg)
    if col > MAX_COL_COUNT:
        msg = f"column reference {col} exceeds maximum column {MAX_COL_COUNT}"
        raise InvalidAddress(msg)
    return col


def name_to_col(col_str: str) -> int:
    """Convert a column name such as ``"AB"`` to a one indexed column number.

    Raises
    ------
    InvalidAddress:
        If the name is not one to three upper case letters or is beyond the
        last column.
    """
    if not isinstance(col_str, str):
        msg = f"invalid column reference {col_str!r}"
        raise InvalidAddress(msg)
    match = col_parts.fullmatch(col_str)
    if not match:
        msg = f"invalid column reference {col_str}"
        raise InvalidAddress(msg)

    # Convert base26 column string to number.
    col = 0
    for expn, char in enumerate(reversed(match.group(1))):
        col += (ord(char) - ord("A") + 1) * (26**expn)

    return _check_col(col)


def col_to_name(col: int, col_abs: bool = False) -> str:
    """Convert a one indexed column number to a column name.

    Parameters
    ----------
    col: int
        The column number (one indexed).
    col_abs: bool, default: False
        If ``True``, make the column absolute.

    Returns
    -------
        str:
            Column in A1 notation.
    """
    col = _check_col(col)
    col_str = ""

    while col:
        # Set remainder from 1 .. 26
        remainder = col % 26

        if remainder == 0:
            remainder = 26

        # Convert the remainder to a character.
        col_letter = chr(ord("A") + remainder - 1)

        # Accumulate the column letters, right to left.
        col_str = col_letter + col_str

        # Get the next order of magnitude.
        col = (col - 1) // 26

    return ("$" if col_abs else "") + col_str


def cell_to_rowcol(cell_str: str) -> Tuple[int, int]:
    """Convert a cell reference in A1 notation to a one indexed row and column.

    Parameters
    ----------
    cell_str:  str
        A1 notation cell reference

    Returns
    -------
    row, col: int, int
        Cell row and column numbers (one indexed).

    Raises
    ------
    InvalidAddress:
        If the reference cannot be parsed or is outside the sheet limits.
    """
    if not isinstance(cell_str, str):
        msg = f"invalid cell reference {cell_str!r}"
        raise InvalidAddress(msg)
    match = cell_parts.fullmatch(cell_str)
    if not match:
        msg = f"invalid cell reference {cell_str}"
        raise InvalidAddress(msg)

    col = name_to_col(match.group(1))
    row = _check_row(int(match.group(2)))
    return row, col


def rowcol_to_cell(row: int, col: int, row_abs: bool = False, col_abs: bool = False) -> str:
    """Convert a one indexed row and column cell reference to a A1 style string.

    Parameters
    ----------
    row: int
         The cell row.
    col: int
        The cell column.
    row_abs: bool
        If ``True``, make the row absolute.
    col_abs: bool
        If ``True``, make the column absolute.

    Returns
    -------
    str:
        A1 style string.
    """
    row = _check_row(row)
    col_str = col_to_name(col, col_abs)
    return col_str + ("$" if row_abs else "") + str(row)


def row_as_number(row_str: Union[str, int]) -> int:
    """Convert a row reference such as ``"12"`` to a row number."""
    if isinstance(row_str, int):
        return _check_row(row_str)
    if not isinstance(row_str, str) or not row_parts.fullmatch(row_str):
        msg = f"invalid row reference {row_str!r}"
        raise InvalidAddress(msg)
    return _check_row(int(row_str.lstrip("$")))


def column_as_number(col_str: Union[str, int]) -> int:
    """Convert a column reference such as ``"C"`` to a column number."""
    if isinstance(col_str, int):
        return _check_col(col_str)
    return name_to_col(col_str)


def range_to_rowcol(range_str: str) -> Tuple[int, int, int, int]:
    """Convert an ``A1:B2`` style range into its two corners.

    A single cell reference is a one cell range. The corners are returned
    as written; use :py:class:`~xlstyles.ranges.CellRange` to normalize.

    Returns
    -------
    first_row, first_col, last_row, last_col: int, int, int, int
    """
    if not isinstance(range_str, str):
        msg = f"invalid range reference {range_str!r}"
        raise InvalidAddress(msg)
    parts = range_str.split(":")
    if len(parts) == 1:
        parts = parts * 2
    elif len(parts) != 2:
        msg = f"invalid range reference {range_str}"
        raise InvalidAddress(msg)
    (first_row, first_col) = cell_to_rowcol(parts[0])
    (last_row, last_col) = cell_to_rowcol(parts[1])
    return first_row, first_col, last_row, last_col


def rowcol_to_range(first_row: int, first_col: int, last_row: int, last_col: int) -> str:
    """Convert one indexed row and col cell references to a A1:B1 range string.

    Returns
    -------
    str:
        A1:B1 style range string, or a single reference for a one cell range.
    """
    range1 = rowcol_to_cell(first_row, first_col)
    range2 = rowcol_to_cell(last_row, last_col)

    if range1 == range2:
        return range1
    return range1 + ":" + range2


def to_rowcol(*args) -> Tuple[int, int]:
    """Normalise a cell address to a one indexed ``(row, col)`` pair.

    The address can be given as an A1 string, a ``(row, col)`` tuple, or as
    separate row and column numbers:

    .. code:: python

        to_rowcol("C3")      # (3, 3)
        to_rowcol((3, 3))    # (3, 3)
        to_rowcol(3, 3)      # (3, 3)
    """
    if len(args) == 1 and isinstance(args[0], str):
        return cell_to_rowcol(args[0])
    if len(args) == 1 and isinstance(args[0], tuple) and len(args[0]) == 2:
        args = args[0]
    if len(args) != 2:
        msg = "invalid cell reference " + str(args)
        raise InvalidAddress(msg)
    return _check_row(args[0]), _check_col(args[1])
