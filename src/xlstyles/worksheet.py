import logging
from typing import Dict, Iterator, Optional, Tuple, Union

from xlstyles import __name__ as xlstyles_name
from xlstyles.cell import Cell, CellValue
from xlstyles.constants import DEFAULT_COLUMN_WIDTH, DEFAULT_FORMAT_INDEX, DEFAULT_ROW_HEIGHT
from xlstyles.ranges import CellRange
from xlstyles.resolver import CellFormatResolver, RangeApplier
from xlstyles.styles import Styles
from xlstyles.table import StyleIndex
from xlstyles.xrefs import col_to_name, column_as_number, row_as_number, to_rowcol

logger = logging.getLogger(xlstyles_name)
debug = logger.debug

__all__ = ["Cell", "CellRange", "Column", "Row", "Worksheet"]


class Row:
    """
    .. NOTE::
       Do not instantiate directly. Rows are returned by
       :py:meth:`~xlstyles.Worksheet.row`.

    A handle on one row of a worksheet. The row's format and height are
    stored in the worksheet so handles can be discarded freely.
    """

    def __init__(self, worksheet: "Worksheet", row: int) -> None:
        self._worksheet = worksheet
        self._row = row

    @property
    def index(self) -> int:
        """int: The one indexed row number."""
        return self._row

    @property
    def format(self) -> Optional[StyleIndex]:
        """int: The row's cell format index, or ``None`` if it has none."""
        return self._worksheet.row_format(self._row)

    @format.setter
    def format(self, value: Optional[StyleIndex]) -> None:
        self._worksheet.set_row_format(self._row, value)

    @property
    def height(self) -> float:
        """float: The row height in points."""
        return self._worksheet._row_heights.get(self._row, DEFAULT_ROW_HEIGHT)

    @height.setter
    def height(self, value: float) -> None:
        self._worksheet._row_heights[self._row] = _dimension(value, "height")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._worksheet is other._worksheet and self._row == other._row

    def __hash__(self) -> int:
        return hash((id(self._worksheet), self._row))

    def __repr__(self) -> str:
        return f"<Row {self._row} format={self.format}>"


class Column:
    """
    .. NOTE::
       Do not instantiate directly. Columns are returned by
       :py:meth:`~xlstyles.Worksheet.column`.

    A handle on one column of a worksheet.
    """

    def __init__(self, worksheet: "Worksheet", col: int) -> None:
        self._worksheet = worksheet
        self._col = col

    @property
    def index(self) -> int:
        """int: The one indexed column number."""
        return self._col

    @property
    def letter(self) -> str:
        """str: The column name, for example ``"AB"``."""
        return col_to_name(self._col)

    @property
    def format(self) -> Optional[StyleIndex]:
        """int: The column's cell format index, or ``None`` if it has none."""
        return self._worksheet.column_format(self._col)

    @format.setter
    def format(self, value: Optional[StyleIndex]) -> None:
        self._worksheet.set_column_format(self._col, value)

    @property
    def width(self) -> float:
        """float: The column width in characters."""
        return self._worksheet._col_widths.get(self._col, DEFAULT_COLUMN_WIDTH)

    @width.setter
    def width(self, value: float) -> None:
        self._worksheet._col_widths[self._col] = _dimension(value, "width")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self._worksheet is other._worksheet and self._col == other._col

    def __hash__(self) -> int:
        return hash((id(self._worksheet), self._col))

    def __repr__(self) -> str:
        return f"<Column {self.letter} format={self.format}>"


def _dimension(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} must be a number"
        raise TypeError(msg)
    if value < 0:
        msg = f"{name} cannot be negative"
        raise ValueError(msg)
    return float(value)


class Worksheet:
    """
    .. NOTE::
       Do not instantiate directly. Worksheets are created by
       :py:class:`~xlstyles.Document`.

    A worksheet holds cells and the format overrides of its rows and
    columns. Every format index refers to the document's
    :py:attr:`~xlstyles.Styles.cell_formats`.

    .. code-block:: python

        ws = doc.sheets[0]
        ws.cell("B2").value = "Total"
        ws.set_row_format(2, bold_format)
        ws.cell("B2").cell_format     # bold_format
        ws.apply_format("A3:D10", shaded_format)
    """

    def __init__(self, styles: Styles, name: str, container=None) -> None:
        self._styles = styles
        self._name = name
        self._container = container
        self._cells: Dict[Tuple[int, int], Cell] = {}
        self._row_formats: Dict[int, StyleIndex] = {}
        self._col_formats: Dict[int, StyleIndex] = {}
        self._row_heights: Dict[int, float] = {}
        self._col_widths: Dict[int, float] = {}
        self._default_format = DEFAULT_FORMAT_INDEX
        self._resolver = CellFormatResolver(self)
        self._applier = RangeApplier(self)

    @property
    def styles(self) -> Styles:
        """Styles: The style tables shared by all sheets of the document."""
        return self._styles

    @property
    def resolver(self) -> CellFormatResolver:
        """CellFormatResolver: Finds the format that applies to a cell."""
        return self._resolver

    @property
    def applier(self) -> RangeApplier:
        """RangeApplier: Writes formats and values to ranges of cells."""
        return self._applier

    @property
    def name(self) -> str:
        """str: The worksheet's name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not isinstance(value, str) or not value:
            msg = "sheet name must be a non-empty string"
            raise TypeError(msg)
        if (
            self._container is not None
            and value.lower() != self._name.lower()
            and value in self._container
        ):
            msg = f"sheet '{value}' already exists"
            raise IndexError(msg)
        self._name = value

    @property
    def default_format(self) -> StyleIndex:
        """int: The format of cells with no cell, row or column format."""
        return self._default_format

    @default_format.setter
    def default_format(self, value: StyleIndex) -> None:
        self._styles.cell_formats._check_index(value)
        self._default_format = value

    def cell(self, *args) -> Cell:
        """
        Return a single cell, creating it if it does not exist.

        Parameters
        ----------
        args: str | int, int | Tuple[int, int]
            A cell reference such as ``"B3"``, or a one indexed row and column.

        Raises
        ------
        InvalidAddress:
            If the reference is malformed or outside the sheet.
        """
        (row, col) = to_rowcol(*args)
        key = (row, col)
        if key not in self._cells:
            self._cells[key] = Cell(self, row, col)
        return self._cells[key]

    def has_cell(self, *args) -> bool:
        return to_rowcol(*args) in self._cells

    def cells(self) -> Iterator[Cell]:
        """Iterate through the cells that have been created, in row then column order."""
        for key in sorted(self._cells.keys()):
            yield self._cells[key]

    def row(self, row: Union[int, str]) -> Row:
        """Return the :py:class:`Row` handle for a row number such as ``3`` or ``"3"``."""
        return Row(self, row_as_number(row))

    def column(self, col: Union[int, str]) -> Column:
        """Return the :py:class:`Column` handle for a column number or name such as ``"C"``."""
        return Column(self, column_as_number(col))

    def row_format(self, row: Union[int, str]) -> Optional[StyleIndex]:
        return self._row_formats.get(row_as_number(row))

    def column_format(self, col: Union[int, str]) -> Optional[StyleIndex]:
        return self._col_formats.get(column_as_number(col))

    def set_row_format(self, row: Union[int, str], format_index: Optional[StyleIndex]) -> None:
        """
        Set the format of every cell in a row that has no format of its own.

        Parameters
        ----------
        row: int | str
            The one indexed row number.
        format_index: int | None
            Index into the document's cell formats, or ``None`` to remove
            the row format.

        Raises
        ------
        InvalidAddress:
            If the row is out of range.
        InvalidIndex:
            If the format index does not exist.
        """
        row = row_as_number(row)
        _set_override(self._row_formats, row, format_index, self._styles)
        debug("set_row_format: sheet=%s, row=%d, format=%s", self._name, row, format_index)

    def set_column_format(
        self, col: Union[int, str], format_index: Optional[StyleIndex]
    ) -> None:
        """
        Set the format of every cell in a column that has no cell or row format.

        Raises
        ------
        InvalidAddress:
            If the column is out of range.
        InvalidIndex:
            If the format index does not exist.
        """
        col = column_as_number(col)
        _set_override(self._col_formats, col, format_index, self._styles)
        debug("set_column_format: sheet=%s, col=%d, format=%s", self._name, col, format_index)

    def cell_format_override(self, *args) -> Optional[StyleIndex]:
        """Return a cell's own format index without creating the cell."""
        cell = self._cells.get(to_rowcol(*args))
        return None if cell is None else cell.explicit_format

    def cell_format(self, *args) -> StyleIndex:
        """Return the format index that applies to a cell after the cascade."""
        return self._resolver.resolve(*args)

    def range(self, *args) -> CellRange:
        """Return a :py:class:`CellRange` such as ``ws.range("A3:D10")``."""
        return CellRange(*args)

    def apply_format(self, cell_range, format_index: StyleIndex) -> None:
        """Set the format of every cell in a range. See :py:class:`RangeApplier`."""
        self._applier.apply_format(cell_range, format_index)

    def set_value(self, cell_range, value: CellValue) -> None:
        """Write one value to every cell in a range. See :py:class:`RangeApplier`."""
        self._applier.set_value(cell_range, value)

    def __repr__(self) -> str:
        return f"<Worksheet '{self._name}' cells={len(self._cells)}>"


def _set_override(
    overrides: Dict[int, StyleIndex], key: int, format_index: Optional[StyleIndex], styles: Styles
) -> None:
    if format_index is None:
        overrides.pop(key, None)
    else:
        styles.cell_formats._check_index(format_index)
        overrides[key] = format_index
