import logging
from typing import Optional

from xlstyles import __name__ as xlstyles_name
from xlstyles.cell import cell_value
from xlstyles.ranges import CellRange
from xlstyles.styles import Border, CellFormat, Fill, Font
from xlstyles.table import StyleIndex
from xlstyles.xrefs import to_rowcol

logger = logging.getLogger(xlstyles_name)
debug = logger.debug

__all__ = ["CellFormatResolver", "RangeApplier"]


class CellFormatResolver:
    """
    Find the cell format that applies to a cell.

    The format comes from the first of these that is set, in order: the
    cell's own format, the format of the cell's row, the format of the
    cell's column, and finally the worksheet default. Formats are never
    merged; once a format is found the lower levels are ignored.

    Row and column formats are looked up when a cell is resolved, so
    changing a row or column format never touches existing cells.

    .. code-block:: python

        resolver = CellFormatResolver(worksheet)
        worksheet.set_row_format(2, bold_format)
        resolver.resolve("C2")     # bold_format
        resolver.resolve(2, 3)     # the same cell

    Raises
    ------
    InvalidAddress:
        If an address is malformed or outside the sheet.
    """

    def __init__(self, worksheet: object) -> None:
        self._worksheet = worksheet
        self._cascade = [
            self._cell_format,
            self._row_format,
            self._column_format,
        ]

    def _cell_format(self, row: int, col: int) -> Optional[StyleIndex]:
        return self._worksheet.cell_format_override(row, col)

    def _row_format(self, row: int, _col: int) -> Optional[StyleIndex]:
        return self._worksheet.row_format(row)

    def _column_format(self, _row: int, col: int) -> Optional[StyleIndex]:
        return self._worksheet.column_format(col)

    def resolve(self, *args) -> StyleIndex:
        """Return the format index that applies to a cell address."""
        (row, col) = to_rowcol(*args)
        for lookup in self._cascade:
            format_index = lookup(row, col)
            if format_index is not None:
                return format_index
        return self._worksheet.default_format

    def resolve_format(self, *args) -> CellFormat:
        """Return the :py:class:`~xlstyles.CellFormat` that applies to a cell."""
        return self._worksheet.styles.cell_formats[self.resolve(*args)]

    def resolve_font(self, *args) -> Font:
        """Return the font referenced by the cell's format.

        Apply flags are not consulted; they are carried for the renderer.
        """
        return self._worksheet.styles.fonts[self.resolve_format(*args).font_index]

    def resolve_fill(self, *args) -> Fill:
        return self._worksheet.styles.fills[self.resolve_format(*args).fill_index]

    def resolve_border(self, *args) -> Border:
        return self._worksheet.styles.borders[self.resolve_format(*args).border_index]


class RangeApplier:
    """
    Apply a format or a value to every cell of a range.

    Formats and values are independent: :py:meth:`apply_format` never
    changes cell values and :py:meth:`set_value` never changes cell formats.

    .. code-block:: python

        applier = RangeApplier(worksheet)
        applier.set_value("B20:P25", "TEST COLORS")
        applier.apply_format("B20:P25", highlight_format)
    """

    def __init__(self, worksheet: object) -> None:
        self._worksheet = worksheet

    def apply_format(self, cell_range, format_index: StyleIndex) -> None:
        """
        Set the cell format of every cell in a range.

        Parameters
        ----------
        cell_range: CellRange | str | Tuple[str, str]
            The range, such as ``"A3:D10"``, ``("D10", "A3")`` or a
            :py:class:`~xlstyles.CellRange`.
        format_index: int
            Index into the document's cell formats.

        Raises
        ------
        InvalidAddress:
            If the range is malformed.
        InvalidIndex:
            If the format index does not exist; no cell is changed.
        """
        cell_range = _cell_range(cell_range)
        self._worksheet.styles.cell_formats._check_index(format_index)
        debug("apply_format: range=%s, format=%d", cell_range, format_index)
        for row, col in cell_range:
            self._worksheet.cell(row, col)._format = format_index

    def set_value(self, cell_range, value) -> None:
        """
        Write the same value to every cell in a range.

        Raises
        ------
        InvalidAddress:
            If the range is malformed.
        ValueError:
            If the value's type cannot be stored in a cell; no cell is changed.
        """
        cell_range = _cell_range(cell_range)
        value = cell_value(value)
        debug("set_value: range=%s, value=%r", cell_range, value)
        for row, col in cell_range:
            self._worksheet.cell(row, col)._value = value


def _cell_range(value) -> CellRange:
    if isinstance(value, CellRange):
        return value
    if isinstance(value, tuple):
        return CellRange(*value)
    return CellRange(value)
