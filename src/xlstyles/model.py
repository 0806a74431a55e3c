import logging
from pathlib import Path
from typing import Dict, List, Optional

from pendulum import DateTime, Duration, duration
from pendulum import parse as parse_datetime

from xlstyles import __name__ as xlstyles_name
from xlstyles.archive import ArchiveFile
from xlstyles.constants import (
    DEFAULT_SHEET_NAME,
    PROPERTIES_FILENAME,
    SHEETS_FILENAME,
    STYLES_FILENAME,
    FillType,
    FontVerticalAlign,
    GradientType,
    HorizontalAlignment,
    LineStyle,
    VerticalAlignment,
)
from xlstyles.exceptions import FileFormatError
from xlstyles.file import properties_plist, read_document_file, write_document_file
from xlstyles.styles import (
    BORDER_SIDES,
    Alignment,
    Border,
    BorderLine,
    CellFormat,
    CellStyle,
    Fill,
    Font,
    Styles,
)
from xlstyles.worksheet import Worksheet

logger = logging.getLogger(xlstyles_name)
debug = logger.debug

# Struct messages store every number as a double
MAX_EXACT_INT = 2**53


def _color_hex(color) -> Optional[str]:
    return None if color is None else color.hex


def _int(value) -> Optional[int]:
    return None if value is None else int(value)


def font_to_dict(font: Font) -> dict:
    return {
        "name": font.name,
        "size": font.size,
        "bold": font.bold,
        "italic": font.italic,
        "underline": font.underline,
        "strikethrough": font.strikethrough,
        "color": _color_hex(font.color),
        "verticalAlign": int(font.vertical_align),
    }


def font_from_dict(font: Font, data: dict) -> None:
    font.name = data["name"]
    font.size = data["size"]
    for attr in ["bold", "italic", "underline", "strikethrough"]:
        setattr(font, attr, data[attr])
    font.color = data["color"]
    font.vertical_align = FontVerticalAlign(int(data["verticalAlign"]))


def fill_to_dict(fill: Fill) -> dict:
    data = {"fillType": int(fill.fill_type)}
    if fill.fill_type == FillType.SOLID:
        data["color"] = _color_hex(fill.color)
    elif fill.fill_type == FillType.GRADIENT:
        data["gradientType"] = int(fill.gradient_type)
        data["degree"] = fill.degree
        data["left"] = fill.left
        data["right"] = fill.right
        data["top"] = fill.top
        data["bottom"] = fill.bottom
        data["backgroundColor"] = _color_hex(fill.background_color)
        data["stops"] = [
            {"position": stop.position, "color": _color_hex(stop.color)} for stop in fill.stops
        ]
    return data


def fill_from_dict(fill: Fill, data: dict) -> None:
    fill.set_fill_type(FillType(int(data["fillType"])))
    if fill.fill_type == FillType.SOLID:
        fill.color = data.get("color")
    elif fill.fill_type == FillType.GRADIENT:
        fill.gradient_type = GradientType(int(data["gradientType"]))
        for attr in ["degree", "left", "right", "top", "bottom"]:
            setattr(fill, attr, data.get(attr))
        fill.background_color = data.get("backgroundColor")
        for stop_data in data.get("stops", []):
            stop = fill.stops[fill.stops.create()]
            stop.position = stop_data["position"]
            stop.color = stop_data["color"]


def border_to_dict(border: Border) -> dict:
    data = {}
    for side in BORDER_SIDES:
        line = getattr(border, side)
        if line is None:
            data[side] = None
        else:
            data[side] = {"style": int(line.style), "color": _color_hex(line.color)}
    data["diagonalUp"] = border.diagonal_up
    data["diagonalDown"] = border.diagonal_down
    return data


def border_from_dict(border: Border, data: dict) -> None:
    for side in BORDER_SIDES:
        line = data.get(side)
        if line is not None:
            setattr(border, side, BorderLine(LineStyle(int(line["style"])), line["color"]))
    border.diagonal_up = data.get("diagonalUp", False)
    border.diagonal_down = data.get("diagonalDown", False)


def cell_format_to_dict(cell_format: CellFormat) -> dict:
    return {
        "fontIndex": cell_format.font_index,
        "fillIndex": cell_format.fill_index,
        "borderIndex": cell_format.border_index,
        "applyFont": cell_format.apply_font,
        "applyFill": cell_format.apply_fill,
        "applyBorder": cell_format.apply_border,
        "horizontal": int(cell_format.alignment.horizontal),
        "vertical": int(cell_format.alignment.vertical),
        "applyAlignment": cell_format.apply_alignment,
    }


def cell_format_from_dict(cell_format: CellFormat, data: dict) -> None:
    cell_format.font_index = int(data["fontIndex"])
    cell_format.fill_index = int(data["fillIndex"])
    cell_format.border_index = int(data["borderIndex"])
    cell_format.apply_font = data["applyFont"]
    cell_format.apply_fill = data["applyFill"]
    cell_format.apply_border = data["applyBorder"]
    cell_format.alignment = Alignment(
        HorizontalAlignment(int(data["horizontal"])), VerticalAlignment(int(data["vertical"]))
    )
    cell_format.apply_alignment = data["applyAlignment"]


def cell_style_to_dict(cell_style: CellStyle) -> dict:
    return {
        "name": cell_style.name,
        "cellFormatIndex": cell_style.cell_format_index,
        "builtinId": cell_style.builtin_id,
    }


def cell_style_from_dict(cell_style: CellStyle, data: dict) -> None:
    cell_style.name = data["name"]
    cell_style.cell_format_index = int(data["cellFormatIndex"])
    cell_style.builtin_id = _int(data.get("builtinId"))


# Table name, archive converters, in load order
STYLE_TABLES = [
    ("fonts", font_to_dict, font_from_dict),
    ("fills", fill_to_dict, fill_from_dict),
    ("borders", border_to_dict, border_from_dict),
    ("cell_formats", cell_format_to_dict, cell_format_from_dict),
    ("cell_styles", cell_style_to_dict, cell_style_from_dict),
]


def value_to_dict(value) -> dict:
    if value is None:
        return {"type": "empty"}
    elif isinstance(value, str):
        return {"type": "string", "value": value}
    elif isinstance(value, bool):
        return {"type": "bool", "value": value}
    elif isinstance(value, int):
        if abs(value) < MAX_EXACT_INT:
            return {"type": "int", "value": value}
        return {"type": "int", "value": str(value)}
    elif isinstance(value, float):
        return {"type": "number", "value": value}
    elif isinstance(value, DateTime):
        return {"type": "datetime", "value": value.isoformat()}
    elif isinstance(value, Duration):
        return {"type": "duration", "value": value.total_seconds()}
    msg = f"cannot save value of type {type(value).__name__}"
    raise TypeError(msg)


def value_from_dict(data: dict):
    value_type = data["type"]
    if value_type == "empty":
        return None
    elif value_type in ["string", "bool"]:
        return data["value"]
    elif value_type == "number":
        return float(data["value"])
    elif value_type == "int":
        return int(data["value"])
    elif value_type == "datetime":
        return parse_datetime(data["value"])
    elif value_type == "duration":
        return duration(seconds=data["value"])
    msg = f"unknown value type '{value_type}'"
    raise ValueError(msg)


def _int_keys(data: Dict[str, float]) -> Dict[int, float]:
    return {int(k): v for k, v in data.items()}


def sheet_to_dict(sheet: Worksheet) -> dict:
    cells = []
    for cell in sheet.cells():
        if cell.value is None and cell.explicit_format is None:
            continue
        cell_data = {"row": cell.row, "col": cell.col, "value": value_to_dict(cell.value)}
        if cell.explicit_format is not None:
            cell_data["format"] = cell.explicit_format
        cells.append(cell_data)
    return {
        "name": sheet.name,
        "defaultFormat": sheet.default_format,
        "rowFormats": {str(k): v for k, v in sheet._row_formats.items()},
        "columnFormats": {str(k): v for k, v in sheet._col_formats.items()},
        "rowHeights": {str(k): v for k, v in sheet._row_heights.items()},
        "columnWidths": {str(k): v for k, v in sheet._col_widths.items()},
        "cells": cells,
    }


def sheet_from_dict(sheet: Worksheet, data: dict) -> None:
    sheet.default_format = int(data["defaultFormat"])
    for row, format_index in _int_keys(data.get("rowFormats", {})).items():
        sheet.set_row_format(row, int(format_index))
    for col, format_index in _int_keys(data.get("columnFormats", {})).items():
        sheet.set_column_format(col, int(format_index))
    for row, height in _int_keys(data.get("rowHeights", {})).items():
        sheet.row(row).height = height
    for col, width in _int_keys(data.get("columnWidths", {})).items():
        sheet.column(col).width = width
    for cell_data in data.get("cells", []):
        cell = sheet.cell(int(cell_data["row"]), int(cell_data["col"]))
        cell._value = value_from_dict(cell_data["value"])
        if "format" in cell_data:
            cell.set_cell_format(int(cell_data["format"]))


class _DocumentModel:
    """
    Loads and saves the style tables and worksheets of a document.

    The styles part holds one archive per style table, in the order the
    tables must be loaded so that every index refers to a record that has
    already been read. The sheets part holds one archive per worksheet.
    """

    def __init__(self, filepath: Optional[Path] = None):
        if filepath is None:
            self._styles = Styles()
            self._sheet_archives = [{"name": DEFAULT_SHEET_NAME}]
        else:
            file_store = read_document_file(filepath)
            self._styles = self._load_styles(file_store[STYLES_FILENAME].archives)
            self._sheet_archives = file_store[SHEETS_FILENAME].archives

    @property
    def styles(self) -> Styles:
        return self._styles

    def _load_styles(self, archives: List[dict]) -> Styles:
        styles = Styles(seed=False)
        tables = {archive.get("table"): archive.get("records", []) for archive in archives}
        try:
            for table_name, _, from_dict in STYLE_TABLES:
                if table_name not in tables:
                    msg = f"invalid document (no {table_name} table)"
                    raise FileFormatError(msg)
                table = getattr(styles, table_name)
                for record_data in tables[table_name]:
                    from_dict(table[table.create()], record_data)
                debug("_load_styles: %s=%d", table_name, len(table))
        except (IndexError, KeyError, TypeError, ValueError) as e:
            raise FileFormatError("invalid document (bad style table)") from e
        return styles

    def worksheets(self, container) -> List[Worksheet]:
        """Create the worksheets of the document, in document order."""
        sheets = []
        for archive in self._sheet_archives:
            try:
                sheet = Worksheet(self._styles, archive["name"], container)
                if "defaultFormat" in archive:
                    sheet_from_dict(sheet, archive)
            except (IndexError, KeyError, TypeError, ValueError) as e:
                raise FileFormatError("invalid document (bad worksheet)") from e
            sheets.append(sheet)
        self._sheet_archives = None
        return sheets

    def save(self, filepath: Path, sheets: List[Worksheet]) -> None:
        styles_archives = [
            {
                "table": table_name,
                "records": [to_dict(record) for record in getattr(self._styles, table_name)],
            }
            for table_name, to_dict, _ in STYLE_TABLES
        ]
        sheet_archives = [sheet_to_dict(sheet) for sheet in sheets]
        file_store = {
            PROPERTIES_FILENAME: properties_plist(),
            STYLES_FILENAME: ArchiveFile(styles_archives, STYLES_FILENAME),
            SHEETS_FILENAME: ArchiveFile(sheet_archives, SHEETS_FILENAME),
        }
        write_document_file(filepath, file_store)
