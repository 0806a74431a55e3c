from enum import IntEnum

import enum_tools.documentation

__all__ = [
    "FillType",
    "FontVerticalAlign",
    "GradientType",
    "HorizontalAlignment",
    "LineStyle",
    "OverwritePolicy",
    "VerticalAlignment",
]

# New document defaults
DEFAULT_SHEET_NAME = "Sheet1"
DEFAULT_STYLE_NAME = "Normal"
DEFAULT_FORMAT_INDEX = 0
DEFAULT_COLUMN_WIDTH = 8.43
DEFAULT_ROW_HEIGHT = 15.0

# Style defaults
DEFAULT_FONT = "Calibri"
DEFAULT_FONT_SIZE = 11.0
DEFAULT_COLOR = "ff000000"
CUSTOM_STYLE_PREFIX = "Custom Style"

# Spreadsheet limits
MAX_ROW_COUNT = 1048576
MAX_COL_COUNT = 16384
MAX_SIGNIFICANT_DIGITS = 15

# Container layout
PROPERTIES_FILENAME = "Metadata/Properties.plist"
STYLES_FILENAME = "Index/Styles.iwa"
SHEETS_FILENAME = "Index/Sheets.iwa"
FILE_FORMAT_VERSION = "1.2"
SUPPORTED_FILE_FORMAT_VERSIONS = ["1.0", "1.1", "1.2"]
MAX_CHUNK_SIZE = 65536


@enum_tools.documentation.document_enum
class FillType(IntEnum):
    """
    The active mode of a fill.

    A fill is in exactly one mode at a time. Switching modes discards the
    attributes of the previous mode.
    """

    NONE = 0
    """No fill; the cell background is transparent."""
    SOLID = 1
    """A single solid color."""
    GRADIENT = 2
    """A gradient interpolated between ordered gradient stops."""


@enum_tools.documentation.document_enum
class GradientType(IntEnum):
    """How a gradient fill is interpolated."""

    LINEAR = 0
    """Colors change along a line at an angle given by ``degree``."""
    PATH = 1
    """Colors radiate from the rectangle given by ``left``, ``right``, ``top`` and ``bottom``."""


@enum_tools.documentation.document_enum
class LineStyle(IntEnum):
    """The line style of a border edge."""

    NONE = 0
    THIN = 1
    MEDIUM = 2
    DASHED = 3
    DOTTED = 4
    THICK = 5
    DOUBLE = 6
    HAIR = 7
    MEDIUM_DASHED = 8
    DASH_DOT = 9
    MEDIUM_DASH_DOT = 10
    DASH_DOT_DOT = 11
    MEDIUM_DASH_DOT_DOT = 12
    SLANT_DASH_DOT = 13


LINE_STYLE_MAP = {
    "none": LineStyle.NONE,
    "thin": LineStyle.THIN,
    "medium": LineStyle.MEDIUM,
    "dashed": LineStyle.DASHED,
    "dotted": LineStyle.DOTTED,
    "thick": LineStyle.THICK,
    "double": LineStyle.DOUBLE,
    "hair": LineStyle.HAIR,
    "mediumdashed": LineStyle.MEDIUM_DASHED,
    "dashdot": LineStyle.DASH_DOT,
    "mediumdashdot": LineStyle.MEDIUM_DASH_DOT,
    "dashdotdot": LineStyle.DASH_DOT_DOT,
    "mediumdashdotdot": LineStyle.MEDIUM_DASH_DOT_DOT,
    "slantdashdot": LineStyle.SLANT_DASH_DOT,
}


@enum_tools.documentation.document_enum
class FontVerticalAlign(IntEnum):
    """Vertical position of font glyphs relative to the text baseline."""

    BASELINE = 0
    SUPERSCRIPT = 1
    SUBSCRIPT = 2


@enum_tools.documentation.document_enum
class HorizontalAlignment(IntEnum):
    """Horizontal alignment of cell content."""

    GENERAL = 0
    LEFT = 1
    CENTER = 2
    RIGHT = 3
    FILL = 4
    JUSTIFY = 5


@enum_tools.documentation.document_enum
class VerticalAlignment(IntEnum):
    """Vertical alignment of cell content."""

    BOTTOM = 0
    CENTER = 1
    TOP = 2
    JUSTIFY = 3


HORIZONTAL_MAP = {x.name.lower(): x for x in HorizontalAlignment}
VERTICAL_MAP = {x.name.lower(): x for x in VerticalAlignment}


@enum_tools.documentation.document_enum
class OverwritePolicy(IntEnum):
    """What to do when a document is created or saved over an existing file."""

    DO_NOT_OVERWRITE = 0
    """Raise :py:class:`~xlstyles.exceptions.FileError` if the file exists."""
    FORCE_OVERWRITE = 1
    """Replace any existing file."""
