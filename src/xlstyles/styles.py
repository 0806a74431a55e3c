import logging
import re
from collections import namedtuple
from copy import copy
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from xlstyles import __name__ as xlstyles_name
from xlstyles.constants import (
    CUSTOM_STYLE_PREFIX,
    DEFAULT_COLOR,
    DEFAULT_FONT,
    DEFAULT_FONT_SIZE,
    DEFAULT_STYLE_NAME,
    HORIZONTAL_MAP,
    LINE_STYLE_MAP,
    VERTICAL_MAP,
    FillType,
    FontVerticalAlign,
    GradientType,
    HorizontalAlignment,
    LineStyle,
    VerticalAlignment,
)
from xlstyles.exceptions import IncompatibleFillType, InvalidIndex
from xlstyles.table import StyleIndex, StyleTable

logger = logging.getLogger(xlstyles_name)
debug = logger.debug

__all__ = [
    "Alignment",
    "Border",
    "BorderLine",
    "BorderTable",
    "CellFormat",
    "CellFormatTable",
    "CellStyle",
    "CellStyleTable",
    "Color",
    "Fill",
    "FillTable",
    "Font",
    "FontTable",
    "GradientStop",
    "GradientStops",
    "Styles",
]

_Color = namedtuple("Color", ["alpha", "red", "green", "blue"])


class Color(_Color):
    """An ARGB color.

    .. code-block:: python

        red = Color(255, 255, 0, 0)
        yellow = Color.from_hex("aaffff00")  # a bit transparent
        str(yellow)  # 'aaffff00'
    """

    def __new__(cls, alpha: int = 255, red: int = 0, green: int = 0, blue: int = 0):
        for value in (alpha, red, green, blue):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                msg = "color components must be integers in the range 0-255"
                raise TypeError(msg)
        return super().__new__(cls, alpha, red, green, blue)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from an ``AARRGGBB`` or ``RRGGBB`` hex string."""
        if not isinstance(value, str) or not re.fullmatch(r"([0-9a-fA-F]{2}){3,4}", value):
            msg = f"invalid hex color '{value}'"
            raise TypeError(msg)
        if len(value) == 6:
            value = "ff" + value
        return cls(*bytes.fromhex(value))

    @property
    def hex(self) -> str:
        """str: The color as a lower case ``AARRGGBB`` string."""
        return "".join(f"{x:02x}" for x in self)

    def __str__(self) -> str:
        return self.hex


def argb_color(color) -> Optional[Color]:
    """Convert a color value to a :py:class:`Color`, raising TypeError if invalid."""
    if color is None:
        return None
    if isinstance(color, Color):
        return color
    if isinstance(color, str):
        return Color.from_hex(color)
    if isinstance(color, tuple) and len(color) == 3:
        return Color(255, *color)
    if isinstance(color, tuple) and len(color) == 4:
        return Color(*color)
    msg = "color must be a Color, a hex string or a tuple of 3 or 4 integers"
    raise TypeError(msg)


def _to_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{name} must be a number"
        raise TypeError(msg)
    return float(value)


def _check_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        msg = f"{name} argument must be boolean"
        raise TypeError(msg)
    return value


def _check_index_value(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{name} must be a non-negative integer"
        raise InvalidIndex(msg)
    return value


def _enum_value(enum_class, value, name_map=None):
    if isinstance(value, str):
        key = value.lower().replace("_", "").replace(" ", "")
        if name_map is not None and key in name_map:
            return name_map[key]
        for member in enum_class:
            if member.name.lower().replace("_", "") == key:
                return member
        msg = f"invalid {enum_class.__name__} '{value}'"
        raise TypeError(msg)
    try:
        return enum_class(value)
    except ValueError:
        msg = f"invalid {enum_class.__name__} {value!r}"
        raise TypeError(msg) from None


DEFAULT_FONT_COLOR = Color.from_hex(DEFAULT_COLOR)
_FONT_FLAGS = ["bold", "italic", "underline", "strikethrough"]


@dataclass
class Font:
    """A font record held in a :py:class:`FontTable`.

    All attributes are independent and may be changed in place:

    .. code-block:: python

        font = styles.fonts[styles.fonts.create()]
        font.name = "Arial"
        font.size = 16
        font.bold = True
        font.color = "ffff0000"

    Parameters
    ----------
    name: str, optional, default: ``DEFAULT_FONT``
        Font name
    size: float, optional, default: ``DEFAULT_FONT_SIZE``
        Font size in points; integers are converted to float
    bold: bool, optional, default: False
        ``True`` if the font is bold
    italic: bool, optional, default: False
        ``True`` if the font is italic
    underline: bool, optional, default: False
        ``True`` if the font is underlined
    strikethrough: bool, optional, default: False
        ``True`` if the font is struck through
    color: Color, optional, default: opaque black
        Font color
    vertical_align: FontVerticalAlign, optional, default: ``BASELINE``
        Superscript or subscript position

    Raises
    ------
    TypeError:
        If any attribute is set to a value of the wrong type.
    """

    name: str = DEFAULT_FONT
    size: float = DEFAULT_FONT_SIZE
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    color: Color = DEFAULT_FONT_COLOR
    vertical_align: FontVerticalAlign = FontVerticalAlign.BASELINE

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "name":
            if not isinstance(value, str):
                msg = "font name must be a string"
                raise TypeError(msg)
        elif name == "size":
            value = _to_float(value, "size")
            if value <= 0.0:
                msg = "size must be a positive number of points"
                raise ValueError(msg)
        elif name in _FONT_FLAGS:
            _check_bool(value, name)
        elif name == "color":
            if value is None:
                msg = "font color cannot be None"
                raise TypeError(msg)
            value = argb_color(value)
        elif name == "vertical_align":
            value = _enum_value(FontVerticalAlign, value)
        super().__setattr__(name, value)


@dataclass
class GradientStop:
    """A positioned color sample of a gradient fill.

    ``position`` is ``None`` until set and must lie between 0.0 and 1.0.
    """

    position: Optional[float] = None
    color: Optional[Color] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "position" and value is not None:
            value = _to_float(value, "position")
            if not 0.0 <= value <= 1.0:
                msg = "gradient stop position must be between 0.0 and 1.0"
                raise ValueError(msg)
        elif name == "color":
            value = argb_color(value)
        super().__setattr__(name, value)


class GradientStops(StyleTable[GradientStop]):
    """The stops of one gradient fill, kept in the order they were created.

    Stops are never sorted by position; iteration always follows creation
    order, even when positions are not monotonic.
    """

    def __init__(self) -> None:
        super().__init__(GradientStop, "gradient stop")

    @property
    def positions(self) -> List[Optional[float]]:
        """List[float]: Stop positions in creation order."""
        return [stop.position for stop in self]


def _gradient_property(attr: str, doc: str):
    def getter(self):
        return getattr(self, "_" + attr)

    def setter(self, value):
        self._require(FillType.GRADIENT, attr)
        value = None if value is None else _to_float(value, attr)
        setattr(self, "_" + attr, value)

    return property(getter, setter, doc=doc)


class Fill:
    """A cell fill held in a :py:class:`FillTable`.

    A fill is in exactly one of the modes of :py:class:`~xlstyles.FillType`.
    Attributes of a mode can only be set while the fill is in that mode,
    otherwise :py:class:`~xlstyles.exceptions.IncompatibleFillType` is
    raised. Switching modes discards every attribute of the old mode,
    including gradient stops.

    .. code-block:: python

        fill = styles.fills[styles.fills.create()]
        fill.set_fill_type(FillType.SOLID)
        fill.color = "aaffff00"

        fill.set_fill_type(FillType.GRADIENT)
        fill.gradient_type = GradientType.LINEAR
        stop = fill.stops[fill.stops.create()]
        stop.position = 0.1
        stop.color = "ffff0000"
    """

    def __init__(self, fill_type: FillType = FillType.NONE) -> None:
        self._fill_type = FillType.NONE
        self._clear()
        self.set_fill_type(fill_type)

    def _clear(self) -> None:
        self._color = None
        self._gradient_type = None
        self._degree = None
        self._left = None
        self._right = None
        self._top = None
        self._bottom = None
        self._background_color = None
        self._stops = None

    def _require(self, fill_type: FillType, attr: str) -> None:
        if self._fill_type != fill_type:
            current = self._fill_type.name.lower()
            msg = f"cannot use {attr} with a {current} fill"
            raise IncompatibleFillType(msg)

    @property
    def fill_type(self) -> FillType:
        """FillType: The active fill mode."""
        return self._fill_type

    @fill_type.setter
    def fill_type(self, value: FillType) -> None:
        self.set_fill_type(value)

    def set_fill_type(self, fill_type: Union[FillType, str]) -> None:
        """Switch the fill mode, discarding attributes of the previous mode.

        Switching to the current mode changes nothing.
        """
        fill_type = _enum_value(FillType, fill_type)
        if fill_type == self._fill_type:
            return
        debug("set_fill_type: %s -> %s", self._fill_type.name, fill_type.name)
        self._clear()
        self._fill_type = fill_type
        if fill_type == FillType.GRADIENT:
            self._gradient_type = GradientType.LINEAR
            self._degree = 0.0
            self._stops = GradientStops()

    @property
    def color(self) -> Optional[Color]:
        """Color: The color of a solid fill, or ``None`` for other modes."""
        return self._color

    @color.setter
    def color(self, value) -> None:
        self._require(FillType.SOLID, "color")
        self._color = argb_color(value)

    @property
    def gradient_type(self) -> Optional[GradientType]:
        """GradientType: The gradient type, or ``None`` if not a gradient fill."""
        return self._gradient_type

    @gradient_type.setter
    def gradient_type(self, value) -> None:
        self._require(FillType.GRADIENT, "gradient_type")
        self._gradient_type = _enum_value(GradientType, value)

    degree = _gradient_property("degree", "float: Angle of a linear gradient in degrees.")
    left = _gradient_property("left", "float: Left edge of a path gradient.")
    right = _gradient_property("right", "float: Right edge of a path gradient.")
    top = _gradient_property("top", "float: Top edge of a path gradient.")
    bottom = _gradient_property("bottom", "float: Bottom edge of a path gradient.")

    @property
    def background_color(self) -> Optional[Color]:
        """Color: The background color of a gradient fill."""
        return self._background_color

    @background_color.setter
    def background_color(self, value) -> None:
        self._require(FillType.GRADIENT, "background_color")
        self._background_color = argb_color(value)

    @property
    def stops(self) -> GradientStops:
        """GradientStops: The stops of a gradient fill in creation order.

        Raises
        ------
        IncompatibleFillType:
            If the fill is not a gradient fill.
        """
        self._require(FillType.GRADIENT, "stops")
        return self._stops

    def _state(self) -> tuple:
        stops = None if self._stops is None else list(self._stops)
        return (
            self._fill_type,
            self._color,
            self._gradient_type,
            self._degree,
            self._left,
            self._right,
            self._top,
            self._bottom,
            self._background_color,
            stops,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fill):
            return NotImplemented
        return self._state() == other._state()

    __hash__ = None

    def __repr__(self) -> str:
        if self._fill_type == FillType.SOLID:
            return f"Fill(fill_type=solid, color={self._color})"
        if self._fill_type == FillType.GRADIENT:
            gradient_type = self._gradient_type.name.lower()
            return f"Fill(fill_type=gradient, gradient_type={gradient_type}, stops={len(self._stops)})"
        return "Fill(fill_type=none)"


def line_style(value) -> LineStyle:
    """Convert a line style name or number to a :py:class:`~xlstyles.LineStyle`."""
    return _enum_value(LineStyle, value, LINE_STYLE_MAP)


_BorderLine = namedtuple("BorderLine", ["style", "color"])


class BorderLine(_BorderLine):
    """The line style and color of one border edge."""

    def __new__(cls, style: Union[LineStyle, str] = LineStyle.THIN, color=None):
        style = line_style(style)
        color = DEFAULT_FONT_COLOR if color is None else argb_color(color)
        return super().__new__(cls, style, color)

    def __str__(self) -> str:
        return f"BorderLine(style={self.style.name.lower()}, color={self.color})"


BORDER_SIDES = ["top", "bottom", "left", "right", "diagonal"]


def _check_sides(side: Union[str, List[str]]) -> List[str]:
    sides = side if isinstance(side, list) else [side]
    for s in sides:
        if s not in BORDER_SIDES:
            msg = f"side must be one of {', '.join(BORDER_SIDES)}"
            raise TypeError(msg)
    return sides


def _edge_property(side: str):
    def getter(self):
        return self._edges[side]

    def setter(self, value):
        if value is not None and not isinstance(value, BorderLine):
            msg = "border edge must be a BorderLine or None"
            raise TypeError(msg)
        self._edges[side] = value

    return property(getter, setter, doc=f"BorderLine: The {side} edge, or ``None``.")


class Border:
    """
    Cell borders held in a :py:class:`BorderTable`.

    Each edge is independent and is either ``None`` or a
    :py:class:`BorderLine`:

    .. code-block:: python

        border = styles.borders[styles.borders.create()]
        border.set_edge(["top", "bottom"], "thin", "ff000000")
        border.set_left(LineStyle.DASHED, Color(255, 29, 177, 0))
        border.clear_edge("top")
    """

    def __init__(self) -> None:
        self._edges = dict.fromkeys(BORDER_SIDES)
        self._diagonal_up = False
        self._diagonal_down = False

    top = _edge_property("top")
    bottom = _edge_property("bottom")
    left = _edge_property("left")
    right = _edge_property("right")
    diagonal = _edge_property("diagonal")

    @property
    def diagonal_up(self) -> bool:
        """bool: ``True`` if the diagonal edge runs bottom-left to top-right."""
        return self._diagonal_up

    @diagonal_up.setter
    def diagonal_up(self, value: bool) -> None:
        self._diagonal_up = _check_bool(value, "diagonal_up")

    @property
    def diagonal_down(self) -> bool:
        """bool: ``True`` if the diagonal edge runs top-left to bottom-right."""
        return self._diagonal_down

    @diagonal_down.setter
    def diagonal_down(self, value: bool) -> None:
        self._diagonal_down = _check_bool(value, "diagonal_down")

    def set_edge(self, side: Union[str, List[str]], style, color=None) -> None:
        """
        Set one or more edges to the same line style and color.

        Parameters
        ----------
        side: str | List[str]
            One of ``"top"``, ``"bottom"``, ``"left"``, ``"right"`` or
            ``"diagonal"``, or a list of them.
        style: LineStyle | str
            The line style, for example ``LineStyle.THIN`` or ``"dashed"``.
        color: Color | str, optional
            The line color; opaque black if ``None``.

        Raises
        ------
        TypeError:
            If a side name, the style or the color is invalid.
        """
        sides = _check_sides(side)
        line = BorderLine(style, color)
        for s in sides:
            self._edges[s] = line

    def clear_edge(self, side: Union[str, List[str]]) -> None:
        """Remove the border from one or more edges."""
        for s in _check_sides(side):
            self._edges[s] = None

    def set_top(self, style, color=None) -> None:
        self.set_edge("top", style, color)

    def set_bottom(self, style, color=None) -> None:
        self.set_edge("bottom", style, color)

    def set_left(self, style, color=None) -> None:
        self.set_edge("left", style, color)

    def set_right(self, style, color=None) -> None:
        self.set_edge("right", style, color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Border):
            return NotImplemented
        return (self._edges, self._diagonal_up, self._diagonal_down) == (
            other._edges,
            other._diagonal_up,
            other._diagonal_down,
        )

    __hash__ = None

    def __repr__(self) -> str:
        edges = ", ".join(f"{k}={v}" for k, v in self._edges.items() if v is not None)
        return f"Border({edges})"


_Alignment = namedtuple("Alignment", ["horizontal", "vertical"])


class Alignment(_Alignment):
    def __new__(cls, horizontal="general", vertical="bottom"):
        horizontal = _enum_value(HorizontalAlignment, horizontal, HORIZONTAL_MAP)
        vertical = _enum_value(VerticalAlignment, vertical, VERTICAL_MAP)
        return super(_Alignment, cls).__new__(cls, (horizontal, vertical))


DEFAULT_ALIGNMENT = Alignment()


def alignment(value) -> Alignment:
    """Raise a TypeError if a alignment is not a valid."""
    if value is None:
        return DEFAULT_ALIGNMENT
    if isinstance(value, Alignment):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        return Alignment(*value)
    msg = "Alignment must be an Alignment or a tuple of 2 integers/strings"
    raise TypeError(msg)


_INDEX_TABLES = {"font_index": "fonts", "fill_index": "fills", "border_index": "borders"}
_APPLY_FLAGS = ["apply_font", "apply_fill", "apply_border", "apply_alignment"]


@dataclass
class CellFormat:
    """
    A cell format held in a :py:class:`CellFormatTable`.

    A cell format refers to a font, fill and border by index; it does not
    own them. Copying a cell format copies the indices, so the copy shares
    its font, fill and border with the original until it is pointed at new
    ones:

    .. code-block:: python

        new_format = styles.cell_formats.create(old_format)
        new_font = styles.fonts.create(styles.cell_formats[old_format].font_index)
        styles.cell_formats[new_format].font_index = new_font

    The apply flags tell a renderer whether to honour each referenced
    record.

    Raises
    ------
    InvalidIndex:
        If an index is set that does not exist in its table.
    TypeError:
        If an apply flag is not a ``bool``.
    """

    font_index: StyleIndex = 0
    fill_index: StyleIndex = 0
    border_index: StyleIndex = 0
    apply_font: bool = False
    apply_fill: bool = False
    apply_border: bool = False
    alignment: Alignment = DEFAULT_ALIGNMENT
    apply_alignment: bool = False
    _styles: object = field(default=None, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _INDEX_TABLES:
            styles = self.__dict__.get("_styles")
            if styles is None:
                _check_index_value(value, name)
            else:
                getattr(styles, _INDEX_TABLES[name])._check_index(value)
        elif name in _APPLY_FLAGS:
            _check_bool(value, name)
        elif name == "alignment":
            value = alignment(value)
        super().__setattr__(name, value)


@dataclass
class CellStyle:
    """A named cell style preset built on one cell format."""

    name: Optional[str] = None
    cell_format_index: StyleIndex = 0
    builtin_id: Optional[int] = None
    _styles: object = field(default=None, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "name" and value is not None and not isinstance(value, str):
            msg = "style name must be a string"
            raise TypeError(msg)
        elif name == "cell_format_index":
            styles = self.__dict__.get("_styles")
            if styles is None:
                _check_index_value(value, name)
            else:
                styles.cell_formats._check_index(value)
        elif name == "builtin_id" and value is not None:
            if isinstance(value, bool) or not isinstance(value, int):
                msg = "builtin_id must be an integer"
                raise TypeError(msg)
        super().__setattr__(name, value)


class FontTable(StyleTable[Font]):
    def __init__(self) -> None:
        super().__init__(Font, "font")


class FillTable(StyleTable[Fill]):
    def __init__(self) -> None:
        super().__init__(Fill, "fill")


class BorderTable(StyleTable[Border]):
    def __init__(self) -> None:
        super().__init__(Border, "border")


class CellFormatTable(StyleTable[CellFormat]):
    """Cell formats; copies share font, fill and border records by index."""

    def __init__(self, styles: "Styles") -> None:
        super().__init__(CellFormat, "cell format")
        self._styles = styles

    def _copy_record(self, record: CellFormat) -> CellFormat:
        return copy(record)

    def _validate(self, record: CellFormat) -> None:
        super()._validate(record)
        for attr, table_name in _INDEX_TABLES.items():
            getattr(self._styles, table_name)._check_index(getattr(record, attr))

    def _attach(self, record: CellFormat) -> None:
        record._styles = self._styles


class CellStyleTable(StyleTable[CellStyle]):
    """Named cell styles, also addressable by name.

    .. code-block:: python

        >>> styles.cell_styles["Normal"].cell_format_index
        0
        >>> "Normal" in styles.cell_styles
        True
    """

    def __init__(self, styles: "Styles") -> None:
        super().__init__(CellStyle, "cell style")
        self._styles = styles

    def create(self, template: Optional[StyleIndex] = None, *, name: Optional[str] = None) -> StyleIndex:
        """
        Create a new cell style and return its index.

        If no name is provided, the next available numbered style name is
        generated in the series ``Custom Style 1``, ``Custom Style 2``, etc.
        A copy keeps the template's name unless ``name`` is given.

        Raises
        ------
        IndexError:
            If ``name`` is already used by another style.
        InvalidIndex:
            If ``template`` is not a valid index.
        """
        if name is not None:
            if not isinstance(name, str):
                msg = "style name must be a string"
                raise TypeError(msg)
            if name in self:
                msg = f"style '{name}' already exists"
                raise IndexError(msg)
        if template is not None:
            self._check_index(template)
        generated_name = self.custom_style_name() if name is None and template is None else None

        index = super().create(template)
        style = self._records[index]
        if name is not None:
            style.name = name
        elif generated_name is not None:
            style.name = generated_name
        return index

    def custom_style_name(self) -> str:
        """Return the next highest numbered custom style name."""
        pattern = re.compile(re.escape(CUSTOM_STYLE_PREFIX) + r" (\d+)")
        numbers = []
        for style in self._records:
            match = pattern.fullmatch(style.name or "")
            if match:
                numbers.append(int(match.group(1)))
        if len(numbers) > 0:
            return f"{CUSTOM_STYLE_PREFIX} {max(numbers) + 1}"
        return f"{CUSTOM_STYLE_PREFIX} 1"

    def index(self, name: str) -> StyleIndex:
        """Return the lowest index of the style called ``name``."""
        for index, style in enumerate(self._records):
            if style.name == name:
                return index
        msg = f"no cell style named '{name}'"
        raise KeyError(msg)

    def _copy_record(self, record: CellStyle) -> CellStyle:
        return copy(record)

    def _validate(self, record: CellStyle) -> None:
        super()._validate(record)
        self._styles.cell_formats._check_index(record.cell_format_index)

    def _attach(self, record: CellStyle) -> None:
        record._styles = self._styles

    def __getitem__(self, key: Union[StyleIndex, str]) -> CellStyle:
        if isinstance(key, str):
            return self._records[self.index(key)]
        return super().__getitem__(key)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return any(style.name == key for style in self._records)
        return super().__contains__(key)


class Styles:
    """
    The style tables of one document.

    A new set of tables is seeded with a record at index 0 in every table: the
    default font, an empty fill, a border with no edges, a cell format that
    uses all three, and the ``Normal`` cell style.

    .. code-block:: python

        styles = doc.styles
        bold = styles.fonts.create()
        styles.fonts[bold].bold = True
        bold_format = styles.cell_formats.create()
        styles.cell_formats[bold_format].font_index = bold

    Parameters
    ----------
    seed: bool, optional, default: True
        If ``False``, create empty tables; used when loading a document.
    """

    def __init__(self, seed: bool = True) -> None:
        self._fonts = FontTable()
        self._fills = FillTable()
        self._borders = BorderTable()
        self._cell_formats = CellFormatTable(self)
        self._cell_styles = CellStyleTable(self)

        if seed:
            self._fonts.create()
            self._fills.create()
            self._borders.create()
            self._cell_formats.create()
            normal = self._cell_styles.create(name=DEFAULT_STYLE_NAME)
            self._cell_styles[normal].builtin_id = 0

    @property
    def fonts(self) -> FontTable:
        """FontTable: The font records."""
        return self._fonts

    @property
    def fills(self) -> FillTable:
        """FillTable: The fill records."""
        return self._fills

    @property
    def borders(self) -> BorderTable:
        """BorderTable: The border records."""
        return self._borders

    @property
    def cell_formats(self) -> CellFormatTable:
        """CellFormatTable: The cell format records."""
        return self._cell_formats

    @property
    def cell_styles(self) -> CellStyleTable:
        """CellStyleTable: The named cell styles."""
        return self._cell_styles

    def __repr__(self) -> str:
        sizes = ", ".join(
            f"{name}={len(getattr(self, name))}"
            for name in ["fonts", "fills", "borders", "cell_formats", "cell_styles"]
        )
        return f"<Styles {sizes}>"
