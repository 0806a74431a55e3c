import pytest
from pytest_check import check

from xlstyles import Color, Fill, FillType, GradientType, IncompatibleFillType


def new_fill(styles, fill_type=None):
    index = styles.fills.create()
    fill = styles.fills[index]
    if fill_type is not None:
        fill.set_fill_type(fill_type)
    return index, fill


def add_stop(fill, position, color):
    stop = fill.stops[fill.stops.create()]
    stop.position = position
    stop.color = color
    return stop


def test_default_fill(styles):
    fill = styles.fills[0]
    assert fill.fill_type == FillType.NONE
    assert fill.color is None
    assert fill.gradient_type is None
    assert repr(fill) == "Fill(fill_type=none)"


def test_solid_fill(styles):
    _, fill = new_fill(styles, FillType.SOLID)
    fill.color = "aaffff00"
    assert fill.color == Color(170, 255, 255, 0)
    assert repr(fill) == "Fill(fill_type=solid, color=aaffff00)"

    with pytest.raises(IncompatibleFillType) as e:
        fill.gradient_type = GradientType.LINEAR
    assert "cannot use gradient_type with a solid fill" in str(e)
    with pytest.raises(IncompatibleFillType):
        _ = fill.stops
    with pytest.raises(IncompatibleFillType):
        fill.background_color = "ffffffff"
    with pytest.raises(IncompatibleFillType):
        fill.degree = 90
    assert fill.gradient_type is None
    assert fill.color == Color(170, 255, 255, 0)


def test_incompatible_is_type_error(styles):
    _, fill = new_fill(styles)
    with pytest.raises(TypeError):
        fill.color = "ffff0000"
    with pytest.raises(IncompatibleFillType) as e:
        fill.color = "ffff0000"
    assert "cannot use color with a none fill" in str(e)


def test_gradient_fill(styles):
    _, fill = new_fill(styles, "gradient")
    check.equal(fill.fill_type, FillType.GRADIENT)
    check.equal(fill.gradient_type, GradientType.LINEAR)
    check.equal(fill.degree, 0.0)
    check.equal(len(fill.stops), 0)

    fill.gradient_type = "path"
    fill.left = 0.25
    fill.right = 0.75
    fill.top = 0
    fill.bottom = 1
    fill.background_color = "ffffffff"
    check.equal(fill.gradient_type, GradientType.PATH)
    check.equal(fill.left, 0.25)
    check.equal(fill.top, 0.0)
    check.equal(fill.background_color, Color(255, 255, 255, 255))

    with pytest.raises(IncompatibleFillType):
        fill.color = "ffff0000"
    assert fill.color is None


def test_stops_keep_insertion_order(styles):
    _, fill = new_fill(styles, FillType.GRADIENT)
    add_stop(fill, 0.9, "ff0000ff")
    add_stop(fill, 0.1, "ffff0000")
    assert fill.stops.positions == [0.9, 0.1]
    assert [str(stop.color) for stop in fill.stops] == ["ff0000ff", "ffff0000"]

    add_stop(fill, 0.5, "ff00ff00")
    assert fill.stops.positions == [0.9, 0.1, 0.5]


def test_stop_values(styles):
    _, fill = new_fill(styles, FillType.GRADIENT)
    index = fill.stops.create()
    stop = fill.stops[index]
    assert stop.position is None
    assert stop.color is None

    stop.position = 1
    assert stop.position == 1.0
    with pytest.raises(ValueError) as e:
        stop.position = 1.5
    assert "gradient stop position must be between 0.0 and 1.0" in str(e)
    with pytest.raises(TypeError):
        stop.position = "middle"

    stop.color = "ffff0000"
    copy_index = fill.stops.create(index)
    assert copy_index == 1
    assert fill.stops[copy_index].position == 1.0
    assert fill.stops[copy_index].color == Color(255, 255, 0, 0)
    fill.stops[copy_index].position = 0.0
    assert stop.position == 1.0


def test_mode_switch_discards_stops(styles):
    _, fill = new_fill(styles, FillType.GRADIENT)
    add_stop(fill, 0.0, "ff000000")
    add_stop(fill, 1.0, "ffffffff")
    fill.background_color = "ff808080"
    assert len(fill.stops) == 2

    fill.set_fill_type(FillType.SOLID)
    assert fill.background_color is None
    assert fill.gradient_type is None
    with pytest.raises(IncompatibleFillType):
        _ = fill.stops

    fill.set_fill_type(FillType.GRADIENT)
    assert len(fill.stops) == 0
    assert fill.background_color is None


def test_mode_switch_discards_color(styles):
    _, fill = new_fill(styles, FillType.SOLID)
    fill.color = "ffff0000"
    fill.fill_type = FillType.NONE
    assert fill.color is None
    fill.fill_type = FillType.SOLID
    assert fill.color is None


def test_same_mode_is_noop(styles):
    _, fill = new_fill(styles, FillType.GRADIENT)
    add_stop(fill, 0.5, "ff000000")
    fill.set_fill_type(FillType.GRADIENT)
    assert len(fill.stops) == 1

    fill.set_fill_type(FillType.SOLID)
    fill.color = "ff00ff00"
    fill.set_fill_type("solid")
    assert fill.color == Color(255, 0, 255, 0)


def test_invalid_fill_type(styles):
    _, fill = new_fill(styles)
    with pytest.raises(TypeError) as e:
        fill.set_fill_type("pattern")
    assert "invalid FillType 'pattern'" in str(e)
    with pytest.raises(TypeError):
        fill.set_fill_type(7)
    assert fill.fill_type == FillType.NONE


def test_fill_copy_owns_stops(styles):
    index, fill = new_fill(styles, FillType.GRADIENT)
    add_stop(fill, 0.2, "ff000000")

    copy_index = styles.fills.create(index)
    copy = styles.fills[copy_index]
    assert copy == fill
    assert copy.stops is not fill.stops

    add_stop(copy, 0.8, "ffffffff")
    copy.stops[0].position = 0.3
    assert fill.stops.positions == [0.2]
    assert copy.stops.positions == [0.3, 0.8]

    assert Fill(FillType.SOLID) != fill
