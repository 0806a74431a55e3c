import pytest
from pytest_check import check

from xlstyles import (
    Alignment,
    CellFormat,
    CellStyle,
    HorizontalAlignment,
    InvalidIndex,
    VerticalAlignment,
)


def test_cell_format_defaults(styles):
    cell_format = styles.cell_formats[0]
    check.equal(cell_format.font_index, 0)
    check.equal(cell_format.fill_index, 0)
    check.equal(cell_format.border_index, 0)
    check.is_false(cell_format.apply_font)
    check.is_false(cell_format.apply_fill)
    check.is_false(cell_format.apply_border)
    check.is_false(cell_format.apply_alignment)
    check.equal(cell_format.alignment, Alignment(HorizontalAlignment.GENERAL, "bottom"))


def test_index_validation(styles):
    index = styles.cell_formats.create()
    cell_format = styles.cell_formats[index]

    font = styles.fonts.create()
    cell_format.font_index = font
    assert cell_format.font_index == font

    with pytest.raises(InvalidIndex) as e:
        cell_format.font_index = 99
    assert "font index 99 out of range" in str(e)
    assert cell_format.font_index == font

    with pytest.raises(InvalidIndex):
        cell_format.fill_index = 1
    with pytest.raises(InvalidIndex):
        cell_format.border_index = -1
    with pytest.raises(InvalidIndex):
        cell_format.fill_index = "0"
    assert cell_format.fill_index == 0
    assert cell_format.border_index == 0

    with pytest.raises(TypeError) as e:
        cell_format.apply_font = "yes"
    assert "apply_font argument must be boolean" in str(e)


def test_alignment(styles):
    cell_format = styles.cell_formats[styles.cell_formats.create()]
    cell_format.alignment = ("center", "top")
    cell_format.apply_alignment = True
    assert cell_format.alignment.horizontal == HorizontalAlignment.CENTER
    assert cell_format.alignment.vertical == VerticalAlignment.TOP
    cell_format.alignment = None
    assert cell_format.alignment == Alignment()
    with pytest.raises(TypeError):
        cell_format.alignment = ("middle", "top")
    with pytest.raises(TypeError) as e:
        cell_format.alignment = "center"
    assert "Alignment must be an Alignment or a tuple" in str(e)


def test_shallow_copy_shares_sub_records(styles):
    font = styles.fonts.create()
    fill = styles.fills.create()
    original = styles.cell_formats.create()
    styles.cell_formats[original].font_index = font
    styles.cell_formats[original].fill_index = fill
    styles.cell_formats[original].apply_font = True

    copy = styles.cell_formats.create(original)
    assert copy != original
    assert styles.cell_formats[copy] == styles.cell_formats[original]
    assert styles.cell_formats[copy].font_index == font
    assert styles.cell_formats[copy].fill_index == fill
    assert styles.cell_formats[copy].apply_font

    # Changing the copy's indices never changes the original
    new_font = styles.fonts.create(font)
    styles.cell_formats[copy].font_index = new_font
    assert styles.cell_formats[original].font_index == font


def test_aliased_font_edit_visible_through_copies(styles):
    font = styles.fonts.create()
    styles.fonts[font].bold = True
    c1 = styles.cell_formats.create()
    styles.cell_formats[c1].font_index = font
    c2 = styles.cell_formats.create(c1)

    styles.fonts[font].italic = True

    for index in [c1, c2]:
        resolved = styles.fonts[styles.cell_formats[index].font_index]
        check.is_true(resolved.bold)
        check.is_true(resolved.italic)


def test_set_cell_format_record(styles):
    index = styles.cell_formats.create()
    styles.cell_formats[index] = CellFormat(font_index=0, apply_fill=True)
    assert styles.cell_formats[index].apply_fill
    with pytest.raises(InvalidIndex):
        styles.cell_formats[index] = CellFormat(border_index=5)
    assert styles.cell_formats[index].border_index == 0


def test_cell_style_names(styles):
    assert styles.cell_styles["Normal"] is styles.cell_styles[0]
    assert "Normal" in styles.cell_styles
    assert "Heading" not in styles.cell_styles
    assert styles.cell_styles.index("Normal") == 0

    first = styles.cell_styles.create()
    second = styles.cell_styles.create()
    assert styles.cell_styles[first].name == "Custom Style 1"
    assert styles.cell_styles[second].name == "Custom Style 2"

    heading = styles.cell_styles.create(name="Heading")
    assert styles.cell_styles["Heading"].name == "Heading"
    assert styles.cell_styles.index("Heading") == heading

    with pytest.raises(IndexError) as e:
        styles.cell_styles.create(name="Heading")
    assert "style 'Heading' already exists" in str(e)
    with pytest.raises(KeyError) as e:
        _ = styles.cell_styles["Title"]
    assert "no cell style named 'Title'" in str(e)
    assert len(styles.cell_styles) == 4


def test_cell_style_copy(styles):
    cell_format = styles.cell_formats.create()
    heading = styles.cell_styles.create(name="Heading")
    styles.cell_styles[heading].cell_format_index = cell_format

    copy = styles.cell_styles.create(heading)
    check.equal(styles.cell_styles[copy].name, "Heading")
    check.equal(styles.cell_styles[copy].cell_format_index, cell_format)
    check.equal(styles.cell_styles.index("Heading"), heading)

    renamed = styles.cell_styles.create(heading, name="Subheading")
    check.equal(styles.cell_styles[renamed].name, "Subheading")
    check.equal(styles.cell_styles[renamed].cell_format_index, cell_format)

    styles.cell_styles[copy].cell_format_index = 0
    check.equal(styles.cell_styles[heading].cell_format_index, cell_format)


def test_cell_style_validation(styles):
    style = styles.cell_styles[styles.cell_styles.create()]
    with pytest.raises(InvalidIndex):
        style.cell_format_index = 1
    with pytest.raises(TypeError) as e:
        style.name = 10
    assert "style name must be a string" in str(e)
    with pytest.raises(TypeError):
        style.builtin_id = "1"
    with pytest.raises(InvalidIndex):
        styles.cell_styles.create(3)
    with pytest.raises(InvalidIndex):
        _ = CellStyle(cell_format_index=-1)
