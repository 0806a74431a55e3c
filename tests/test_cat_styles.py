import pytest

from xlstyles import Document, FillType, __version__


@pytest.fixture(name="document")
def document_fixture(tmp_path):
    doc = Document()
    styles = doc.styles
    bold = styles.fonts.create()
    styles.fonts[bold].bold = True
    fill = styles.fills.create()
    styles.fills[fill].set_fill_type(FillType.SOLID)
    styles.fills[fill].color = "ffffff00"
    heading = styles.cell_formats.create()
    styles.cell_formats[heading].font_index = bold
    styles.cell_formats[heading].fill_index = fill
    styles.cell_styles.create(name="Heading")

    ws = doc.sheets[0]
    ws.set_row_format(1, heading)
    ws.cell("A1").value = "Name"
    ws.cell("B2").value = 42
    other = doc.add_sheet("Other")
    other.cell("C3").value = "other"

    filename = tmp_path / "test.xlstyles"
    doc.save_as(filename)
    return str(filename)


@pytest.mark.script_launch_mode("subprocess")
def test_no_documents(script_runner):
    ret = script_runner.run(["cat-xlstyles"], print_result=False)
    assert ret.success
    assert "usage: cat-xlstyles" in ret.stdout
    assert ret.stderr == ""


@pytest.mark.script_launch_mode("subprocess")
def test_version(script_runner):
    ret = script_runner.run(["cat-xlstyles", "--version"], print_result=False)
    assert ret.success
    assert ret.stdout == __version__ + "\n"
    assert ret.stderr == ""


@pytest.mark.script_launch_mode("subprocess")
def test_list_sheets(script_runner, document):
    ret = script_runner.run(["cat-xlstyles", "-S", document], print_result=False)
    assert ret.success
    assert ret.stdout == f"{document}: Sheet1\n{document}: Other\n"


@pytest.mark.script_launch_mode("subprocess")
def test_cells(script_runner, document):
    ret = script_runner.run(["cat-xlstyles", document], print_result=False)
    assert ret.success
    rows = ret.stdout.splitlines()
    assert rows == [
        f"{document}: Sheet1: A1: format=1: Name",
        f"{document}: Sheet1: B2: format=0: 42",
        f"{document}: Other: C3: format=0: other",
    ]

    ret = script_runner.run(["cat-xlstyles", "-s", "Other", document], print_result=False)
    assert ret.success
    assert ret.stdout == f"{document}: Other: C3: format=0: other\n"


@pytest.mark.script_launch_mode("subprocess")
def test_style_tables(script_runner, document):
    ret = script_runner.run(["cat-xlstyles", "--fonts", "--styles", document], print_result=False)
    assert ret.success
    rows = ret.stdout.splitlines()
    assert len(rows) == 4
    assert rows[0].startswith(f"{document}: fonts[0]: Font(name='Calibri'")
    assert "bold=True" in rows[1]
    assert rows[2].startswith(f"{document}: cell_styles[0]: CellStyle(name='Normal'")
    assert rows[3].startswith(f"{document}: cell_styles[1]: CellStyle(name='Heading'")

    ret = script_runner.run(["cat-xlstyles", "--fills", document], print_result=False)
    assert ret.success
    assert ret.stdout == (
        f"{document}: fills[0]: Fill(fill_type=none)\n"
        + f"{document}: fills[1]: Fill(fill_type=solid, color=ffffff00)\n"
    )


@pytest.mark.script_launch_mode("subprocess")
def test_resolve_cells(script_runner, document):
    ret = script_runner.run(
        ["cat-xlstyles", "-s", "Sheet1", "-c", "C1", "-c", "C2", document], print_result=False
    )
    assert ret.success
    assert ret.stdout == (
        f"{document}: Sheet1: C1: format=1 font=1 fill=1 border=0\n"
        + f"{document}: Sheet1: C2: format=0 font=0 fill=0 border=0\n"
    )


@pytest.mark.script_launch_mode("subprocess")
def test_errors(script_runner, document, tmp_path):
    ret = script_runner.run(["cat-xlstyles", "-c", "A0", document], print_result=False)
    assert not ret.success
    assert f"{document}: row reference 0 below one" in ret.stderr

    missing = str(tmp_path / "missing.xlstyles")
    ret = script_runner.run(["cat-xlstyles", missing], print_result=False)
    assert not ret.success
    assert f"{missing}: no such file or directory" in ret.stderr

    invalid = tmp_path / "invalid.xlstyles"
    invalid.write_text("not a document")
    ret = script_runner.run(["cat-xlstyles", str(invalid)], print_result=False)
    assert not ret.success
    assert "invalid document" in ret.stderr


@pytest.mark.script_launch_mode("subprocess")
def test_debug_logging(script_runner, document):
    ret = script_runner.run(["cat-xlstyles", "--debug", "-S", document], print_result=False)
    assert ret.success
    assert "DEBUG:xlstyles:read_document_file: path=" in ret.stderr
