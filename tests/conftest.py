import pytest

from xlstyles import Document


def pytest_addoption(parser):
    parser.addoption("--save-file", action="store", default=None)


@pytest.fixture(name="configurable_save_file")
def configurable_save_file_fixture(request, tmp_path, pytestconfig):
    if pytestconfig.getoption("save_file") is not None:
        new_filename = pytestconfig.getoption("save_file")
    else:
        new_filename = tmp_path / "test-save-new.xlstyles"

    yield new_filename


@pytest.fixture(name="doc")
def doc_fixture():
    doc = Document()
    yield doc
    doc.close()


@pytest.fixture(name="styles")
def styles_fixture(doc):
    return doc.styles


@pytest.fixture(name="ws")
def worksheet_fixture(doc):
    return doc.sheets[0]
