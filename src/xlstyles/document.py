import logging
from pathlib import Path
from typing import Optional, Union

from xlstyles import __name__ as xlstyles_name
from xlstyles.constants import OverwritePolicy
from xlstyles.containers import ItemsList
from xlstyles.exceptions import FileError
from xlstyles.model import _DocumentModel
from xlstyles.styles import Styles
from xlstyles.worksheet import Worksheet

logger = logging.getLogger(xlstyles_name)
debug = logger.debug

__all__ = ["Document"]


class Document:
    """
    Create an instance of a new document or open an existing one.

    If ``filename`` is ``None``, an empty document is created with a single
    worksheet called ``Sheet1`` and the default style tables.

    .. code-block:: python

        doc = Document()
        styles = doc.styles
        bold = styles.fonts.create()
        styles.fonts[bold].bold = True
        bold_format = styles.cell_formats.create()
        styles.cell_formats[bold_format].font_index = bold

        ws = doc.sheets["Sheet1"]
        ws.set_row_format(1, bold_format)
        doc.save_as("report.xlstyles")

    Parameters
    ----------
    filename: str | Path, optional
        Document to read.

    Raises
    ------
    FileError:
        If the file cannot be read.
    FileFormatError:
        If the file is not a valid document.
    """

    def __init__(self, filename: Optional[Union[str, Path]] = None):
        self._filename = None if filename is None else Path(filename)
        self._model = _DocumentModel(self._filename)
        self._sheets = ItemsList([], "sheet")
        for sheet in self._model.worksheets(self._sheets):
            self._sheets.append(sheet)
        self._closed = False
        debug("Document: filename=%s, sheets=%d", self._filename, len(self._sheets))

    @classmethod
    def create(
        cls,
        filename: Union[str, Path],
        overwrite_policy: OverwritePolicy = OverwritePolicy.DO_NOT_OVERWRITE,
    ) -> "Document":
        """
        Create a new empty document and save it immediately.

        Parameters
        ----------
        filename: str | Path
            The path of the new document. The document remains bound to
            this path so later calls to :py:meth:`save` write to it.
        overwrite_policy: OverwritePolicy, optional, default: ``DO_NOT_OVERWRITE``
            What to do if the file already exists.

        Raises
        ------
        FileError:
            If the file exists and the policy is ``DO_NOT_OVERWRITE``, or
            if the file cannot be written.
        """
        doc = cls()
        doc.save_as(filename, overwrite_policy)
        return doc

    def _check_open(self) -> None:
        if self._closed:
            msg = "document is closed"
            raise FileError(msg)

    @property
    def filename(self) -> Optional[Path]:
        """Path: The path the document is saved to, or ``None``."""
        return self._filename

    @property
    def closed(self) -> bool:
        """bool: ``True`` if :py:meth:`close` has been called."""
        return self._closed

    @property
    def sheets(self) -> ItemsList[Worksheet]:
        """ItemsList[:class:`Worksheet`]: The worksheets of the document.

        Worksheets can be looked up by position or by name.
        """
        self._check_open()
        return self._sheets

    @property
    def styles(self) -> Styles:
        """:class:`Styles`: The style tables of the document."""
        self._check_open()
        return self._model.styles

    def add_sheet(self, sheet_name: Optional[str] = None) -> Worksheet:
        """
        Add a new worksheet to the document.

        If no sheet name is provided, the next available numbered sheet
        will be generated in the series ``Sheet1``, ``Sheet2``, etc.

        Raises
        ------
        IndexError:
            If the sheet name already exists in the document.
        """
        self._check_open()
        if sheet_name is not None:
            if sheet_name in self._sheets:
                msg = f"sheet '{sheet_name}' already exists"
                raise IndexError(msg)
        else:
            sheet_num = 1
            while f"sheet{sheet_num}" in self._sheets:
                sheet_num += 1
            sheet_name = f"Sheet{sheet_num}"

        sheet = Worksheet(self._model.styles, sheet_name, self._sheets)
        self._sheets.append(sheet)
        debug("add_sheet: name=%s", sheet_name)
        return sheet

    def save(self) -> None:
        """
        Save the document to the path it was opened from or last saved to.

        Raises
        ------
        FileError:
            If the document has never been saved, is closed, or cannot be
            written.
        """
        self._check_open()
        if self._filename is None:
            msg = "document has no filename; use save_as()"
            raise FileError(msg)
        self._model.save(self._filename, list(self._sheets))

    def save_as(
        self,
        filename: Union[str, Path],
        overwrite_policy: OverwritePolicy = OverwritePolicy.FORCE_OVERWRITE,
    ) -> None:
        """
        Save the document to a new path and use that path for later saves.

        Parameters
        ----------
        filename: str | Path
            The path to save the document to.
        overwrite_policy: OverwritePolicy, optional, default: ``FORCE_OVERWRITE``
            What to do if the file already exists.

        Raises
        ------
        FileError:
            If the file exists and the policy is ``DO_NOT_OVERWRITE``, or
            if the file cannot be written.
        """
        self._check_open()
        filename = Path(filename)
        overwrite_policy = OverwritePolicy(overwrite_policy)
        if overwrite_policy == OverwritePolicy.DO_NOT_OVERWRITE and filename.exists():
            msg = f"file '{filename}' already exists"
            raise FileError(msg)
        self._model.save(filename, list(self._sheets))
        self._filename = filename

    def close(self) -> None:
        """
        Close the document and discard its style tables and worksheets.

        Any later use of the document raises :py:class:`~xlstyles.exceptions.FileError`.
        Closing a closed document does nothing.
        """
        if self._closed:
            return
        debug("close: filename=%s", self._filename)
        self._model = None
        self._sheets = None
        self._closed = True

    def __enter__(self) -> "Document":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._closed:
            return "<Document closed>"
        return f"<Document filename={self._filename} sheets={len(self._sheets)}>"
