import logging
import os
import plistlib
import warnings
from pathlib import Path
from sys import version_info
from tempfile import NamedTemporaryFile
from typing import Dict, Union
from xml.parsers.expat import ExpatError
from zipfile import BadZipFile, ZipFile

from xlstyles import __name__ as xlstyles_name
from xlstyles.archive import ArchiveFile
from xlstyles.constants import (
    FILE_FORMAT_VERSION,
    PROPERTIES_FILENAME,
    SHEETS_FILENAME,
    STYLES_FILENAME,
    SUPPORTED_FILE_FORMAT_VERSIONS,
)
from xlstyles.exceptions import FileError, FileFormatError, UnsupportedWarning

logger = logging.getLogger(xlstyles_name)
debug = logger.debug

REQUIRED_PARTS = [PROPERTIES_FILENAME, STYLES_FILENAME, SHEETS_FILENAME]


def open_zipfile(filepath: Path):
    """Open Zip file with the correct filename encoding supported by current python"""
    # Coverage is python version dependent, so one path with always fail coverage
    if version_info.minor >= 11:  # pragma: no cover
        return ZipFile(filepath, metadata_encoding="utf-8")
    else:  # pragma: no cover
        return ZipFile(filepath)


def properties_plist() -> bytes:
    """Return the contents of a new document's properties file."""
    return plistlib.dumps({"fileFormatVersion": FILE_FORMAT_VERSION})


def check_document_version(blob: bytes) -> str:
    """
    Test whether a document was written using a supported file format
    version and warn if not.
    """
    try:
        doc_properties = plistlib.loads(blob)
        doc_version = doc_properties["fileFormatVersion"]
    except (ExpatError, KeyError, TypeError, ValueError):
        raise FileFormatError("invalid document (bad properties)") from None
    if doc_version not in SUPPORTED_FILE_FORMAT_VERSIONS:
        warnings.warn(f"unsupported file format version {doc_version}", UnsupportedWarning, stacklevel=4)
    return doc_version


def read_document_file(filepath: Union[str, Path]) -> Dict[str, object]:
    """
    Read a document container and return its parts keyed by filename.

    ``.iwa`` parts are returned as :py:class:`~xlstyles.archive.ArchiveFile`
    objects and all other parts as bytes.

    Raises
    ------
    FileError:
        If the file does not exist or cannot be read.
    FileFormatError:
        If the file is not a valid document.
    """
    filepath = Path(filepath)
    debug("read_document_file: path=%s", filepath)
    if filepath.is_dir():
        raise FileFormatError("invalid document (is a directory)")

    try:
        zipf = open_zipfile(filepath)
    except BadZipFile:
        raise FileFormatError("invalid document") from None
    except FileNotFoundError:
        raise FileError("no such file or directory") from None
    except OSError as e:
        msg = f"cannot read document: {e.strerror}"
        raise FileError(msg) from None

    file_store = {}
    with zipf:
        names = zipf.namelist()
        for filename in REQUIRED_PARTS:
            if filename not in names:
                msg = f"invalid document (missing {filename})"
                raise FileFormatError(msg)
        try:
            for filename in names:
                blob = zipf.read(filename)
                if filename.endswith(".iwa"):
                    file_store[filename] = extract_iwa_archives(blob, filename)
                else:
                    file_store[filename] = blob
        except BadZipFile:
            raise FileFormatError("invalid document") from None

    check_document_version(file_store[PROPERTIES_FILENAME])
    return file_store


def extract_iwa_archives(blob: bytes, filename: str) -> ArchiveFile:
    try:
        debug("extract_iwa_archives: filename=%s", filename)
        return ArchiveFile.from_buffer(blob, filename)
    except Exception as e:
        msg = f"{filename}: invalid archive file"
        raise FileFormatError(msg) from e


def write_document_file(filepath: Union[str, Path], file_store: Dict[str, object]) -> None:
    """
    Write a document container.

    Parameters
    ----------
    filepath: str | Path
        The path of the zip file to write.
    file_store: Dict[str, ArchiveFile | bytes]
        The parts of the document keyed by filename.

    Raises
    ------
    FileError:
        If the file cannot be written.
    """
    filepath = Path(filepath)
    debug("write_document_file: path=%s", filepath)
    # Serialize everything before touching the file system
    blobs = {
        blob_path: blob.to_buffer() if isinstance(blob, ArchiveFile) else blob
        for blob_path, blob in file_store.items()
    }
    temp_path = None
    try:
        with NamedTemporaryFile(
            dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp", delete=False
        ) as tmp:
            temp_path = Path(tmp.name)
            with ZipFile(tmp, "w") as zipf:
                for blob_path, blob in blobs.items():
                    zipf.writestr(blob_path, blob)
        os.replace(temp_path, filepath)
    except OSError as e:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        msg = f"cannot write document: {e.strerror}"
        raise FileError(msg) from None
