class XLStylesError(Exception):
    """Base class for other exceptions."""


class InvalidIndex(XLStylesError, IndexError):
    """Raised when a style index does not name a slot in its table."""


class InvalidAddress(XLStylesError, IndexError):
    """Raised for malformed cell, row, column or range references."""


class IncompatibleFillType(XLStylesError, TypeError):
    """Raised when changing a fill attribute that belongs to another fill type."""


class FileError(XLStylesError):
    """Raised for IO and other OS errors."""


class FileFormatError(XLStylesError):
    """Raised for parsing errors during file load."""


class UnsupportedWarning(Warning):
    """Raised for unsupported file format features."""
