import logging
from copy import deepcopy
from typing import Generic, Iterator, List, Optional, Type, TypeVar

from xlstyles import __name__ as xlstyles_name
from xlstyles.exceptions import InvalidIndex

logger = logging.getLogger(xlstyles_name)
debug = logger.debug

__all__ = ["StyleIndex", "StyleTable"]

StyleIndex = int
"""Stable handle of a record in one :py:class:`StyleTable`."""

RecordType = TypeVar("RecordType")


class StyleTable(Generic[RecordType]):
    """
    An append-only table of style records addressed by stable indices.

    Records are never removed and indices are never reused, so an index
    handed out by :py:meth:`create` stays valid for as long as the table
    exists. Two higher level records may refer to the same index; changes
    made through ``table[index]`` are seen by all of them.

    .. code-block:: python

        bold = fonts.create()
        fonts[bold].bold = True
        bold_red = fonts.create(bold)
        fonts[bold_red].color = "ffff0000"

    Parameters
    ----------
    record_class: type
        The record type; called with no arguments to make a default record.
    name: str, optional
        Table name used in log and error messages.
    """

    def __init__(self, record_class: Type[RecordType], name: Optional[str] = None) -> None:
        self._record_class = record_class
        self._name = name or "style"
        self._records: List[RecordType] = []

    @property
    def name(self) -> str:
        """str: The table name."""
        return self._name

    def create(self, template: Optional[StyleIndex] = None) -> StyleIndex:
        """
        Create a new record and return its index.

        Parameters
        ----------
        template: int, optional
            Index of an existing record. The new record starts as a copy of
            the template's current values; later changes to either record
            are not seen by the other.

        Returns
        -------
        int:
            The index of the new record.

        Raises
        ------
        InvalidIndex:
            If ``template`` is not a valid index.
        """
        if template is None:
            record = self._record_class()
        else:
            record = self._copy_record(self.get(template))
        self._attach(record)
        self._records.append(record)
        index = len(self._records) - 1
        debug("%s.create: index=%d, template=%s", self._name, index, template)
        return index

    def get(self, index: StyleIndex) -> RecordType:
        """Return the live record at ``index``."""
        self._check_index(index)
        return self._records[index]

    def set(self, index: StyleIndex, record: RecordType) -> None:
        """Replace the record at ``index`` with a copy of ``record``."""
        self._check_index(index)
        self._validate(record)
        record = self._copy_record(record)
        self._attach(record)
        self._records[index] = record

    def _check_index(self, index: StyleIndex) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            msg = f"invalid {self._name} index type {type(index).__name__}"
            raise InvalidIndex(msg)
        if index < 0 or index >= len(self._records):
            msg = f"{self._name} index {index} out of range"
            raise InvalidIndex(msg)

    def _copy_record(self, record: RecordType) -> RecordType:
        return deepcopy(record)

    def _validate(self, record: RecordType) -> None:
        if not isinstance(record, self._record_class):
            msg = f"{self._name} record must be a {self._record_class.__name__}"
            raise TypeError(msg)

    def _attach(self, record: RecordType) -> None:
        pass

    def __getitem__(self, index: StyleIndex) -> RecordType:
        return self.get(index)

    def __setitem__(self, index: StyleIndex, record: RecordType) -> None:
        self.set(index, record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordType]:
        return iter(self._records)

    def __contains__(self, index: object) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._records)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name} size={len(self._records)}>"
