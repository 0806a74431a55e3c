from typing import Generic, Iterator, List, TypeVar, Union

__all__ = ["ItemsList"]

ItemType = TypeVar("ItemType")


class ItemsList(Generic[ItemType]):
    """A list of named items that can be indexed by position or by name."""

    def __init__(self, items: List[ItemType], item_name: str):
        self._item_name = item_name
        self._items = list(items)

    def __getitem__(self, key: Union[int, str]) -> ItemType:
        if isinstance(key, int):
            if key < 0:
                key += len(self._items)
            if key < 0 or key >= len(self._items):
                msg = f"index {key} out of range"
                raise IndexError(msg)
            return self._items[key]
        elif isinstance(key, str):
            for item in self._items:
                if item.name == key:
                    return item
            msg = f"no {self._item_name} named '{key}'"
            raise KeyError(msg)
        else:
            t = type(key).__name__
            msg = f"invalid index type {t}"
            raise LookupError(msg)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemType]:
        return iter(self._items)

    def __contains__(self, key) -> bool:
        if not isinstance(key, str):
            return key in self._items
        return key.lower() in [x.name.lower() for x in self._items]

    def append(self, item: ItemType) -> None:
        self._items.append(item)
