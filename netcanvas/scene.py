"""A minimal scene that keeps track of the items placed on the canvas."""

from __future__ import annotations

from typing import Any, Iterator

USER_TYPE = 65536


class Scene:
    """An ordered collection of canvas items, compared by identity."""

    def __init__(self) -> None:
        self._items: dict[int, Any] = {}

    def add_item(self, item: Any) -> None:
        """Add an item; adding an item that is already present does nothing."""
        self._items.setdefault(id(item), item)

    def remove_item(self, item: Any) -> bool:
        """Remove an item and tell whether it was in the scene."""
        return self._items.pop(id(item), None) is not None

    def __contains__(self, item: Any) -> bool:
        return id(item) in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))