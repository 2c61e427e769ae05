"""A bounded array-backed max-heap."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

MAX_HEAP_SIZE = 50


class MaxHeap(Generic[T]):
    """Max-heap of items ordered by their ``>`` and ``<`` operators.

    The heap holds at most ``capacity`` items; pushing onto a full heap
    leaves it unchanged.
    """

    def __init__(self, capacity: int = MAX_HEAP_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate in the heap's storage order, root first."""
        return iter(list(self._items))

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError("heap index out of range")
        return self._items[index]

    def push(self, item: T) -> bool:
        """Insert ``item``; return False if the heap was full."""
        if len(self._items) >= self.capacity:
            return False
        items = self._items
        items.append(item)
        place = len(items) - 1
        while place > 0:
            parent = (place - 1) // 2
            if not items[place] > items[parent]:
                break
            items[place], items[parent] = items[parent], items[place]
            place = parent
        return True

    def pop(self) -> T:
        """Remove and return the root item."""
        if not self._items:
            raise IndexError("pop from empty heap")
        items = self._items
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> T:
        """Return the root item without removing it."""
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def remove(self, item: T) -> None:
        """Remove the first stored item equal to ``item``.

        The last item takes its place and is only sifted downwards.
        """
        items = self._items
        for index, current in enumerate(items):
            if current == item:
                break
        else:
            raise ValueError("item not in heap")
        last = items.pop()
        if index < len(items):
            items[index] = last
            self._sift_down(index)

    def find_by_id(self, item_id: Any) -> T:
        """Return the first stored item whose ``id`` equals ``item_id``."""
        for current in self._items:
            if getattr(current, "id", None) == item_id:
                return current
        raise KeyError(item_id)

    def _sift_down(self, root: int) -> None:
        items = self._items
        size = len(items)
        while True:
            child = 2 * root + 1
            if child >= size:
                return
            right = child + 1
            if right < size and items[right] > items[child]:
                child = right
            if not items[root] < items[child]:
                return
            items[root], items[child] = items[child], items[root]
            root = child