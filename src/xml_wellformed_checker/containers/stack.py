"""LIFO container used to track open elements.

A thin wrapper over a Python list: the end of the list is the top of the
stack. ``pop`` and ``peek`` on an empty stack raise ``EmptyStackError``;
callers in this package always check ``is_empty`` first.
"""

from typing import Any, Generic, Iterator, List, Optional, TypeVar

from xml_wellformed_checker.shared.errors import EmptyStackError

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out container of opaque elements."""

    def __init__(self, items: Optional[List[T]] = None) -> None:
        self._items: List[T] = []
        for item in items or []:
            self.push(item)

    def push(self, item: T) -> None:
        if item is None:
            raise ValueError("Cannot push None onto the stack")
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise EmptyStackError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise EmptyStackError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def contains(self, item: T) -> bool:
        return item in self._items

    def search(self, item: T) -> int:
        """Return the 1-based distance of ``item`` from the top, or -1.

        The topmost element is at distance 1; when ``item`` occurs more than
        once the occurrence nearest the top wins.
        """
        for distance, candidate in enumerate(reversed(self._items), start=1):
            if candidate == item:
                return distance
        return -1

    def to_list(self) -> List[T]:
        """Return the elements bottom to top."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate top to bottom without removing anything."""
        return reversed(self._items)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
