"""A singly linked list that stores elements by identity."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations, islice
from typing import Any


class SortOrder(IntEnum):
    """Direction used by :meth:`LinkedList.sort`."""

    DESCENDING = 0
    ASCENDING = 1


@dataclass(slots=True)
class _Node:
    element: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list.

    Membership and lookup compare elements by identity, not equality.
    Indices are never negative: an index outside the list raises IndexError.
    """

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._size = 0
        if items is not None:
            tail: _Node | None = None
            for item in items:
                node = _Node(item)
                if tail is None:
                    self._head = node
                else:
                    tail.next = node
                tail = node
                self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    @staticmethod
    def _check_index(index: Any, upper: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"list index must be an integer, not {type(index).__name__}")
        if not 0 <= index < upper:
            raise IndexError(f"list index {index} out of range")

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _unlink(self, index: int) -> _Node:
        self._check_index(index, self._size)
        if index == 0:
            assert self._head is not None
            node = self._head
            self._head = node.next
        else:
            previous = self._node_at(index - 1)
            node = previous.next
            assert node is not None
            previous.next = node.next
        self._size -= 1
        return node

    def __getitem__(self, index: int) -> Any:
        self._check_index(index, self._size)
        return self._node_at(index).element

    def __setitem__(self, index: int, element: Any) -> None:
        self._check_index(index, self._size)
        self._node_at(index).element = element

    def __delitem__(self, index: int) -> None:
        self._unlink(index)

    def __contains__(self, element: Any) -> bool:
        return any(item is element for item in self)

    def append(self, element: Any) -> None:
        """Add an element at the end."""
        self.insert(self._size, element)

    def insert(self, index: int, element: Any) -> None:
        """Insert an element before position ``index`` (``0..len`` allowed)."""
        self._check_index(index, self._size + 1)
        if index == 0:
            self._head = _Node(element, self._head)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(element, previous.next)
        self._size += 1

    def pop(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        return self._unlink(index).element

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._size = 0

    def index(self, element: Any) -> int:
        """Return the position of ``element``; raise ValueError if absent."""
        for position, item in enumerate(self):
            if item is element:
                return position
        raise ValueError("element is not in the list")

    def is_empty(self) -> bool:
        """Tell whether the list holds no elements."""
        return self._size == 0

    def contains_all(self, other: Iterable[Any]) -> bool:
        """Tell whether every element of ``other`` is in this list."""
        return all(item in self for item in other)

    def sublist(self, start: int, stop: int) -> LinkedList:
        """Return a new list with the elements from ``start`` up to ``stop``.

        ``start`` must be a valid index and ``stop`` must lie after it and
        no further than the length of the list.
        """
        for bound in (start, stop):
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise TypeError("sublist bounds must be integers")
        if not (0 <= start < self._size and start < stop <= self._size):
            raise IndexError(f"sublist bounds {start}:{stop} out of range")
        return LinkedList(islice(self, start, stop))

    def clone(self) -> LinkedList:
        """Return a shallow copy of the list."""
        return LinkedList(self)

    def sort(
        self,
        compare: Callable[[Any, Any], int],
        order: SortOrder | int = SortOrder.ASCENDING,
    ) -> None:
        """Sort in place with a three-way ``compare`` function."""
        if not callable(compare):
            raise TypeError("compare must be callable")
        order = SortOrder(order)
        items = list(self)
        for i, j in combinations(range(len(items)), 2):
            result = compare(items[i], items[j])
            if (result > 0 and order is SortOrder.ASCENDING) or (
                result < 0 and order is SortOrder.DESCENDING
            ):
                items[i], items[j] = items[j], items[i]
        node = self._head
        for item in items:
            assert node is not None
            node.element = item
            node = node.next

    def filter(self, predicate: Callable[[Any], Any]) -> LinkedList:
        """Return a new list with the elements for which ``predicate`` is true."""
        if not callable(predicate):
            raise TypeError("predicate must be callable")
        return LinkedList(item for item in self if predicate(item))