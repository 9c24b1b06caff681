# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrderedSet - sorted set of unique elements on top of BST."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from ..tree import BST, BSTIterator


class OrderedSet:
    """A set that keeps its elements sorted.

    Every insertion forwards to BST.insert() with keep_unique=True, so equal
    elements are stored once.

    Example:
        >>> s = OrderedSet([3, 1, 3, 2])
        >>> list(s)
        [1, 2, 3]
    """

    __slots__ = ('_bst',)

    def __init__(self, source: OrderedSet | Iterable[Any] | None = None) -> None:
        self._bst = BST()
        if source is not None:
            self.assign(source)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._bst)!r})"

    def __len__(self) -> int:
        return self._bst.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._bst)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._bst)

    def __contains__(self, value: Any) -> bool:
        return value in self._bst

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedSet):
            return NotImplemented
        return list(self._bst) == list(other._bst)

    def __copy__(self) -> OrderedSet:
        return self.copy()

    def size(self) -> int:
        return self._bst.size()

    def empty(self) -> bool:
        return self._bst.empty()

    def begin(self) -> BSTIterator:
        return self._bst.begin()

    def end(self) -> BSTIterator:
        return self._bst.end()

    def find(self, value: Any) -> BSTIterator:
        return self._bst.find(value)

    def insert(self, value: Any) -> tuple[BSTIterator, bool]:
        """Insert value unless an equal element is present."""
        return self._bst.insert(value, keep_unique=True)

    def insert_many(self, values: Iterable[Any]) -> None:
        for value in values:
            self._bst.insert(value, keep_unique=True)

    def erase(self, it: BSTIterator) -> BSTIterator:
        return self._bst.erase(it)

    def erase_value(self, value: Any) -> int:
        """Remove value if present. Returns the number of removed elements."""
        it = self._bst.find(value)
        if it.is_end:
            return 0
        self._bst.erase(it)
        return 1

    def erase_range(self, first: BSTIterator, last: BSTIterator) -> BSTIterator:
        """Remove elements from first up to, not including, last."""
        it = first.copy()
        while it != last:
            it = self._bst.erase(it)
        return it

    def clear(self) -> None:
        self._bst.clear()

    def assign(self, source: OrderedSet | Iterable[Any]) -> OrderedSet:
        """Replace the contents with those of source."""
        if isinstance(source, OrderedSet):
            self._bst.assign(source._bst)
        else:
            values = list(source)
            self._bst.clear()
            self.insert_many(values)
        return self

    def copy(self) -> OrderedSet:
        return OrderedSet(self)

    def move_from(self, other: OrderedSet) -> OrderedSet:
        """Take over the elements of other, leaving it empty."""
        self._bst.move_from(other._bst)
        return self

    def swap(self, other: OrderedSet) -> None:
        self._bst.swap(other._bst)
