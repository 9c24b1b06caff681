# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""OrderedMap - key ordered mapping on top of BST.

Every operation forwards to a ``BST`` of ``Pair`` objects inserted with
``keep_unique=True``. Cursors returned by the map are plain BSTIterator
instances whose value is a Pair.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator

from .. import config as bst_config
from ..exceptions import KeyNotFoundError
from ..tree import BST, BSTIterator
from .pair import Pair


def _as_pair(item: Pair | tuple[Any, Any]) -> Pair:
    if isinstance(item, Pair):
        return Pair(item.key, item.value)
    key, value = item
    return Pair(key, value)


class OrderedMap:
    """A mapping that keeps its keys sorted.

    OrderedMap provides:
    - map[key]: Value for key, inserting default_factory() on a miss
    - at(key): Value for key, KeyNotFoundError on a miss
    - insert(item): Add a Pair or (key, value) unless key exists
    - erase(it) / erase_key(key) / erase_range(first, last): Removal

    Example:
        >>> m = OrderedMap({'b': 2, 'a': 1})
        >>> list(m.items())
        [('a', 1), ('b', 2)]
        >>> counts = OrderedMap(default_factory=int)
        >>> counts['x'] += 1
    """

    __slots__ = ('_bst', '_default_factory')

    def __init__(
        self,
        source: OrderedMap | Mapping[Any, Any] | Iterable[Any] | None = None,
        default_factory: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize an OrderedMap.

        Args:
            source: Optional initial data. Can be:
                - OrderedMap: Copied
                - Mapping: Its items are inserted
                - iterable of Pair or (key, value) tuples
            default_factory: Called without arguments to build the value
                inserted by map[key] on a miss. None inserts None.
        """
        self._bst = BST()
        self._default_factory = default_factory
        if source is not None:
            self.assign(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"OrderedMap({{{body}}})"

    def __len__(self) -> int:
        return self._bst.size()

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __contains__(self, key: Any) -> bool:
        return not self.find(key).is_end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __getitem__(self, key: Any) -> Any:
        it = self.find(key)
        if it.is_end:
            default = None if self._default_factory is None else self._default_factory()
            it, _ = self._bst.insert(Pair(key, default), keep_unique=True)
        return it.value.value

    def __setitem__(self, key: Any, value: Any) -> None:
        it = self.find(key)
        if it.is_end:
            self._bst.insert(Pair(key, value), keep_unique=True)
        else:
            it.node.data = Pair(key, value)
            if bst_config.runtime_config().check_invariants:
                self._bst.validate()

    def __delitem__(self, key: Any) -> None:
        if not self.erase_key(key):
            raise KeyNotFoundError(key)

    def __copy__(self) -> OrderedMap:
        return self.copy()

    # ==================== Status ====================

    def size(self) -> int:
        return self._bst.size()

    def empty(self) -> bool:
        return self._bst.empty()

    @property
    def default_factory(self) -> Callable[[], Any] | None:
        return self._default_factory

    # ==================== Access ====================

    def begin(self) -> BSTIterator:
        return self._bst.begin()

    def end(self) -> BSTIterator:
        return self._bst.end()

    def find(self, key: Any) -> BSTIterator:
        """Return a cursor on the pair for key, or end()."""
        return self._bst.find(Pair(key))

    def at(self, key: Any) -> Any:
        """Return the value for key.

        Raises:
            KeyNotFoundError: If key is absent.
        """
        it = self.find(key)
        if it.is_end:
            raise KeyNotFoundError(key)
        return it.value.value

    def get(self, key: Any, default: Any = None) -> Any:
        it = self.find(key)
        if it.is_end:
            return default
        return it.value.value

    # ==================== Insert ====================

    def insert(self, item: Pair | tuple[Any, Any]) -> tuple[BSTIterator, bool]:
        """Insert a pair unless its key is already present.

        Returns:
            Tuple of (cursor, inserted); the cursor designates the existing
            pair when inserted is False.
        """
        return self._bst.insert(_as_pair(item), keep_unique=True)

    def insert_many(self, source: Mapping[Any, Any] | Iterable[Any]) -> None:
        items = source.items() if isinstance(source, Mapping) else source
        for item in items:
            self.insert(item)

    # ==================== Remove ====================

    def erase(self, it: BSTIterator) -> BSTIterator:
        """Remove the pair under it and return the cursor BST.erase() gives."""
        return self._bst.erase(it)

    def erase_key(self, key: Any) -> int:
        """Remove key if present. Returns the number of removed pairs."""
        it = self.find(key)
        if it.is_end:
            return 0
        self._bst.erase(it)
        return 1

    def erase_range(self, first: BSTIterator, last: BSTIterator) -> BSTIterator:
        """Remove pairs from first up to, not including, last."""
        it = first.copy()
        while it != last:
            it = self._bst.erase(it)
        return it

    def clear(self) -> None:
        self._bst.clear()

    # ==================== Iteration ====================

    def keys(self) -> Iterator[Any]:
        for pair in self._bst:
            yield pair.key

    def values(self) -> Iterator[Any]:
        for pair in self._bst:
            yield pair.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        for pair in self._bst:
            yield pair.as_tuple()

    # ==================== Assignment ====================

    def assign(self, source: OrderedMap | Mapping[Any, Any] | Iterable[Any]) -> OrderedMap:
        """Replace the contents with those of source."""
        if isinstance(source, OrderedMap):
            self._bst.assign(source._bst)
        else:
            items = list(source.items()) if isinstance(source, Mapping) else list(source)
            self._bst.clear()
            self.insert_many(items)
        return self

    def copy(self) -> OrderedMap:
        result = OrderedMap(default_factory=self._default_factory)
        result._bst.assign(self._bst)
        return result

    def move_from(self, other: OrderedMap) -> OrderedMap:
        """Take over the pairs of other, leaving it empty."""
        self._bst.move_from(other._bst)
        return self

    def swap(self, other: OrderedMap) -> None:
        self._bst.swap(other._bst)


def swap(lhs: OrderedMap, rhs: OrderedMap) -> None:
    """Exchange the contents of two maps."""
    lhs.swap(rhs)
