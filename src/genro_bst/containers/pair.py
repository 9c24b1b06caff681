# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Key/value pair ordered by key only."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Iterator


@total_ordering
class Pair:
    """A key with an attached value.

    Comparison and hashing look at the key alone, so a BST of pairs is a
    BST of keys. Pairs stored in a tree are never mutated; OrderedMap swaps
    in a new pair to change a value.

    Example:
        >>> Pair(1, 'a') == Pair(1, 'b')
        True
        >>> key, value = Pair(1, 'a')
    """

    __slots__ = ('key', 'value')

    def __init__(self, key: Any, value: Any = None) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"Pair({self.key!r}, {self.value!r})"

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def as_tuple(self) -> tuple[Any, Any]:
        return (self.key, self.value)
