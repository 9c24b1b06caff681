# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Bidirectional in-order cursor over a BST.

The cursor walks the tree through the parent back references stored in each
node, so no stack is kept. A cursor holding no node is the end position.

Any structural change of the tree (insert, erase, clear, assign, move, swap)
may invalidate a cursor; this is not detected.
"""

from __future__ import annotations

from typing import Any

from ..exceptions import InvalidIteratorError
from ..node import BSTNode


class BSTIterator:
    """A cursor referencing a node or the end position.

    Example:
        >>> it = tree.begin()
        >>> while it != tree.end():
        ...     print(it.value)
        ...     it.increment()
    """

    __slots__ = ('_node',)

    def __init__(self, node: BSTNode | None = None) -> None:
        self._node = node

    def __repr__(self) -> str:
        if self._node is None:
            return "BSTIterator(end)"
        return f"BSTIterator({self._node.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BSTIterator):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __bool__(self) -> bool:
        return self._node is not None

    def __copy__(self) -> BSTIterator:
        return BSTIterator(self._node)

    def copy(self) -> BSTIterator:
        """Return an independent cursor at the same position."""
        return BSTIterator(self._node)

    @property
    def node(self) -> BSTNode | None:
        """The referenced node, None at end."""
        return self._node

    @property
    def is_end(self) -> bool:
        return self._node is None

    @property
    def value(self) -> Any:
        """Read-only access to the referenced element.

        Raises:
            InvalidIteratorError: If the cursor is at end.
        """
        if self._node is None:
            raise InvalidIteratorError("Cannot dereference the end iterator")
        return self._node.data

    # ==================== Stepping ====================

    def increment(self) -> BSTIterator:
        """Move to the in-order successor and return self.

        With a right child the successor is the leftmost node of the right
        subtree. Otherwise climb while coming from a right child; the first
        ancestor reached from its left side is the successor, or end if none.
        Stepping the end cursor leaves it at end.
        """
        node = self._node
        if node is None:
            return self

        if node.right is not None:
            node = node.right
            while node.left is not None:
                node = node.left
            self._node = node
            return self

        parent = node.parent
        while parent is not None and parent.is_right_child(node):
            node = parent
            parent = node.parent
        self._node = parent
        return self

    def decrement(self) -> BSTIterator:
        """Move to the in-order predecessor and return self.

        Mirror of increment(): rightmost node of the left subtree, or the
        first ancestor reached from its right side, or end.
        """
        node = self._node
        if node is None:
            return self

        if node.left is not None:
            node = node.left
            while node.right is not None:
                node = node.right
            self._node = node
            return self

        parent = node.parent
        while parent is not None and parent.is_left_child(node):
            node = parent
            parent = node.parent
        self._node = parent
        return self

    def post_increment(self) -> BSTIterator:
        """Step forward, returning a cursor at the prior position."""
        prior = self.copy()
        self.increment()
        return prior

    def post_decrement(self) -> BSTIterator:
        """Step backward, returning a cursor at the prior position."""
        prior = self.copy()
        self.decrement()
        return prior
