# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BST node class."""

from __future__ import annotations

import weakref
from typing import Any


class BSTNode:
    """A single node of a binary search tree.

    Each node has:
    - data: The stored element
    - left: Owning link to the left child (smaller elements)
    - right: Owning link to the right child (greater or equal elements)
    - parent: Non-owning back reference to the node holding this one

    The parent link is kept as a weak reference so it can never keep a
    released subtree alive. The node knows nothing about ordering, so no
    validation is done here.

    Example:
        >>> root = BSTNode(5)
        >>> root.add_left(BSTNode(3))
        >>> root.left.parent is root
        True
    """

    __slots__ = ('data', 'left', 'right', '_parent', '__weakref__')

    def __init__(self, data: Any = None) -> None:
        """Initialize a BSTNode.

        Args:
            data: The element held by the node.
        """
        self.data = data
        self.left: BSTNode | None = None
        self.right: BSTNode | None = None
        self._parent: weakref.ref[BSTNode] | None = None

    def __repr__(self) -> str:
        return f"BSTNode({self.data!r})"

    @property
    def parent(self) -> BSTNode | None:
        """The node owning this one, or None for a root or detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: BSTNode | None) -> None:
        self._parent = None if node is None else weakref.ref(node)

    def add_left(self, node: BSTNode | None) -> None:
        """Attach node as the left child and point it back to self."""
        self.left = node
        if node is not None:
            node.parent = self

    def add_right(self, node: BSTNode | None) -> None:
        """Attach node as the right child and point it back to self."""
        self.right = node
        if node is not None:
            node.parent = self

    def is_left_child(self, node: BSTNode | None) -> bool:
        return self.left is node

    def is_right_child(self, node: BSTNode | None) -> bool:
        return self.right is node

    def detach(self) -> None:
        """Drop every link of a released node."""
        self.left = None
        self.right = None
        self._parent = None
