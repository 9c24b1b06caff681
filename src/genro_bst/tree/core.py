# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BST - An unbalanced, node-linked binary search tree.

This module provides the BST class, the ordered store behind OrderedSet and
OrderedMap. Elements only need a total order through ``<`` and ``==``.

Key Features:
    - **Ordered storage**: Left subtree strictly less, right subtree greater
      or equal (duplicates land on the right)
    - **Stackless iteration**: BSTIterator walks parent back references
    - **Node reuse on copy**: assign() reconciles the existing node graph
      with the source instead of rebuilding it
    - **Value semantics**: copy, move_from() and swap() like a container

No balancing is performed: inserting sorted data degenerates into a list.
All traversals use explicit stacks so deep trees do not hit the recursion
limit.

Example:
    Basic usage::

        tree = BST([5, 3, 8])
        it, inserted = tree.insert(4)
        print(list(tree))  # [3, 4, 5, 8]

        it = tree.find(5)
        tree.erase(it)
        print(list(tree))  # [3, 4, 8]
"""

from __future__ import annotations

from copy import copy as _shallow_copy, deepcopy
from typing import Any, Iterable, Iterator

from .. import config as bst_config
from ..exceptions import AllocationError, InvariantError
from ..log import get_logger
from ..node import BSTNode
from .iterator import BSTIterator

_log = get_logger("tree")

_SIDES = ('left', 'right')
_UNBOUNDED = object()


def _release_subtree(node: BSTNode | None) -> int:
    """Detach every node below and including node in post-order.

    Returns:
        Number of released nodes.
    """
    if node is None:
        return 0
    released = 0
    pending: list[tuple[BSTNode, bool]] = [(node, False)]
    while pending:
        current, expanded = pending.pop()
        if expanded:
            current.detach()
            released += 1
            continue
        pending.append((current, True))
        if current.right is not None:
            pending.append((current.right, False))
        if current.left is not None:
            pending.append((current.left, False))
    return released


class BST:
    """An ordered collection of elements stored in a binary search tree.

    BST provides:
    - insert(value, keep_unique): Add an element, optionally refusing equals
    - find(value): Cursor on a matching element, or end()
    - erase(it): Remove the element under a cursor
    - assign(source) / move_from(other) / swap(other): Value semantics

    Attributes are private; the tree owns its root node and every node
    reachable from it.

    Example:
        >>> tree = BST([2, 1, 3])
        >>> tree.size()
        3
        >>> tree.begin().value
        1
    """

    __slots__ = ('_root', '_size')

    def __init__(self, source: BST | Iterable[Any] | None = None) -> None:
        """Initialize a BST.

        Args:
            source: Optional initial data. Can be:
                - BST: Copied node by node
                - any iterable: Each element inserted in turn (duplicates kept)
        """
        self._root: BSTNode | None = None
        self._size = 0
        if source is not None:
            self.assign(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"BST({list(self)!r})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate over elements in ascending order."""
        it = self.begin()
        while it.node is not None:
            yield it.node.data
            it.increment()

    def __reversed__(self) -> Iterator[Any]:
        """Iterate over elements in descending order."""
        it = self.rbegin()
        while it.node is not None:
            yield it.node.data
            it.decrement()

    def __contains__(self, value: Any) -> bool:
        return not self.find(value).is_end

    def __copy__(self) -> BST:
        return BST(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> BST:
        result = BST(self)
        memo[id(self)] = result
        for node in result._iter_nodes():
            node.data = deepcopy(node.data, memo)
        return result

    # ==================== Status ====================

    def size(self) -> int:
        """Return the number of stored elements."""
        return self._size

    def empty(self) -> bool:
        """True if the tree holds no element."""
        return self._size == 0

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0
        tallest = 0
        pending = [(self._root, 1)]
        while pending:
            node, depth = pending.pop()
            tallest = max(tallest, depth)
            for child in (node.left, node.right):
                if child is not None:
                    pending.append((child, depth + 1))
        return tallest

    # ==================== Iterators ====================

    def begin(self) -> BSTIterator:
        """Cursor on the smallest element, or end() if empty."""
        node = self._root
        if node is None:
            return BSTIterator()
        while node.left is not None:
            node = node.left
        return BSTIterator(node)

    def rbegin(self) -> BSTIterator:
        """Cursor on the largest element, or end() if empty."""
        node = self._root
        if node is None:
            return BSTIterator()
        while node.right is not None:
            node = node.right
        return BSTIterator(node)

    def end(self) -> BSTIterator:
        """The end position. Never dereference it."""
        return BSTIterator()

    # ==================== Core API ====================

    def find(self, value: Any) -> BSTIterator:
        """Return a cursor on an element equal to value.

        Args:
            value: The element to look for.

        Returns:
            Cursor on the first equal node met while descending, or end().
        """
        node = self._root
        while node is not None:
            if value == node.data:
                return BSTIterator(node)
            node = node.left if value < node.data else node.right
        return BSTIterator()

    def insert(
        self,
        value: Any,
        keep_unique: bool = False,
        *,
        copy: bool = False,
    ) -> tuple[BSTIterator, bool]:
        """Insert value, descending left when smaller and right otherwise.

        Args:
            value: The element to store.
            keep_unique: If True, an equal element met during the descent
                stops the insertion.
            copy: If True, store a shallow copy of value; by default the
                object itself is handed over to the tree.

        Returns:
            Tuple of (cursor, inserted) where cursor designates the new node,
            or the existing equal node when inserted is False.

        Raises:
            AllocationError: If the node cannot be created. The tree is left
                unchanged.
        """
        if copy:
            value = _shallow_copy(value)

        node = self._root
        if node is None:
            self._root = self._allocate(value)
            self._size = 1
            _log.debug("Inserted %r as root", value)
            self._after_mutation()
            return BSTIterator(self._root), True

        while True:
            if keep_unique and value == node.data:
                return BSTIterator(node), False
            if value < node.data:
                if node.left is None:
                    created = self._allocate(value)
                    node.add_left(created)
                    break
                node = node.left
            else:
                if node.right is None:
                    created = self._allocate(value)
                    node.add_right(created)
                    break
                node = node.right

        self._size += 1
        _log.debug("Inserted %r (size=%d)", value, self._size)
        self._after_mutation()
        return BSTIterator(created), True

    def erase(self, it: BSTIterator) -> BSTIterator:
        """Remove the element under it.

        Three shapes are handled:
        - no left child: the right child takes the node's place
        - no right child: the left child takes the node's place
        - two children: the in-order successor S (leftmost of the right
          subtree) takes over the left subtree, and the right subtree too
          when S lies deeper; S then takes the node's place

        Args:
            it: Cursor on the element to remove. The end cursor is ignored.

        Returns:
            For the one-child shapes, a cursor on the in-order successor of
            the removed element. For the two-children shape, a cursor on S
            in its new position.
        """
        doomed = it.node
        if doomed is None:
            return BSTIterator()

        if doomed.left is None:
            following = it.copy().increment()
            self._replace(doomed, doomed.right)
        elif doomed.right is None:
            following = it.copy().increment()
            self._replace(doomed, doomed.left)
        else:
            successor = doomed.right
            while successor.left is not None:
                successor = successor.left
            successor.add_left(doomed.left)
            if doomed.right is not successor:
                successor.parent.add_left(successor.right)
                successor.add_right(doomed.right)
            self._replace(doomed, successor)
            following = BSTIterator(successor)

        self._size -= 1
        _log.debug("Erased %r (size=%d)", doomed.data, self._size)
        doomed.detach()
        self._after_mutation()
        return following

    def clear(self) -> None:
        """Release every node. Safe on an empty tree."""
        released = _release_subtree(self._root)
        self._root = None
        self._size = 0
        if released:
            _log.debug("Cleared %d nodes", released)
        self._after_mutation()

    # ==================== Assignment ====================

    def assign(self, source: BST | Iterable[Any]) -> BST:
        """Replace the contents with those of source.

        A BST source is reconciled node by node: existing nodes are reused
        and overwritten, extra subtrees are released, missing nodes are
        allocated. Any other iterable is read in full before the tree is
        cleared, so it may be a generator over this very tree; each element
        is then inserted.

        Args:
            source: BST or iterable of elements.

        Returns:
            self, for chaining.

        Raises:
            AllocationError: If a node cannot be created while copying a BST.
                The tree keeps whatever was copied so far and its size
                reflects the nodes actually present.
        """
        if source is self:
            return self

        if isinstance(source, BST):
            try:
                self._copy_from(source._root)
            except AllocationError:
                self._size = self._count_nodes()
                raise
            self._size = source._size
            _log.debug("Copied %d nodes", self._size)
        else:
            values = list(source)
            self.clear()
            for value in values:
                self.insert(value)

        self._after_mutation()
        return self

    def move_from(self, other: BST) -> BST:
        """Take over the nodes of other, leaving it empty.

        Returns:
            self, for chaining.
        """
        if other is self:
            return self
        self.clear()
        self.swap(other)
        _log.debug("Moved %d nodes", self._size)
        return self

    def swap(self, other: BST) -> None:
        """Exchange contents with other in constant time."""
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size
        self._after_mutation()
        other._after_mutation()

    # ==================== Validation ====================

    def validate(self) -> None:
        """Check ordering, parent links and size.

        Raises:
            InvariantError: On the first violation found.
        """
        root = self._root
        if root is None:
            if self._size != 0:
                raise InvariantError(f"Empty tree reports size {self._size}")
            return
        if root.parent is not None:
            raise InvariantError("Root node has a parent")

        count = 0
        pending: list[tuple[BSTNode, Any, Any]] = [(root, _UNBOUNDED, _UNBOUNDED)]
        while pending:
            node, lower, upper = pending.pop()
            count += 1
            if lower is not _UNBOUNDED and node.data < lower:
                raise InvariantError(f"{node.data!r} is smaller than ancestor {lower!r}")
            if upper is not _UNBOUNDED and not node.data < upper:
                raise InvariantError(f"{node.data!r} is not smaller than ancestor {upper!r}")
            if node.left is not None:
                if node.left.parent is not node:
                    raise InvariantError(f"Broken parent link below {node.data!r}")
                pending.append((node.left, lower, node.data))
            if node.right is not None:
                if node.right.parent is not node:
                    raise InvariantError(f"Broken parent link below {node.data!r}")
                pending.append((node.right, node.data, upper))

        if count != self._size:
            raise InvariantError(f"Tree holds {count} nodes but reports size {self._size}")

    # ==================== Internals ====================

    def _allocate(self, value: Any) -> BSTNode:
        try:
            return BSTNode(value)
        except MemoryError as exc:
            _log.error("Unable to allocate a node for %r", value)
            raise AllocationError() from exc

    def _replace(self, doomed: BSTNode, replacement: BSTNode | None) -> None:
        """Put replacement in the slot doomed occupies under its parent."""
        parent = doomed.parent
        if parent is None:
            self._root = replacement
            if replacement is not None:
                replacement.parent = None
        elif parent.is_left_child(doomed):
            parent.add_left(replacement)
        else:
            parent.add_right(replacement)

    def _copy_from(self, source_root: BSTNode | None) -> None:
        if source_root is None:
            _release_subtree(self._root)
            self._root = None
            return

        if self._root is None:
            self._root = self._allocate(source_root.data)
        else:
            self._root.data = source_root.data
        self._root.parent = None

        pending = [(source_root, self._root)]
        while pending:
            src, dest = pending.pop()
            for side in _SIDES:
                src_child = getattr(src, side)
                dest_child = getattr(dest, side)
                if src_child is None:
                    if dest_child is not None:
                        setattr(dest, side, None)
                        _release_subtree(dest_child)
                    continue
                if dest_child is None:
                    dest_child = self._allocate(src_child.data)
                    setattr(dest, side, dest_child)
                else:
                    dest_child.data = src_child.data
                dest_child.parent = dest
                pending.append((src_child, dest_child))

    def _iter_nodes(self) -> Iterator[BSTNode]:
        """Yield every node in pre-order."""
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            yield node
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def _count_nodes(self) -> int:
        return sum(1 for _ in self._iter_nodes())

    def _after_mutation(self) -> None:
        if bst_config.runtime_config().check_invariants:
            self.validate()
