# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-BST - Ordered binary search tree with set and map wrappers.

A lightweight, zero-dependency library providing an unbalanced,
node-linked binary search tree for the Genro ecosystem, with a stackless
bidirectional cursor and key ordered containers on top.
"""

__version__ = "0.1.0"

from .containers import OrderedMap, OrderedSet, Pair, swap
from .exceptions import (
    AllocationError,
    BSTError,
    InvalidIteratorError,
    InvariantError,
    KeyNotFoundError,
)
from .node import BSTNode
from .tree import BST, BSTIterator

__all__ = [
    # Core classes
    "BST",
    "BSTIterator",
    "BSTNode",
    # Containers
    "OrderedMap",
    "OrderedSet",
    "Pair",
    "swap",
    # Exceptions
    "BSTError",
    "AllocationError",
    "KeyNotFoundError",
    "InvalidIteratorError",
    "InvariantError",
]
