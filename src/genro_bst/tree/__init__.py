# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BST package - Ordered node-linked binary search tree.

The package is organized into:
- core: Main BST class with insert, find, erase, copy, move and swap
- iterator: BSTIterator, the in-order cursor stepping through parent links

Example:
    >>> from genro_bst import BST
    >>> tree = BST([5, 3, 8])
    >>> list(tree)
    [3, 5, 8]
"""

from .core import BST
from .iterator import BSTIterator

__all__ = ["BST", "BSTIterator"]
