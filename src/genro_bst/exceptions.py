# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BST exceptions."""

from __future__ import annotations


class BSTError(Exception):
    """Base exception for BST errors."""

    pass


class AllocationError(BSTError, MemoryError):
    """Raised when a node cannot be allocated."""

    def __init__(self, message: str = "allocation failed") -> None:
        super().__init__(message)


class KeyNotFoundError(BSTError, KeyError):
    """Raised by OrderedMap when a required key is missing."""

    pass


class InvalidIteratorError(BSTError, LookupError):
    """Raised when the end iterator is dereferenced."""

    pass


class InvariantError(BSTError, AssertionError):
    """Raised when a tree fails structural validation."""

    pass
