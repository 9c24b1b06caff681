# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Associative containers built on BST."""

from .ordered_map import OrderedMap, swap
from .ordered_set import OrderedSet
from .pair import Pair

__all__ = [
    'OrderedMap',
    'OrderedSet',
    'Pair',
    'swap',
]
