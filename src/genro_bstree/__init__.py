# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-BsTree - An unbalanced binary search tree with a lazy in-order iterator.

A lightweight, zero-dependency library for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import (
    BstTreeError,
    IteratorExhaustedError,
    TreeModifiedError,
)
from .iterator import BstIterator
from .tree import BstTree

__all__ = [
    # Core classes
    "BstTree",
    "BstIterator",
    # Exceptions
    "BstTreeError",
    "IteratorExhaustedError",
    "TreeModifiedError",
]
