# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BstTree - An unbalanced binary search tree.

This module provides the BstTree class. Every BstTree is at the same time a
node and the tree rooted at that node: it holds one value and up to two
exclusively owned subtrees.

Invariant:
    For every node, all values in ``left`` are strictly less than ``value``
    and all values in ``right`` are strictly greater. The tree never holds
    duplicates.

Example:
    Basic usage::

        tree = BstTree(5)
        tree.insert(3)       # True
        tree.insert(3)       # False, already present
        snapshot = tree.clone()
        tree.insert(7)

        print(tree)          # '3 5 7'
        print(snapshot)      # '3 5'
        list(tree)           # [3, 5, 7]

Iterating while inserting:
    Iterators hold references into the tree they were built from. Inserting
    into the tree while an iterator over it is still live makes the next
    step of that iterator raise TreeModifiedError. Always insert through
    the root: ``left`` and ``right`` are exposed for reading only.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, TypeVar

from .iterator import BstIterator

logger = logging.getLogger(__name__)

E = TypeVar('E')


class BstTree(Generic[E]):
    """A binary search tree node with owned left and right subtrees.

    The element type must support ``==`` and ``<`` consistently with a
    total order. Insertion is iterative, so degenerate insertion orders
    (e.g. already sorted input) never hit the recursion limit.

    Attributes:
        value: The value stored in this node.
        left: Subtree of values less than ``value``, or None.
        right: Subtree of values greater than ``value``, or None.
    """

    __slots__ = ('_value', '_left', '_right', '_version')

    def __init__(self, value: E) -> None:
        """Create a single-node tree holding ``value``, with no children."""
        self._value = value
        self._left: BstTree[E] | None = None
        self._right: BstTree[E] | None = None
        # bumped on every successful insert passing through this node
        self._version = 0

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.display()!r})"

    def __str__(self) -> str:
        return self.display()

    def __iter__(self) -> BstIterator[E]:
        """Iterate over values in ascending order."""
        return self.iter()

    def __copy__(self) -> BstTree[E]:
        # children are owned, a shallow copy would alias them
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> BstTree[E]:
        return self.clone()

    # ==================== Properties ====================

    @property
    def value(self) -> E:
        return self._value

    @property
    def left(self) -> BstTree[E] | None:
        return self._left

    @property
    def right(self) -> BstTree[E] | None:
        return self._right

    # ==================== Core API ====================

    def insert(self, value: E) -> bool:
        """Insert a value in its sorted position.

        Walks down from this node to the leaf position where ``value``
        belongs and attaches a new single-node tree there. No rebalancing
        is performed.

        Args:
            value: The value to insert.

        Returns:
            True if the value was inserted, False if it was already present
            (in which case the tree is left unchanged).

        Raises:
            TypeError: If ``value`` cannot be compared with stored values.
        """
        current = self
        path = [self]
        while True:
            if value == current._value:
                logger.debug("Value %r already present, not inserted", value)
                return False
            if value < current._value:
                if current._left is None:
                    current._left = type(self)(value)
                    break
                current = current._left
                path.append(current)
            else:
                if current._right is None:
                    current._right = type(self)(value)
                    break
                current = current._right
                path.append(current)
        for node in path:
            node._version += 1
        return True

    def clone(self) -> BstTree[E]:
        """Return a deep, fully independent copy of this tree.

        Every node is recreated and every value is copied with
        ``copy.deepcopy``, so mutating either tree never affects the other.
        """
        cls = type(self)
        root = cls(copy.deepcopy(self._value))
        pending = [(self, root)]
        count = 1
        while pending:
            source, target = pending.pop()
            if source._left is not None:
                target._left = cls(copy.deepcopy(source._left._value))
                pending.append((source._left, target._left))
                count += 1
            if source._right is not None:
                target._right = cls(copy.deepcopy(source._right._value))
                pending.append((source._right, target._right))
                count += 1
        logger.debug("Cloned tree of %d nodes", count)
        return root

    def display(self) -> str:
        """Return the space-separated in-order rendering of the tree.

        Example:
            >>> tree = BstTree(5)
            >>> tree.insert(3)
            True
            >>> tree.display()
            '3 5'
        """
        return ' '.join(str(value) for value in self.iter())

    def iter(self) -> BstIterator[E]:
        """Return an iterator positioned on the minimum value of this tree."""
        return BstIterator(self)
