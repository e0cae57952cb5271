# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""In-order iterator for BstTree.

The iterator keeps an explicit stack of the nodes that have the current node
in their left subtree: the path from the root to the current node, skipping
the nodes already visited. The top of the stack is the next node to emit, so
memory use is bounded by the tree height rather than its size.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import IteratorExhaustedError, TreeModifiedError

if TYPE_CHECKING:
    from .tree import BstTree

E = TypeVar('E')


class BstIterator(Generic[E]):
    """Single-pass in-order cursor over a BstTree.

    Built from a tree, the cursor starts on the minimum value. Built with no
    tree, it is already exhausted (an "end" iterator).

    The tree must not be modified while the iterator is in use: the next
    step after an insert into the source tree raises TreeModifiedError.

    Example:
        >>> it = BstIterator(tree)
        >>> while it:
        ...     print(it.peek())
        ...     next(it)
    """

    __slots__ = ('_nodes', '_tree', '_version')

    def __init__(self, tree: BstTree[E] | None = None) -> None:
        self._nodes: list[BstTree[E]] = []
        self._tree = tree
        self._version = 0
        if tree is not None:
            self._version = tree._version
            self._fill_leftmost(tree)

    def _fill_leftmost(self, node: BstTree[E]) -> None:
        """Push node and its chain of left children onto the stack."""
        current: BstTree[E] | None = node
        while current is not None:
            self._nodes.append(current)
            current = current._left

    def _check_unmodified(self) -> None:
        if self._tree is not None and self._tree._version != self._version:
            raise TreeModifiedError("tree was modified during iteration")

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        if not self._nodes:
            return f"{type(self).__name__}(<exhausted>)"
        return f"{type(self).__name__}(at={self._nodes[-1]._value!r})"

    def __iter__(self) -> BstIterator[E]:
        return self

    def __copy__(self) -> BstIterator[E]:
        """Return an independent cursor at the same position."""
        duplicate = type(self)()
        duplicate._nodes = list(self._nodes)
        duplicate._tree = self._tree
        duplicate._version = self._version
        return duplicate

    def __deepcopy__(self, memo: dict[int, Any]) -> BstIterator[E]:
        # the cursor borrows its tree, only the stack is duplicated
        return self.__copy__()

    def __next__(self) -> E:
        """Return the current value and advance to its in-order successor.

        The current node is popped; the next node is either the leftmost
        descendant of its right child or, with no right child, the node
        below it on the stack.

        Raises:
            StopIteration: When no values are left. Exhaustion is terminal.
            TreeModifiedError: If the source tree was modified.
        """
        if not self._nodes:
            raise StopIteration
        self._check_unmodified()
        node = self._nodes.pop()
        if node._right is not None:
            self._fill_leftmost(node._right)
        return node._value

    def __bool__(self) -> bool:
        """True while there are values left to emit."""
        return bool(self._nodes)

    def __eq__(self, other: object) -> bool:
        """Equal when both are exhausted or both point at the same node."""
        if not isinstance(other, BstIterator):
            return NotImplemented
        if not self._nodes or not other._nodes:
            return not self._nodes and not other._nodes
        return self._nodes[-1] is other._nodes[-1]

    __hash__ = None  # type: ignore[assignment]

    # ==================== Core API ====================

    def peek(self) -> E:
        """Return the current value without advancing.

        Raises:
            IteratorExhaustedError: If no values are left.
            TreeModifiedError: If the source tree was modified.
        """
        if not self._nodes:
            raise IteratorExhaustedError("iterator is exhausted")
        self._check_unmodified()
        return self._nodes[-1]._value
