"""Pairing heap with stable position handles and true decrease-key."""

from __future__ import annotations

from typing import Any, Generic, List, Optional, Protocol, TypeVar

from .exceptions import HeapError, HeapUnderflowError, InvalidDecreaseKeyError


class _Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=_Comparable)


class Position(Generic[T]):
    """Opaque handle to one element stored in a :class:`PairingHeap`.

    Nodes are linked leftmost-child / next-sibling. ``prev`` points at the
    parent for a leftmost child and at the left sibling otherwise.
    """

    __slots__ = ("element", "left_child", "next_sibling", "prev", "removed")

    def __init__(self, element: T) -> None:
        self.element: T = element
        self.left_child: Optional[Position[T]] = None
        self.next_sibling: Optional[Position[T]] = None
        self.prev: Optional[Position[T]] = None
        self.removed = False

    def __repr__(self) -> str:
        state = "removed" if self.removed else "live"
        return f"Position({self.element!r}, {state})"


class PairingHeap(Generic[T]):
    """Mergeable min-heap.

    ``insert`` and ``merge`` are O(1); ``delete_min`` and ``decrease_key`` are
    O(log n) amortized thanks to two-pass pairing of the root's children.

    Examples:
        ```python
        >>> h = PairingHeap()
        >>> p = h.insert(5)
        >>> _ = h.insert(3)
        >>> h.decrease_key(p, 1)
        >>> h.delete_min(), h.delete_min()
        (1, 3)
        ```
    """

    def __init__(self) -> None:
        self._root: Optional[Position[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"PairingHeap(size={self._size})"

    def is_empty(self) -> bool:
        """Return ``True`` if the heap holds no elements."""
        return self._root is None

    def make_empty(self) -> None:
        """Drop every element; outstanding positions become invalid."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            node.removed = True
            if node.left_child is not None:
                stack.append(node.left_child)
            if node.next_sibling is not None:
                stack.append(node.next_sibling)
        self._root = None
        self._size = 0

    def insert(self, element: T) -> Position[T]:
        """Insert ``element`` and return its position handle.

        Args:
            element: Item to insert; only ``<`` is used to order items.

        Returns:
            A handle usable with :meth:`decrease_key` until the element is
            removed by :meth:`delete_min`.
        """
        node: Position[T] = Position(element)
        self._root = node if self._root is None else self._link(self._root, node)
        self._size += 1
        return node

    def find_min(self) -> T:
        """Return the smallest element without removing it.

        Raises:
            HeapUnderflowError: If the heap is empty.
        """
        if self._root is None:
            raise HeapUnderflowError("pairing heap is empty")
        return self._root.element

    def delete_min(self) -> T:
        """Remove and return the smallest element.

        Raises:
            HeapUnderflowError: If the heap is empty.
        """
        old = self._root
        if old is None:
            raise HeapUnderflowError("pairing heap is empty")
        if old.left_child is None:
            self._root = None
        else:
            self._root = self._combine_siblings(old.left_child)
        old.left_child = None
        old.removed = True
        self._size -= 1
        return old.element

    def decrease_key(self, pos: Position[T], new_element: T) -> None:
        """Replace the element at ``pos`` with the strictly smaller ``new_element``.

        Args:
            pos: Handle returned by :meth:`insert`.
            new_element: Replacement item.

        Raises:
            InvalidDecreaseKeyError: If ``pos`` was already removed or
                ``new_element`` is not strictly smaller than the current item.
        """
        if pos.removed:
            raise InvalidDecreaseKeyError("position is no longer in the heap")
        if not new_element < pos.element:
            raise InvalidDecreaseKeyError(
                f"new value {new_element!r} is not smaller than {pos.element!r}"
            )
        pos.element = new_element
        if pos is self._root:
            return
        if self._root is None:
            raise HeapError("heap has no root but holds a live position")
        self._cut(pos)
        self._root = self._link(self._root, pos)

    def merge(self, other: "PairingHeap[T]") -> None:
        """Move every element of ``other`` into this heap in O(1).

        Positions obtained from ``other`` stay valid and now refer to this heap.
        """
        if other is self or other._root is None:
            return
        if self._root is None:
            self._root = other._root
        else:
            self._root = self._link(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0

    # ---------- internals -------------------------------------------------

    @staticmethod
    def _link(first: Position[T], second: Optional[Position[T]]) -> Position[T]:
        """Link two detached roots; the larger becomes the other's leftmost child.

        Returns:
            The surviving root. On a tie ``first`` survives.
        """
        if second is None:
            return first
        if second.element < first.element:
            first, second = second, first
        second.prev = first
        second.next_sibling = first.left_child
        if first.left_child is not None:
            first.left_child.prev = second
        first.left_child = second
        return first

    @staticmethod
    def _cut(node: Position[T]) -> None:
        """Detach ``node`` and its subtree from its parent's child list."""
        parent_or_left = node.prev
        if parent_or_left is None:
            raise HeapError("cannot cut a node without a parent")
        if node.next_sibling is not None:
            node.next_sibling.prev = parent_or_left
        if parent_or_left.left_child is node:
            parent_or_left.left_child = node.next_sibling
        else:
            parent_or_left.next_sibling = node.next_sibling
        node.next_sibling = None
        node.prev = None

    def _combine_siblings(self, first: Position[T]) -> Position[T]:
        """Two-pass pairing of a sibling list, returning the new root."""
        trees: List[Position[T]] = []
        node: Optional[Position[T]] = first
        while node is not None:
            nxt = node.next_sibling
            node.prev = None
            node.next_sibling = None
            trees.append(node)
            node = nxt

        # left to right: link neighbours pairwise
        paired: List[Position[T]] = []
        for i in range(0, len(trees) - 1, 2):
            paired.append(self._link(trees[i], trees[i + 1]))
        if len(trees) % 2:
            paired.append(trees[-1])

        # right to left: fold into the last tree
        result = paired[-1]
        for tree in reversed(paired[:-1]):
            result = self._link(tree, result)
        return result


__all__ = ["PairingHeap", "Position"]
