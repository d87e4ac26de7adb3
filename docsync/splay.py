"""Weighted splay tree that indexes nodes by the cumulative length of values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class SplayNode:
    """A node of :class:`SplayTree` holding a value with a length.

    The value must support ``len()`` and ``str()``.
    """

    __slots__ = ("_value", "weight", "left", "right", "parent")

    def __init__(self, value: Any) -> None:
        self._value = value
        self.weight = len(value)
        self.left: SplayNode | None = None
        self.right: SplayNode | None = None
        self.parent: SplayNode | None = None

    @property
    def value(self) -> Any:
        """The value stored in this node."""
        return self._value

    def _length(self) -> int:
        return len(self._value)

    def _left_weight(self) -> int:
        return 0 if self.left is None else self.left.weight

    def _right_weight(self) -> int:
        return 0 if self.right is None else self.right.weight

    def _unlink(self) -> None:
        self.parent = None
        self.left = None
        self.right = None

    def _has_links(self) -> bool:
        return (
            self.parent is not None
            or self.left is not None
            or self.right is not None
        )

    def __repr__(self) -> str:
        return f"SplayNode({self._value!r})"


def _is_left_child(node: SplayNode | None) -> bool:
    return node is not None and node.parent is not None and node.parent.left is node


def _is_right_child(node: SplayNode | None) -> bool:
    return (
        node is not None and node.parent is not None and node.parent.right is node
    )


def _in_order(node: SplayNode | None) -> Iterator[SplayNode]:
    stack: list[SplayNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


class SplayTree:
    """Weighted binary search tree based on a splay tree.

    Each node's weight is the total length of the values in its subtree,
    which lets positions in the concatenated content be found quickly.
    """

    def __init__(self, root: SplayNode | None = None) -> None:
        self.root = root

    def insert(self, node: SplayNode) -> SplayNode:
        """Insert ``node`` after the current root and return it."""
        if self.root is None:
            self.root = node
            return node
        return self.insert_after(self.root, node)

    def insert_after(self, prev: SplayNode, node: SplayNode) -> SplayNode:
        """Insert ``node`` directly after ``prev`` and return it."""
        self.splay(prev)
        self.root = node
        node.right = prev.right
        if prev.right is not None:
            prev.right.parent = node
        node.left = prev
        prev.parent = node
        prev.right = None

        self.update_subtree(prev)
        self.update_subtree(node)
        return node

    def splay(self, node: SplayNode | None) -> None:
        """Move ``node`` to the root of the tree."""
        if node is None:
            return

        while True:
            parent = node.parent
            if _is_left_child(parent) and _is_right_child(node):
                self._rotate_left(node)
                self._rotate_right(node)
            elif _is_right_child(parent) and _is_left_child(node):
                self._rotate_right(node)
                self._rotate_left(node)
            elif _is_left_child(parent) and _is_left_child(node):
                self._rotate_right(parent)
                self._rotate_right(node)
            elif _is_right_child(parent) and _is_right_child(node):
                self._rotate_left(parent)
                self._rotate_left(node)
            else:
                if _is_left_child(node):
                    self._rotate_right(node)
                elif _is_right_child(node):
                    self._rotate_left(node)
                return

    def index_of(self, node: SplayNode | None) -> int:
        """Return the start position of ``node``, or -1 if it is not linked."""
        if node is None or not node._has_links():
            return -1

        index = 0
        current: SplayNode | None = node
        prev: SplayNode | None = None
        while current is not None:
            if prev is None or prev is current.right:
                index += current._length() + current._left_weight()
            prev = current
            current = current.parent
        return index - node._length()

    def find(self, index: int) -> tuple[SplayNode | None, int]:
        """Return the node containing position ``index`` and the offset in it.

        Raises ``IndexError`` if ``index`` lies beyond the content.
        """
        if self.root is None:
            return None, 0

        node = self.root
        offset = index
        while True:
            if node.left is not None and offset <= node._left_weight():
                node = node.left
            elif (
                node.right is not None
                and node._left_weight() + node._length() < offset
            ):
                offset -= node._left_weight() + node._length()
                node = node.right
            else:
                offset -= node._left_weight()
                break

        if offset > node._length():
            raise IndexError(
                f"out of bound of text index: node.length {node._length()}, "
                f"pos {offset}"
            )
        return node, offset

    def update_subtree(self, node: SplayNode) -> None:
        """Recalculate the weight of ``node`` from its value and children."""
        node.weight = node._length() + node._left_weight() + node._right_weight()

    def delete(self, node: SplayNode) -> None:
        """Remove ``node`` from the tree."""
        self.splay(node)

        left_tree = SplayTree(node.left)
        if left_tree.root is not None:
            left_tree.root.parent = None

        right_tree = SplayTree(node.right)
        if right_tree.root is not None:
            right_tree.root.parent = None

        if left_tree.root is not None:
            left_tree.splay(left_tree._maximum())
            left_tree.root.right = right_tree.root
            if right_tree.root is not None:
                right_tree.root.parent = left_tree.root
            self.root = left_tree.root
        else:
            self.root = right_tree.root

        node._unlink()
        if self.root is not None:
            self.update_subtree(self.root)

    def annotated_string(self) -> str:
        """Return the nodes as ``[weight,length]value`` for debugging."""
        return "".join(
            f"[{node.weight},{node._length()}]{node.value}"
            for node in _in_order(self.root)
        )

    def __str__(self) -> str:
        return "".join(str(node.value) for node in _in_order(self.root))

    def _rotate_left(self, pivot: SplayNode) -> None:
        root = pivot.parent
        if root.parent is not None:
            if root is root.parent.left:
                root.parent.left = pivot
            else:
                root.parent.right = pivot
        else:
            self.root = pivot
        pivot.parent = root.parent

        root.right = pivot.left
        if root.right is not None:
            root.right.parent = root

        pivot.left = root
        root.parent = pivot

        self.update_subtree(root)
        self.update_subtree(pivot)

    def _rotate_right(self, pivot: SplayNode) -> None:
        root = pivot.parent
        if root.parent is not None:
            if root is root.parent.left:
                root.parent.left = pivot
            else:
                root.parent.right = pivot
        else:
            self.root = pivot
        pivot.parent = root.parent

        root.left = pivot.right
        if root.left is not None:
            root.left.parent = root

        pivot.right = root
        root.parent = pivot

        self.update_subtree(root)
        self.update_subtree(pivot)

    def _maximum(self) -> SplayNode:
        node = self.root
        while node.right is not None:
            node = node.right
        return node