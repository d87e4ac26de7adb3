"""Left-leaning red-black tree keyed by comparable keys."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("key", "value", "left", "right", "red")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.red = True


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.red


def _rotate_left(node: _Node) -> _Node:
    right = node.right
    node.right = right.left
    right.left = node
    right.red = node.red
    node.red = True
    return right


def _rotate_right(node: _Node) -> _Node:
    left = node.left
    node.left = left.right
    left.right = node
    left.red = node.red
    node.red = True
    return left


def _flip_colors(node: _Node) -> None:
    node.red = not node.red
    node.left.red = not node.left.red
    node.right.red = not node.right.red


def _move_red_left(node: _Node) -> _Node:
    _flip_colors(node)
    if _is_red(node.right.left):
        node.right = _rotate_right(node.right)
        node = _rotate_left(node)
        _flip_colors(node)
    return node


def _move_red_right(node: _Node) -> _Node:
    _flip_colors(node)
    if _is_red(node.left.left):
        node = _rotate_right(node)
        _flip_colors(node)
    return node


def _fix_up(node: _Node) -> _Node:
    if _is_red(node.right):
        node = _rotate_left(node)
    if _is_red(node.left) and _is_red(node.left.left):
        node = _rotate_right(node)
    if _is_red(node.left) and _is_red(node.right):
        _flip_colors(node)
    return node


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove_min(node: _Node) -> _Node | None:
    if node.left is None:
        return None
    if not _is_red(node.left) and not _is_red(node.left.left):
        node = _move_red_left(node)
    node.left = _remove_min(node.left)
    return _fix_up(node)


def _in_order(node: _Node | None) -> Iterator[_Node]:
    stack: list[_Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


class LLRBTree:
    """Left-leaning red-black tree.

    Keys must support ``<`` and ``>``; values are rendered with ``str``.
    """

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def put(self, key: Any, value: Any) -> Any:
        """Store ``value`` under ``key`` and return ``value``."""
        self._root = self._put(self._root, key, value)
        self._root.red = False
        return value

    def remove(self, key: Any) -> None:
        """Remove ``key``; raise ``KeyError`` if it is absent."""
        if self._find(key) is None:
            raise KeyError(key)
        root = self._root
        if not _is_red(root.left) and not _is_red(root.right):
            root.red = True
        self._root = self._remove(root, key)
        if self._root is not None:
            self._root.red = False

    def floor(self, key: Any) -> tuple[Any, Any] | None:
        """Return ``(key, value)`` for the greatest key <= ``key``, or None."""
        node = self._root
        best: _Node | None = None
        while node is not None:
            if key > node.key:
                best = node
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                return node.key, node.value
        if best is None:
            return None
        return best.key, best.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        for node in _in_order(self._root):
            yield node.key

    def __str__(self) -> str:
        return ",".join(str(node.value) for node in _in_order(self._root))

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def _put(self, node: _Node | None, key: Any, value: Any) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key, value)

        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif key > node.key:
            node.right = self._put(node.right, key, value)
        else:
            node.value = value

        if _is_red(node.right) and not _is_red(node.left):
            node = _rotate_left(node)
        if _is_red(node.left) and _is_red(node.left.left):
            node = _rotate_right(node)
        if _is_red(node.left) and _is_red(node.right):
            _flip_colors(node)
        return node

    def _remove(self, node: _Node, key: Any) -> _Node | None:
        if key < node.key:
            if not _is_red(node.left) and not _is_red(node.left.left):
                node = _move_red_left(node)
            node.left = self._remove(node.left, key)
        else:
            if _is_red(node.left):
                node = _rotate_right(node)

            if key == node.key and node.right is None:
                self._size -= 1
                return None

            if not _is_red(node.right) and not _is_red(node.right.left):
                node = _move_red_right(node)

            if key == node.key:
                self._size -= 1
                smallest = _min_node(node.right)
                node.key = smallest.key
                node.value = smallest.value
                node.right = _remove_min(node.right)
            else:
                node.right = self._remove(node.right, key)

        return _fix_up(node)