"""Left-leaning red-black tree mapping ordered keys to values."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class _Node:
    __slots__ = ("key", "value", "left", "right", "red")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.red = True


def _is_red(node: Optional[_Node]) -> bool:
    return node is not None and node.red


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    pivot.red = node.red
    node.red = True
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    pivot.red = node.red
    node.red = True
    return pivot


def _flip_colors(node: _Node) -> None:
    node.red = True
    assert node.left is not None and node.right is not None
    node.left.red = False
    node.right.red = False


class RedBlackTree:
    """Balanced search tree with unique keys."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if absent."""
        node = self._find(key)
        return None if node is None else node.value

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: Any, value: Any) -> None:
        """Add ``key`` with ``value``; a key already present is an error."""
        self._root = self._insert(self._root, key, value)
        self._root.red = False
        self._size += 1

    def _insert(self, node: Optional[_Node], key: Any, value: Any) -> _Node:
        if node is None:
            return _Node(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif node.key < key:
            node.right = self._insert(node.right, key, value)
        else:
            raise KeyError(key)
        if _is_red(node.right) and not _is_red(node.left):
            node = _rotate_left(node)
        if _is_red(node.left) and _is_red(node.left.left):
            node = _rotate_right(node)
        if _is_red(node.left) and _is_red(node.right):
            _flip_colors(node)
        return node

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None