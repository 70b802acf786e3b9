"""Self-balancing AVL binary search tree of comparable keys."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree."""

    data: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None


def _height(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


def _min_node(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _insert(node: Optional[AVLNode], item: Any) -> AVLNode:
    if node is None:
        return AVLNode(item)
    if item < node.data:
        node.left = _insert(node.left, item)
    else:
        node.right = _insert(node.right, item)

    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
    if node is None:
        return None
    if key < node.data:
        node.left = _delete(node.left, key)
    elif key > node.data:
        node.right = _delete(node.right, key)
    else:
        if node.right is None:
            return node.left
        if node.left is None:
            return node.right
        successor = _min_node(node.right)
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


class AVLTree:
    """AVL tree: insertion rebalances, deletion removes without rebalancing.

    Equal keys are placed in the right subtree.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.root: Optional[AVLNode] = None
        for item in items:
            self.insert(item)

    def insert(self, item: Any) -> None:
        """Insert ``item`` and restore balance along its path."""
        self.root = _insert(self.root, item)

    def delete(self, key: Any) -> None:
        """Remove one node holding ``key``; a missing key is ignored."""
        self.root = _delete(self.root, key)

    def level_order(self) -> list:
        """Return the keys in breadth-first order."""
        if self.root is None:
            return []
        result = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        return _height(self.root)

    def minimum(self) -> Any:
        """Return the smallest key."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        return _min_node(self.root).data

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False