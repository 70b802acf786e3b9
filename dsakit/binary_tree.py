"""Plain binary trees: construction helpers and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def insert_level_order(root: Optional[TreeNode], value: Any) -> TreeNode:
    """Attach ``value`` at the first free position in breadth-first order.

    Returns the root, which is a new node when ``root`` is None.
    """
    node = TreeNode(value)
    if root is None:
        return node
    queue = deque([root])
    while queue:
        current = queue.popleft()
        if current.left is None:
            current.left = node
            return root
        queue.append(current.left)
        if current.right is None:
            current.right = node
            return root
        queue.append(current.right)
    return root


def insert_at(root: TreeNode, value: Any, path: Iterable[str]) -> TreeNode:
    """Place ``value`` by following ``path`` of 'l'/'r' steps from ``root``.

    The last step must lead to a free position. Returns the new node.
    """
    if root is None:
        raise ValueError("tree has no root")
    steps = list(path)
    for step in steps:
        if step not in ("l", "r"):
            raise ValueError(f"invalid direction {step!r}; expected 'l' or 'r'")

    parent = root
    for position, step in enumerate(steps):
        child = parent.left if step == "l" else parent.right
        if child is None:
            if position != len(steps) - 1:
                raise ValueError("path continues past a free position")
            node = TreeNode(value)
            if step == "l":
                parent.left = node
            else:
                parent.right = node
            return node
        parent = child
    raise ValueError("path ends at an occupied position")


def morris_inorder(root: Optional[TreeNode]) -> list:
    """In-order traversal with temporary threads instead of a stack.

    The tree is restored to its original shape once the traversal completes.
    """
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            result.append(current.value)
            predecessor.right = None
            current = current.right
    return result


def breadth_first(root: Optional[TreeNode]) -> list:
    """Return values level by level, left to right."""
    if root is None:
        return []
    result = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def preorder(root: Optional[TreeNode]) -> list:
    """Return values in node-left-right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.value)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def inorder(root: Optional[TreeNode]) -> list:
    """Return values in left-node-right order."""
    result = []
    stack = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        result.append(node.value)
        current = node.right
    return result


def postorder(root: Optional[TreeNode]) -> list:
    """Return values in left-right-node order."""
    reversed_values = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        reversed_values.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_values[::-1]