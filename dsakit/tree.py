"""Binary trees: construction from a preorder listing, traversals and queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(preorder_values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from a preorder listing where ``-1`` marks a missing child.

    Values left over once the tree is complete are ignored.
    """
    values = iter(preorder_values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(values)
        except StopIteration:
            raise ValueError("preorder listing ends before the tree is complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def _preorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _postorder(root: Optional[TreeNode]) -> Iterator[int]:
    if root is not None:
        yield from _postorder(root.left)
        yield from _postorder(root.right)
        yield root.data


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    return list(_preorder(root))


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order."""
    return list(_inorder(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order."""
    return list(_postorder(root))


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def node_count(root: Optional[TreeNode]) -> int:
    """Total number of nodes."""
    if root is None:
        return 0
    return node_count(root.left) + node_count(root.right) + 1


def node_sum(root: Optional[TreeNode]) -> int:
    """Sum of all node values."""
    if root is None:
        return 0
    return node_sum(root.left) + node_sum(root.right) + root.data


def same_tree(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """True if both trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    return (
        first.data == second.data
        and same_tree(first.left, second.left)
        and same_tree(first.right, second.right)
    )


def is_subtree(root: Optional[TreeNode], sub_root: Optional[TreeNode]) -> bool:
    """True if some node of ``root`` heads a tree identical to ``sub_root``."""
    if root is None or sub_root is None:
        return root is sub_root
    if root.data == sub_root.data and same_tree(root, sub_root):
        return True
    return is_subtree(root.left, sub_root) or is_subtree(root.right, sub_root)