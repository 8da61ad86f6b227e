"""Binary tree and linked list nodes with algorithms over them."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """Node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass
class ListNode:
    """Node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None


def linked_list(values):
    """Build a linked list from values and return its head (None if empty)."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head):
    """Return the values of a linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def min_depth(root):
    """Number of nodes on the shortest path from the root to a leaf."""
    if root is None:
        return 0
    children = [child for child in (root.left, root.right) if child is not None]
    if not children:
        return 1
    return 1 + min(min_depth(child) for child in children)


def find_min(root):
    """Return the leftmost node of a tree."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    while root.left is not None:
        root = root.left
    return root


def delete_node(root, key):
    """Remove key from a binary search tree and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = delete_node(root.left, key)
    elif key > root.val:
        root.right = delete_node(root.right, key)
    elif root.left is None:
        return root.right
    elif root.right is None:
        return root.left
    else:
        root.val = find_min(root.right).val
        root.right = delete_node(root.right, root.val)
    return root


def remove_zero_sum_sublists(head):
    """Drop runs of consecutive nodes that sum to zero; return the new head."""
    dummy = ListNode(0, head)
    last_at = {}
    total = 0
    node = dummy
    while node is not None:
        total += node.val
        last_at[total] = node
        node = node.next

    total = 0
    node = dummy
    while node is not None:
        total += node.val
        node.next = last_at[total].next
        node = node.next
    return dummy.next