import pytest

from algoset.nodes import (
    ListNode,
    TreeNode,
    delete_node,
    find_min,
    linked_list,
    list_values,
    min_depth,
    remove_zero_sum_sublists,
)


def _insert(root, value):
    if root is None:
        return TreeNode(value)
    if value < root.val:
        root.left = _insert(root.left, value)
    else:
        root.right = _insert(root.right, value)
    return root


def _build(values):
    root = None
    for value in values:
        root = _insert(root, value)
    return root


def _inorder(root):
    if root is None:
        return []
    return _inorder(root.left) + [root.val] + _inorder(root.right)


def test_linked_list_round_trip():
    values = [4, -1, 7, 0]
    head = linked_list(values)
    assert head == ListNode(4, ListNode(-1, ListNode(7, ListNode(0))))
    assert list_values(head) == values


def test_linked_list_empty():
    assert linked_list([]) is None
    assert list_values(None) == []


def test_min_depth():
    root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
    assert min_depth(root) == 2
    assert min_depth(None) == 0
    assert min_depth(TreeNode(1)) == 1


def test_min_depth_chain():
    values = [1, 2, 3, 4, 5]
    root = _build(values)
    assert min_depth(root) == len(values)


def test_find_min():
    values = [50, 30, 70, 20, 40, 60, 80]
    assert find_min(_build(values)).val == min(values)
    with pytest.raises(ValueError):
        find_min(None)


@pytest.mark.parametrize("key", [50, 30, 70, 20, 40, 60, 80])
def test_delete_node_keeps_order(key):
    values = [50, 30, 70, 20, 40, 60, 80]
    root = delete_node(_build(values), key)
    assert _inorder(root) == sorted(v for v in values if v != key)


def test_delete_node_missing_and_empty():
    values = [5, 3, 6, 2, 4, 7]
    root = delete_node(_build(values), 0)
    assert _inorder(root) == sorted(values)
    assert delete_node(None, 1) is None
    assert delete_node(TreeNode(1), 1) is None


def test_remove_zero_sum_sublists_examples():
    assert list_values(remove_zero_sum_sublists(linked_list([1, 2, -3, 3, 1]))) == [3, 1]
    assert list_values(remove_zero_sum_sublists(linked_list([1, 2, 3, -3, 4]))) == [1, 2, 4]


def test_remove_zero_sum_sublists_all_removed():
    assert remove_zero_sum_sublists(linked_list([1, -1])) is None
    assert remove_zero_sum_sublists(None) is None


def test_remove_zero_sum_sublists_no_zero_runs():
    values = [1, 2, 3]
    assert list_values(remove_zero_sum_sublists(linked_list(values))) == values


def test_remove_zero_sum_sublists_leaves_no_zero_run():
    result = list_values(remove_zero_sum_sublists(linked_list([2, -2, 5, 3, -3, -5, 7, 1])))
    prefix = [0]
    for value in result:
        prefix.append(prefix[-1] + value)
    assert len(set(prefix)) == len(prefix)