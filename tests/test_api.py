"""Tests for the high-level functional API."""

import logging
import unittest

import pytest

from treeplayground import (
    BinarySearchTree,
    BinaryTree,
    CapabilityMismatchError,
    GenericTree,
    build_search_tree,
    collect_values,
    count_nodes,
    find_values,
    get_leaf_values,
    get_tree_stats,
    is_search_tree,
    tree_height,
)
from treeplayground.demo import build_binary_tree, build_generic_tree


class TestCollectValues(unittest.TestCase):

    def setUp(self):
        self.bst = build_search_tree([5, 3, 8, 1, 4, 7, 12, 10, 9, 11])
        self.generic = build_generic_tree()

    def test_default_is_breadth_first(self):
        self.assertEqual(collect_values(self.bst), [5, 3, 8, 1, 4, 7, 12, 10, 9, 11])

    def test_depth_first_uses_tree_default(self):
        self.assertEqual(collect_values(self.bst, "dfs"), [1, 3, 4, 5, 7, 8, 9, 10, 11, 12])
        self.assertEqual(collect_values(self.generic, "dfs"),
                         [10, 11, 1, 12, 13, 2, 14, 15, 3, 0])

    def test_explicit_order(self):
        self.assertEqual(collect_values(self.bst, "dfs", order="pre"),
                         [5, 3, 1, 4, 8, 7, 12, 10, 9, 11])
        self.assertEqual(collect_values(self.generic, "dfs", order="pre"),
                         [0, 1, 10, 11, 2, 12, 13, 3, 14, 15])

    def test_order_ignored_for_bfs(self):
        self.assertEqual(collect_values(self.generic, "bfs", order="in"), list(range(4)) + list(range(10, 16)))

    def test_binary_order_on_generic_tree(self):
        with self.assertRaises(CapabilityMismatchError):
            collect_values(self.generic, "dfs", order="in")


class TestTreeMeasures(unittest.TestCase):

    def test_count_and_height(self):
        self.assertEqual(count_nodes(build_generic_tree()), 10)
        self.assertEqual(tree_height(build_generic_tree()), 2)
        self.assertEqual(count_nodes(GenericTree("solo")), 1)
        self.assertEqual(tree_height(GenericTree("solo")), 0)

        bst = build_search_tree([5, 3, 8, 1, 4, 7, 12, 10, 9, 11])
        self.assertEqual(count_nodes(bst), 10)
        self.assertEqual(tree_height(bst), 4)

    def test_leaf_values(self):
        self.assertEqual(get_leaf_values(build_binary_tree()), [3, 4, 5, 6])
        self.assertEqual(get_leaf_values(build_search_tree([5, 3, 8, 1, 4, 7, 12, 10, 9, 11])),
                         [1, 4, 7, 9, 11])

    def test_find_values(self):
        self.assertEqual(find_values(build_generic_tree(), lambda v: v % 2 == 1),
                         [1, 3, 11, 13, 15])
        self.assertEqual(find_values(build_binary_tree(), lambda v: v > 3, strategy="dfs"),
                         [4, 5, 6])

    def test_tree_stats(self):
        stats = get_tree_stats(build_generic_tree())
        self.assertEqual(stats['total_nodes'], 10)
        self.assertEqual(stats['leaf_nodes'], 6)
        self.assertEqual(stats['internal_nodes'], 4)
        self.assertEqual(stats['height'], 2)
        self.assertEqual(stats['depths'], {0: 1, 1: 3, 2: 6})


class TestSearchTreeHelpers(unittest.TestCase):

    def test_build_search_tree(self):
        bst = build_search_tree(iter([2, 1, 3]))
        self.assertIsInstance(bst, BinarySearchTree)
        self.assertEqual(bst.value, 2)
        self.assertEqual(bst.left.value, 1)
        self.assertEqual(bst.right.value, 3)

    def test_build_search_tree_empty(self):
        with self.assertRaises(ValueError):
            build_search_tree([])

    def test_is_search_tree(self):
        self.assertTrue(is_search_tree(build_search_tree([5, 5, 3, 9, 7])))
        self.assertTrue(is_search_tree(BinaryTree(1)))

    def test_is_search_tree_rejects_hand_wired(self):
        # 0..6 in level order is not ordered
        self.assertFalse(is_search_tree(build_binary_tree()))

        # Violation deep in the tree: 6 sits in 5's left subtree but above 4
        root = BinaryTree(5)
        root.left = BinaryTree(3)
        root.left.right = BinaryTree(6)
        self.assertFalse(is_search_tree(root))

        # Equal value on the right breaks the strict bound
        root = BinaryTree(5)
        root.right = BinaryTree(5)
        self.assertFalse(is_search_tree(root))


def test_search_tree_insertion_logs_depth(caplog):
    bst = BinarySearchTree(10)
    with caplog.at_level(logging.DEBUG, logger="treeplayground.trees.search"):
        bst.add(5)
        bst.add(7)
    assert "Inserted 5 at depth 1" in caplog.text
    assert "Inserted 7 at depth 2" in caplog.text


@pytest.mark.parametrize("strategy", ["bfs", "dfs"])
def test_collect_values_is_repeatable(strategy):
    tree = build_binary_tree()
    assert collect_values(tree, strategy) == collect_values(tree, strategy)
