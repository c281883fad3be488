"""Playground demonstration.

Builds one tree of each kind and prints its traversals, one value per line.

Usage:
    python -m treeplayground                 # binary DFS in-order
    python -m treeplayground --order pre     # binary DFS pre-order
    python -m treeplayground -v              # with debug logging
"""

import argparse
import logging
import sys

from .config import parse_order
from .trees import BinarySearchTree, BinaryTree, GenericTree


def build_generic_tree() -> GenericTree:
    """Root 0 with children 1..3; each child gets the next two values from 10."""
    root = GenericTree(0)
    first = 10
    for i in range(1, 4):
        child = root.add(i)
        for value in range(first, first + 2):
            child.add(value)
        first += 2
    return root


def build_binary_tree() -> BinaryTree:
    """Complete tree of depth 2 holding 0..6 in level order."""
    root = BinaryTree(0)
    root.left = BinaryTree(1)
    root.right = BinaryTree(2)
    root.left.left = BinaryTree(3)
    root.left.right = BinaryTree(4)
    root.right.left = BinaryTree(5)
    root.right.right = BinaryTree(6)
    return root


def build_search_tree() -> BinarySearchTree:
    """
                   ( 5 )
                  /     \\
                (3)     (8)
               /  \\     /  \\
             (1)  (4) (7)  (12)
                           /
                         (10)
                         /  \\
                      (9)  (11)
    """
    root = BinarySearchTree(5)
    for value in (3, 8, 1, 4, 7, 12, 10, 9, 11):
        root.add(value)
    return root


def _print_value(value) -> None:
    print(value)


def run_demo(order: str = "in") -> None:
    """Print every traversal of the three sample trees."""
    dfs_order = parse_order(order)

    tree = build_generic_tree()
    print("Tree DFS:")
    tree.dfs(_print_value)
    print("\nTree BFS:")
    tree.bfs(_print_value)
    print("")

    binary = build_binary_tree()
    print(f"BinaryTree DFS {dfs_order.value}:")
    binary.dfs(_print_value, order=dfs_order)
    print("\nBinaryTree BFS:")
    binary.bfs(_print_value)
    print("")

    bst = build_search_tree()
    print(f"BinarySearchTree DFS {dfs_order.value}:")
    bst.dfs(_print_value, order=dfs_order)
    print("\nBinarySearchTree BFS:")
    bst.bfs(_print_value)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Print traversals of sample generic, binary and binary search trees"
    )
    parser.add_argument(
        "--order",
        choices=["pre", "in", "post"],
        default="in",
        help="Depth-first order for the binary trees (default: in)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    run_demo(args.order)
    return 0


if __name__ == "__main__":
    sys.exit(main())
