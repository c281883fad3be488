"""treeplayground - Three classic trees and their traversals.

Each tree holds a value per node and supports depth-first and breadth-first
traversal with a per-node callback:
━━━━━━━━━━━━━━━━━━━━━━━━━━
GenericTree:
    ordered children, built with add()
BinaryTree:
    left/right slots wired by the caller
BinarySearchTree:
    add() keeps left <= value < right
━━━━━━━━━━━━━━━━━━━━━━━━━━

Example:
    from treeplayground import BinarySearchTree

    bst = BinarySearchTree(5)
    for value in (3, 8, 1):
        bst.add(value)
    bst.dfs(print)            # 1 3 5 8
"""

__version__ = "0.1.0"

from .trees import GenericTree, BinaryTree, BinarySearchTree
from .core.node import Visitable
from .config import TraversalConfig, TraversalStrategy, DFSOrder
from .planning import ExecutionPlan, CapabilityMismatchError
from .api import (
    collect_values,
    count_nodes,
    tree_height,
    get_leaf_values,
    find_values,
    get_tree_stats,
    build_search_tree,
    is_search_tree,
)

__all__ = [
    "__version__",
    # Trees
    "GenericTree",
    "BinaryTree",
    "BinarySearchTree",
    "Visitable",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DFSOrder",
    "ExecutionPlan",
    "CapabilityMismatchError",
    # API
    "collect_values",
    "count_nodes",
    "tree_height",
    "get_leaf_values",
    "find_values",
    "get_tree_stats",
    "build_search_tree",
    "is_search_tree",
]
