"""High-level API for treeplayground.

Simple functional helpers over any playground tree. They wrap the
callback-based ``dfs`` / ``bfs`` operations and always return complete
results (lists, counts, dicts).
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .config import DFSOrder, TraversalConfig, TraversalStrategy, parse_order, parse_strategy
from .core.node import Visitable
from .planning import ExecutionPlan
from .trees.binary import BinaryTree
from .trees.search import BinarySearchTree


def collect_values(
    tree: Visitable,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    order: Optional[Union[DFSOrder, str]] = None,
) -> List[Any]:
    """Traverse ``tree`` and return the visited values as a list.

    Args:
        tree: Any playground tree
        strategy: "bfs" or "dfs" (or a TraversalStrategy)
        order: Depth-first order; ignored for bfs. None uses the tree's
            own default.

    Raises:
        CapabilityMismatchError: If ``order`` needs left/right children
            and ``tree`` is a multi-child tree

    Example:
        >>> bst = build_search_tree([5, 3, 8])
        >>> collect_values(bst, "dfs")
        [3, 5, 8]
    """
    values: List[Any] = []

    if parse_strategy(strategy) == TraversalStrategy.BREADTH_FIRST:
        tree.bfs(values.append)
    elif order is None:
        tree.dfs(values.append)
    else:
        config = TraversalConfig.depth_first(parse_order(order))
        ExecutionPlan(config, tree.adapter).run(tree, values.append)

    return values


def count_nodes(tree: Visitable) -> int:
    """Count the nodes in a tree."""
    return len(_depths(tree))


def tree_height(tree: Visitable) -> int:
    """Number of edges on the longest root-to-leaf path (a lone root is 0)."""
    return max(_depths(tree))


def get_leaf_values(tree: Visitable) -> List[Any]:
    """Values of all leaf nodes, in breadth-first order."""
    plan = ExecutionPlan(TraversalConfig.breadth_first(), tree.adapter)
    return [node.value for node, _ in plan.execute(tree) if tree.adapter.is_leaf(node)]


def find_values(
    tree: Visitable,
    predicate: Callable[[Any], bool],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
) -> List[Any]:
    """Values matching ``predicate``, in traversal order."""
    return [value for value in collect_values(tree, strategy) if predicate(value)]


def get_tree_stats(tree: Visitable) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height and
        depths (node count per depth)

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {}
    }

    plan = ExecutionPlan(TraversalConfig.breadth_first(), tree.adapter)
    for node, depth in plan.execute(tree):
        stats['total_nodes'] += 1

        if tree.adapter.is_leaf(node):
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


def build_search_tree(values: Iterable[Any]) -> BinarySearchTree:
    """Build a BinarySearchTree; the first value becomes the root.

    Raises:
        ValueError: If ``values`` is empty
    """
    it = iter(values)
    try:
        root = BinarySearchTree(next(it))
    except StopIteration:
        raise ValueError("Cannot build a search tree from an empty sequence") from None

    for value in it:
        root.add(value)
    return root


def is_search_tree(tree: BinaryTree) -> bool:
    """Check the ordering invariant: left subtree <= node < right subtree.

    Works on any BinaryTree, which makes it handy for checking hand-wired trees.
    """
    # Each entry carries the (exclusive lower, inclusive upper) bounds for its subtree.
    stack = [(tree, None, None)]
    while stack:
        node, low, high = stack.pop()
        if low is not None and not node.value > low:
            return False
        if high is not None and not node.value <= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


# Helper functions

def _depths(tree: Visitable) -> List[int]:
    plan = ExecutionPlan(TraversalConfig.breadth_first(), tree.adapter)
    return [depth for _, depth in plan.execute(tree)]
