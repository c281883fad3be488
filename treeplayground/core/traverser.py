"""Tree traversal strategies for treeplayground.

Traversers implement the algorithms for walking a tree. They work through a
TreeAdapter, so the same breadth-first and depth-first code serves the
multi-child tree and the binary trees.

Depth-first traversers walk with an explicit stack by default, so trees of
any height can be traversed. ``iterative=False`` selects the recursive
walk, which visits nodes in exactly the same order but is limited by the
interpreter's recursion depth.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple

from .adapter import TreeAdapter

#: One step of a depth-first layout: (True, node) visits it, (False, child) descends.
Step = Tuple[bool, Any]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    #: Whether the strategy needs to tell left children from right children.
    requires_binary = False

    def __init__(self, adapter: TreeAdapter, iterative: bool = True):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
            iterative: Use an explicit stack (default) instead of recursion
        """
        self.adapter = adapter
        self.iterative = iterative

    @abstractmethod
    def traverse(self, root: Any, max_depth: Optional[int] = None) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    A node's children are enqueued before the node itself is yielded, so all
    nodes at depth N come out before any node at depth N+1. Always queue
    based; ``iterative`` makes no difference.
    """

    def traverse(self, root: Any, max_depth: Optional[int] = None) -> Iterator[Tuple[Any, int]]:
        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_explore(depth, max_depth) and not self.adapter.is_leaf(node):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))

            yield (node, depth)


class DepthFirstTraverser(TreeTraverser):
    """Base class for depth-first strategies.

    Subclasses only describe, for a single node, the sequence in which the
    node itself and its children are handled. This class turns that layout
    into either a recursive or an explicit-stack walk.
    """

    @abstractmethod
    def _layout(self, node: Any) -> List[Step]:
        """Return the visit/descend steps for one node, in traversal order."""
        pass

    def traverse(self, root: Any, max_depth: Optional[int] = None) -> Iterator[Tuple[Any, int]]:
        if self.iterative:
            return self._traverse_iterative(root, max_depth)
        return self._traverse_recursive(root, 0, max_depth)

    def _steps(self, node: Any, depth: int, max_depth: Optional[int]) -> List[Step]:
        if self._should_explore(depth, max_depth) and not self.adapter.is_leaf(node):
            return self._layout(node)
        return [(True, node)]

    def _traverse_recursive(self, node: Any, depth: int,
                            max_depth: Optional[int]) -> Iterator[Tuple[Any, int]]:
        for is_self, item in self._steps(node, depth, max_depth):
            if is_self:
                yield (item, depth)
            else:
                yield from self._traverse_recursive(item, depth + 1, max_depth)

    def _traverse_iterative(self, root: Any, max_depth: Optional[int]) -> Iterator[Tuple[Any, int]]:
        # Entries are (expanded, node, depth); an expanded entry is ready to yield.
        stack: List[Tuple[bool, Any, int]] = [(False, root, 0)]

        while stack:
            expanded, node, depth = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            for is_self, item in reversed(self._steps(node, depth, max_depth)):
                if is_self:
                    stack.append((True, item, depth))
                else:
                    stack.append((False, item, depth + 1))


class DepthFirstPreOrderTraverser(DepthFirstTraverser):
    """Node first, then each child in adapter order."""

    def _layout(self, node: Any) -> List[Step]:
        steps = [(True, node)]
        steps.extend((False, child) for child in self.adapter.get_children(node))
        return steps


class DepthFirstPostOrderTraverser(DepthFirstTraverser):
    """Each child in adapter order, then the node.

    This is the depth-first order of the multi-child tree.
    """

    def _layout(self, node: Any) -> List[Step]:
        steps = [(False, child) for child in self.adapter.get_children(node)]
        steps.append((True, node))
        return steps


class InOrderTraverser(DepthFirstTraverser):
    """Left subtree, node, right subtree. Binary adapters only."""

    requires_binary = True

    def _layout(self, node: Any) -> List[Step]:
        steps = []
        left = self.adapter.get_left(node)
        if left is not None:
            steps.append((False, left))
        steps.append((True, node))
        right = self.adapter.get_right(node)
        if right is not None:
            steps.append((False, right))
        return steps


class MirroredPostOrderTraverser(DepthFirstTraverser):
    """Right subtree, node, left subtree. Binary adapters only.

    This is what the binary trees call post-order.
    """

    requires_binary = True

    def _layout(self, node: Any) -> List[Step]:
        steps = []
        right = self.adapter.get_right(node)
        if right is not None:
            steps.append((False, right))
        steps.append((True, node))
        left = self.adapter.get_left(node)
        if left is not None:
            steps.append((False, left))
        return steps


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: TreeAdapter, iterative: bool = True) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post, dfs_in, dfs_mirrored_post)
        adapter: TreeAdapter for the tree structure
        iterative: Use an explicit stack for depth-first strategies

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'dfs_in': InOrderTraverser,
        'dfs_mirrored_post': MirroredPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter, iterative=iterative)
