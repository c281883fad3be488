"""Multi-child tree.

A :class:`GenericTree` holds one value and an ordered list of children.
Children can only be created through :meth:`GenericTree.add`, so every node
exclusively owns its children and the structure can never contain a cycle.
"""

from typing import List

from ..config import DFSOrder, TraversalConfig
from ..core.adapter import ChildListAdapter
from ..core.node import T, Visitable, Visitor
from ..planning import ExecutionPlan


class GenericTree(Visitable[T]):
    """Node with a value and any number of ordered children.

    Example:
        >>> root = GenericTree(0)
        >>> child = root.add(1)
        >>> child.add(10)
        GenericTree(10)
        >>> values = []
        >>> root.bfs(values.append)
        >>> values
        [0, 1, 10]
    """

    adapter = ChildListAdapter()

    def __init__(self, value: T):
        self.value: T = value
        self.children: List['GenericTree[T]'] = []

    def add(self, child_value: T) -> 'GenericTree[T]':
        """Append a new child holding ``child_value`` and return it.

        The returned node can be used to keep adding below that child.
        """
        child = self.__class__(child_value)
        self.children.append(child)
        return child

    def dfs(self, visit: Visitor, iterative: bool = True) -> None:
        """Depth-first traversal: every child subtree (in insertion order), then the value."""
        config = TraversalConfig.depth_first(DFSOrder.CHILDREN_FIRST, iterative=iterative)
        ExecutionPlan(config, self.adapter).run(self, visit)

    def bfs(self, visit: Visitor) -> None:
        """Level-order traversal; siblings are visited in insertion order."""
        ExecutionPlan(TraversalConfig.breadth_first(), self.adapter).run(self, visit)
