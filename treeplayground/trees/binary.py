"""Binary tree with caller-wired children.

A :class:`BinaryTree` has at most two children, ``left`` and ``right``. There
is no insertion policy: callers attach children directly and may build any
shape. No ordering is assumed between values.
"""

from typing import Optional, Union

from ..config import DFSOrder, TraversalConfig
from ..core.adapter import BinaryAdapter
from ..core.node import T, Visitable, Visitor
from ..planning import ExecutionPlan


class BinaryTree(Visitable[T]):
    """Node with a value and optional ``left`` / ``right`` subtrees.

    Depth-first orders:

    - ``DFSOrder.PRE_ORDER``: value, left, right
    - ``DFSOrder.IN_ORDER``: left, value, right (the default)
    - ``DFSOrder.POST_ORDER``: right, value, left. This is a mirrored
      post-order and is kept that way deliberately.
    - ``DFSOrder.CHILDREN_FIRST``: left, right, value

    Missing children are skipped.
    """

    adapter = BinaryAdapter()

    def __init__(self, value: T):
        self.value: T = value
        self.left: Optional['BinaryTree[T]'] = None
        self.right: Optional['BinaryTree[T]'] = None

    def dfs(self, visit: Visitor, order: Union[DFSOrder, str] = DFSOrder.IN_ORDER,
            iterative: bool = True) -> None:
        """Depth-first traversal in ``order`` (enum member or name such as ``"pre"``).

        Raises:
            ValueError: If ``order`` is a name that is not recognized
        """
        config = TraversalConfig.depth_first(order, iterative=iterative)
        ExecutionPlan(config, self.adapter).run(self, visit)

    def bfs(self, visit: Visitor) -> None:
        """Level-order traversal; left child is enqueued before right."""
        ExecutionPlan(TraversalConfig.breadth_first(), self.adapter).run(self, visit)
