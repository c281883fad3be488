"""Visitable abstraction for treeplayground.

Multi-child and two-child nodes are shaped differently, so rather than
forcing them under a common node representation they only share this
capability: they hold a value and can be walked depth-first and
breadth-first with a per-node callback.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from .adapter import TreeAdapter

T = TypeVar('T')

#: Callback invoked with each visited value, in traversal order.
Visitor = Callable[[Any], None]


class Visitable(ABC, Generic[T]):
    """Abstract base class for every tree node in the playground.

    Subclasses set ``self.value`` and implement ``dfs`` and ``bfs``.
    Both traversals run to completion on the calling thread and may be
    invoked any number of times. Mutating the tree from inside ``visit``
    is unsupported and leaves the visit sequence undefined.
    """

    value: T

    #: Navigates this node shape; set by each concrete tree class.
    adapter: TreeAdapter

    @abstractmethod
    def dfs(self, visit: Visitor, *args, **kwargs) -> None:
        """Depth-first traversal, calling ``visit(value)`` for each node."""
        pass

    @abstractmethod
    def bfs(self, visit: Visitor, *args, **kwargs) -> None:
        """Breadth-first (level-order) traversal, calling ``visit(value)`` for each node."""
        pass

    def is_leaf(self) -> bool:
        """Return True if this node has no children."""
        return self.adapter.is_leaf(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
