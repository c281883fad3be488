"""TreeAdapter abstraction for treeplayground.

The adapter knows HOW to reach the children of a particular node shape,
which lets the same traversal algorithms walk both the multi-child tree
and the binary trees.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional


class TreeAdapter(ABC):
    """Abstract adapter for navigating one kind of node.

    Traversers only ever ask an adapter for children, so a new node shape
    needs nothing more than an adapter to be walked.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of child nodes, in visiting order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        pass

    def is_leaf(self, node: Any) -> bool:
        """Check if the node has no children.

        Default implementation asks ``get_children`` for a first child.
        """
        for _ in self.get_children(node):
            return False
        return True

    def supports_binary_orders(self) -> bool:
        """Check if in-order and mirrored post-order are meaningful.

        Only adapters that can tell a left child from a right child
        support them.

        Returns:
            True if the adapter exposes ``get_left`` / ``get_right``
        """
        return False


class ChildListAdapter(TreeAdapter):
    """Adapter for nodes keeping an ordered ``children`` list."""

    def get_children(self, node: Any) -> Iterator[Any]:
        return iter(node.children)

    def is_leaf(self, node: Any) -> bool:
        return not node.children


class BinaryAdapter(TreeAdapter):
    """Adapter for nodes with optional ``left`` and ``right`` slots.

    Missing children are skipped; ``get_children`` yields left before right.
    """

    def get_left(self, node: Any) -> Optional[Any]:
        return node.left

    def get_right(self, node: Any) -> Optional[Any]:
        return node.right

    def get_children(self, node: Any) -> Iterator[Any]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def is_leaf(self, node: Any) -> bool:
        return node.left is None and node.right is None

    def supports_binary_orders(self) -> bool:
        return True
