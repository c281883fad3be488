"""Binary search tree.

Values go left when ``value <= node.value`` and right otherwise, so an
in-order traversal always yields values in non-decreasing order. Equal values
are routed left. There is no rebalancing: inserting a sorted sequence builds
a tree as deep as the sequence is long.

Values must support a consistent total order. With a comparison that is not
transitive the resulting shape is unspecified, though insertion still
completes.
"""

import logging

from .binary import BinaryTree
from ..core.node import T

logger = logging.getLogger(__name__)


class BinarySearchTree(BinaryTree[T]):
    """BinaryTree whose ``add`` maintains the binary search tree ordering.

    ``left`` and ``right`` are only ever assigned by ``add``.
    """

    def add(self, child_value: T) -> 'BinarySearchTree[T]':
        """Insert ``child_value`` and return the node now holding it.

        The insertion point is found with a loop rather than recursion, so
        degenerate trees never hit the interpreter's recursion limit.
        """
        node = self
        depth = 1
        while True:
            if child_value <= node.value:
                if node.left is None:
                    node.left = self.__class__(child_value)
                    created = node.left
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = self.__class__(child_value)
                    created = node.right
                    break
                node = node.right
            depth += 1

        logger.debug("Inserted %r at depth %d", child_value, depth)
        return created
