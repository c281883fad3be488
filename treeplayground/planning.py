"""Execution planning for treeplayground.

The ExecutionPlan validates that a TraversalConfig can be satisfied by a
TreeAdapter and coordinates the actual traversal execution.
"""

import logging
from typing import Any, Dict, Iterator, Tuple

from .config import DFSOrder, TraversalConfig, TraversalStrategy
from .core.adapter import TreeAdapter
from .core.node import Visitor
from .core.traverser import TreeTraverser, create_traverser

logger = logging.getLogger(__name__)


class CapabilityMismatchError(Exception):
    """Raised when configuration requirements can't be met by adapter."""
    pass


_ORDER_TRAVERSERS = {
    DFSOrder.PRE_ORDER: "dfs_pre",
    DFSOrder.IN_ORDER: "dfs_in",
    DFSOrder.POST_ORDER: "dfs_mirrored_post",
    DFSOrder.CHILDREN_FIRST: "dfs_post",
}


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between caller intent (TraversalConfig)
    and execution. It validates that the adapter can satisfy the config and
    picks the traverser before any node is touched.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Tree adapter for the node shape being walked

        Raises:
            CapabilityMismatchError: If adapter can't satisfy config
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Adapter limitations: {'; '.join(capability_issues)}"
            )

        self.nodes_processed = 0
        logger.debug("Planned %s with %s over %s",
                     self.traverser.__class__.__name__,
                     "explicit stack" if config.iterative else "recursion",
                     adapter.__class__.__name__)

    def _select_traverser(self) -> TreeTraverser:
        if self.config.strategy == TraversalStrategy.BREADTH_FIRST:
            strategy_name = "bfs"
        else:
            strategy_name = _ORDER_TRAVERSERS[self.config.order]
        return create_traverser(strategy_name, self.adapter, iterative=self.config.iterative)

    def _validate_capabilities(self):
        issues = []
        if self.traverser.requires_binary and not self.adapter.supports_binary_orders():
            issues.append(
                f"{self.config.order.value} traversal needs left/right children, "
                f"which {self.adapter.__class__.__name__} does not provide"
            )
        return issues

    def execute(self, root: Any) -> Iterator[Tuple[Any, int]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from

        Yields:
            Tuples of (node, depth)
        """
        self.nodes_processed = 0

        for node, depth in self.traverser.traverse(root, max_depth=self.config.max_depth):
            self.nodes_processed += 1
            yield (node, depth)

    def run(self, root: Any, visit: Visitor) -> None:
        """Execute the plan to completion, calling ``visit(value)`` per node."""
        for node, _ in self.execute(root):
            visit(node.value)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.
        """
        return {
            'strategy': self.config.strategy.value,
            'order': (self.config.order.value
                      if self.config.strategy == TraversalStrategy.DEPTH_FIRST else None),
            'iterative': self.config.iterative,
            'max_depth': self.config.max_depth,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
        }
