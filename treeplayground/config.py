"""Configuration system for treeplayground.

This module defines how callers describe a traversal: which strategy to use,
which depth-first order to follow, and whether to walk with recursion or
with an explicit stack.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class TraversalStrategy(Enum):
    """How to walk the tree."""
    BREADTH_FIRST = "bfs"    # Level by level
    DEPTH_FIRST = "dfs"      # Descend fully into a subtree first


class DFSOrder(Enum):
    """When a node's value is visited relative to its children.

    PRE_ORDER, IN_ORDER and POST_ORDER apply to binary trees. POST_ORDER is
    the mirrored form: right subtree, value, left subtree.
    CHILDREN_FIRST applies to multi-child trees: every child, then the value.
    """
    PRE_ORDER = "pre_order"
    IN_ORDER = "in_order"
    POST_ORDER = "post_order"
    CHILDREN_FIRST = "children_first"


_STRATEGY_ALIASES = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.BREADTH_FIRST,
    'level_order': TraversalStrategy.BREADTH_FIRST,
    'dfs': TraversalStrategy.DEPTH_FIRST,
    'depth_first': TraversalStrategy.DEPTH_FIRST,
}

_ORDER_ALIASES = {
    'pre': DFSOrder.PRE_ORDER,
    'pre_order': DFSOrder.PRE_ORDER,
    'preorder': DFSOrder.PRE_ORDER,
    'in': DFSOrder.IN_ORDER,
    'in_order': DFSOrder.IN_ORDER,
    'inorder': DFSOrder.IN_ORDER,
    'post': DFSOrder.POST_ORDER,
    'post_order': DFSOrder.POST_ORDER,
    'postorder': DFSOrder.POST_ORDER,
    'children_first': DFSOrder.CHILDREN_FIRST,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse a strategy from an enum member or a case-insensitive name.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    key = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if key in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[key]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


def parse_order(order: Union[DFSOrder, str]) -> DFSOrder:
    """Parse a depth-first order from an enum member or a case-insensitive name.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, DFSOrder):
        return order

    key = order.lower().replace('-', '_') if isinstance(order, str) else str(order)
    if key in _ORDER_ALIASES:
        return _ORDER_ALIASES[key]

    raise ValueError(
        f"Unknown depth-first order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class TraversalConfig:
    """Complete description of one traversal.

    Example:
        config = TraversalConfig(
            strategy=TraversalStrategy.DEPTH_FIRST,
            order=DFSOrder.PRE_ORDER,
            iterative=True,
        )
    """

    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST

    # Only consulted for DEPTH_FIRST
    order: DFSOrder = DFSOrder.IN_ORDER

    # Explicit stack has no recursion limit; False walks recursively
    iterative: bool = True

    # None = unlimited; 0 = root only
    max_depth: Optional[int] = None

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if not isinstance(self.order, DFSOrder):
            errors.append(f"order must be a DFSOrder, got {self.order!r}")

        if self.max_depth is not None:
            if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
                errors.append(f"max_depth must be an integer, got {self.max_depth!r}")
            elif self.max_depth < 0:
                errors.append(f"max_depth must be non-negative, got {self.max_depth}")

        return errors

    @classmethod
    def breadth_first(cls, **kwargs) -> 'TraversalConfig':
        """Level-order traversal."""
        return cls(strategy=TraversalStrategy.BREADTH_FIRST, **kwargs)

    @classmethod
    def depth_first(cls, order: Union[DFSOrder, str] = DFSOrder.IN_ORDER,
                    **kwargs) -> 'TraversalConfig':
        """Depth-first traversal in the given order."""
        return cls(strategy=TraversalStrategy.DEPTH_FIRST, order=parse_order(order), **kwargs)
