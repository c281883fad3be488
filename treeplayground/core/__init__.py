"""Core traversal machinery: the visitable contract, adapters and traversers."""

from .node import Visitable, Visitor
from .adapter import TreeAdapter, ChildListAdapter, BinaryAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    InOrderTraverser,
    MirroredPostOrderTraverser,
    create_traverser,
)

__all__ = [
    'Visitable',
    'Visitor',
    'TreeAdapter',
    'ChildListAdapter',
    'BinaryAdapter',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'InOrderTraverser',
    'MirroredPostOrderTraverser',
    'create_traverser',
]
