"""The three playground tree types."""

from .generic import GenericTree
from .binary import BinaryTree
from .search import BinarySearchTree

__all__ = [
    'GenericTree',
    'BinaryTree',
    'BinarySearchTree',
]
