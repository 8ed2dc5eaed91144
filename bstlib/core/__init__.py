"""Core structures for bstlib.

This package holds the node cell, the internal walkers and the Tree
container built on top of them.
"""

from .node import Node
from .traverser import (
    NodeTraverser,
    InOrderTraverser,
    ReverseInOrderTraverser,
    PreOrderTraverser,
    create_traverser,
)
from .tree import Tree

__all__ = [
    "Node",
    "NodeTraverser",
    "InOrderTraverser",
    "ReverseInOrderTraverser",
    "PreOrderTraverser",
    "create_traverser",
    "Tree",
]
