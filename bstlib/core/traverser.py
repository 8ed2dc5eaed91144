"""Depth-first walkers over bstlib node graphs.

These are internal building blocks for rendering and the testing helpers.
They are deliberately not exposed as iteration methods on Tree.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple
from .node import Node


class NodeTraverser(ABC):
    """Abstract base class for node walking strategies.

    Traversers yield ``(node, depth)`` tuples where depth is relative to
    the starting node. They keep their own stack instead of recursing, so
    a tree degraded into a long chain walks the same as a bushy one.
    """

    @abstractmethod
    def traverse(self, root: Optional[Node], depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Walk the subtree starting at root.

        Args:
            root: Starting node (None yields nothing)
            depth: Depth assigned to root

        Yields:
            Tuples of (node, depth)
        """
        pass


class InOrderTraverser(NodeTraverser):
    """Left subtree, node, right subtree.

    On a well-formed tree this yields values in ascending order.
    """

    def traverse(self, root: Optional[Node], depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node = root
        while stack or node is not None:
            # Descend as far left as possible
            while node is not None:
                stack.append((node, depth))
                node = node.left
                depth += 1
            node, depth = stack.pop()
            yield (node, depth)
            node = node.right
            depth += 1


class ReverseInOrderTraverser(NodeTraverser):
    """Right subtree, node, left subtree.

    This is the order the diagram printer uses: read top to bottom, the
    output is the tree rotated a quarter turn counter-clockwise.
    """

    def traverse(self, root: Optional[Node], depth: int = 0) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = []
        node = root
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            yield (node, depth)
            node = node.left
            depth += 1


class PreOrderTraverser(NodeTraverser):
    """Node before its children, left before right.

    Re-inserting values in this order rebuilds the exact same shape.
    """

    def traverse(self, root: Optional[Node], depth: int = 0) -> Iterator[Tuple[Node, int]]:
        if root is None:
            return
        stack: List[Tuple[Node, int]] = [(root, depth)]
        while stack:
            node, node_depth = stack.pop()
            yield (node, node_depth)
            # Right pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append((node.right, node_depth + 1))
            if node.left is not None:
                stack.append((node.left, node_depth + 1))

# Factory function for creating traversers by name
def create_traverser(strategy: str) -> NodeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in_order, reverse, pre_order)

    Returns:
        NodeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'reverse': ReverseInOrderTraverser,
        'reverse_in_order': ReverseInOrderTraverser,
        'pre_order': PreOrderTraverser,
        'preorder': PreOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
