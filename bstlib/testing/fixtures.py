"""Test fixtures for bstlib consumers.

These fixtures provide controlled access to a tree's node graph for testing
purposes without exposing iteration or node access on Tree itself.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ..core.node import Node
from ..core.traverser import InOrderTraverser, PreOrderTraverser
from ..core.tree import Tree

logger = logging.getLogger(__name__)

# Nested (value, left, right) tuples; None for a missing subtree
Shape = Optional[Tuple[Any, Any, Any]]


class TreeTestHelper:
    """Public test fixture for verifying tree structure.

    Example:
        tree = Tree([5, 3, 8])
        helper = TreeTestHelper(tree)

        assert helper.in_order() == [3, 5, 8]
        assert helper.check_invariants() == []
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree under test.

        Args:
            tree: Tree to inspect (never modified)
        """
        self._tree = tree

    @property
    def root(self) -> Optional[Node]:
        return self._tree._root

    def in_order(self) -> List[Any]:
        """Values in ascending order, read straight from the nodes."""
        return [node.value for node, _ in InOrderTraverser().traverse(self.root)]

    def pre_order(self) -> List[Any]:
        """Values parent-first; inserting them in this order rebuilds the shape."""
        return [node.value for node, _ in PreOrderTraverser().traverse(self.root)]

    def shape(self) -> Shape:
        """Nested tuple describing the exact shape of the tree.

        Returns:
            ``(value, left_shape, right_shape)`` for the root, or None
        """
        shapes: Dict[int, Shape] = {}
        nodes = [node for node, _ in PreOrderTraverser().traverse(self.root)]
        # Reversed pre-order sees every child before its parent
        for node in reversed(nodes):
            shapes[id(node)] = (
                node.value,
                shapes[id(node.left)] if node.left is not None else None,
                shapes[id(node.right)] if node.right is not None else None,
            )
        return shapes[id(self.root)] if self.root is not None else None

    def height(self) -> int:
        """Number of levels (0 for an empty tree)."""
        depths = [depth for _, depth in InOrderTraverser().traverse(self.root)]
        return max(depths) + 1 if depths else 0

    def node_count(self) -> int:
        """Count of nodes actually reachable from the root."""
        return sum(1 for _ in InOrderTraverser().traverse(self.root))

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: What the tree reports
            - reachable: Nodes reachable from the root
            - height: Number of levels
            - leaves: Number of leaf nodes
            - root: Root value (None when empty)
        """
        nodes = [node for node, _ in InOrderTraverser().traverse(self.root)]
        return {
            'size': self._tree.size(),
            'reachable': len(nodes),
            'height': self.height(),
            'leaves': sum(1 for node in nodes if node.is_leaf()),
            'root': self.root.value if self.root is not None else None,
        }

    def check_invariants(self) -> List[str]:
        """Validate ordering, size and parent links.

        Returns:
            List of violations (empty if the tree is well formed)
        """
        problems = []
        root = self.root

        if root is not None and root.parent is not None:
            problems.append(f"root {root.value!r} has a parent")

        values = self.in_order()
        for previous, current in zip(values, values[1:]):
            if not current > previous:
                problems.append(
                    f"in-order values not strictly increasing at {previous!r}, {current!r}"
                )

        if len(values) != self._tree.size():
            problems.append(
                f"size() is {self._tree.size()} but {len(values)} node(s) are reachable"
            )

        for node, _ in PreOrderTraverser().traverse(root):
            for child in (node.left, node.right):
                if child is not None and child.parent is not node:
                    problems.append(
                        f"child {child.value!r} does not point back to parent {node.value!r}"
                    )

        if problems:
            logger.debug("Found %d invariant violation(s)", len(problems))
        return problems
