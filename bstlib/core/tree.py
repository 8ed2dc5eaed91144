"""The Tree container.

Tree is an ordered, value-semantic binary search tree. It performs no
rebalancing, so its height depends entirely on insertion order. Elements
must provide a consistent total order through ``==`` and ``>``; if they do
not, which subtree a value lands in (and whether duplicates are detected)
is undefined.
"""

import copy
import dataclasses
import logging
from typing import Any, Dict, Generic, Iterable, List, Optional, TextIO, Tuple, TypeVar, Union

from ..config import TreeConfig
from ..render import format_tree, print_tree
from .node import Node

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Tree(Generic[T]):
    """Ordered container backed by an unbalanced binary search tree.

    Each stored value appears exactly once; inserting a value that is
    already present does nothing, and so does removing one that is absent.
    Copies are deep: a copy owns its own nodes and never observes changes
    made to the original.

    Example:
        >>> tree = Tree([5, 3, 8, 1, 4])
        >>> tree.size()
        5
        >>> tree.exists(4), tree.exists(9)
        (True, False)
        >>> tree.remove(3)
        >>> tree.size()
        4
    """

    __hash__ = None  # Mutable container

    def __init__(self,
                 values: Union[Iterable[T], 'Tree[T]', None] = None,
                 config: Optional[TreeConfig] = None):
        """Create a tree.

        Args:
            values: Another Tree to deep-copy, or any finite iterable of
                values to insert in iteration order (None = empty)
            config: Rendering options. A copy inherits the source tree's
                config unless one is given here.

        Raises:
            TypeError: If config is not a TreeConfig
            ConfigurationError: If config fails validation
        """
        self._root: Optional[Node[T]] = None
        self._size: int = 0

        if config is None and isinstance(values, Tree):
            config = values._config
        self._config = self._resolve_config(config)

        if isinstance(values, Tree):
            self._copy_from(values)
        elif values is not None:
            self.insert_all(values)

    @staticmethod
    def _resolve_config(config: Optional[TreeConfig]) -> TreeConfig:
        if config is None:
            return TreeConfig()
        if not isinstance(config, TreeConfig):
            raise TypeError(
                f"config must be a TreeConfig, not {type(config).__name__}"
            )
        config.check()
        return dataclasses.replace(config)

    @property
    def config(self) -> TreeConfig:
        """A copy of this tree's rendering options.

        Changing the returned object does not affect the tree.
        """
        return dataclasses.replace(self._config)

    # Queries

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def exists(self, value: T) -> bool:
        """Check whether value is stored in the tree."""
        return self._find(value, self._root) is not None

    def equals(self, other: 'Tree[T]') -> bool:
        """Structural equality.

        Two trees are equal when they hold the same values in the same
        shape. Trees holding the same set of values built in different
        orders can differ in shape and therefore compare unequal.

        Args:
            other: Tree to compare against

        Returns:
            True if both trees have identical shape and values

        Raises:
            TypeError: If other is not a Tree
        """
        if not isinstance(other, Tree):
            raise TypeError(
                f"equals() expects a Tree, not {type(other).__name__}"
            )
        if self is other:
            return True
        if self._size != other._size:
            return False
        return self._equals(self._root, other._root)

    # Mutation

    def insert(self, value: T) -> None:
        """Insert a single value; no-op if it is already present."""
        if self._root is None:
            self._root = Node(value)
            self._size += 1
            return

        parent = self._insert_position(value, self._root)
        if parent is None:
            logger.debug("Ignoring duplicate value %r", value)
            return

        node = Node(value, parent)
        if parent.value > value:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def insert_all(self, values: Iterable[T]) -> None:
        """Insert every value from an iterable, in iteration order.

        Later duplicates are silently dropped.

        Args:
            values: Any finite iterable (list, tuple, set, generator, ...)
        """
        for value in values:
            self.insert(value)

    def remove(self, value: T) -> None:
        """Remove value from the tree; no-op if it is absent.

        A node with two children is not unlinked itself. Instead it takes
        over the value of its in-order predecessor, and the predecessor
        (which never has a right child) is unlinked in its place.
        """
        node = self._find(value, self._root)
        if node is None:
            logger.debug("Value %r not present, nothing removed", value)
            return

        if node.has_both_children():
            node = self._replace_with_predecessor(node)
        self._unlink(node)
        self._size -= 1

    def clear(self) -> None:
        """Drop every node."""
        logger.debug("Clearing tree of %d node(s)", self._size)
        self._root = None
        self._size = 0

    def assign(self, source: Union[Iterable[T], 'Tree[T]']) -> None:
        """Replace the contents of this tree.

        Args:
            source: A Tree to deep-copy, or an iterable of values to insert
                after clearing. This tree keeps its own config either way.
        """
        if source is self:
            return
        if isinstance(source, Tree):
            self._copy_from(source)
            return
        values = list(source)
        self.clear()
        self.insert_all(values)

    def copy(self) -> 'Tree[T]':
        """Return an independent deep copy of this tree."""
        return Tree(self)

    # Output

    def print(self, sink: Optional[TextIO] = None) -> None:
        """Write an indented diagram of the tree.

        Args:
            sink: Writable text stream (defaults to sys.stdout)
        """
        print_tree(self._root, self._config, sink)

    def format(self) -> str:
        """Return the diagram written by print() as a string."""
        return format_tree(self._root, self._config)

    # Internal structural helpers

    def _copy_from(self, other: 'Tree[T]') -> None:
        self._root = other._root.clone() if other._root is not None else None
        self._size = other._size
        logger.debug("Cloned tree of %d node(s)", self._size)

    def _find(self, value: T, node: Optional[Node[T]]) -> Optional[Node[T]]:
        while node is not None and node.value != value:
            node = node.left if node.value > value else node.right
        return node

    def _find_max(self, node: Node[T]) -> Node[T]:
        while node.right is not None:
            node = node.right
        return node

    def _insert_position(self, value: T, node: Node[T]) -> Optional[Node[T]]:
        """Find the node that will own a new node holding value.

        Returns:
            The parent for the new node, or None if value is already stored
        """
        while True:
            if node.value == value:
                return None
            nxt = node.left if node.value > value else node.right
            if nxt is None:
                return node
            node = nxt

    def _replace_with_predecessor(self, node: Node[T]) -> Node[T]:
        """Move the in-order predecessor's value into node.

        Returns:
            The predecessor node, which is the one to unlink
        """
        predecessor = self._find_max(node.left)
        logger.debug("Replacing %r with predecessor %r", node.value, predecessor.value)
        node.value = predecessor.value
        return predecessor

    def _unlink(self, node: Node[T]) -> None:
        """Detach a node that has at most one child.

        The parent slot is chosen by identity. Choosing it by comparing
        values breaks when the predecessor is the direct left child of the
        node it replaced, since both then hold the same value.
        """
        child = node.only_child()
        parent = node.parent

        if child is not None:
            child.parent = parent

        if parent is None:
            logger.debug("Root %r replaced by %r", node.value,
                         child.value if child is not None else None)
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

        node.left = node.right = None
        node.parent = None

    def _equals(self, lhs: Optional[Node[T]], rhs: Optional[Node[T]]) -> bool:
        """Compare two subtrees position by position, left side first."""
        stack: List[Tuple[Optional[Node[T]], Optional[Node[T]]]] = [(lhs, rhs)]
        while stack:
            left, right = stack.pop()
            if left is None or right is None:
                if left is not right:
                    return False
                continue
            if left.value != right.value:
                return False
            if (left.left is None) != (right.left is None):
                return False
            stack.append((left.right, right.right))
            stack.append((left.left, right.left))
        return True

    # Python protocol

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.exists(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return self.equals(other)

    def __copy__(self) -> 'Tree[T]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'Tree[T]':
        """Deep copy, also deep-copying the stored values."""
        clone: Tree[T] = Tree(config=self._config)
        memo[id(self)] = clone
        if self._root is not None:
            clone._root = self._root.clone(lambda value: copy.deepcopy(value, memo))
        clone._size = self._size
        return clone

    def __repr__(self) -> str:
        return f"Tree(size={self._size})"
