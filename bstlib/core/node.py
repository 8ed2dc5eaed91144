"""Node cell for bstlib trees.

A Node is a single tree cell. It owns its left and right children and keeps
a non-owning reference back to its parent. Ordering decisions live in the
Tree; the Node only knows how to hold links and copy itself.
"""

import weakref
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class Node(Generic[T]):
    """A single cell of a binary search tree.

    Children are owned through plain attributes, so dropping a node drops
    its whole subtree. The parent link is a ``weakref.ref`` and therefore
    never keeps a parent alive; a parent that has since been released reads
    back as ``None``.
    """

    __slots__ = ('value', 'left', 'right', '_parent', '__weakref__')

    def __init__(self, value: T, parent: Optional['Node[T]'] = None):
        """Create a detached node.

        Args:
            value: The element stored in this cell
            parent: Owning node, or None for a root
        """
        self.value: T = value
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None
        self._parent: Optional[weakref.ref] = None
        self.parent = parent

    @property
    def parent(self) -> Optional['Node[T]']:
        """The owning node, or None for a root or a released owner."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional['Node[T]']) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def has_both_children(self) -> bool:
        return self.left is not None and self.right is not None

    def only_child(self) -> Optional['Node[T]']:
        """Return the left child if present, otherwise the right one.

        Only meaningful for nodes with at most one child, which is the case
        for every node the deletion path physically unlinks.
        """
        return self.left if self.left is not None else self.right

    def clone(self, copy_value: Optional[Callable[[T], T]] = None) -> 'Node[T]':
        """Deep copy this subtree.

        Walks the source with an explicit stack. Every copied child gets a
        parent reference pointing at its copied parent rather than the
        original. The returned node itself has no parent.

        Args:
            copy_value: Applied to each stored value (None = share values)

        Returns:
            Root of an independent subtree with identical shape and values
        """
        def _copy(value: T) -> T:
            return copy_value(value) if copy_value is not None else value

        root = Node(_copy(self.value))
        stack: List[Tuple[Node[T], Node[T]]] = [(self, root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = Node(_copy(source.left.value), target)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = Node(_copy(source.right.value), target)
                stack.append((source.right, target.right))
        return root

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.value!r})"

