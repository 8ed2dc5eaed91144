"""bstlib - Ordered binary search tree container.

bstlib provides Tree, a generic value-semantic container that keeps its
elements ordered in an unbalanced binary search tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bstlib import Tree

    tree = Tree([5, 3, 8, 1, 4])
    tree.remove(3)
    tree.print()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Elements only need ``==`` and ``>``. The tree is not thread-safe and is
never rebalanced.
"""

__version__ = "0.1.0"

from .config import TreeConfig, RenderStyle, ConfigurationError
from .core.tree import Tree
from .render import format_tree, print_tree

__all__ = [
    "__version__",
    "Tree",
    "TreeConfig",
    "RenderStyle",
    "ConfigurationError",
    "format_tree",
    "print_tree",
]
