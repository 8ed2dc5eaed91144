#!/usr/bin/env python3
"""
Basic bstlib usage.

This example demonstrates:
- Building a tree from a list
- Membership queries and removal
- Deep copies and structural equality
- Printing the tree diagram
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstlib import Tree, TreeConfig, RenderStyle


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    tree = Tree([5, 3, 8, 1, 4])
    print(f"Built {tree!r}")
    tree.print()

    print(f"\nexists(4) = {tree.exists(4)}, exists(9) = {tree.exists(9)}")

    snapshot = Tree(tree)
    tree.remove(3)
    print("\nAfter remove(3):")
    tree.print()
    print(f"Still equal to snapshot? {tree == snapshot}")

    # Same values, different insertion order, different shape
    chain = Tree([3, 5, 8])
    print(f"\nTree([5, 3, 8]) == Tree([3, 5, 8])? {Tree([5, 3, 8]) == chain}")

    guides = Tree(snapshot, config=TreeConfig(render_style=RenderStyle.GUIDES))
    print("\nSnapshot with guides:")
    guides.print()


if __name__ == "__main__":
    main()
