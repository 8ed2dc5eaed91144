"""Diagram rendering for bstlib trees.

The diagram is the tree rotated a quarter turn: the right subtree is
printed above its parent and the left subtree below, each one level
deeper. It is meant for people reading it, not for parsing.

Example for a tree built from 5, 3, 8, 1, 4::

       8
    5
          4
       3
          1
"""

import io
import logging
import sys
from typing import Iterator, Optional, TextIO

from .config import TreeConfig
from .core.node import Node
from .core.traverser import ReverseInOrderTraverser

logger = logging.getLogger(__name__)


def render_lines(root: Optional[Node], config: Optional[TreeConfig] = None) -> Iterator[str]:
    """Yield diagram lines without trailing newlines.

    Args:
        root: Root of the subtree to render (None renders nothing)
        config: Rendering options (defaults to TreeConfig())

    Yields:
        One line per node, right-most node first
    """
    config = config or TreeConfig()
    for node, depth in ReverseInOrderTraverser().traverse(root):
        yield config.indent(depth) + config.format_value(node.value)


def print_tree(root: Optional[Node],
               config: Optional[TreeConfig] = None,
               sink: Optional[TextIO] = None) -> None:
    """Write the diagram for root to a text sink.

    Args:
        root: Root of the subtree to render
        config: Rendering options
        sink: Writable text stream (defaults to sys.stdout)
    """
    if sink is None:
        sink = sys.stdout
    count = 0
    for line in render_lines(root, config):
        sink.write(line + "\n")
        count += 1
    logger.debug("Rendered %d node(s)", count)


def format_tree(root: Optional[Node], config: Optional[TreeConfig] = None) -> str:
    """Render the diagram into a string."""
    buffer = io.StringIO()
    print_tree(root, config, buffer)
    return buffer.getvalue()
