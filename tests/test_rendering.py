"""Tests for the tree diagram printer."""

import io
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstlib import Tree, TreeConfig, RenderStyle, format_tree, print_tree
from bstlib.testing import TreeTestHelper


SAMPLE = [5, 3, 8, 1, 4]


def test_print_to_sink():
    """Right subtree first, then node, then left subtree."""
    sink = io.StringIO()
    Tree(SAMPLE).print(sink)

    assert sink.getvalue() == (
        "   8\n"
        "5\n"
        "      4\n"
        "   3\n"
        "      1\n"
    )


def test_print_defaults_to_stdout(capsys):
    Tree([2, 1]).print()
    captured = capsys.readouterr()
    assert captured.out == "2\n   1\n"


def test_empty_tree_prints_nothing(capsys):
    Tree().print()
    assert capsys.readouterr().out == ""
    assert Tree().format() == ""


def test_format_matches_print():
    tree = Tree(SAMPLE)
    sink = io.StringIO()
    tree.print(sink)
    assert tree.format() == sink.getvalue()


def test_compact_config():
    tree = Tree(SAMPLE, config=TreeConfig.compact())
    assert tree.format().splitlines() == [" 8", "5", "  4", " 3", "  1"]


def test_guides_style():
    config = TreeConfig(render_style=RenderStyle.GUIDES)
    tree = Tree(SAMPLE, config=config)
    assert tree.format().splitlines() == ["|  8", "5", "|  |  4", "|  3", "|  |  1"]


def test_value_formatter():
    config = TreeConfig(value_formatter=lambda value: f"<{value}>")
    tree = Tree([2, 1, 3], config=config)
    assert tree.format() == "   <3>\n<2>\n   <1>\n"


def test_printing_does_not_modify_tree():
    tree = Tree(SAMPLE)
    before = TreeTestHelper(tree).shape()
    tree.format()
    tree.print(io.StringIO())
    assert TreeTestHelper(tree).shape() == before
    assert tree.size() == 5


def test_module_level_functions():
    helper = TreeTestHelper(Tree([2, 1]))
    assert format_tree(helper.root) == "2\n   1\n"
    assert format_tree(None) == ""

    sink = io.StringIO()
    print_tree(helper.root, TreeConfig(indent_width=2), sink)
    assert sink.getvalue() == "2\n  1\n"
