"""Testing utilities for bstlib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
