"""Configuration system for bstlib.

Trees carry a small TreeConfig describing how they render themselves.
Ordering behaviour is not configurable: it always comes from the element
type's own ``==`` and ``>`` operators.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional


class ConfigurationError(Exception):
    """Raised when a TreeConfig fails validation."""
    pass


class RenderStyle(Enum):
    """How each depth level is indented in a tree diagram."""
    INDENTED = "indented"   # Plain spaces
    GUIDES = "guides"       # A vertical guide per level


@dataclass
class TreeConfig:
    """Rendering options for a Tree.

    The config is copied along with the tree on copy/assign, so two
    copies of a tree render identically.
    """

    indent_width: int = 3                                   # Columns per depth level
    render_style: RenderStyle = RenderStyle.INDENTED
    value_formatter: Optional[Callable[[Any], str]] = None  # Defaults to str()

    @classmethod
    def default(cls) -> 'TreeConfig':
        return cls()

    @classmethod
    def compact(cls) -> 'TreeConfig':
        """Create config with a single column per level.

        Returns:
            TreeConfig for narrow diagrams
        """
        return cls(indent_width=1)

    def indent(self, depth: int) -> str:
        """Build the prefix for a line at the given depth.

        Args:
            depth: Depth of the node being rendered (root = 0)

        Returns:
            Indentation string
        """
        if self.render_style == RenderStyle.GUIDES:
            return ("|" + " " * (self.indent_width - 1)) * depth
        return " " * (self.indent_width * depth)

    def format_value(self, value: Any) -> str:
        if self.value_formatter is None:
            return str(value)
        return self.value_formatter(value)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.indent_width, int) or isinstance(self.indent_width, bool):
            errors.append("indent_width must be an integer")
        elif self.indent_width <= 0:
            errors.append("indent_width must be positive")

        if not isinstance(self.render_style, RenderStyle):
            errors.append("render_style must be a RenderStyle")

        if self.value_formatter is not None and not callable(self.value_formatter):
            errors.append("value_formatter must be callable")

        return errors

    def check(self) -> None:
        """Raise ConfigurationError if validate() reports any problems."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}"
            )
