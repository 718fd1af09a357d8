"""HTML generator for the markup language.

Renders a forest of Elements produced by the parser as indented HTML-like
text. Each element becomes an opening tag line, its rendered children one
level deeper, and a closing tag line.

Attribute values and tag names are emitted verbatim: nothing is escaped.
"""

from typing import List, Optional

from common.config.render_config import RenderConfig
from .parser import Element


class HTMLGenerator:
    """Converts an element forest into indented HTML text."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize the HTML generator.

        Args:
            config: Rendering settings; built-in defaults when omitted
        """
        self.config = config or RenderConfig()

    def generate(self, forest: List[Element], depth: int = 0) -> str:
        """
        Generate HTML for sibling elements at the given depth.

        Walks the forest with an explicit stack of (element, depth, closing)
        entries: an opening entry emits the opening line, then schedules the
        closing line beneath the element's children. Every line is joined by
        a single newline.
        """
        lines: List[str] = []
        pending = [(element, depth, False) for element in reversed(forest)]
        while pending:
            element, level, closing = pending.pop()
            indent = self.config.indent * level
            if closing:
                lines.append(f"{indent}{self.config.closing_line(element.tag)}")
                continue

            lines.append(f"{indent}{self._generate_opening(element)}")
            pending.append((element, level, True))
            pending.extend((child, level + 1, False) for child in reversed(element.children))
        return "\n".join(lines)

    def _generate_attributes(self, element: Element) -> str:
        """Render attributes as name="value" entries in insertion order."""
        return self.config.attribute_separator.join(
            f'{name}="{value}"' for name, value in element.attributes.items()
        )

    def _generate_opening(self, element: Element) -> str:
        if element.attributes:
            return f"<{element.tag} {self._generate_attributes(element)}>"
        return f"<{element.tag}>"


def render(forest: List[Element], depth: int = 0, config: Optional[RenderConfig] = None) -> str:
    """
    Convenience function to render a forest to HTML.

    Args:
        forest: Root elements, in order
        depth: Indent level of the root elements (must be >= 0)
        config: Rendering settings; built-in defaults when omitted

    Returns:
        Generated HTML string
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    generator = HTMLGenerator(config)
    return generator.generate(forest, depth)
