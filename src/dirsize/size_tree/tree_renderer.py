"""Depth-indented text rendering of size trees."""

from typing import Iterable, Iterator, List, Tuple

from dirsize.size_tree.size_node import SizeNode
from dirsize.size_unit import Size, SizeUnit
from dirsize.types import LineSink


class TreeRenderer:
    """Renders a forest of SizeNodes as one indented line per entry.

    Nodes are visited depth-first in pre-order. Each line holds one indentation marker
    per nesting level (the forest's roots are at level 0), the entry name, a space, and
    the size converted to the display unit. Sizes are shown with their full fractional
    value; no rounding is applied.

    Attributes:
        display_unit (SizeUnit): Unit sizes are converted to for display.
        indent (str): Marker emitted once per nesting level.

    Example:
        >>> renderer = TreeRenderer(SizeUnit.MEGABYTE)  # doctest: +SKIP
        >>> for line in renderer.stream_lines(forest):  # doctest: +SKIP
        ...     print(line, end='')
        big.txt 2.0M
        sub 3.0005M
            bigger.txt 3.0M
    """

    def __init__(self, display_unit: SizeUnit = SizeUnit.KILOBYTE, indent: str = "\t") -> None:
        self.display_unit = display_unit
        self.indent = indent

    def format_node(self, node: SizeNode, level: int) -> str:
        """Format a single node as an output line, including the trailing newline."""
        size = Size.from_bytes(node.size_bytes, self.display_unit)
        return f"{self.indent * level}{node.name} {size}\n"

    def stream_lines(self, forest: Iterable[SizeNode]) -> Iterator[str]:
        """Generate the rendered lines one at a time, in traversal order.

        Args:
            forest: Root-level nodes to render.

        Yields:
            One newline-terminated line per node.
        """
        # Explicit pre-order stack of (node, level); children are pushed in reverse so
        # they come off in listing order.
        stack: List[Tuple[SizeNode, int]] = [(tree, 0) for tree in reversed(list(forest))]
        while stack:
            node, level = stack.pop()
            yield self.format_node(node, level)
            stack.extend((child, level + 1) for child in reversed(node.children))

    def render(self, forest: Iterable[SizeNode]) -> List[str]:
        """Get all rendered lines as a list."""
        return list(self.stream_lines(forest))

    def write(self, forest: Iterable[SizeNode], sink: LineSink) -> int:
        """Write every rendered line to a sink before returning.

        Args:
            forest: Root-level nodes to render.
            sink: Object with a ``write(str)`` method, such as a text stream or SafeWriter.

        Returns:
            Number of lines written.

        Raises:
            OSError: If the sink fails to accept a line (for example BrokenPipeError).
        """
        count = 0
        for line in self.stream_lines(forest):
            sink.write(line)
            count += 1
        return count
