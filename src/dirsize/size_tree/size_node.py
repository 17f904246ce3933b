"""Node representation for size-annotated file system entries."""

from pathlib import Path
from typing import Any, Iterable, Optional

from anytree import Node


class SizeNode(Node):  # type: ignore
    """Node class representing a file or directory together with its aggregate size.

    Extends anytree.Node with the entry's path, a directory flag, and a byte count.
    Inherits tree traversal capabilities (depth, iteration) from anytree.Node.

    anytree reserves ``path`` (the node chain from the root) and ``size`` (the number
    of nodes in a subtree) as read-only properties, so the file system path and the
    byte count are stored as ``fs_path`` and ``size_bytes``.

    For directories, ``size_bytes`` is the sum over every direct child that was
    measured, while ``children`` holds only the children that were kept after
    filtering. The two are deliberately independent: a directory can report more bytes
    than its visible children add up to.

    Attributes:
        name (str): The final path component of the entry.
        fs_path (Path): The path of the entry as encountered during traversal.
        is_dir (bool): True if this node represents a directory, False otherwise.
        size_bytes (int): Size in bytes. For directories, the aggregate of all direct
            children.
        children (tuple[SizeNode]): The retained child nodes (inherited from anytree.Node).

    Example:
        >>> leaf = SizeNode(Path("data/big.bin"), size_bytes=2048)
        >>> root = SizeNode(Path("data"), is_dir=True, size_bytes=4096, children=[leaf])
        >>> leaf.name, leaf.depth
        ('big.bin', 1)
        >>> root.size_bytes - sum(child.size_bytes for child in root.children)
        2048
    """

    def __init__(
        self,
        fs_path: Path,
        is_dir: bool = False,
        size_bytes: int = 0,
        parent: Optional["SizeNode"] = None,
        children: Optional[Iterable["SizeNode"]] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a SizeNode.

        Args:
            fs_path: Path of the file or directory. The node name is its final component.
            is_dir: Whether this node represents a directory. Defaults to False.
            size_bytes: Size in bytes. Defaults to 0.
            parent: The parent node. Defaults to None.
            children: Child nodes to attach. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        fs_path = Path(fs_path)
        super().__init__(fs_path.name or str(fs_path), parent=parent, children=children, **kwargs)
        self.fs_path = fs_path
        self.is_dir = is_dir
        self.size_bytes = size_bytes
