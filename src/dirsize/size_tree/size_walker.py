"""Recursive size aggregation with threshold filtering.

This module provides the SizeWalker class, which measures every file and directory
beneath a root path and prunes entries that fall below a size threshold, while keeping
directory totals computed from the complete, unpruned contents.
"""

import os
import sys
from collections import deque
from pathlib import Path
from typing import List, Optional, Tuple

from dirsize.exceptions import RootPathError
from dirsize.size_tree.error_action import ErrorAction
from dirsize.size_tree.size_node import SizeNode
from dirsize.types import PathType


class SizeWalker:
    """Aggregates file sizes bottom-up and keeps only entries at or above a threshold.

    The walk is depth-first and post-order: a directory's children are measured in full
    before the directory's own node is created. The directory's size is the sum over all
    of its measured children, and only afterwards is its child list filtered down to those
    whose size is at least ``threshold_bytes``. The same filter is applied once more to the
    list of root-level entries. Pruning therefore never changes a reported size.

    Error Handling:
        The root path must exist, be a directory, and be listable; otherwise walk() raises
        RootPathError. Any entry beneath the root that cannot be listed or measured is
        skipped: it contributes nothing to its parent's size and does not appear in the
        result. Skips are recorded in ``skipped`` and, with ErrorAction.WARN, reported on
        stderr as they happen.

    Symbolic Link Behavior:
        Entries are classified and measured the way os.DirEntry reports them when
        following links. A link to a directory is walked as a directory, a link to a file
        reports the target's size, and a dangling link fails its stat and is skipped.

    Attributes:
        threshold_bytes (int): Minimum size (inclusive) an entry needs to be kept.
        error_action (ErrorAction): Whether skipped entries are reported.
        skipped (List[Tuple[Path, OSError]]): Entries skipped during the last walk.
        total_size (int): Aggregate size of the root from the last walk.

    Example:
        >>> walker = SizeWalker(1_000_000)  # doctest: +SKIP
        >>> forest = walker.walk("/var/log")  # doctest: +SKIP
        >>> [(node.name, node.size_bytes) for node in forest]  # doctest: +SKIP
        [('journal', 402653184), ('syslog.1', 1830212)]
    """

    def __init__(self, threshold_bytes: int, error_action: ErrorAction = ErrorAction.IGNORE) -> None:
        """Initialize a SizeWalker.

        Args:
            threshold_bytes: Minimum size in bytes for an entry to be kept. Entries whose
                size equals the threshold are kept.
            error_action: How to report entries that are skipped. Defaults to IGNORE.

        Raises:
            ValueError: If threshold_bytes is negative.
        """
        if threshold_bytes < 0:
            raise ValueError("Threshold cannot be negative")
        self.threshold_bytes = threshold_bytes
        self.error_action = error_action
        self.skipped: List[Tuple[Path, OSError]] = []
        self.total_size: int = 0

    def walk(self, root_path: PathType) -> List[SizeNode]:
        """Measure everything under a root directory and return the filtered forest.

        Args:
            root_path: Directory to scan. Can be any path-like object.

        Returns:
            The root's direct entries whose aggregate size meets the threshold, in
            directory-listing order. Each is the root of its own SizeNode tree.

        Raises:
            RootPathError: If the root does not exist, is not a directory, or cannot be
                listed. The errno of the underlying failure is preserved.
        """
        root = Path(root_path)
        self.skipped = []
        self.total_size = 0

        try:
            entries = self._list_directory(root)
        except FileNotFoundError as e:
            raise RootPathError(root, "Root path does not exist", e.errno)
        except NotADirectoryError as e:
            raise RootPathError(root, "Root path is not a directory", e.errno)
        except PermissionError as e:
            raise RootPathError(root, "Access denied to root path", e.errno)
        except OSError as e:
            raise RootPathError(root, f"Cannot list root path ({e.strerror})", e.errno)

        nodes = self._measure_entries(entries)
        self.total_size = sum(node.size_bytes for node in nodes)
        return self._filter(nodes)

    def _list_directory(self, path: Path) -> List["os.DirEntry[str]"]:
        # Read the listing in full so the directory handle is closed before descending.
        with os.scandir(path) as it:
            return list(it)

    def _measure_entries(self, entries: List["os.DirEntry[str]"]) -> List[SizeNode]:
        """Measure a root listing and everything below it, dropping entries that fail.

        Directories are descended with an explicit stack of pending listings rather than
        recursion, so nesting depth is limited only by the file system. A directory's
        node is built when its last pending entry has been measured.
        """
        top = _PendingDirectory(None, entries)
        stack = [top]
        while stack:
            current = stack[-1]
            if current.entries:
                entry = current.entries.popleft()
                path = Path(entry.path)
                try:
                    if entry.is_dir():
                        stack.append(_PendingDirectory(path, self._list_directory(path)))
                    else:
                        current.nodes.append(SizeNode(path, is_dir=False, size_bytes=entry.stat().st_size))
                except OSError as e:
                    self._skip(path, e)
                continue

            stack.pop()
            if current.path is not None:
                size = sum(child.size_bytes for child in current.nodes)
                node = SizeNode(current.path, is_dir=True, size_bytes=size, children=self._filter(current.nodes))
                stack[-1].nodes.append(node)
        return top.nodes

    def _filter(self, nodes: List[SizeNode]) -> List[SizeNode]:
        return [node for node in nodes if node.size_bytes >= self.threshold_bytes]

    def _skip(self, path: Path, error: OSError) -> None:
        self.skipped.append((path, error))
        if self.error_action == ErrorAction.WARN:
            print(f"Warning: skipped {path}: {error.strerror or error}", file=sys.stderr)


class _PendingDirectory:
    """A directory whose listing is still being measured."""

    def __init__(self, path: Optional[Path], entries: List["os.DirEntry[str]"]) -> None:
        self.path = path
        self.entries = deque(entries)
        self.nodes: List[SizeNode] = []
