"""Directory size inspection utilities.

This package provides tools for measuring the recursive size of a directory
tree and reporting only the entries that are large enough to matter.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirsize")
except PackageNotFoundError:
    __version__ = "unknown"
