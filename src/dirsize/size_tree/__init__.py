"""Size-annotated file system trees.

This module provides classes for aggregating the recursive size of a directory
structure, pruning entries below a size threshold, and rendering the result.
"""
