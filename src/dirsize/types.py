from os import PathLike
from typing import Any, Protocol, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class LineSink(Protocol):
    """Anything rendered lines can be written to, such as a text stream or a SafeWriter."""

    def write(self, data: str) -> Any: ...
