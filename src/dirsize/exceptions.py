import errno
from typing import Optional

from dirsize.types import PathType


class RootPathError(OSError):
    """
    Exception raised when the root of a scan cannot be used.

    A scan has nothing useful to report if its root path is missing, is not a
    directory, or cannot be listed. Unlike errors on descendant entries, which are
    skipped, this error is fatal and propagates to the caller. It subclasses
    ``OSError`` and keeps the ``errno`` of the underlying failure, so callers can
    still catch ``FileNotFoundError``-style conditions by errno.

    Attributes:
        path (str): The root path that could not be scanned.
        reason (str): Human-readable description of the failure.

    Example:
        >>> error = RootPathError("/no/such/dir", "Root path does not exist", errno.ENOENT)
        >>> str(error)
        'Root path does not exist: /no/such/dir'
        >>> error.errno == errno.ENOENT
        True
    """

    def __init__(self, path: PathType, reason: str, error_number: Optional[int] = None) -> None:
        """
        Initialize the exception with the offending path and a reason.

        Args:
            path (PathType): The root path that could not be scanned.
            reason (str): Short description of what went wrong.
            error_number (int, optional): ``errno`` value of the underlying failure.
                Defaults to ``errno.EIO``.
        """
        self.path = str(path)
        self.reason = reason
        super().__init__(error_number if error_number is not None else errno.EIO, reason, self.path)

    def __str__(self) -> str:
        return f"{self.reason}: {self.path}"
