"""Safe output writing for the dirsize CLI.

Rendered lines go straight to a file descriptor so that a closed pipe or an
interrupt is noticed on the next line rather than at interpreter shutdown.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirsize.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for the tree listing.

    Writes UTF-8 encoded text to either an existing file descriptor (typically stdout)
    or a file it opens itself. Undecodable file name bytes are written back unchanged.
    Before every write it checks whether SIGPIPE or SIGINT has been received and, if
    so, stops with BrokenPipeError.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
        bytes_written: Number of encoded bytes written so far.
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to create or truncate.

        Raises:
            TypeError: If file is neither an int nor a path-like object.
            OSError: If the output file cannot be opened.
        """
        self.file = file
        self.bytes_written = 0
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w", encoding="utf-8", errors="surrogateescape")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> int:
        """Write a string, checking for interruption first.

        Args:
            data: Text to write.

        Returns:
            Number of bytes written.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received, or the pipe is broken.
            OSError: If any other I/O error occurs.
            ValueError: If the writer is already closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        # File names that are not valid UTF-8 arrive with surrogate escapes; write their
        # original bytes back out.
        encoded = data.encode("utf-8", "surrogateescape")
        view = memoryview(encoded)
        try:
            # os.write may accept only part of the buffer on pipes.
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise
        self.bytes_written += len(encoded)
        return len(encoded)

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer is marked closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer. An exception from the with block takes priority over a close error."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
