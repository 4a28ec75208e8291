"""Line-oriented output for search results that stops cleanly on SIGPIPE or SIGINT."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from bfsfind.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes result lines to a file descriptor or file, aware of interrupting signals.

    Each write goes straight to the descriptor with ``os.write``, so every match is
    visible downstream as soon as it is found. Once SIGPIPE or SIGINT has been received,
    or the reader has gone away, writes raise BrokenPipeError and the caller stops the
    search.

    Attributes:
        file: The file descriptor or path the writer was created with.
        fd: The file descriptor being written to.
        lines_written: Number of lines written so far.
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the writer.

        Args:
            file: A file descriptor (e.g. ``sys.stdout.fileno()``) or a path to create.

        Raises:
            TypeError: If file is neither an int nor path-like.
        """
        self.file = file
        self.lines_written = 0
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("w")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data, refusing once an interrupting signal has been received.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: For other I/O errors.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        # Paths that are not valid UTF-8 are written back as their original bytes
        payload = data.encode("utf-8", "surrogateescape")
        try:
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def write_line(self, line: str) -> None:
        """Write a single line followed by a newline."""
        self.write(line + "\n")
        self.lines_written += 1

    def close(self) -> None:
        """Close the underlying file if this writer opened it.

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
        try:
            self.close()
        except OSError:
            # An exception from the with block takes priority over a close failure
            if exc_type is None:
                raise
