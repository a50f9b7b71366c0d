"""Safe output writing utilities for dirtree CLI.

This module provides a writing interface that is aware of interrupting
signals and never leaves a half-written output file behind.
"""

import errno
import os
import tempfile
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Signal-aware writer for a file descriptor or an output file.

    When given a path, data is written to a temporary file next to the target.
    The temporary file replaces the target only when the writer is committed,
    which the context manager does on a clean exit. On error the temporary file
    is removed and any existing target is left untouched.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
        temp_path: Temporary file receiving the data, for path output.
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path for writing output.

        Raises:
            TypeError: If ``file`` is neither a file descriptor nor a path.
            OSError: If the temporary file cannot be created.
        """
        self.file = file
        self._closed = False
        self.temp_path: Optional[Path] = None

        if isinstance(file, int):
            # It's already a file descriptor
            self.fd = file
            self.target: Optional[Path] = None
        elif isinstance(file, (str, os.PathLike)):
            self.target = Path(file)
            directory = self.target.parent if str(self.target.parent) else Path(".")
            self.fd, temp_name = tempfile.mkstemp(prefix=f".{self.target.name}.", suffix=".tmp", dir=directory)
            self.temp_path = Path(temp_name)
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Safely write data with signal checking.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If SIGPIPE received or pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        # Undecodable file names come back as the bytes they were read from
        view = memoryview(data.encode("utf-8", errors="surrogateescape"))
        try:
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def commit(self) -> None:
        """Close the writer and move the written data into place.

        For file descriptor output this only marks the writer closed.
        """
        if self._closed:
            return
        if self.temp_path is None or self.target is None:
            self._closed = True
            return

        try:
            os.close(self.fd)
            os.chmod(self.temp_path, 0o666 & ~_current_umask())
            os.replace(self.temp_path, self.target)
        except OSError:
            self.discard()
            raise
        self._closed = True

    def discard(self) -> None:
        """Close the writer and drop anything written to the temporary file."""
        if self._closed:
            return
        self._closed = True
        if self.temp_path is None:
            return
        try:
            os.close(self.fd)
        except OSError as e:
            if e.errno != errno.EBADF:
                raise
        finally:
            self.temp_path.unlink(missing_ok=True)

    def close(self) -> None:
        self.commit()

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Commit on a clean exit, discard otherwise.

        An interrupted write (BrokenPipeError) also discards, so a file target
        never holds a truncated report.
        """
        if exc_type is None and not signal_handler.interrupted:
            self.commit()
        else:
            self.discard()


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
