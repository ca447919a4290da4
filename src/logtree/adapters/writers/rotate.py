"""Size-based rotating file writer."""

import errno
import logging
import os
import threading
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from logtree.core.sizes import parse_size

logger = logging.getLogger(__name__)


class RotatingFileWriter:
    """Appends to a file in a directory and starts a new file by size.

    A write that would push the current file past the threshold goes to a
    fresh file instead, so every payload lands in exactly one file and a
    file only exceeds the threshold when a single payload is larger than it.

    Files are named after the time they were opened
    (``20261018.101500.123456.log``), with ``_1``, ``_2``... appended when
    that name is already taken. The first file is opened on first write.
    """

    def __init__(self, directory: str | os.PathLike[str], max_bytes: int) -> None:
        """Initialize the writer.

        Args:
            directory: Directory receiving the log files. Created if missing.
            max_bytes: Size threshold per file, in bytes.

        Raises:
            ValueError: If max_bytes is not positive.
            OSError: If the directory cannot be created or is not writable.
        """
        if max_bytes < 1:
            raise ValueError(f"size must be positive, got {max_bytes}")
        self.directory = Path(directory)
        self.max_bytes = max_bytes
        self.directory.mkdir(parents=True, exist_ok=True)
        if not self.directory.is_dir():
            raise NotADirectoryError(
                errno.ENOTDIR, "not a directory", str(self.directory)
            )
        if not os.access(self.directory, os.W_OK | os.X_OK):
            raise PermissionError(
                errno.EACCES, "directory is not writable", str(self.directory)
            )
        self._file: BinaryIO | None = None
        self._path: Path | None = None
        self._written = 0
        self._closed = False
        self._lock = threading.Lock()

    @classmethod
    def from_attrs(cls, attrs: Mapping[str, str]) -> "RotatingFileWriter":
        """Construct from configuration attributes (``dir``, ``size``)."""
        directory = attrs.get("dir")
        if not directory:
            raise ValueError("missing required attribute [dir]")
        size = attrs.get("size")
        if size is None:
            raise ValueError("missing required attribute [size]")
        return cls(directory, parse_size(size))

    @property
    def current_path(self) -> Path | None:
        """Path of the file currently written to, if one is open."""
        with self._lock:
            return self._path

    def write(self, data: bytes) -> int:
        """Append data, rotating first if it would overflow the current file."""
        with self._lock:
            if self._closed:
                raise OSError(errno.EBADF, "write to closed rotating writer")
            if self._file is None:
                self._open_locked()
            elif self._written and self._written + len(data) > self.max_bytes:
                self._rotate_locked()
            assert self._file is not None
            self._file.write(data)
            self._written += len(data)
        return len(data)

    def flush(self) -> None:
        """Push buffered output of the current file to durable storage."""
        with self._lock:
            if self._file is None:
                return
            self._file.flush()
            os.fsync(self._file.fileno())

    def close(self) -> None:
        """Flush and close the current file. Later writes fail."""
        with self._lock:
            self._closed = True
            if self._file is None:
                return
            try:
                self._file.flush()
                os.fsync(self._file.fileno())
            finally:
                self._file.close()
                self._file = None

    def _rotate_locked(self) -> None:
        assert self._file is not None
        self._file.close()
        self._file = None
        logger.debug("rotating %s after %d bytes", self._path, self._written)
        self._open_locked()

    def _open_locked(self) -> None:
        stamp = datetime.now().strftime("%Y%m%d.%H%M%S.%f")
        attempt = 0
        while True:
            suffix = f"_{attempt}" if attempt else ""
            path = self.directory / f"{stamp}{suffix}.log"
            try:
                self._file = open(path, "xb")
            except FileExistsError:
                attempt += 1
                continue
            break
        self._path = path
        self._written = 0
