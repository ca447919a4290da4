"""Count-based buffering writer.

Holds records in memory until a configured number has been written, then
forwards them downstream as a single payload. Records are never dropped:
anything still pending is forwarded by flush().
"""

import errno
import threading
from collections.abc import Mapping

from logtree.core.composite import CompositeWriter
from logtree.core.ports import Writer


class BufferWriter:
    """Batches writes and forwards them to its children in one call.

    Args:
        size: Number of records that triggers forwarding. Must be >= 1.
        *writers: Initial downstream writers. More can be added with add().
    """

    def __init__(self, size: int, *writers: Writer) -> None:
        if size < 1:
            raise ValueError(f"buffer size must be at least 1, got {size}")
        self.size = size
        self._downstream = CompositeWriter(*writers)
        self._pending = bytearray()
        self._count = 0
        self._closed = False
        self._lock = threading.Lock()

    @classmethod
    def from_attrs(cls, attrs: Mapping[str, str]) -> "BufferWriter":
        """Construct from configuration attributes (``size``)."""
        raw = attrs.get("size")
        if raw is None:
            raise ValueError("missing required attribute [size]")
        try:
            size = int(raw.strip())
        except ValueError:
            raise ValueError(f"size must be an integer, got [{raw}]") from None
        return cls(size)

    @property
    def count(self) -> int:
        """Number of records currently held."""
        with self._lock:
            return self._count

    def add(self, writer: Writer) -> None:
        """Append a downstream writer."""
        with self._lock:
            self._downstream.add(writer)

    def write(self, data: bytes) -> int:
        """Buffer one record, forwarding the batch when the threshold is hit.

        Raises:
            OSError: If the writer was closed, or if forwarding the batch
                fails downstream. A failed batch is not retained.
        """
        with self._lock:
            if self._closed:
                raise OSError(errno.EBADF, "write to closed buffer writer")
            self._pending += data
            self._count += 1
            if self._count >= self.size:
                self._drain_locked()
        return len(data)

    def flush(self) -> None:
        """Forward pending records, then flush downstream writers."""
        with self._lock:
            try:
                self._drain_locked()
            finally:
                self._downstream.flush()

    def close(self) -> None:
        """Flush, then close downstream writers. Later writes fail."""
        with self._lock:
            self._closed = True
            try:
                self._drain_locked()
                self._downstream.flush()
            finally:
                self._downstream.close()

    def _drain_locked(self) -> None:
        if not self._pending:
            self._count = 0
            return
        payload = bytes(self._pending)
        self._pending.clear()
        self._count = 0
        self._downstream.write(payload)
