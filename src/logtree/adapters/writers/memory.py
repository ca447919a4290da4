"""In-memory writer that records every payload it receives.

Suitable for tests and for embedding, where output is inspected by the
application instead of being written anywhere.
"""

import threading
from collections import deque
from collections.abc import Mapping


class MemoryWriter:
    """Keeps each payload as a separate item.

    Args:
        max_size: Maximum number of payloads kept. When full, the oldest
            payload is evicted. None keeps everything.
    """

    def __init__(self, max_size: int | None = None) -> None:
        self._payloads: deque[bytes] = deque(maxlen=max_size)
        self._flushes = 0
        self._lock = threading.Lock()

    @classmethod
    def from_attrs(cls, attrs: Mapping[str, str]) -> "MemoryWriter":
        """Construct from an optional ``size`` attribute."""
        raw = attrs.get("size")
        if raw is None:
            return cls()
        try:
            size = int(raw)
        except ValueError:
            raise ValueError(f"size must be an integer, got [{raw}]") from None
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        return cls(max_size=size)

    def write(self, data: bytes) -> int:
        with self._lock:
            self._payloads.append(bytes(data))
        return len(data)

    def flush(self) -> None:
        with self._lock:
            self._flushes += 1

    @property
    def payloads(self) -> list[bytes]:
        """Payloads received, oldest first."""
        with self._lock:
            return list(self._payloads)

    @property
    def flush_count(self) -> int:
        with self._lock:
            return self._flushes

    def getvalue(self) -> bytes:
        """All retained payloads concatenated."""
        with self._lock:
            return b"".join(self._payloads)

    def clear(self) -> None:
        with self._lock:
            self._payloads.clear()
            self._flushes = 0
