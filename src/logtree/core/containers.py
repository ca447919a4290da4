"""Thread-safe set of the writer trees bound by the active configuration."""

import threading

from logtree.core.ports import Closer, Flusher, Writer


class ContainerSet:
    """Tracks bound writer roots so a single call can flush all of them."""

    def __init__(self) -> None:
        self._members: list[Writer] = []
        self._lock = threading.Lock()

    def add(self, writer: Writer) -> None:
        """Track a writer root. Adding the same object twice is a no-op."""
        with self._lock:
            if not any(member is writer for member in self._members):
                self._members.append(writer)

    def flush(self) -> None:
        """Flush every member that supports it.

        Every member is attempted; the first failure is raised afterwards.
        """
        with self._lock:
            members = list(self._members)
        _apply_all(members, _flush_one)

    def close(self) -> None:
        """Flush every member, then release those that hold resources."""
        with self._lock:
            members = list(self._members)
        _apply_all(members, _flush_one, _close_one)

    def clear(self) -> None:
        """Forget all members without touching them."""
        with self._lock:
            self._members.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._members)

    def __iter__(self):
        with self._lock:
            return iter(list(self._members))


def _flush_one(writer: Writer) -> None:
    if isinstance(writer, Flusher):
        writer.flush()


def _close_one(writer: Writer) -> None:
    if isinstance(writer, Closer):
        writer.close()


def _apply_all(members: list[Writer], *operations) -> None:
    first_error: Exception | None = None
    for operation in operations:
        for writer in members:
            try:
                operation(writer)
            except Exception as e:
                if first_error is None:
                    first_error = e
    if first_error is not None:
        raise first_error
