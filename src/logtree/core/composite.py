"""Fan-out writer that forwards every payload to its children."""

from logtree.core.ports import Closer, Flusher, Writer


class CompositeWriter:
    """Writer owning an ordered list of child writers.

    Every write and flush is forwarded to all children in insertion order.
    A failing child does not stop delivery to the remaining children; the
    first failure is raised once all of them have been attempted.
    """

    def __init__(self, *writers: Writer) -> None:
        self._children: list[Writer] = list(writers)

    @property
    def children(self) -> tuple[Writer, ...]:
        return tuple(self._children)

    def add(self, writer: Writer) -> None:
        """Append a child writer. No deduplication is performed."""
        self._children.append(writer)

    def write(self, data: bytes) -> int:
        """Forward data to every child.

        Returns:
            len(data) when every child accepted the payload.

        Raises:
            Exception: The first child failure (usually OSError, or ValueError
                for a closed stream), after all children were tried.
        """
        first_error: Exception | None = None
        for child in self._children:
            try:
                child.write(data)
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error
        return len(data)

    def flush(self) -> None:
        """Flush every child that supports flushing."""
        first_error: Exception | None = None
        for child in self._children:
            if not isinstance(child, Flusher):
                continue
            try:
                child.flush()
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def close(self) -> None:
        """Close every child that holds resources."""
        first_error: Exception | None = None
        for child in self._children:
            if not isinstance(child, Closer):
                continue
            try:
                child.close()
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error

    def __len__(self) -> int:
        return len(self._children)
