"""Test doubles shared by unit, integration and feature tests."""


class FailingWriter:
    """Writer whose writes and flushes always fail, counting attempts."""

    def __init__(self, message: str = "disk full") -> None:
        self.message = message
        self.writes = 0
        self.flushes = 0

    def write(self, data: bytes) -> int:
        self.writes += 1
        raise OSError(self.message)

    def flush(self) -> None:
        self.flushes += 1
        raise OSError(self.message)


class LeafWriter:
    """Write-only writer recording payloads; has neither flush nor add."""

    def __init__(self) -> None:
        self.payloads: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.payloads.append(data)
        return len(data)


class ClosableWriter(LeafWriter):
    """Leaf writer that records whether it was flushed and closed."""

    def __init__(self) -> None:
        super().__init__()
        self.flushed = 0
        self.closed = False

    def flush(self) -> None:
        self.flushed += 1

    def close(self) -> None:
        self.closed = True


class ClosedStreamWriter:
    """Writer behaving like a stream that was closed underneath it."""

    def __init__(self) -> None:
        self.writes = 0
        self.flushes = 0

    def write(self, data: bytes) -> int:
        self.writes += 1
        raise ValueError("I/O operation on closed file")

    def flush(self) -> None:
        self.flushes += 1
        raise ValueError("I/O operation on closed file")
