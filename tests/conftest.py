"""Shared test fixtures for all test modules."""

from collections.abc import Iterator
from pathlib import Path

import pytest

import logtree
from logtree.adapters.writers import MemoryWriter, create_default_registry
from logtree.core.registry import WriterRegistry
from logtree.core.router import LevelRouter


@pytest.fixture
def memory_writer() -> MemoryWriter:
    """Provide an empty in-memory writer."""
    return MemoryWriter()


@pytest.fixture
def registry() -> WriterRegistry:
    """Fresh registry with the built-ins plus a ``memory`` sink type."""
    fresh = create_default_registry()
    fresh.register("memory", MemoryWriter.from_attrs)
    return fresh


@pytest.fixture
def sink() -> MemoryWriter:
    """A single in-memory writer shared by every ``sink`` node of a config."""
    return MemoryWriter()


@pytest.fixture
def sink_registry(registry: WriterRegistry, sink: MemoryWriter) -> WriterRegistry:
    """Registry where the ``sink`` writer type always returns the sink fixture."""
    registry.register("sink", lambda attrs: sink)
    return registry


@pytest.fixture
def router(sink_registry: WriterRegistry) -> Iterator[LevelRouter]:
    """Router over sink_registry, closed after the test."""
    level_router = LevelRouter(sink_registry)
    yield level_router
    level_router.close()


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for rotated log files."""
    return tmp_path / "logs"


@pytest.fixture
def default_runtime() -> Iterator[None]:
    """Detach the process-wide router after a test that configures it."""
    yield
    logtree.close()
