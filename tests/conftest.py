"""Shared pytest fixtures for lazytext tests.

Fixtures are organized by category:
- Configuration fixtures: isolate the process-wide configuration and logging
- Renderable fixtures: values that write caller-chosen fragment sequences
- Sink fixtures: sinks that record or fail on demand
"""

import logging
from collections.abc import Callable, Iterator

import pytest

from lazytext.config import set_config
from lazytext.core.base import Renderable
from lazytext.core.sinks import Fragment, Sink, SinkWriteError, StringSink

# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_config() -> Iterator[None]:
    """Restore default configuration and logging after each test."""
    yield
    set_config(None)
    root = logging.getLogger("lazytext")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


# =============================================================================
# Renderable Fixtures
# =============================================================================


class Chunks(Renderable):
    """Writes each given fragment as its own sink write."""

    def __init__(self, *fragments: Fragment) -> None:
        self.fragments = fragments

    def render(self, sink: Sink) -> None:
        for fragment in self.fragments:
            sink.write(fragment)


def split_bytes(text: str, size: int, encoding: str = "utf-8") -> list[bytes]:
    """Encode text and cut it into ``size``-byte pieces, ignoring character boundaries."""
    data = text.encode(encoding)
    return [data[i : i + size] for i in range(0, len(data), size)]


@pytest.fixture
def chunks() -> Callable[..., Chunks]:
    """Factory for renderables with an exact fragment sequence."""
    return Chunks


@pytest.fixture
def byte_chunks() -> Callable[..., Chunks]:
    """Factory for renderables writing ``text`` as ``size``-byte encoded pieces."""

    def make(text: str, size: int, encoding: str = "utf-8") -> Chunks:
        return Chunks(*split_bytes(text, size, encoding))

    return make


# =============================================================================
# Sink Fixtures
# =============================================================================


class FailingSink(Sink):
    """Accepts ``fail_after`` fragments, then raises on every write."""

    def __init__(self, fail_after: int = 0) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.fragments: list[str] = []
        self.attempts = 0

    def write_text(self, text: str) -> None:
        self.attempts += 1
        if len(self.fragments) >= self.fail_after:
            raise SinkWriteError("destination full", self)
        self.fragments.append(text)


@pytest.fixture
def failing_sink() -> Callable[..., FailingSink]:
    """Factory for sinks that fail after a number of successful writes."""
    return FailingSink


@pytest.fixture
def string_sink() -> StringSink:
    return StringSink()


@pytest.fixture
def fragments_of() -> Callable[[Renderable], list[str]]:
    """Render a value and return the fragments its sink received."""

    def render(value: Renderable) -> list[str]:
        sink = StringSink()
        value.render(sink)
        sink.finish()
        return sink.fragments

    return render
