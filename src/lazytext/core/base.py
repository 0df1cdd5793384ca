"""Render contract shared by every lazytext value.

A renderable writes its text into a ``Sink`` when asked, and may be asked
any number of times: each render produces the same fragments, whichever sink
is used. The single sanctioned exception is a renderable backed by a
single-use slot (see ``lazytext.core.once``), which renders once and then
renders nothing.

Anything that is not a ``Renderable`` can still appear as a child: it
renders as ``str(value)`` in one fragment, or as one encoded fragment when it
is ``bytes``.
"""

import copy
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import IO, Any

from lazytext.core.sinks import Sink, StreamSink, StringSink


class Renderable(ABC):
    """Base class for lazily rendered text.

    Subclasses implement ``render()`` and, when they hold nested values,
    ``children()`` so duplicability can be worked out.
    """

    @abstractmethod
    def render(self, sink: Sink) -> None:
        """Write this value's text into ``sink``.

        Raises:
            SinkWriteError: Propagated unchanged from the first failing write
        """

    def children(self) -> Iterable[Any]:
        """Nested values held by this renderable."""
        return ()

    @property
    def duplicable(self) -> bool:
        """Whether this value may be copied.

        False as soon as any nested value is single-use.
        """
        return all(is_duplicable(child) for child in self.children())

    def to_string(self) -> str:
        """Render into a fresh string."""
        sink = StringSink()
        self.render(sink)
        sink.finish()
        return sink.getvalue()

    def write_to(self, stream: IO[Any], **sink_options: Any) -> None:
        """Render into a text or binary stream.

        Args:
            stream: File-like object with a ``write()`` method
            **sink_options: Passed to ``StreamSink``
        """
        sink = StreamSink(stream, **sink_options)
        self.render(sink)
        sink.finish()

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_string(), format_spec)

    def _check_duplicable(self) -> None:
        if not self.duplicable:
            raise TypeError(
                f"{type(self).__name__} holds a single-use value and cannot be copied"
            )

    def __copy__(self) -> "Renderable":
        self._check_duplicable()
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        return clone

    def __deepcopy__(self, memo: dict[int, Any]) -> "Renderable":
        self._check_duplicable()
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            setattr(clone, key, copy.deepcopy(value, memo))
        return clone


class Literal(Renderable):
    """A plain value rendered as a single fragment."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def render(self, sink: Sink) -> None:
        render_value(self.value, sink)

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


def is_duplicable(value: Any) -> bool:
    if isinstance(value, Renderable):
        return value.duplicable
    return True


def render_value(value: Any, sink: Sink) -> None:
    """Render any value into ``sink`` under the render contract."""
    if isinstance(value, Renderable):
        value.render(sink)
    elif isinstance(value, (bytes, bytearray, memoryview)):
        sink.write(value)
    else:
        sink.write(value if isinstance(value, str) else str(value))


def as_renderable(value: Any) -> Renderable:
    """Adapt any value to the render contract."""
    if isinstance(value, Renderable):
        return value
    return Literal(value)


def to_string(value: Any) -> str:
    """Render any value into a fresh string."""
    return as_renderable(value).to_string()
