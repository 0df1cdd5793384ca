"""Concatenation combinators."""

from collections.abc import Callable, Iterable
from typing import Any

from lazytext.core.base import Renderable, render_value
from lazytext.core.once import ItemSource, Ownership, make_source
from lazytext.core.sinks import Sink


class Concat(Renderable):
    """Renders items back to back, optionally mapping each one first.

    Args:
        items: Items to render
        ownership: SHARED for re-iterable collections, SINGLE_USE for
            one-shot iterators
        map_fn: Applied to each item at render time
    """

    def __init__(
        self,
        items: Iterable[Any],
        ownership: Ownership = Ownership.SHARED,
        map_fn: Callable[[Any], Any] | None = None,
    ) -> None:
        self.source: ItemSource = make_source(items, ownership)
        self.map_fn = map_fn

    @property
    def ownership(self) -> Ownership:
        return self.source.ownership

    @property
    def duplicable(self) -> bool:
        return self.source.duplicable

    def render(self, sink: Sink) -> None:
        items = self.source.open(sink)
        if items is None:
            return
        for item in items:
            render_value(item if self.map_fn is None else self.map_fn(item), sink)


class FmtWith(Renderable):
    """Renders by calling ``fn(sink)``."""

    def __init__(self, fn: Callable[[Sink], None]) -> None:
        if not callable(fn):
            raise TypeError(f"fmt_with() takes a callable, not {type(fn).__name__}")
        self.fn = fn

    def render(self, sink: Sink) -> None:
        self.fn(sink)


def concat(items: Iterable[Any]) -> Concat:
    """Concatenate items.

    Examples:
        >>> str(concat(["hola", "mundo"]))
        'holamundo'
        >>> str(concat([]))
        ''
    """
    return Concat(items)


def concat_map(items: Iterable[Any], fn: Callable[[Any], Any]) -> Concat:
    """Concatenate ``fn(item)`` for each item."""
    return Concat(items, map_fn=fn)


def concat_once(items: Iterable[Any]) -> Concat:
    """Concatenate a one-shot iterable on the first render only.

    Examples:
        >>> value = concat_once(iter(["hola", "mundo"]))
        >>> str(value), str(value)
        ('holamundo', '')
    """
    return Concat(items, ownership=Ownership.SINGLE_USE)


def concat_map_once(items: Iterable[Any], fn: Callable[[Any], Any]) -> Concat:
    """Like ``concat_map()`` for a one-shot iterable."""
    return Concat(items, ownership=Ownership.SINGLE_USE, map_fn=fn)


def fmt_with(fn: Callable[[Sink], None]) -> FmtWith:
    """Render by writing directly to the sink.

    Examples:
        >>> str(fmt_with(lambda sink: sink.write("hola")))
        'hola'
    """
    return FmtWith(fn)


def noop() -> Concat:
    """Renders nothing."""
    return Concat(())
