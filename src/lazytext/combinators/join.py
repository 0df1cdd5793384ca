"""Join combinators: items with a separator between each."""

from collections.abc import Callable, Iterable
from typing import Any

from lazytext.core.base import Renderable, is_duplicable, render_value
from lazytext.core.once import ItemSource, Ownership, make_source
from lazytext.core.sinks import Sink

CSV_SEPARATOR = ", "


class Join(Renderable):
    """Renders items with ``sep`` between each pair.

    Zero or one item never emits a separator.
    """

    def __init__(
        self,
        items: Iterable[Any],
        sep: Any,
        ownership: Ownership = Ownership.SHARED,
        map_fn: Callable[[Any], Any] | None = None,
    ) -> None:
        self.source: ItemSource = make_source(items, ownership)
        self.sep = sep
        self.map_fn = map_fn

    @property
    def ownership(self) -> Ownership:
        return self.source.ownership

    @property
    def duplicable(self) -> bool:
        return is_duplicable(self.sep) and self.source.duplicable

    def render(self, sink: Sink) -> None:
        items = self.source.open(sink)
        if items is None:
            return

        first = True
        for item in items:
            if not first:
                render_value(self.sep, sink)
            first = False
            render_value(item if self.map_fn is None else self.map_fn(item), sink)


def join(items: Iterable[Any], sep: Any) -> Join:
    """Join items with a separator.

    Examples:
        >>> str(join(["hola", "mundo"], " "))
        'hola mundo'
    """
    return Join(items, sep)


def join_map(items: Iterable[Any], sep: Any, fn: Callable[[Any], Any]) -> Join:
    """Join ``fn(item)`` for each item with a separator."""
    return Join(items, sep, map_fn=fn)


def join_once(items: Iterable[Any], sep: Any) -> Join:
    """Like ``join()`` for a one-shot iterable; later renders are empty."""
    return Join(items, sep, ownership=Ownership.SINGLE_USE)


def join_map_once(items: Iterable[Any], sep: Any, fn: Callable[[Any], Any]) -> Join:
    """Like ``join_map()`` for a one-shot iterable."""
    return Join(items, sep, ownership=Ownership.SINGLE_USE, map_fn=fn)


def csv(items: Iterable[Any]) -> Join:
    """Join items with ``", "``.

    Examples:
        >>> str(csv(["hola", "mundo"]))
        'hola, mundo'
    """
    return Join(items, CSV_SEPARATOR)


def csv_map(items: Iterable[Any], fn: Callable[[Any], Any]) -> Join:
    return Join(items, CSV_SEPARATOR, map_fn=fn)


def csv_once(items: Iterable[Any]) -> Join:
    return Join(items, CSV_SEPARATOR, ownership=Ownership.SINGLE_USE)


def csv_map_once(items: Iterable[Any], fn: Callable[[Any], Any]) -> Join:
    return Join(items, CSV_SEPARATOR, ownership=Ownership.SINGLE_USE, map_fn=fn)
