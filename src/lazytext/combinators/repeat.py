"""Repetition."""

from typing import Any

from lazytext.core.base import Renderable, render_value
from lazytext.core.sinks import Sink


class Repeat(Renderable):
    """Renders ``value`` ``count`` times in a row."""

    def __init__(self, value: Any, count: int) -> None:
        if not isinstance(count, int) or isinstance(count, bool):
            raise TypeError(f"Repeat count must be an int, not {type(count).__name__}")
        if count < 0:
            raise ValueError(f"Repeat count must be non-negative (got {count})")
        self.value = value
        self.count = count

    def children(self) -> tuple[Any, ...]:
        return (self.value,)

    def render(self, sink: Sink) -> None:
        for _ in range(self.count):
            render_value(self.value, sink)


def repeat(value: Any, count: int) -> Repeat:
    """Repeat a value.

    Examples:
        >>> str(repeat("123", 3))
        '123123123'
    """
    return Repeat(value, count)
