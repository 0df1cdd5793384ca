"""Conditional rendering."""

from collections.abc import Callable
from typing import Any

from lazytext.core.base import Renderable, render_value
from lazytext.core.sinks import Sink


class Cond(Renderable):
    """Renders ``value`` when ``present`` is true, otherwise nothing."""

    def __init__(self, value: Any, present: bool = True) -> None:
        self.value = value
        self.present = present

    def children(self) -> tuple[Any, ...]:
        return (self.value,)

    def render(self, sink: Sink) -> None:
        if self.present:
            render_value(self.value, sink)


class CondWith(Renderable):
    """Calls ``make_value`` on each render and renders the result.

    With ``optional`` set, a ``None`` result renders nothing.
    """

    def __init__(
        self,
        make_value: Callable[[], Any],
        enabled: bool = True,
        optional: bool = False,
    ) -> None:
        self.make_value = make_value
        self.enabled = enabled
        self.optional = optional

    def render(self, sink: Sink) -> None:
        if not self.enabled:
            return
        value = self.make_value()
        if value is None and self.optional:
            return
        render_value(value, sink)


def cond(write: bool, value: Any) -> Cond:
    """Render ``value`` only if ``write`` is true.

    Examples:
        >>> str(cond(True, "hola")), str(cond(False, "hola"))
        ('hola', '')
    """
    return Cond(value, bool(write))


def cond_option(value: Any | None) -> Cond:
    """Render ``value`` unless it is None."""
    return Cond(value, value is not None)


def cond_with(write: bool, fn: Callable[[], Any]) -> CondWith:
    """Render ``fn()`` only if ``write`` is true; ``fn`` is not called otherwise."""
    return CondWith(fn, enabled=bool(write))


def cond_with_option(fn: Callable[[], Any | None]) -> CondWith:
    """Render ``fn()`` unless it returns None."""
    return CondWith(fn, optional=True)

