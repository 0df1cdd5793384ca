"""Lazy ``str.format``-style templates.

``fmt("{} and {name}", a, name=b)`` renders like ``"{} and {name}".format(a,
name=b)`` but writes each literal part and each field as its own fragment.
Renderable arguments used without a conversion or format spec are rendered
straight into the sink instead of being turned into strings first.
"""

import re
import string
from typing import Any

from lazytext.core.base import Renderable, render_value
from lazytext.core.sinks import Sink

_formatter = string.Formatter()
_FIELD_SPLIT_RE = re.compile(r"[.\[]")


def _split_field_name(field_name: str) -> tuple[str, str]:
    """Split ``"0.attr[1]"`` into ``("0", ".attr[1]")``."""
    match = _FIELD_SPLIT_RE.search(field_name)
    if match is None:
        return field_name, ""
    return field_name[: match.start()], field_name[match.start() :]


class _FieldNumbering:
    """Automatic versus manual field numbering for one render.

    Shared by a field and the fields nested in its format spec, so
    ``"{:{}}"`` numbers its fields 0 then 1 as ``str.format`` does.
    """

    def __init__(self) -> None:
        self.next_index: int | None = 0

    def resolve(self, field_name: str) -> str:
        first, rest = _split_field_name(field_name)
        if first == "":
            if self.next_index is None:
                raise ValueError(
                    "cannot switch from manual field specification to automatic field numbering"
                )
            field_name = f"{self.next_index}{rest}"
            self.next_index += 1
        elif first.isdigit():
            if self.next_index:
                raise ValueError(
                    "cannot switch from automatic field numbering to manual field specification"
                )
            self.next_index = None
        return field_name


class Fmt(Renderable):
    """A parsed format template plus its arguments."""

    def __init__(self, template: str, *args: Any, **kwargs: Any) -> None:
        self.template = template
        self.args = args
        self.kwargs = kwargs
        # Parsed eagerly so malformed templates fail at construction.
        self.parts = list(_formatter.parse(template))

    def children(self) -> tuple[Any, ...]:
        return (*self.args, *self.kwargs.values())

    def render(self, sink: Sink) -> None:
        numbering = _FieldNumbering()

        for literal, field_name, format_spec, conversion in self.parts:
            if literal:
                sink.write(literal)
            if field_name is None:
                continue

            value, _ = _formatter.get_field(numbering.resolve(field_name), self.args, self.kwargs)

            if conversion is None and not format_spec:
                render_value(value, sink)
                continue

            if conversion is not None:
                value = _formatter.convert_field(value, conversion)
            if format_spec and "{" in format_spec:
                format_spec = self._expand_spec(format_spec, numbering, depth=1)
            sink.write(format(value, format_spec or ""))

    def _expand_spec(self, format_spec: str, numbering: _FieldNumbering, depth: int) -> str:
        """Substitute the fields nested in a format spec."""
        if depth < 0:
            raise ValueError("Max string recursion exceeded")

        parts = []
        for literal, field_name, spec, conversion in _formatter.parse(format_spec):
            parts.append(literal)
            if field_name is None:
                continue
            value, _ = _formatter.get_field(numbering.resolve(field_name), self.args, self.kwargs)
            if conversion is not None:
                value = _formatter.convert_field(value, conversion)
            parts.append(format(value, self._expand_spec(spec or "", numbering, depth - 1)))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Fmt({self.template!r})"


def fmt(template: str, *args: Any, **kwargs: Any) -> Fmt:
    """Build a lazily rendered format string.

    Examples:
        >>> str(fmt("{} {}", "hola", "mundo"))
        'hola mundo'
        >>> str(fmt("{name:>5}", name="ab"))
        '   ab'
    """
    return Fmt(template, *args, **kwargs)
