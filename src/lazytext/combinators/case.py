"""Case conversion of rendered output.

Conversion is applied one character at a time, so the result does not depend
on how the inner value splits its output into fragments. Full Unicode casing
may expand a character (``"ß"`` uppercases to ``"SS"``); context-dependent
rules such as the Greek final sigma are not applied.
"""

from enum import Enum
from typing import Any

from lazytext.core.base import Renderable, render_value
from lazytext.core.sinks import ForwardingSink, Sink

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


class CaseMode(Enum):
    """Supported case conversions."""

    UPPER = "upper"
    LOWER = "lower"
    ASCII_UPPER = "ascii_upper"
    ASCII_LOWER = "ascii_lower"

    def apply(self, text: str) -> str:
        if self is CaseMode.ASCII_UPPER:
            return text.translate(_ASCII_UPPER)
        if self is CaseMode.ASCII_LOWER:
            return text.translate(_ASCII_LOWER)
        if self is CaseMode.UPPER:
            return "".join(c.upper() for c in text)
        return "".join(c.lower() for c in text)


class CaseSink(ForwardingSink):
    """Converts the case of each fragment before forwarding it."""

    def __init__(self, inner: Sink, mode: CaseMode) -> None:
        super().__init__(inner)
        self.mode = mode

    def write_text(self, text: str) -> None:
        self.inner.write(self.mode.apply(text))


class CaseConvert(Renderable):
    def __init__(self, value: Any, mode: CaseMode) -> None:
        self.value = value
        self.mode = mode

    def children(self) -> tuple[Any, ...]:
        return (self.value,)

    def render(self, sink: Sink) -> None:
        converting = CaseSink(sink, self.mode)
        render_value(self.value, converting)
        converting.finish()


def to_uppercase(value: Any) -> CaseConvert:
    """Uppercase the rendered text.

    Examples:
        >>> str(to_uppercase("grüße"))
        'GRÜSSE'
    """
    return CaseConvert(value, CaseMode.UPPER)


def to_lowercase(value: Any) -> CaseConvert:
    return CaseConvert(value, CaseMode.LOWER)


def to_ascii_uppercase(value: Any) -> CaseConvert:
    """Uppercase ASCII letters only.

    Examples:
        >>> str(to_ascii_uppercase("Grüße, Jürgen ❤"))
        'GRüßE, JüRGEN ❤'
    """
    return CaseConvert(value, CaseMode.ASCII_UPPER)


def to_ascii_lowercase(value: Any) -> CaseConvert:
    """Lowercase ASCII letters only.

    Examples:
        >>> str(to_ascii_lowercase("Grüße, Jürgen ❤"))
        'grüße, jürgen ❤'
    """
    return CaseConvert(value, CaseMode.ASCII_LOWER)
