"""Character-exact truncation of rendered output.

``truncate_chars(value, n)`` emits the first ``n`` characters that ``value``
would emit and silently drops the rest. Characters are Unicode code points
(decoded scalar values); combining marks count individually.

The inner value renders into a ``TruncatingSink`` holding the remaining
budget. Fragments can arrive in any chunking, and encoded fragments can split
a character across writes: bytes are decoded incrementally, so a split
character is counted once, when it completes, and the cut always falls on a
character boundary. Running out of budget is not an error; writes keep
succeeding so siblings rendered after the truncated value are unaffected.
"""

import logging
from typing import Any

from lazytext.core.base import Renderable, render_value
from lazytext.core.sinks import Fragment, ForwardingSink, Sink
from lazytext.utils.logging import get_logger

logger = get_logger(__name__)


class TruncatingSink(ForwardingSink):
    """Forwards at most ``limit`` characters to the wrapped sink.

    Attributes:
        limit: Character budget given at construction
        remaining: Characters that may still be forwarded
        truncated: True once any character has been dropped
    """

    def __init__(self, inner: Sink, limit: int) -> None:
        if limit < 0:
            raise ValueError(f"Truncation limit must be non-negative (got {limit})")
        super().__init__(inner)
        self.limit = limit
        self.remaining = limit
        self.truncated = False

    @property
    def saturated(self) -> bool:
        return self.remaining == 0 or self.inner.saturated

    @property
    def written(self) -> int:
        """Characters forwarded so far."""
        return self.limit - self.remaining

    def write(self, fragment: Fragment) -> None:
        if self.remaining == 0:
            if fragment:
                self.truncated = True
            return
        super().write(fragment)

    def write_text(self, text: str) -> None:
        if self.remaining == 0:
            self.truncated = True
            return

        if len(text) <= self.remaining:
            self.remaining -= len(text)
            self.inner.write(text)
            return

        head = text[: self.remaining]
        self.remaining = 0
        self.truncated = True
        logger.structured(logging.DEBUG, "Character budget exhausted", limit=self.limit)
        self.inner.write(head)

    def finish(self) -> None:
        if self.remaining == 0:
            # Pending bytes past the cut are never emitted.
            if self.has_pending_bytes():
                self.truncated = True
            if self._decoder is not None:
                self._decoder.reset()
            return
        super().finish()


class TruncateChars(Renderable):
    """Renders at most ``limit`` characters of ``value``.

    The inner value is rendered on every call, so a single-use slot inside
    it is consumed whatever the limit. Once the budget is spent, single-use
    items past the cut are no longer pulled from their producer; shared
    values still render in full and only their output is cut.
    """

    def __init__(self, value: Any, limit: int) -> None:
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise TypeError(f"Truncation limit must be an int, not {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"Truncation limit must be non-negative (got {limit})")
        self.value = value
        self.limit = limit

    def children(self) -> tuple[Any, ...]:
        return (self.value,)

    def render(self, sink: Sink) -> None:
        truncating = TruncatingSink(sink, self.limit)
        render_value(self.value, truncating)
        truncating.finish()

    def __repr__(self) -> str:
        return f"TruncateChars({self.value!r}, {self.limit})"


def truncate_chars(value: Any, limit: int) -> TruncateChars:
    """Shorten ``value``'s rendering to ``limit`` characters.

    Examples:
        >>> str(truncate_chars(12345, 2))
        '12'
        >>> str(truncate_chars("héllo", 2))
        'hé'
    """
    return TruncateChars(value, limit)
