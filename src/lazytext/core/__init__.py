"""Render contract, sinks, and the two stateful renderables.

- base: Renderable ABC and value adaptation
- sinks: Sink ABC, concrete sinks, SinkWriteError
- truncate: character-exact truncation (truncate_chars)
- once: single-use slot and renderables (once, once_with)
"""

from lazytext.core.base import Literal, Renderable, as_renderable, render_value, to_string
from lazytext.core.once import (
    CrossThreadRenderError,
    Once,
    Ownership,
    SingleUse,
    SlotState,
    once,
    once_with,
)
from lazytext.core.sinks import (
    CallbackSink,
    ForwardingSink,
    LazyTextError,
    Sink,
    SinkWriteError,
    StreamSink,
    StringSink,
)
from lazytext.core.truncate import TruncateChars, TruncatingSink, truncate_chars

__all__ = [
    "CallbackSink",
    "CrossThreadRenderError",
    "ForwardingSink",
    "LazyTextError",
    "Literal",
    "Once",
    "Ownership",
    "Renderable",
    "SingleUse",
    "Sink",
    "SinkWriteError",
    "SlotState",
    "StreamSink",
    "StringSink",
    "TruncateChars",
    "TruncatingSink",
    "as_renderable",
    "once",
    "once_with",
    "render_value",
    "to_string",
    "truncate_chars",
]
