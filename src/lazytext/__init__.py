"""lazytext - Lazy renderable text values.

Small wrappers that defer text production until output is requested. Values
are assembled from parts (concatenation, joins, quoting, case conversion,
templates) and written piecewise into a sink instead of being built up as
intermediate strings.

Core principles:
- Repeatable: rendering a value twice yields the same fragments
- Character-exact: truncation counts code points and never splits one
- Single-use on request: one-shot producers render once, then nothing
- Fail fast: the first sink failure aborts the render and propagates
"""

from lazytext.combinators import (
    concat,
    concat_map,
    concat_map_once,
    concat_once,
    cond,
    cond_option,
    cond_with,
    cond_with_option,
    csv,
    csv_map,
    csv_map_once,
    csv_once,
    fmt,
    fmt_with,
    infix,
    join,
    join_map,
    join_map_once,
    join_once,
    noop,
    quote_backtick,
    quote_directed_double,
    quote_directed_single,
    quote_double,
    quote_guillemet_double,
    quote_guillemet_single,
    quote_low_double,
    quote_low_single,
    quote_single,
    repeat,
    to_ascii_lowercase,
    to_ascii_uppercase,
    to_lowercase,
    to_uppercase,
)
from lazytext.core import (
    CallbackSink,
    CrossThreadRenderError,
    LazyTextError,
    Ownership,
    Renderable,
    Sink,
    SinkWriteError,
    StreamSink,
    StringSink,
    as_renderable,
    once,
    once_with,
    to_string,
    truncate_chars,
)

__version__ = "0.1.0"
__author__ = "lazytext Contributors"

__all__ = [
    "CallbackSink",
    "CrossThreadRenderError",
    "LazyTextError",
    "Ownership",
    "Renderable",
    "Sink",
    "SinkWriteError",
    "StreamSink",
    "StringSink",
    "as_renderable",
    "concat",
    "concat_map",
    "concat_map_once",
    "concat_once",
    "cond",
    "cond_option",
    "cond_with",
    "cond_with_option",
    "csv",
    "csv_map",
    "csv_map_once",
    "csv_once",
    "fmt",
    "fmt_with",
    "infix",
    "join",
    "join_map",
    "join_map_once",
    "join_once",
    "noop",
    "once",
    "once_with",
    "quote_backtick",
    "quote_directed_double",
    "quote_directed_single",
    "quote_double",
    "quote_guillemet_double",
    "quote_guillemet_single",
    "quote_low_double",
    "quote_low_single",
    "quote_single",
    "repeat",
    "to_ascii_lowercase",
    "to_ascii_uppercase",
    "to_lowercase",
    "to_string",
    "to_uppercase",
    "truncate_chars",
]
