"""Plain combinators.

Each one holds its children and renders them in a fixed left-to-right order,
with no state carried between renders. The ``*_once`` variants take one-shot
iterators and follow the single-use rules of ``lazytext.core.once``.
"""

from lazytext.combinators.case import (
    CaseConvert,
    CaseMode,
    to_ascii_lowercase,
    to_ascii_uppercase,
    to_lowercase,
    to_uppercase,
)
from lazytext.combinators.concat import (
    Concat,
    FmtWith,
    concat,
    concat_map,
    concat_map_once,
    concat_once,
    fmt_with,
    noop,
)
from lazytext.combinators.cond import Cond, CondWith, cond, cond_option, cond_with, cond_with_option
from lazytext.combinators.format import Fmt, fmt
from lazytext.combinators.join import (
    Join,
    csv,
    csv_map,
    csv_map_once,
    csv_once,
    join,
    join_map,
    join_map_once,
    join_once,
)
from lazytext.combinators.quote import (
    infix,
    quote_backtick,
    quote_directed_double,
    quote_directed_single,
    quote_double,
    quote_guillemet_double,
    quote_guillemet_single,
    quote_low_double,
    quote_low_single,
    quote_single,
)
from lazytext.combinators.repeat import Repeat, repeat

__all__ = [
    "CaseConvert",
    "CaseMode",
    "Concat",
    "Cond",
    "CondWith",
    "Fmt",
    "FmtWith",
    "Join",
    "Repeat",
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
    "to_uppercase",
]
