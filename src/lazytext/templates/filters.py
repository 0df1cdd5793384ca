"""Jinja2 filters backed by lazytext combinators.

Each filter returns a renderable; Jinja2 turns it into text when it writes the
expression, so ``{{ title | truncate_chars(10) }}`` cuts at a character
boundary exactly like ``truncate_chars()`` does in Python code.
"""

from typing import Any

from jinja2 import Environment

from lazytext.combinators.case import to_ascii_lowercase, to_ascii_uppercase
from lazytext.combinators.join import csv, join
from lazytext.combinators.quote import (
    quote_backtick,
    quote_double,
    quote_guillemet_double,
    quote_single,
)
from lazytext.combinators.repeat import repeat
from lazytext.core.truncate import truncate_chars

FILTERS: dict[str, Any] = {
    "truncate_chars": truncate_chars,
    "csv": csv,
    "join_lazy": join,
    "repeat_text": repeat,
    "quote_single": quote_single,
    "quote_double": quote_double,
    "quote_backtick": quote_backtick,
    "quote_guillemet": quote_guillemet_double,
    "ascii_upper": to_ascii_uppercase,
    "ascii_lower": to_ascii_lowercase,
}


def register_filters(env: Environment) -> Environment:
    """Install the lazytext filters on ``env``.

    Existing filters with the same names are replaced.

    Returns:
        The same environment, for chaining
    """
    env.filters.update(FILTERS)
    return env
