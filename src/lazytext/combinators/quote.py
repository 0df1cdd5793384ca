"""Infix placement and quoting."""

from typing import Any

from lazytext.combinators.concat import Concat


def infix(left: Any, value: Any, right: Any) -> Concat:
    """Place ``value`` between ``left`` and ``right``.

    Examples:
        >>> str(infix("(", 1, ")"))
        '(1)'
    """
    return Concat((left, value, right))


def quote_single(value: Any) -> Concat:
    """Place a value between ``'``."""
    return infix("'", value, "'")


def quote_double(value: Any) -> Concat:
    """Place a value between ``"``.

    Examples:
        >>> str(quote_double(123))
        '"123"'
    """
    return infix('"', value, '"')


def quote_backtick(value: Any) -> Concat:
    return infix("`", value, "`")


def quote_directed_single(value: Any) -> Concat:
    return infix("‘", value, "’")


def quote_directed_double(value: Any) -> Concat:
    return infix("“", value, "”")


def quote_low_single(value: Any) -> Concat:
    """German-style low single quotes."""
    return infix("‚", value, "‘")


def quote_low_double(value: Any) -> Concat:
    """German-style low double quotes."""
    return infix("„", value, "“")


def quote_guillemet_single(value: Any) -> Concat:
    return infix("‹", value, "›")


def quote_guillemet_double(value: Any) -> Concat:
    return infix("«", value, "»")
