"""Shared statement field normalization helpers.

This module centralizes header, date and amount normalization so the CSV
reader and record mapper agree on one set of cell contracts.
"""

from __future__ import annotations

import math
import re

_DOMAIN_HEADER_STRIP_PATTERN = re.compile(r"[\s/]")
_DOMAIN_SHORT_DATE_PATTERN = re.compile(r"^(\d{2})/(\d{2})/(\d{2})$")
_DOMAIN_SHORT_DATE_CENTURY = "20"


def domain_normalize_header(name: str) -> str:
    """Remove whitespace and slash characters from one header name.

    Args:
        name: Raw header cell text.

    Returns:
        str: Normalized column name, e.g. `Value Date` -> `ValueDate`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return _DOMAIN_HEADER_STRIP_PATTERN.sub("", name)


def domain_rewrite_statement_date(value: str) -> str:
    """Rewrite one `DD/MM/YY` statement date into `20YY-MM-DD`.

    Two-digit years are always placed in the 2000s. Values with any other
    shape are returned unchanged.

    Args:
        value: Date cell text.

    Returns:
        str: ISO date text, or the input value when it does not match.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    match = _DOMAIN_SHORT_DATE_PATTERN.match(value)
    if match is None:
        return value

    day, month, short_year = match.groups()
    return f"{_DOMAIN_SHORT_DATE_CENTURY}{short_year}-{month}-{day}"


def domain_parse_amount(value: str | None) -> float:
    """Parse one amount cell into a float.

    Args:
        value: Amount cell text.

    Returns:
        float: Parsed amount, `0.0` for blank cells, NaN for non-numeric text.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if value is None:
        return 0.0

    normalized_value = value.strip().replace(",", "")
    if not normalized_value:
        return 0.0

    try:
        return float(normalized_value)
    except ValueError:
        return math.nan


def domain_amount_or_zero(value: float) -> float:
    """Return `value` when finite, otherwise `0.0`."""

    if math.isfinite(value):
        return value
    return 0.0
