"""Column type inference from distinct non-null values."""

import re
from collections.abc import Iterable

from csvscope.models import ColumnType

_INTEGER = re.compile(r"-?[0-9]+")
_DECIMAL = re.compile(r"-?[0-9]*\.[0-9]+")
_BOOLEANS = frozenset({"true", "false"})


def is_boolean(value: str) -> bool:
    return value.lower() in _BOOLEANS


def is_integer(value: str) -> bool:
    return _INTEGER.fullmatch(value) is not None


def is_decimal(value: str) -> bool:
    # Disjoint from is_integer: a decimal point is required
    return _DECIMAL.fullmatch(value) is not None


def infer_column_type(values: Iterable[str]) -> ColumnType:
    """Classify a column from its distinct non-null values.

    BOOLEAN wins over INTEGER, which wins over DECIMAL; anything else (and
    an empty column) is STRING.
    """
    seen = False
    all_booleans = all_integers = all_decimals = True

    for raw in values:
        seen = True
        value = raw.strip()
        all_booleans = all_booleans and is_boolean(value)
        all_integers = all_integers and is_integer(value)
        all_decimals = all_decimals and is_decimal(value)
        if not (all_booleans or all_integers or all_decimals):
            break

    if not seen:
        return ColumnType.STRING
    if all_booleans:
        return ColumnType.BOOLEAN
    if all_integers:
        return ColumnType.INTEGER
    if all_decimals:
        return ColumnType.DECIMAL
    return ColumnType.STRING
