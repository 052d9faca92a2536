"""Text formatting helpers and name-to-value lookups."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

_log = logging.getLogger(__name__)

T = TypeVar("T")


class FindValues(Generic[T]):
    """Look up values by name in a pair of parallel sequences."""

    def __init__(self, names: Sequence[str], values: Sequence[T]) -> None:
        self.names = names
        self.values = values

    def find(self, name: str, default: T | int = 0) -> T | int:
        """Return the value paired with the first occurrence of ``name``, else ``default``."""
        return next(
            (value for candidate, value in zip(self.names, self.values) if candidate == name),
            default,
        )


def _significant(value: float) -> str:
    return f"{value:.3g}"


def percent_to_str(value: float) -> str:
    """Format a percentage with three significant digits, e.g. ``12.3%``."""
    return f"{_significant(value)}%"


def stat_percent_str(stat_name: str, value: float, description: str) -> str:
    """Format one named percentage as an HTML line."""
    return f"{stat_name}: <b>{_significant(value)}%</b> {description}<br>"


def stat_percent_pair_str(
    stat_name: str,
    value1: float,
    description1: str,
    value2: float,
    description2: str,
) -> str:
    """Format a named percentage followed by a second, parenthesised one, as an HTML line."""
    return (
        f"{stat_name}: <b>{_significant(value1)}%</b> {description1}. "
        f"(<b>{_significant(value2)}%</b> {description2})<br>"
    )


def string_with_precision(amount: float, precision: int | None = None) -> str:
    """Format ``amount`` as an integer, or in fixed notation with ``precision`` decimals."""
    if precision is None:
        return str(int(amount))
    return f"{amount:.{precision}f}"


def find_string(strings: Sequence[str], match: str) -> bool:
    """Return whether ``match`` occurs in ``strings``."""
    return match in strings


def find_value(strings: Sequence[str], values: Sequence[float], match: str) -> float:
    """Return the value paired with ``match``; warn and return 0.0 if it is absent."""
    for name, value in zip(strings, values):
        if name == match:
            return value
    _log.warning("Could not find: %s", match)
    return 0.0