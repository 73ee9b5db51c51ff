"""Conversion of exact numbers into floats."""

from __future__ import annotations

import numbers
from typing import Any


def to_float(value: Any) -> float:
    """Convert ``value`` (a fraction or other real number) into a float.

    Values that are not real numbers are converted through their string
    form; a :class:`ValueError` is raised if that is not a valid number.
    """
    if isinstance(value, numbers.Real):
        return float(value)
    try:
        return float(str(value))
    except ValueError as error:
        raise ValueError(f"not a valid number representation: {value!r}") from error