"""Argument checks shared by pools and workers."""

from __future__ import annotations

import math
from numbers import Integral, Real

from .errors import InvalidArgument

__all__ = ["ensure_integer", "round_half_up"]


def ensure_integer(value, name: str) -> int:
    """
    Return ``value`` as an ``int``, or raise if it is not a finite whole number.

    Integral floats (``10.0``) are accepted and normalised; bools are rejected
    even though they are technically integers.

    Args:
        value: Candidate value
        name: Argument name used in the error message

    Returns:
        The value as a plain int

    Raises:
        InvalidArgument: If value is not a finite, integer-valued number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a number, got {type(value).__name__}")
    if isinstance(value, Integral):
        return int(value)
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    if not float(value).is_integer():
        raise InvalidArgument(f"{name} must be a whole number, got {value!r}")
    return int(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)
