"""Exception types raised by the range pool."""

from __future__ import annotations

__all__ = ["RangePoolError", "InvalidArgument", "PoolExhausted", "RangeExceeded"]


class RangePoolError(Exception):
    """Base class for all range pool failures."""


class InvalidArgument(RangePoolError, ValueError):
    """An argument or snapshot field is outside its valid domain."""


class PoolExhausted(RangePoolError, RuntimeError):
    """No more work can be handed out by the pool."""


class RangeExceeded(RangePoolError, ValueError):
    """A worker was advanced past the end of its range."""
