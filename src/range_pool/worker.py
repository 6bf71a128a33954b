"""A single worker's slice of the pool's index range."""

from __future__ import annotations

import math
from typing import Any, Mapping

from .errors import InvalidArgument, RangeExceeded
from .types import WorkerSnapshot
from .validation import ensure_integer, round_half_up

__all__ = ["RangeWorker"]


class RangeWorker:
    """
    Tracks progress through one contiguous sub-range ``[start, limit)``.

    The cursor ``current`` only ever moves forward, through ``advance``. The
    ``active`` flag says whether a caller currently holds the worker; a
    disposed worker with range left over is handed out again by its pool.
    """

    def __init__(self, start: int, limit: int):
        """
        Create an inactive worker positioned at ``start``.

        Args:
            start: First index of the range (inclusive), at least zero
            limit: End of the range (exclusive), greater than start

        Raises:
            InvalidArgument: If either bound is not a finite whole number,
                start is negative, or limit does not exceed start
        """
        start = ensure_integer(start, "start")
        limit = ensure_integer(limit, "limit")
        if start < 0:
            raise InvalidArgument(f"start must be at least zero, got {start}")
        if limit <= start:
            raise InvalidArgument(
                f"limit must be greater than start, got start={start} limit={limit}"
            )

        self.active = False
        self.start = start
        self.limit = limit
        self.current = start

    def __repr__(self) -> str:
        return (
            f"RangeWorker(start={self.start}, current={self.current}, "
            f"limit={self.limit}, active={self.active})"
        )

    # =========================================================================
    # Mutation
    # =========================================================================

    def advance(self, steps: int) -> None:
        """
        Move the cursor forward by ``steps`` processed indices.

        Args:
            steps: Number of indices completed since the last call

        Raises:
            InvalidArgument: If steps is not a positive whole number
            RangeExceeded: If steps is larger than the remaining range
        """
        steps = ensure_integer(steps, "steps")
        if steps <= 0:
            raise InvalidArgument(f"steps must be more than zero, got {steps}")

        remaining = self.remaining()
        if steps > remaining:
            raise RangeExceeded(
                f"Cannot advance worker by {steps}: only {remaining} steps remaining"
            )
        self.current += steps

    def set_active(self, active: bool) -> "RangeWorker":
        self.active = bool(active)
        return self

    def dispose(self) -> None:
        """Give up the worker; its unfinished range becomes reusable."""
        self.active = False

    # =========================================================================
    # Queries
    # =========================================================================

    def get_active(self) -> bool:
        return self.active

    def get_start(self) -> int:
        return self.start

    def get_limit(self) -> int:
        return self.limit

    def get_current(self) -> int:
        return self.current

    def remaining(self) -> int:
        return self.limit - self.current

    def completed(self) -> int:
        return self.current - self.start

    def has_completed(self) -> bool:
        return self.remaining() == 0

    def completion_percentage(self) -> int:
        """Percentage of the range processed, rounded to a whole number."""
        if math.isinf(self.limit):
            return 0
        return round_half_up(self.completed() / (self.limit - self.start) * 100)

    # =========================================================================
    # Snapshots
    # =========================================================================

    def serialize(self) -> WorkerSnapshot:
        return {
            "active": self.active,
            "start": self.start,
            "limit": self.limit,
            "current": self.current,
        }

    @classmethod
    def restore(cls, snapshot: Mapping[str, Any]) -> "RangeWorker":
        """
        Rebuild a standalone worker from ``serialize()`` output.

        Args:
            snapshot: Mapping with active, start, limit and current keys

        Returns:
            New RangeWorker with the same state

        Raises:
            InvalidArgument: If a key is missing or a value is out of range
        """
        try:
            active = snapshot["active"]
            start = snapshot["start"]
            limit = snapshot["limit"]
            current = snapshot["current"]
        except (KeyError, TypeError) as exc:
            raise InvalidArgument(f"Malformed worker snapshot: {snapshot!r}") from exc

        if not isinstance(active, bool):
            raise InvalidArgument(f"active must be a bool, got {active!r}")

        worker = cls(start, limit)
        current = ensure_integer(current, "current")
        if not worker.start <= current <= worker.limit:
            raise InvalidArgument(
                f"current must lie within [{worker.start}, {worker.limit}], got {current}"
            )
        worker.active = active
        worker.current = current
        return worker
