"""Dynamic partitioning of an index range among a growing set of workers."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from .errors import InvalidArgument, PoolExhausted
from .types import PoolProgress, PoolSnapshot
from .validation import ensure_integer
from .worker import RangeWorker

__all__ = ["RangePool"]

logger = logging.getLogger(__name__)


class RangePool:
    """
    Hands out sub-ranges of ``[0, length)`` to workers as they join.

    The first worker gets the whole range. Later workers either pick up a
    disposed worker's unfinished range (the same ``RangeWorker`` object is
    reactivated) or take the unprocessed tail of the busiest active worker.
    Worker ranges always tile ``[0, length)`` with no gaps or overlaps.

    The pool does no locking. ``create_worker`` and the worker mutators
    (``advance``, ``dispose``, ``set_active``) share state and must be called
    from a single coordinator, or under one lock held by the caller.
    """

    def __init__(self, length: int):
        """
        Initialize an empty pool.

        Args:
            length: Total number of indices to partition, at least zero

        Raises:
            InvalidArgument: If length is not a finite whole number >= 0
        """
        length = ensure_integer(length, "length")
        if length < 0:
            raise InvalidArgument(f"length must be at least zero, got {length}")

        self.length = length
        self._workers: List[RangeWorker] = []

    def __repr__(self) -> str:
        return (
            f"RangePool(length={self.length}, workers={len(self._workers)}, "
            f"remaining={self.get_remaining()})"
        )

    @property
    def workers(self) -> Tuple[RangeWorker, ...]:
        """Worker records in creation order."""
        return tuple(self._workers)

    # =========================================================================
    # Allocation
    # =========================================================================

    def create_worker(self) -> RangeWorker:
        """
        Grant a range to a new unit of capacity.

        Returns:
            An active RangeWorker, either a reactivated disposed worker or a
            newly carved one

        Raises:
            PoolExhausted: If no work is left, or the busiest worker's
                remaining range is too small to split
        """
        if self.get_remaining() == 0:
            raise PoolExhausted("Pool has no remaining work to hand out")

        reusable = self._find_reusable()
        if reusable is not None:
            reusable.set_active(True)
            logger.debug("Reusing disposed worker %r", reusable)
            return reusable

        if not self._workers:
            worker = RangeWorker(0, self.length)
            logger.debug("Created initial worker over [0, %d)", self.length)
        else:
            worker = self._split_busiest()

        worker.set_active(True)
        self._workers.append(worker)
        return worker

    def _find_reusable(self) -> Optional[RangeWorker]:
        for worker in self._workers:
            if not worker.active and not worker.has_completed():
                return worker
        return None

    def _split_busiest(self) -> RangeWorker:
        """
        Carve a new worker from the unprocessed tail of the busiest worker.

        The busiest worker keeps the first half of its remaining range
        (rounded up) and the new worker takes the rest.
        """
        busiest: Optional[RangeWorker] = None
        for worker in self._workers:
            if not worker.active:
                continue
            # strict comparison keeps the earliest worker on ties
            if busiest is None or worker.remaining() > busiest.remaining():
                busiest = worker

        if busiest is None or busiest.remaining() == 0:
            raise PoolExhausted("No active worker has remaining work to split")

        remaining = busiest.remaining()
        kept = (remaining + 1) // 2
        split_at = busiest.current + kept
        if split_at >= busiest.limit:
            raise PoolExhausted(
                f"Remaining range of {remaining} is too small to split"
            )

        worker = RangeWorker(split_at, busiest.limit)
        busiest.limit = split_at
        logger.debug(
            "Split worker [%d, %d) at %d; new worker covers [%d, %d)",
            busiest.start, worker.limit, split_at, worker.start, worker.limit,
        )
        return worker

    # =========================================================================
    # Progress Queries
    # =========================================================================

    def get_length(self) -> int:
        return self.length

    def get_completed_steps(self) -> int:
        return sum(worker.completed() for worker in self._workers)

    def get_remaining(self) -> int:
        return self.length - self.get_completed_steps()

    def has_completed(self) -> bool:
        return self.get_remaining() == 0

    def progress(self) -> PoolProgress:
        """
        Summarize pool progress.

        Every worker is counted in exactly one of active, idle or exhausted.

        Returns:
            PoolProgress with step and worker counts
        """
        active = idle = exhausted = 0
        for worker in self._workers:
            if worker.has_completed():
                exhausted += 1
            elif worker.active:
                active += 1
            else:
                idle += 1

        completed = self.get_completed_steps()
        return PoolProgress(
            length=self.length,
            completed_steps=completed,
            remaining_steps=self.length - completed,
            total_workers=len(self._workers),
            active_workers=active,
            idle_workers=idle,
            exhausted_workers=exhausted,
        )

    # =========================================================================
    # Snapshots
    # =========================================================================

    def serialize(self) -> PoolSnapshot:
        return {
            "length": self.length,
            "workers": [worker.serialize() for worker in self._workers],
        }

    @classmethod
    def restore_from_snapshot(cls, snapshot: Mapping[str, Any]) -> "RangePool":
        """
        Rebuild a pool from ``serialize()`` output.

        Args:
            snapshot: Mapping with length and an ordered list of worker snapshots

        Returns:
            New RangePool with equal length and field-for-field equal workers

        Raises:
            InvalidArgument: If the snapshot is malformed or its workers do not
                tile the range
        """
        try:
            length = snapshot["length"]
            worker_snapshots = snapshot["workers"]
        except (KeyError, TypeError) as exc:
            raise InvalidArgument(f"Malformed pool snapshot: {snapshot!r}") from exc

        if not isinstance(worker_snapshots, (list, tuple)):
            raise InvalidArgument(
                f"workers must be a list, got {type(worker_snapshots).__name__}"
            )

        pool = cls(length)
        pool._workers = [RangeWorker.restore(item) for item in worker_snapshots]
        pool._check_tiling()

        logger.debug(
            "Restored pool of length %d with %d workers", pool.length, len(pool._workers)
        )
        return pool

    def _check_tiling(self) -> None:
        if not self._workers:
            return

        position = 0
        for worker in sorted(self._workers, key=lambda w: w.start):
            if worker.start != position:
                raise InvalidArgument(
                    f"Worker ranges do not tile [0, {self.length}): "
                    f"expected a range starting at {position}, got {worker!r}"
                )
            position = worker.limit

        if position != self.length:
            raise InvalidArgument(
                f"Worker ranges end at {position}, expected {self.length}"
            )
