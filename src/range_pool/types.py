"""Snapshot shapes and progress statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, TypedDict

__all__ = ["WorkerSnapshot", "PoolSnapshot", "PoolProgress"]


class WorkerSnapshot(TypedDict):
    """Serialized form of a single worker."""

    active: bool
    start: int
    limit: int
    current: int


class PoolSnapshot(TypedDict):
    """Serialized form of a pool; workers are kept in creation order."""

    length: int
    workers: List[WorkerSnapshot]


@dataclass(frozen=True)
class PoolProgress:
    """Point-in-time progress statistics for a pool."""

    length: int
    """Total number of indices in the pool"""

    completed_steps: int
    """Indices processed by any worker, active or not"""

    remaining_steps: int
    """Indices not yet processed"""

    total_workers: int
    """Number of worker records ever created"""

    active_workers: int
    """Unfinished workers currently held by a caller"""

    idle_workers: int
    """Disposed workers with unfinished range, waiting for reuse"""

    exhausted_workers: int
    """Workers whose range is fully processed"""

    @property
    def percentage(self) -> float:
        if self.length == 0:
            return 100.0
        return self.completed_steps / self.length * 100
