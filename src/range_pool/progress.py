"""Progress display for a range pool."""

from __future__ import annotations

from tqdm import tqdm

from .pool import RangePool
from .types import PoolProgress

__all__ = ["PoolProgressBar", "format_progress"]


class PoolProgressBar:
    """
    tqdm bar that follows a pool's completed steps.

    The bar only reads from the pool. Call ``refresh()`` from the coordinating
    thread after workers report progress.
    """

    def __init__(self, pool: RangePool, desc: str = "Range", **tqdm_kwargs):
        """
        Args:
            pool: Pool to display
            desc: Bar description
            **tqdm_kwargs: Extra arguments passed to tqdm
        """
        self.pool = pool
        tqdm_kwargs.setdefault("unit", "steps")
        self._bar = tqdm(
            total=pool.get_length(),
            initial=pool.get_completed_steps(),
            desc=desc,
            **tqdm_kwargs,
        )

    @property
    def n(self) -> int:
        return self._bar.n

    def refresh(self) -> None:
        progress = self.pool.progress()
        delta = progress.completed_steps - self._bar.n
        if delta:
            self._bar.update(delta)
        self._bar.set_postfix(
            active=progress.active_workers, idle=progress.idle_workers, refresh=False
        )
        self._bar.refresh()

    def close(self) -> None:
        self._bar.close()

    def __enter__(self) -> "PoolProgressBar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def format_progress(progress: PoolProgress) -> str:
    """
    Format a one-line progress summary.

    Examples:
        >>> format_progress(PoolProgress(200, 50, 150, 3, 2, 1, 0))
        '50/200 steps (25.0%) | workers: 3 total, 2 active, 1 idle, 0 exhausted'
    """
    return (
        f"{progress.completed_steps:,}/{progress.length:,} steps "
        f"({progress.percentage:.1f}%) | workers: "
        f"{progress.total_workers} total, {progress.active_workers} active, "
        f"{progress.idle_workers} idle, {progress.exhausted_workers} exhausted"
    )
