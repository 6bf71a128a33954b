"""Partition an index range among a dynamically growing set of workers."""

from .errors import RangePoolError, InvalidArgument, PoolExhausted, RangeExceeded
from .types import WorkerSnapshot, PoolSnapshot, PoolProgress
from .worker import RangeWorker
from .pool import RangePool
from .snapshot import SNAPSHOT_VERSION, dumps_snapshot, loads_snapshot, read_metadata
from .progress import PoolProgressBar, format_progress
from .logger import setup_logger

__all__ = [
    "RangePoolError",
    "InvalidArgument",
    "PoolExhausted",
    "RangeExceeded",
    "WorkerSnapshot",
    "PoolSnapshot",
    "PoolProgress",
    "RangeWorker",
    "RangePool",
    "SNAPSHOT_VERSION",
    "dumps_snapshot",
    "loads_snapshot",
    "read_metadata",
    "PoolProgressBar",
    "format_progress",
    "setup_logger",
]
