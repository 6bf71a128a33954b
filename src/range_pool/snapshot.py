"""Versioned JSON text form of pool snapshots."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .errors import InvalidArgument
from .pool import RangePool

__all__ = ["SNAPSHOT_VERSION", "dumps_snapshot", "loads_snapshot", "read_metadata"]

SNAPSHOT_VERSION = "1.0"


def dumps_snapshot(pool: RangePool, metadata: Optional[Dict[str, Any]] = None) -> str:
    """
    Encode a pool snapshot as JSON text.

    Args:
        pool: Pool to snapshot
        metadata: Optional JSON-compatible data stored alongside the snapshot

    Returns:
        JSON string with version, length, worker list and metadata
    """
    snapshot = pool.serialize()
    envelope = {
        "version": SNAPSHOT_VERSION,
        "length": snapshot["length"],
        "num_workers": len(snapshot["workers"]),
        "workers": snapshot["workers"],
        "metadata": metadata or {},
    }
    return json.dumps(envelope, indent=2)


def _parse_envelope(text: str) -> Dict[str, Any]:
    try:
        envelope = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidArgument(f"Snapshot is not valid JSON: {exc}") from exc

    if not isinstance(envelope, dict):
        raise InvalidArgument("Snapshot must be a JSON object")

    version = envelope.get("version")
    if version != SNAPSHOT_VERSION:
        raise InvalidArgument(
            f"Snapshot version mismatch: expected {SNAPSHOT_VERSION}, got {version}"
        )
    return envelope


def loads_snapshot(text: str) -> RangePool:
    """
    Decode JSON text produced by ``dumps_snapshot`` back into a pool.

    Raises:
        InvalidArgument: If the text is not a valid snapshot of this version
    """
    envelope = _parse_envelope(text)
    return RangePool.restore_from_snapshot(envelope)


def read_metadata(text: str) -> Dict[str, Any]:
    """Return the metadata stored in a snapshot envelope."""
    return _parse_envelope(text).get("metadata", {})
