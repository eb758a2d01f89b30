"""Partition selection for messages keyed by peer or router hash."""

from __future__ import annotations


def _signed(byte: int) -> int:
    return byte - 256 if byte > 127 else byte


def peer_partition(key: str | bytes, partition_count: int) -> int:
    """Pick a partition from the first and last byte of the message key.

    Bytes are taken as signed characters and the remainder keeps the
    sign of the sum, so keys of plain ASCII always give a result in
    ``range(partition_count)``.
    """
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    if not raw:
        raise ValueError("partition key must not be empty")
    if partition_count <= 0:
        raise ValueError(f"partition count must be positive, got {partition_count}")
    total = _signed(raw[0]) + _signed(raw[-1])
    remainder = abs(total) % partition_count
    return -remainder if total < 0 else remainder