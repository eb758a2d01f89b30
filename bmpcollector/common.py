"""Shared action codes, row context and formatting helpers for bus messages."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum

HASH_SIZE = 16


class _Action(IntEnum):
    """Action code whose wire label is the lower-case member name."""

    @property
    def label(self) -> str:
        return self.name.lower()


class CollectorAction(_Action):
    STARTED = 0
    CHANGE = 1
    HEARTBEAT = 2
    STOPPED = 3


class RouterAction(_Action):
    FIRST = 0
    INIT = 1
    TERM = 2


class PeerAction(_Action):
    FIRST = 0
    UP = 1
    DOWN = 2


class BaseAttrAction(_Action):
    ADD = 0


class UnicastPrefixAction(_Action):
    ADD = 0
    DEL = 1


class VpnAction(_Action):
    ADD = 0
    DEL = 1


class LsAction(_Action):
    ADD = 0
    DEL = 1


@dataclass(frozen=True)
class RowContext:
    """Per-router values that appear in every formatted row."""

    router_ip: str = ""


def hash_to_str(hash_bin: bytes) -> str:
    """Return the first 16 bytes of a binary hash as lower-case hex."""
    raw = bytes(hash_bin)
    if len(raw) < HASH_SIZE:
        raise ValueError(f"hash must be at least {HASH_SIZE} bytes, got {len(raw)}")
    return raw[:HASH_SIZE].hex()


def format_timestamp(secs: int, usecs: int) -> str:
    """Format a UTC timestamp as 'YYYY-MM-DD HH:MM:SS.uuuuuu'.

    Values of ``secs`` up to 1000 are treated as unset and the current
    time is used instead.
    """
    if secs <= 1000:
        now = time.time()
        secs = int(now)
        usecs = int((now - secs) * 1_000_000)
    stamp = datetime.fromtimestamp(secs, tz=timezone.utc)
    return f"{stamp:%Y-%m-%d %H:%M:%S}.{usecs:06d}"