import dataclasses
from datetime import datetime, timezone

import pytest

from bmpcollector.common import (
    CollectorAction,
    LsAction,
    PeerAction,
    RouterAction,
    RowContext,
    UnicastPrefixAction,
    VpnAction,
    format_timestamp,
    hash_to_str,
)


def test_hash_to_str_known_value():
    assert hash_to_str(bytes(range(16))) == "000102030405060708090a0b0c0d0e0f"


def test_hash_to_str_round_trip():
    raw = bytes([0xDE, 0xAD, 0xBE, 0xEF] * 4)
    text = hash_to_str(raw)
    assert len(text) == 32
    assert text == text.lower()
    assert bytes.fromhex(text) == raw


def test_hash_to_str_uses_first_sixteen_bytes():
    raw = bytes(range(20))
    assert hash_to_str(raw) == hash_to_str(raw[:16])


def test_hash_to_str_short_raises():
    with pytest.raises(ValueError):
        hash_to_str(b"\x01\x02")


def test_format_timestamp_given_time():
    assert format_timestamp(1500000000, 123) == "2017-07-14 02:40:00.000123"


def test_format_timestamp_microseconds_padded():
    text = format_timestamp(1500000000, 7)
    assert text.endswith(".000007")


@pytest.mark.parametrize("secs", [0, 1, 1000])
def test_format_timestamp_unset_uses_now(secs):
    text = format_timestamp(secs, 5)
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S.%f").replace(tzinfo=timezone.utc)
    delta = abs((datetime.now(timezone.utc) - parsed).total_seconds())
    assert delta < 5


def test_action_labels():
    assert [a.label for a in CollectorAction] == ["started", "change", "heartbeat", "stopped"]
    assert [a.label for a in RouterAction] == ["first", "init", "term"]
    assert [a.label for a in PeerAction] == ["first", "up", "down"]
    assert UnicastPrefixAction.DEL.label == "del"
    assert VpnAction.ADD.label == "add"
    assert LsAction(1) is LsAction.DEL


def test_row_context_is_frozen():
    ctx = RowContext(router_ip="192.0.2.1")
    assert ctx.router_ip == "192.0.2.1"
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.router_ip = "192.0.2.2"