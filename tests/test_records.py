import pytest

from bmpcollector.records import (
    BgpPeer,
    Collector,
    EvpnEntry,
    PathAttributes,
    PeerDownEvent,
    PeerUpEvent,
    RibEntry,
    RouteDistinguisher,
    Router,
    StatsReport,
    VpnEntry,
)


def test_default_hashes_are_zero():
    peer = BgpPeer()
    assert peer.hash_id == bytes(16)
    assert peer.router_hash_id == bytes(16)
    assert Router().hash_id == bytes(16)


def test_bytearray_hash_is_converted():
    collector = Collector(hash_id=bytearray(range(16)))
    assert collector.hash_id == bytes(range(16))
    assert isinstance(collector.hash_id, bytes)


@pytest.mark.parametrize("cls", [Collector, Router, BgpPeer, PathAttributes, RibEntry])
def test_wrong_hash_length_raises(cls):
    with pytest.raises(ValueError):
        cls(hash_id=b"short")


def test_rib_prefix_len_range():
    assert RibEntry(prefix_len=128).prefix_len == 128
    with pytest.raises(ValueError):
        RibEntry(prefix_len=129)


def test_rib_prefix_bin_length_checked():
    with pytest.raises(ValueError):
        RibEntry(prefix_bin=bytes(4))


def test_vpn_entry_combines_rib_and_rd():
    entry = VpnEntry(prefix="10.0.0.0", prefix_len=8, rd_administrator_subfield="65000",
                     rd_assigned_number="100", rd_type=0)
    assert isinstance(entry, RibEntry)
    assert isinstance(entry, RouteDistinguisher)
    assert (entry.prefix, entry.prefix_len) == ("10.0.0.0", 8)
    assert (entry.rd_administrator_subfield, entry.rd_assigned_number) == ("65000", "100")


def test_vpn_entry_validates_hash():
    with pytest.raises(ValueError):
        VpnEntry(peer_hash_id=bytes(3))


def test_evpn_entry_fields():
    entry = EvpnEntry(mac="00:00:5e:00:53:01", mac_len=48, ip="192.0.2.7", ip_len=32,
                      mpls_label_1=100, rd_type=1)
    assert isinstance(entry, RibEntry)
    assert entry.mac == "00:00:5e:00:53:01"
    assert (entry.mac_len, entry.ip_len, entry.mpls_label_1, entry.mpls_label_2) == (48, 32, 100, 0)
    assert entry.rd_type == 1


def test_records_are_independent_and_comparable():
    a = PathAttributes(as_path="65001 65002", med=10)
    b = PathAttributes(as_path="65001 65002", med=10)
    assert a == b
    b.med = 20
    assert a != b
    assert a.med == 10


def test_event_and_stats_records():
    down = PeerDownEvent(bmp_reason=1, error_text="hold timer expired")
    up = PeerUpEvent(local_port=179, remote_port=50000)
    stats = StatsReport(routes_adj_rib_in=5, routes_loc_rib=7)
    assert (down.bmp_reason, down.bgp_err_code, down.error_text) == (1, 0, "hold timer expired")
    assert (up.local_port, up.remote_port, up.sent_cap) == (179, 50000, "")
    assert (stats.routes_adj_rib_in, stats.routes_loc_rib, stats.prefixes_rej) == (5, 7, 0)