"""Data records passed to the message bus."""

from __future__ import annotations

from dataclasses import dataclass

HASH_SIZE = 16
_ZERO_HASH = bytes(HASH_SIZE)


def _fixed_bytes(name: str, value: bytes, size: int = HASH_SIZE) -> bytes:
    raw = bytes(value)
    if len(raw) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(raw)}")
    return raw


@dataclass
class Collector:
    """Collector state as reported on the collector topic."""

    hash_id: bytes = _ZERO_HASH
    admin_id: str = ""
    descr: str = ""
    routers: str = ""
    router_count: int = 0
    timestamp_secs: int = 0
    timestamp_us: int = 0

    def __post_init__(self) -> None:
        self.hash_id = _fixed_bytes("hash_id", self.hash_id)


@dataclass
class Router:
    """A monitored BMP router."""

    hash_id: bytes = _ZERO_HASH
    hash_type: int = 0
    name: str = ""
    descr: str = ""
    ip_addr: str = ""
    bgp_id: str = ""
    asn: int = 0
    term_reason_code: int = 0
    term_reason_text: str = ""
    term_data: str = ""
    initiate_data: str = ""
    timestamp_secs: int = 0
    timestamp_us: int = 0

    def __post_init__(self) -> None:
        self.hash_id = _fixed_bytes("hash_id", self.hash_id)


@dataclass
class BgpPeer:
    """A BGP peer seen through a monitored router."""

    hash_id: bytes = _ZERO_HASH
    router_hash_id: bytes = _ZERO_HASH
    table_name: str = ""
    peer_rd: str = ""
    peer_addr: str = ""
    peer_bgp_id: str = ""
    peer_as: int = 0
    is_l3vpn: bool = False
    is_pre_policy: bool = False
    is_adj_in: bool = False
    is_loc_rib: bool = False
    is_loc_rib_filtered: bool = False
    is_ipv4: bool = True
    is_two_octet: bool = False
    timestamp_secs: int = 0
    timestamp_us: int = 0

    def __post_init__(self) -> None:
        self.hash_id = _fixed_bytes("hash_id", self.hash_id)
        self.router_hash_id = _fixed_bytes("router_hash_id", self.router_hash_id)


@dataclass
class PeerDownEvent:
    """Details of a peer down notification."""

    bmp_reason: int = 0
    bgp_err_code: int = 0
    bgp_err_subcode: int = 0
    error_text: str = ""


@dataclass
class PeerUpEvent:
    """Details of a peer up notification."""

    info_data: str = ""
    local_ip: str = ""
    local_port: int = 0
    local_asn: int = 0
    local_hold_time: int = 0
    local_bgp_id: str = ""
    remote_asn: int = 0
    remote_port: int = 0
    remote_hold_time: int = 0
    remote_bgp_id: str = ""
    sent_cap: str = ""
    recv_cap: str = ""


@dataclass
class PathAttributes:
    """BGP path attributes shared by a set of prefixes."""

    hash_id: bytes = _ZERO_HASH
    origin: str = ""
    as_path: str = ""
    as_path_count: int = 0
    origin_as: int = 0
    nexthop_is_ipv4: bool = True
    next_hop: str = ""
    aggregator: str = ""
    atomic_agg: bool = False
    med: int = 0
    local_pref: int = 0
    community_list: str = ""
    ext_community_list: str = ""
    large_community_list: str = ""
    cluster_list: str = ""
    originator_id: str = ""

    def __post_init__(self) -> None:
        self.hash_id = _fixed_bytes("hash_id", self.hash_id)


@dataclass
class RibEntry:
    """A single prefix in a RIB."""

    hash_id: bytes = _ZERO_HASH
    path_attr_hash_id: bytes = _ZERO_HASH
    peer_hash_id: bytes = _ZERO_HASH
    is_ipv4: bool = True
    prefix: str = ""
    prefix_len: int = 0
    prefix_bin: bytes = _ZERO_HASH
    prefix_bcast_bin: bytes = _ZERO_HASH
    path_id: int = 0
    labels: str = ""

    def __post_init__(self) -> None:
        self.hash_id = _fixed_bytes("hash_id", self.hash_id)
        self.path_attr_hash_id = _fixed_bytes("path_attr_hash_id", self.path_attr_hash_id)
        self.peer_hash_id = _fixed_bytes("peer_hash_id", self.peer_hash_id)
        self.prefix_bin = _fixed_bytes("prefix_bin", self.prefix_bin)
        self.prefix_bcast_bin = _fixed_bytes("prefix_bcast_bin", self.prefix_bcast_bin)
        if not 0 <= self.prefix_len <= 128:
            raise ValueError(f"prefix_len out of range: {self.prefix_len}")


@dataclass
class RouteDistinguisher:
    """Route distinguisher parts in printed form."""

    rd_administrator_subfield: str = ""
    rd_assigned_number: str = ""
    rd_type: int = 0


@dataclass
class VpnEntry(RibEntry, RouteDistinguisher):
    """An L3VPN prefix: a RIB entry with a route distinguisher."""


@dataclass
class EvpnEntry(RibEntry, RouteDistinguisher):
    """An EVPN route: a RIB entry with a route distinguisher and EVPN fields."""

    originating_router_ip_len: int = 0
    originating_router_ip: str = ""
    ethernet_segment_identifier: str = ""
    ethernet_tag_id_hex: str = ""
    mac_len: int = 0
    mac: str = ""
    ip_len: int = 0
    ip: str = ""
    mpls_label_1: int = 0
    mpls_label_2: int = 0


@dataclass
class StatsReport:
    """BMP statistics report counters."""

    prefixes_rej: int = 0
    known_dup_prefixes: int = 0
    known_dup_withdraws: int = 0
    invalid_cluster_list: int = 0
    invalid_as_path_loop: int = 0
    invalid_originator_id: int = 0
    invalid_as_confed_loop: int = 0
    routes_adj_rib_in: int = 0
    routes_loc_rib: int = 0